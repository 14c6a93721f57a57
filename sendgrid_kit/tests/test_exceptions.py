import pytest

from sendgrid_kit import localization
from sendgrid_kit.auth import Authentication
from sendgrid_kit.exceptions import (
    AuthenticationMissingError,
    AuthenticationTypeNotAllowedError,
    AuthorizationHeaderError,
    ImpersonationNotSupportedError,
    InvalidContentIDError,
    InvalidContentTypeError,
    InvalidFilenameError,
    NonConformingRequestError,
    RequestError,
    SendGridApiError,
    SendGridError,
    SessionError,
    UnableToConstructUrlError,
    ValidationError,
)
from sendgrid_kit.localization import TableMessageResolver
from sendgrid_kit.mail import Email


class TestErrorDescriptions:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (NonConformingRequestError(dict), "Error: Non-Conforming Request."),
            (UnableToConstructUrlError(), "Error: Unable to construct Url."),
            (AuthorizationHeaderError(), "Error: Authorization header error."),
            (
                ImpersonationNotSupportedError(Email),
                "Error: Impersonation not supported.",
            ),
        ],
    )
    def test_request_errors(self, error, expected):
        """요청 생성 오류의 기본 메시지 테스트"""
        assert isinstance(error, RequestError)
        assert error.description == expected

    def test_authentication_missing(self):
        """인증 정보 누락 메시지 테스트"""
        error = AuthenticationMissingError()

        assert isinstance(error, SessionError)
        assert "no `Authentication` configured" in error.description

    def test_authentication_type_not_allowed(self):
        """허용되지 않은 인증 방식 메시지 테스트"""
        error = AuthenticationTypeNotAllowedError(
            Email, Authentication.credential("a", "b")
        )

        assert error.description == (
            "The `Email` class does not allow authentication with credentials. "
            "Please try using another Authentication type."
        )

    @pytest.mark.parametrize(
        "error_class", [InvalidContentTypeError, InvalidFilenameError, InvalidContentIDError]
    )
    def test_validation_errors_carry_value(self, error_class):
        """검증 오류는 문제가 된 값을 가지고 있는지 테스트"""
        error = error_class("bad;value")

        assert isinstance(error, ValidationError)
        assert isinstance(error, SendGridError)
        assert error.value == "bad;value"
        assert "'bad;value'" in str(error)

    def test_api_error(self):
        """API 오류는 상태 코드와 메시지를 가지고 있는지 테스트"""
        error = SendGridApiError(400, "bad request")

        assert error.status == 400
        assert str(error) == "API error (status code: 400): bad request"


class TestLocalization:
    def test_injected_resolver(self):
        """주입한 resolver 로 메시지를 현지화하는지 테스트"""
        resolver = TableMessageResolver(locale="ko")

        error = InvalidFilenameError("a;b", resolver)

        assert str(error) == "잘못된 파일 이름입니다: 'a;b'"

    def test_unknown_locale_falls_back(self):
        """알 수 없는 로케일은 기본 메시지를 사용하는지 테스트"""
        resolver = TableMessageResolver(locale="fr")

        assert UnableToConstructUrlError(resolver).description == (
            "Error: Unable to construct Url."
        )

    def test_custom_table(self):
        """사용자 정의 메시지 테이블 테스트"""
        resolver = TableMessageResolver(
            {"en": {"request.authorization_header": "custom"}}
        )

        assert str(AuthorizationHeaderError(resolver)) == "custom"

    def test_default_resolver(self):
        """기본 resolver 를 교체할 수 있는지 테스트"""
        original = localization.get_default_resolver()
        try:
            localization.set_default_resolver(TableMessageResolver(locale="ko"))

            assert Authentication.api_key("k").description == "API 키"
        finally:
            localization.set_default_resolver(original)
