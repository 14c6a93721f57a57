from datetime import date

import pytest

from sendgrid_kit.auth import Authentication
from sendgrid_kit.exceptions import (
    AuthorizationHeaderError,
    ImpersonationNotSupportedError,
    UnableToConstructUrlError,
)
from sendgrid_kit.request import Request
from sendgrid_kit.stats import GlobalStatisticGet, SubuserStatisticGet


class RelativePathRequest(Request):
    @property
    def path(self) -> str:
        return "v3/stats"


class TestBuildUrl:
    def test_trailing_slash_in_base_url(self):
        """base_url 끝의 / 를 한 번만 사용하는지 테스트"""
        request = GlobalStatisticGet(start_date=date(2024, 1, 1))

        assert request.build_url("https://api.sendgrid.com/").startswith(
            "https://api.sendgrid.com/v3/stats?"
        )

    @pytest.mark.parametrize(
        "base_url", ["", "api.sendgrid.com", "ftp://api.sendgrid.com", "https://"]
    )
    def test_invalid_base_url(self, base_url):
        """절대 http(s) URL 이 아니면 실패하는지 테스트"""
        request = GlobalStatisticGet(start_date=date(2024, 1, 1))

        with pytest.raises(UnableToConstructUrlError):
            request.build_url(base_url)

    def test_relative_path(self):
        """경로가 / 로 시작하지 않으면 실패하는지 테스트"""
        with pytest.raises(UnableToConstructUrlError):
            RelativePathRequest().build_url("https://api.sendgrid.com")


class TestBuildHeaders:
    def test_api_key_headers(self, api_key_auth):
        """GET 요청 헤더 테스트"""
        request = GlobalStatisticGet(start_date=date(2024, 1, 1))

        assert request.build_headers(api_key_auth) == {
            "Authorization": "Bearer SG.test-api-key",
            "Accept": "application/json",
        }

    def test_on_behalf_of(self, credential_auth):
        """대리 호출 헤더가 추가되는지 테스트"""
        request = GlobalStatisticGet(start_date=date(2024, 1, 1))

        headers = request.build_headers(credential_auth, on_behalf_of="sub1")

        assert headers["On-Behalf-Of"] == "sub1"
        assert headers["Authorization"].startswith("Basic ")

    def test_impersonation_not_supported(self, api_key_auth):
        """대리 호출을 지원하지 않는 요청은 실패하는지 테스트"""
        request = SubuserStatisticGet(subusers=["sub1"], start_date=date(2024, 1, 1))

        with pytest.raises(ImpersonationNotSupportedError) as exc_info:
            request.build_headers(api_key_auth, on_behalf_of="sub1")

        assert exc_info.value.obj is SubuserStatisticGet

    def test_empty_api_key_still_builds_header(self):
        """빈 API 키도 Bearer 헤더는 만들어지는지 테스트"""
        auth = Authentication.api_key("")
        request = GlobalStatisticGet(start_date=date(2024, 1, 1))

        assert request.build_headers(auth)["Authorization"] == "Bearer "

    def test_authorization_header_error(self, monkeypatch, api_key_auth):
        """헤더 값을 만들지 못하면 AuthorizationHeaderError 가 발생하는지 테스트"""
        monkeypatch.setattr(
            Authentication, "authorization_header", property(lambda self: "")
        )
        request = GlobalStatisticGet(start_date=date(2024, 1, 1))

        with pytest.raises(AuthorizationHeaderError):
            request.build_headers(api_key_auth)
