from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from sendgrid_kit.localization import MessageResolver, localize

if TYPE_CHECKING:
    from sendgrid_kit.auth import Authentication


def _name_of(obj: Any) -> str:
    cls = obj if isinstance(obj, type) else type(obj)
    return cls.__name__


class SendGridError(Exception):
    """SendGrid 관련 모든 예외의 기본 클래스"""

    @property
    def description(self) -> str:
        return str(self)


class SendGridApiError(SendGridError):
    """API 요청 실패 시 발생하는 예외"""

    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"API error (status code: {status}): {message}")


# 요청 생성 오류
class RequestError(SendGridError):
    """HTTP 요청을 구성하는 중 발생하는 오류"""

    pass


class NonConformingRequestError(RequestError):
    """Request 를 따르지 않는 객체로 요청을 보내려 한 경우"""

    def __init__(self, obj: Any, resolver: MessageResolver | None = None):
        self.obj = obj
        super().__init__(
            localize(
                "request.non_conforming",
                "Error: Non-Conforming Request.",
                resolver,
            )
        )


class UnableToConstructUrlError(RequestError):
    """API 호출 URL 을 만들 수 없는 경우"""

    def __init__(self, resolver: MessageResolver | None = None):
        super().__init__(
            localize(
                "request.unable_to_construct_url",
                "Error: Unable to construct Url.",
                resolver,
            )
        )


class AuthorizationHeaderError(RequestError):
    """Authorization 헤더를 추가할 수 없는 경우"""

    def __init__(self, resolver: MessageResolver | None = None):
        super().__init__(
            localize(
                "request.authorization_header",
                "Error: Authorization header error.",
                resolver,
            )
        )


class ImpersonationNotSupportedError(RequestError):
    """on_behalf_of 를 지원하지 않는 요청에 대리 호출을 시도한 경우"""

    def __init__(self, obj: Any, resolver: MessageResolver | None = None):
        self.obj = obj
        super().__init__(
            localize(
                "request.impersonation_not_supported",
                "Error: Impersonation not supported.",
                resolver,
            )
        )


# 세션 오류
class SessionError(SendGridError):
    """Session 에서 요청을 보내는 중 발생하는 오류"""

    pass


class AuthenticationMissingError(SessionError):
    """Session 에 Authentication 이 설정되지 않은 경우"""

    def __init__(self, resolver: MessageResolver | None = None):
        super().__init__(
            localize(
                "session.authentication_missing",
                "Could not make an HTTP request as there was no "
                "`Authentication` configured on `Session`. Please set the "
                "`authentication` property before calling `send` on `Session`.",
                resolver,
            )
        )


class AuthenticationTypeNotAllowedError(SessionError):
    """API 호출이 해당 인증 방식을 허용하지 않는 경우"""

    def __init__(
        self,
        obj: Any,
        authentication: "Authentication",
        resolver: MessageResolver | None = None,
    ):
        self.obj = obj
        self.authentication = authentication
        super().__init__(
            localize(
                "session.authentication_type_not_allowed",
                "The `{request}` class does not allow authentication with "
                "{authentication}s. Please try using another Authentication type.",
                resolver,
                request=_name_of(obj),
                authentication=authentication.describe(resolver),
            )
        )


# 요청 검증 오류
class ValidationError(SendGridError):
    """요청 값이 API 규칙에 맞지 않는 경우 (전송 전 검증)"""

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)


class InvalidContentTypeError(ValidationError):
    """content type 에 ; 또는 개행(CR/LF)이 포함된 경우"""

    def __init__(self, value: str, resolver: MessageResolver | None = None):
        super().__init__(
            localize(
                "validation.invalid_content_type",
                "Invalid content type: {value!r}",
                resolver,
                value=value,
            ),
            value,
        )


class InvalidFilenameError(ValidationError):
    """파일 이름에 ; , 또는 개행(CR/LF)이 포함된 경우"""

    def __init__(self, value: str, resolver: MessageResolver | None = None):
        super().__init__(
            localize(
                "validation.invalid_filename",
                "Invalid filename: {value!r}",
                resolver,
                value=value,
            ),
            value,
        )


class InvalidContentIDError(ValidationError):
    """content id 가 빈 문자열이거나 , 또는 개행(CR/LF)을 포함한 경우"""

    def __init__(self, value: str, resolver: MessageResolver | None = None):
        super().__init__(
            localize(
                "validation.invalid_content_id",
                "Invalid content ID: {value!r}",
                resolver,
                value=value,
            ),
            value,
        )


class MissingPersonalizationsError(ValidationError):
    """personalization 이 하나도 없는 경우"""

    def __init__(self) -> None:
        super().__init__("An email must have at least one personalization.")


class TooManyPersonalizationsError(ValidationError):
    """personalization 개수가 제한을 넘은 경우"""

    def __init__(self, count: int, limit: int):
        self.limit = limit
        super().__init__(
            f"An email can have at most {limit} personalizations "
            f"(got {count}).",
            count,
        )


class InvalidEmailAddressError(ValidationError):
    """이메일 주소 형식이 잘못된 경우"""

    def __init__(self, value: str):
        super().__init__(f"Invalid email address: {value!r}", value)


class MissingSubjectError(ValidationError):
    """메일 제목이 전역 또는 모든 personalization 에 지정되지 않은 경우"""

    def __init__(self) -> None:
        super().__init__(
            "A subject is required either on the email or on every "
            "personalization."
        )


class MissingContentError(ValidationError):
    """메일 본문이 없는 경우"""

    def __init__(self) -> None:
        super().__init__("An email must have at least one content.")


class TooManyCategoriesError(ValidationError):
    """카테고리 개수가 제한을 넘은 경우"""

    def __init__(self, count: int, limit: int):
        self.limit = limit
        super().__init__(
            f"An email can have at most {limit} categories (got {count}).",
            count,
        )


class InvalidEndDateError(ValidationError):
    """통계 조회 종료일이 시작일보다 앞선 경우"""

    def __init__(self, start_date: date, end_date: date):
        self.start_date = start_date
        super().__init__(
            f"The end date ({end_date.isoformat()}) cannot be before the "
            f"start date ({start_date.isoformat()}).",
            end_date,
        )


class InvalidQueryParameterError(ValidationError):
    """쿼리 파라미터 값이 허용 범위를 벗어난 경우"""

    def __init__(self, name: str, value: Any):
        self.name = name
        super().__init__(f"Invalid value for `{name}`: {value!r}", value)


class InvalidCategoriesError(ValidationError):
    """카테고리 통계 조회 시 카테고리 개수가 잘못된 경우"""

    def __init__(self, count: int, limit: int):
        self.limit = limit
        super().__init__(
            f"Between 1 and {limit} categories must be given (got {count}).",
            count,
        )


class InvalidSubusersError(ValidationError):
    """서브유저 통계 조회 시 서브유저 개수가 잘못된 경우"""

    def __init__(self, count: int, limit: int):
        self.limit = limit
        super().__init__(
            f"Between 1 and {limit} subusers must be given (got {count}).",
            count,
        )


class InvalidSendAtError(ValidationError):
    """예약 발송 시각에 시간대 정보가 없는 경우"""

    def __init__(self, value: datetime):
        super().__init__(
            f"send_at must be a timezone-aware datetime (got {value.isoformat()}).",
            value,
        )
