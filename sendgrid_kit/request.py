from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar
from urllib.parse import urlencode, urlsplit

from sendgrid_kit.auth import Authentication, AuthenticationType
from sendgrid_kit.constants import AUTHORIZATION_HEADER, ON_BEHALF_OF_HEADER
from sendgrid_kit.exceptions import (
    AuthorizationHeaderError,
    ImpersonationNotSupportedError,
    UnableToConstructUrlError,
)
from sendgrid_kit.localization import MessageResolver


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"


class Request(ABC):
    """
    모든 SendGrid API 호출을 위한 추상 기본 클래스.
    하위 클래스는 path 를 고정하고, 필요에 따라 encode() 와 validate() 를 구현합니다.
    """

    method: ClassVar[HttpMethod] = HttpMethod.GET
    supports_impersonation: ClassVar[bool] = True
    supported_authentication: ClassVar[frozenset[AuthenticationType]] = frozenset(
        AuthenticationType
    )

    @property
    @abstractmethod
    def path(self) -> str:
        """API 경로 (예: /v3/stats)"""
        pass

    def encode(self) -> dict[str, Any]:
        """
        요청 값을 API 필드 이름의 딕셔너리로 변환합니다.
        값이 없는 선택 필드는 키 자체를 생략합니다.
        """
        return {}

    def validate(self) -> None:
        """전송 전에 요청 값을 검증합니다. 기본 구현은 아무것도 하지 않습니다."""
        pass

    @property
    def body(self) -> dict[str, Any] | None:
        if self.method is HttpMethod.GET:
            return None
        return self.encode()

    @property
    def query_parameters(self) -> list[tuple[str, str]]:
        if self.method is not HttpMethod.GET:
            return []

        params: list[tuple[str, str]] = []
        for name, value in self.encode().items():
            # 리스트 값은 같은 키를 반복해서 보냄 (categories=a&categories=b)
            values = value if isinstance(value, (list, tuple)) else [value]
            params.extend((name, str(v)) for v in values)
        return params

    def allows(self, authentication: Authentication) -> bool:
        return authentication.type in self.supported_authentication

    def build_url(
        self, base_url: str, resolver: MessageResolver | None = None
    ) -> str:
        """
        API 호출 URL 을 만듭니다.

        Args:
            base_url: API 호스트 (예: https://api.sendgrid.com)
            resolver: 오류 메시지에 사용할 resolver

        Returns:
            str: 쿼리 문자열을 포함한 전체 URL

        Raises:
            UnableToConstructUrlError: base_url 이 절대 URL 이 아니거나 path 가 / 로 시작하지 않는 경우
        """
        parts = urlsplit(base_url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise UnableToConstructUrlError(resolver)
        if not self.path.startswith("/"):
            raise UnableToConstructUrlError(resolver)

        url = base_url.rstrip("/") + self.path
        query = self.query_parameters
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    def build_headers(
        self,
        authentication: Authentication,
        on_behalf_of: str | None = None,
        resolver: MessageResolver | None = None,
    ) -> dict[str, str]:
        """
        API 호출 헤더를 만듭니다.

        Args:
            authentication: 사용할 인증 정보
            on_behalf_of: 대리 호출할 서브유저 이름 (선택)
            resolver: 오류 메시지에 사용할 resolver

        Returns:
            dict[str, str]: 요청 헤더

        Raises:
            ImpersonationNotSupportedError: 대리 호출을 지원하지 않는 요청인 경우
            AuthorizationHeaderError: Authorization 헤더 값을 만들 수 없는 경우
        """
        if on_behalf_of and not self.supports_impersonation:
            raise ImpersonationNotSupportedError(type(self), resolver)

        authorization = authentication.authorization_header
        if not authorization:
            raise AuthorizationHeaderError(resolver)

        headers = {
            AUTHORIZATION_HEADER: authorization,
            "Accept": "application/json",
        }
        if self.body is not None:
            headers["Content-Type"] = "application/json"
        if on_behalf_of:
            headers[ON_BEHALF_OF_HEADER] = on_behalf_of
        return headers
