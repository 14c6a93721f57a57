import json
import logging
from typing import Any, ClassVar

import aiohttp

from sendgrid_kit.auth import Authentication
from sendgrid_kit.config import SendGridSettings
from sendgrid_kit.constants import DEFAULT_BASE_URL
from sendgrid_kit.exceptions import (
    AuthenticationMissingError,
    AuthenticationTypeNotAllowedError,
    NonConformingRequestError,
    SendGridApiError,
    SendGridError,
)
from sendgrid_kit.localization import MessageResolver, TableMessageResolver
from sendgrid_kit.protocols import HttpSession
from sendgrid_kit.request import Request

logger = logging.getLogger(__name__)


class Session:
    """
    SendGrid API 호출 진입점 - Lazy Initialization Singleton 을 지원합니다.
    Request 를 검증하고 인증 헤더를 붙여 HTTP 세션으로 전송합니다.
    재시도, 커넥션 풀링은 주입받은 HTTP 세션의 책임입니다.
    """

    _instance: ClassVar["Session | None"] = None

    def __init__(
        self,
        http_session: HttpSession,
        authentication: Authentication | None = None,
        on_behalf_of: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        resolver: MessageResolver | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
    ):
        self.http_session = http_session
        self.authentication = authentication
        self.on_behalf_of = on_behalf_of
        self.base_url = base_url
        self.resolver = resolver
        self.timeout = timeout

    @classmethod
    def get_session(
        cls,
        http_session: HttpSession | None = None,
        authentication: Authentication | None = None,
        **kwargs: Any,
    ) -> "Session":
        """
        공유 Session 인스턴스를 반환합니다.

        Args:
            http_session: HTTP 세션 객체 (aiohttp.ClientSession 등). 첫 호출 시 필수
            authentication: 인증 정보. 주어지면 기존 인스턴스의 값을 교체
            **kwargs: 첫 생성 시 Session 생성자에 전달할 추가 인자

        Returns:
            Session: 공유 인스턴스

        Raises:
            ValueError: 첫 호출 시 http_session 이 없는 경우
        """
        if cls._instance is None:
            if http_session is None:
                raise ValueError("첫 호출 시 http_session 은 필수입니다.")
            cls._instance = cls(http_session, authentication, **kwargs)
        else:
            if http_session is not None:
                cls._instance.http_session = http_session
            if authentication is not None:
                cls._instance.authentication = authentication

        return cls._instance

    @classmethod
    def reset_session(cls) -> None:
        """공유 인스턴스를 재설정합니다(테스트나 설정 변경 시 사용하기 위함)"""
        cls._instance = None

    @classmethod
    def from_settings(
        cls, http_session: HttpSession, settings: SendGridSettings
    ) -> "Session":
        return cls(
            http_session,
            authentication=settings.authentication,
            on_behalf_of=settings.on_behalf_of,
            base_url=settings.base_url,
            resolver=TableMessageResolver(locale=settings.locale),
            timeout=aiohttp.ClientTimeout(total=settings.timeout),
        )

    def _check_authentication(self, request: Request) -> Authentication:
        if self.authentication is None:
            raise AuthenticationMissingError(self.resolver)
        if not request.allows(self.authentication):
            raise AuthenticationTypeNotAllowedError(
                type(request), self.authentication, self.resolver
            )
        return self.authentication

    async def send(self, request: Request) -> Any:
        """
        API 요청을 전송합니다.

        Args:
            request: 전송할 Request 객체

        Returns:
            Any: 디코딩한 응답 JSON (본문이 없으면 빈 딕셔너리)

        Raises:
            NonConformingRequestError: Request 가 아닌 객체를 전달한 경우
            AuthenticationMissingError: 인증 정보가 설정되지 않은 경우
            AuthenticationTypeNotAllowedError: 요청이 해당 인증 방식을 허용하지 않는 경우
            RequestError: URL 또는 헤더를 만들 수 없는 경우
            ValidationError: 요청 값 검증에 실패한 경우
            SendGridApiError: API 가 오류 상태 코드를 반환한 경우
            SendGridError: 그 외 전송 중 예외가 발생한 경우
        """
        if not isinstance(request, Request):
            raise NonConformingRequestError(type(request), self.resolver)

        authentication = self._check_authentication(request)
        request.validate()

        url = request.build_url(self.base_url, self.resolver)
        headers = request.build_headers(
            authentication, self.on_behalf_of, self.resolver
        )

        options: dict[str, Any] = {}
        if self.timeout is not None:
            options["timeout"] = self.timeout

        logger.debug(f"SendGrid 요청: {request.method.value} {url}")
        try:
            response = await self.http_session.request(
                request.method.value,
                url,
                json=request.body,
                headers=headers,
                **options,
            )
            status = (
                response.status
                if hasattr(response, "status")
                else response.status_code
            )
            text = await response.text()

            if status >= 400:
                raise SendGridApiError(status, text)

            if not text.strip():
                return {}
            return json.loads(text)
        except SendGridApiError as e:
            logger.error(f"SendGrid API 오류: {request.method.value} {url} ({e.status})")
            raise
        except Exception as e:
            logger.error(f"SendGrid 요청 중 예외 발생: {str(e)}")
            raise SendGridError(f"Unexpected error while sending request: {str(e)}") from e
