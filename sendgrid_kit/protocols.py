from typing import Any, Awaitable, Protocol


class HttpResponse(Protocol):
    """HTTP 응답 객체를 위한 프로토콜 (aiohttp.ClientResponse 호환)."""

    status: int

    async def text(self) -> str:
        ...


class HttpSession(Protocol):
    """HTTP 비동기 세션을 위한 프로토콜."""

    def request(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> Awaitable[HttpResponse]:
        """
        HTTP 요청을 수행합니다.

        Args:
            method: HTTP 메서드 (GET, POST 등)
            url: 요청 URL (쿼리 문자열 포함)
            json: 요청 본문 (JSON)
            headers: 요청 헤더
            **kwargs: timeout 등 세션 구현체 고유 옵션

        Returns:
            응답 객체 (await 가능)
        """
        ...
