from typing import Protocol

# 기본 로케일 (영문 메시지는 각 호출부의 default 값을 그대로 사용)
FALLBACK_LOCALE = "en"

DEFAULT_TABLES: dict[str, dict[str, str]] = {
    "en": {},
    "ko": {
        "authentication.credential": "자격 증명",
        "authentication.api_key": "API 키",
        "request.non_conforming": "오류: Request 를 따르지 않는 요청입니다.",
        "request.unable_to_construct_url": "오류: URL 을 생성할 수 없습니다.",
        "request.authorization_header": "오류: Authorization 헤더를 추가할 수 없습니다.",
        "request.impersonation_not_supported": "오류: 대리 호출(impersonation)을 지원하지 않는 요청입니다.",
        "session.authentication_missing": (
            "Session 에 Authentication 이 설정되지 않아 HTTP 요청을 보낼 수 없습니다. "
            "send 를 호출하기 전에 authentication 을 설정하세요."
        ),
        "session.authentication_type_not_allowed": (
            "{request} 클래스는 {authentication} 인증을 허용하지 않습니다. "
            "다른 인증 방식을 사용하세요."
        ),
        "validation.invalid_content_type": "잘못된 content type 입니다: {value!r}",
        "validation.invalid_filename": "잘못된 파일 이름입니다: {value!r}",
        "validation.invalid_content_id": "잘못된 content id 입니다: {value!r}",
    },
}


class MessageResolver(Protocol):
    """사용자에게 보여줄 메시지를 키로 조회하기 위한 프로토콜."""

    def resolve(self, key: str, default: str) -> str:
        """
        키에 해당하는 메시지를 반환합니다.

        Args:
            key: 메시지 키
            default: 키가 없을 때 사용할 기본(영문) 메시지

        Returns:
            현재 로케일의 메시지 또는 default
        """
        ...


class TableMessageResolver:
    """로케일별 메시지 테이블을 사용하는 MessageResolver 구현"""

    def __init__(
        self,
        tables: dict[str, dict[str, str]] | None = None,
        locale: str = FALLBACK_LOCALE,
    ):
        self.tables = DEFAULT_TABLES if tables is None else tables
        self.locale = locale

    def resolve(self, key: str, default: str) -> str:
        table = self.tables.get(self.locale) or {}
        return table.get(key, default)


_default_resolver: MessageResolver = TableMessageResolver()


def get_default_resolver() -> MessageResolver:
    """resolver 를 주입받지 않은 곳에서 사용하는 기본 resolver"""
    return _default_resolver


def set_default_resolver(resolver: MessageResolver) -> None:
    global _default_resolver
    _default_resolver = resolver


def localize(
    key: str,
    default: str,
    resolver: MessageResolver | None = None,
    **params: object,
) -> str:
    """
    메시지를 조회한 뒤 params 로 포맷팅합니다.

    Args:
        key: 메시지 키
        default: 기본(영문) 메시지 템플릿
        resolver: 사용할 resolver, None 이면 기본 resolver
        **params: 템플릿에 채울 값

    Returns:
        포맷팅된 메시지
    """
    template = (resolver or get_default_resolver()).resolve(key, default)
    return template.format(**params) if params else template
