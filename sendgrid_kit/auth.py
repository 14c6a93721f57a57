"""
SendGrid API 인증 방식.

Authentication 은 자격 증명(username/password) 또는 API 키 둘 중 하나만을
표현하는 닫힌 값 타입입니다. 생성은 반드시 credential() / api_key() 를 통해서만
하고, 사용하는 쪽에서는 type 으로 분기합니다.
"""

from base64 import b64encode
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import environ

from sendgrid_kit.localization import MessageResolver, localize


class AuthenticationType(Enum):
    CREDENTIAL = "credential"
    API_KEY = "api_key"


@dataclass(frozen=True, repr=False)
class Authentication:
    type: AuthenticationType
    secret: str
    username: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, AuthenticationType):
            raise ValueError(f"알 수 없는 인증 방식입니다: {self.type!r}")
        if not isinstance(self.secret, str):
            raise ValueError("인증 정보의 secret 은 문자열이어야 합니다.")
        if self.type is AuthenticationType.CREDENTIAL:
            if not isinstance(self.username, str):
                raise ValueError("credential 인증에는 username 이 필요합니다.")
        elif self.username is not None:
            raise ValueError("API 키 인증에는 username 을 지정할 수 없습니다.")

    @classmethod
    def credential(cls, username: str, password: str) -> "Authentication":
        """username / password 로 인증합니다."""
        return cls(AuthenticationType.CREDENTIAL, password, username)

    @classmethod
    def api_key(cls, token: str) -> "Authentication":
        """SendGrid API 키로 인증합니다."""
        return cls(AuthenticationType.API_KEY, token)

    @classmethod
    def from_info(cls, info: Mapping[Any, Any]) -> "Authentication | None":
        """
        딕셔너리에서 가장 적절한 인증 방식을 만듭니다.
        api_key 가 있으면 username/password 보다 우선합니다.

        Args:
            info: api_key 또는 username, password 키를 가진 딕셔너리

        Returns:
            Authentication | None: 조건에 맞는 값이 없으면 None
        """
        key = info.get("api_key")
        if isinstance(key, str):
            return cls.api_key(key)

        username = info.get("username")
        password = info.get("password")
        if isinstance(username, str) and isinstance(password, str):
            return cls.credential(username, password)

        return None

    @classmethod
    def from_env(cls, env: environ.Env | None = None) -> "Authentication | None":
        """
        환경 변수에서 인증 정보를 읽습니다.

        SENDGRID_API_KEY 가 있으면 API 키를, 없으면 SENDGRID_USERNAME 과
        SENDGRID_PASSWORD 를 사용합니다.

        Args:
            env: environ.Env 인스턴스 (기본값: 새 인스턴스)

        Returns:
            Authentication | None: 설정된 값이 없으면 None
        """
        env = env or environ.Env()
        # 비밀 값은 $ 로 시작해도 다른 변수 참조로 해석되지 않도록 원본 그대로 읽음
        return cls.from_info(
            {
                "api_key": env.ENVIRON.get("SENDGRID_API_KEY"),
                "username": env.ENVIRON.get("SENDGRID_USERNAME"),
                "password": env.ENVIRON.get("SENDGRID_PASSWORD"),
            }
        )

    @property
    def user(self) -> str | None:
        """credential 인 경우 username, 그 외에는 None"""
        if self.type is AuthenticationType.CREDENTIAL:
            return self.username
        return None

    @property
    def key(self) -> str:
        """credential 인 경우 password, API 키인 경우 키 값"""
        return self.secret

    @property
    def authorization_header(self) -> str:
        """모든 v3 API 호출에 사용할 수 있는 Authorization 헤더 값"""
        if self.type is AuthenticationType.CREDENTIAL:
            raw = f"{self.username}:{self.secret}".encode("utf-8")
            return "Basic " + b64encode(raw).decode("ascii")
        return f"Bearer {self.secret}"

    def describe(self, resolver: MessageResolver | None = None) -> str:
        if self.type is AuthenticationType.CREDENTIAL:
            return localize("authentication.credential", "credential", resolver)
        return localize("authentication.api_key", "API Key", resolver)

    @property
    def description(self) -> str:
        return self.describe()

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        # 비밀 값은 노출하지 않음
        if self.type is AuthenticationType.CREDENTIAL:
            return f"Authentication.credential(username={self.username!r}, password='***')"
        return "Authentication.api_key('***')"
