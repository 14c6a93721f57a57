from dataclasses import dataclass

import environ

from sendgrid_kit.auth import Authentication
from sendgrid_kit.constants import DEFAULT_BASE_URL
from sendgrid_kit.localization import FALLBACK_LOCALE


@dataclass
class SendGridSettings:
    authentication: Authentication | None = None
    base_url: str = DEFAULT_BASE_URL
    on_behalf_of: str | None = None
    locale: str = FALLBACK_LOCALE
    timeout: float = 30.0

    @classmethod
    def from_env(cls, env: environ.Env | None = None) -> "SendGridSettings":
        """
        환경 변수에서 설정을 읽습니다.

        - SENDGRID_API_KEY 또는 SENDGRID_USERNAME / SENDGRID_PASSWORD
        - SENDGRID_BASE_URL (기본값: https://api.sendgrid.com)
        - SENDGRID_ON_BEHALF_OF
        - SENDGRID_LOCALE (기본값: en)
        - SENDGRID_TIMEOUT (초, 기본값: 30)

        Args:
            env: environ.Env 인스턴스 (기본값: 새 인스턴스)

        Returns:
            SendGridSettings: 읽어들인 설정
        """
        env = env or environ.Env()
        return cls(
            authentication=Authentication.from_env(env),
            base_url=env.str("SENDGRID_BASE_URL", default=DEFAULT_BASE_URL),
            # 빈 문자열은 미설정으로 취급
            on_behalf_of=env.str("SENDGRID_ON_BEHALF_OF", default="") or None,
            locale=env.str("SENDGRID_LOCALE", default=FALLBACK_LOCALE),
            timeout=env.float("SENDGRID_TIMEOUT", default=30.0),
        )
