from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sendgrid_kit.auth import AuthenticationType
from sendgrid_kit.constants import MAIL_SEND_PATH, MAX_CATEGORIES, MAX_PERSONALIZATIONS
from sendgrid_kit.exceptions import (
    InvalidEmailAddressError,
    InvalidSendAtError,
    MissingContentError,
    MissingPersonalizationsError,
    MissingSubjectError,
    TooManyCategoriesError,
    TooManyPersonalizationsError,
)
from sendgrid_kit.mail.attachment import Attachment
from sendgrid_kit.mail.schemas import Address, Content, Personalization
from sendgrid_kit.request import HttpMethod, Request


def _check_address(address: Address) -> None:
    local, sep, domain = address.email.partition("@")
    if not (local and sep and domain) or "\n" in address.email:
        raise InvalidEmailAddressError(address.email)


@dataclass
class Email(Request):
    """
    Mail Send API (POST /v3/mail/send)
    메일 발송 API 는 API 키 인증만 허용합니다.
    """

    personalizations: list[Personalization]
    from_address: Address
    content: list[Content]
    subject: str | None = None
    attachments: list[Attachment] = field(default_factory=list)
    reply_to: Address | None = None
    categories: list[str] = field(default_factory=list)
    send_at: datetime | None = None

    method = HttpMethod.POST
    supported_authentication = frozenset({AuthenticationType.API_KEY})

    @property
    def path(self) -> str:
        return MAIL_SEND_PATH

    def encode(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "personalizations": [p.encode() for p in self.personalizations],
            "from": self.from_address.encode(),
            "content": [c.encode() for c in self.content],
        }
        if self.subject is not None:
            payload["subject"] = self.subject
        if self.attachments:
            payload["attachments"] = [a.encode() for a in self.attachments]
        if self.reply_to is not None:
            payload["reply_to"] = self.reply_to.encode()
        if self.categories:
            payload["categories"] = list(self.categories)
        if self.send_at is not None:
            payload["send_at"] = int(self.send_at.timestamp())
        return payload

    def validate(self) -> None:
        """
        메일 발송 요청을 검증합니다. 처음 발견한 오류를 발생시킵니다.

        Raises:
            MissingPersonalizationsError: personalization 이 없는 경우
            TooManyPersonalizationsError: personalization 이 1000개를 넘는 경우
            InvalidEmailAddressError: 주소 형식이 잘못된 경우
            MissingSubjectError: 제목이 지정되지 않은 personalization 이 있는 경우
            MissingContentError: 본문이 없는 경우
            TooManyCategoriesError: 카테고리가 10개를 넘는 경우
            InvalidSendAtError: send_at 에 시간대 정보가 없는 경우
            ValidationError: 첨부파일 검증에 실패한 경우
        """
        if not self.personalizations:
            raise MissingPersonalizationsError()
        if len(self.personalizations) > MAX_PERSONALIZATIONS:
            raise TooManyPersonalizationsError(
                len(self.personalizations), MAX_PERSONALIZATIONS
            )

        _check_address(self.from_address)
        if self.reply_to is not None:
            _check_address(self.reply_to)
        for personalization in self.personalizations:
            for address in personalization.recipients:
                _check_address(address)

        if self.subject is None and any(
            p.subject is None for p in self.personalizations
        ):
            raise MissingSubjectError()

        if not self.content:
            raise MissingContentError()

        if len(self.categories) > MAX_CATEGORIES:
            raise TooManyCategoriesError(len(self.categories), MAX_CATEGORIES)

        # naive datetime 은 실행 환경의 로컬 시간으로 해석되므로 허용하지 않음
        if self.send_at is not None and self.send_at.utcoffset() is None:
            raise InvalidSendAtError(self.send_at)

        for attachment in self.attachments:
            attachment.validate()
