from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


@dataclass(frozen=True)
class ContentType:
    """
    MIME 타입 값 객체 ("type/subtype").
    구분자 검증은 이 값을 사용하는 쪽(Attachment 등)에서 수행합니다.
    """

    type: str
    subtype: str

    PNG: ClassVar["ContentType"]
    JPEG: ClassVar["ContentType"]
    GIF: ClassVar["ContentType"]
    PDF: ClassVar["ContentType"]
    CSV: ClassVar["ContentType"]
    ZIP: ClassVar["ContentType"]
    JSON: ClassVar["ContentType"]
    PLAIN_TEXT: ClassVar["ContentType"]
    HTML: ClassVar["ContentType"]

    @classmethod
    def parse(cls, value: str) -> "ContentType":
        """
        "type/subtype" 문자열을 ContentType 으로 변환합니다.

        Raises:
            ValueError: "/" 가 없는 경우
        """
        type_, sep, subtype = value.partition("/")
        if not sep:
            raise ValueError(f"content type 형식이 아닙니다: {value!r}")
        return cls(type_, subtype)

    @property
    def description(self) -> str:
        return f"{self.type}/{self.subtype}"

    def __str__(self) -> str:
        return self.description


ContentType.PNG = ContentType("image", "png")
ContentType.JPEG = ContentType("image", "jpeg")
ContentType.GIF = ContentType("image", "gif")
ContentType.PDF = ContentType("application", "pdf")
ContentType.CSV = ContentType("text", "csv")
ContentType.ZIP = ContentType("application", "zip")
ContentType.JSON = ContentType("application", "json")
ContentType.PLAIN_TEXT = ContentType("text", "plain")
ContentType.HTML = ContentType("text", "html")


class ContentDisposition(Enum):
    """첨부파일 표시 방식"""

    ATTACHMENT = "attachment"
    INLINE = "inline"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    email: str
    name: str | None = None

    def encode(self) -> dict[str, str]:
        payload = {"email": self.email}
        if self.name:
            payload["name"] = self.name
        return payload


@dataclass(frozen=True)
class Content:
    """메일 본문 (text/plain, text/html 등)"""

    type: ContentType
    value: str

    @classmethod
    def plain_text(cls, value: str) -> "Content":
        return cls(ContentType.PLAIN_TEXT, value)

    @classmethod
    def html(cls, value: str) -> "Content":
        return cls(ContentType.HTML, value)

    def encode(self) -> dict[str, str]:
        return {"type": self.type.description, "value": self.value}


@dataclass(frozen=True)
class Personalization:
    to: list[Address]
    cc: list[Address] | None = None
    bcc: list[Address] | None = None
    subject: str | None = None
    substitutions: dict[str, str] = field(default_factory=dict)

    @property
    def recipients(self) -> list[Address]:
        return [*self.to, *(self.cc or []), *(self.bcc or [])]

    def encode(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "to": [address.encode() for address in self.to]
        }
        if self.cc:
            payload["cc"] = [address.encode() for address in self.cc]
        if self.bcc:
            payload["bcc"] = [address.encode() for address in self.bcc]
        if self.subject is not None:
            payload["subject"] = self.subject
        if self.substitutions:
            payload["substitutions"] = dict(self.substitutions)
        return payload
