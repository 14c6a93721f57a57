import mimetypes
from base64 import b64encode
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sendgrid_kit.constants import (
    CONTENT_ID_FORBIDDEN_CHARS,
    CONTENT_TYPE_FORBIDDEN_CHARS,
    FILENAME_FORBIDDEN_CHARS,
)
from sendgrid_kit.exceptions import (
    InvalidContentIDError,
    InvalidContentTypeError,
    InvalidFilenameError,
)
from sendgrid_kit.mail.schemas import ContentDisposition, ContentType


def _contains_any(value: str, chars: tuple[str, ...]) -> bool:
    return any(char in value for char in chars)


@dataclass(frozen=True)
class Attachment:
    """
    메일 발송 API 에 포함되는 첨부파일.

    생성 시점에는 값을 검증하지 않으며, 발송 전에 validate() 로 헤더 주입이
    가능한 구분자(; , 개행)가 들어있는지 확인합니다.
    """

    filename: str
    content: bytes
    disposition: ContentDisposition = ContentDisposition.ATTACHMENT
    type: ContentType | None = None
    content_id: str | None = None

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        disposition: ContentDisposition = ContentDisposition.ATTACHMENT,
        type: ContentType | None = None,
        content_id: str | None = None,
    ) -> "Attachment":
        """
        파일을 읽어 첨부파일을 만듭니다.

        Args:
            path: 첨부할 파일 경로
            disposition: 첨부 방식 (기본값: attachment)
            type: content type, 없으면 확장자로 추측
            content_id: inline 이미지 등에 사용할 content id

        Returns:
            Attachment: 파일 이름은 경로의 basename 을 사용
        """
        path = Path(path)
        if type is None:
            guessed, _ = mimetypes.guess_type(path.name)
            if guessed:
                type = ContentType.parse(guessed)

        return cls(
            filename=path.name,
            content=path.read_bytes(),
            disposition=disposition,
            type=type,
            content_id=content_id,
        )

    @property
    def encoded_content(self) -> str:
        return b64encode(self.content).decode("ascii")

    def encode(self) -> dict[str, Any]:
        """
        API 요청 본문 형식으로 변환합니다. 값이 없는 선택 필드는 키를 생략합니다.

        Returns:
            dict[str, Any]: content, filename, disposition (+ type, content_id)
        """
        payload: dict[str, Any] = {
            "content": self.encoded_content,
            "filename": self.filename,
            "disposition": self.disposition.value,
        }
        if self.type is not None:
            payload["type"] = self.type.description
        if self.content_id is not None:
            payload["content_id"] = self.content_id
        return payload

    def validate(self) -> None:
        """
        첨부파일 필드를 검증합니다. type -> filename -> content_id 순으로
        검사하며 처음 발견한 오류를 발생시킵니다.

        Raises:
            InvalidContentTypeError: content type 에 ; 또는 개행이 있는 경우
            InvalidFilenameError: 파일 이름에 ; , 또는 개행이 있는 경우
            InvalidContentIDError: content id 가 비어있거나 , 가 있는 경우
        """
        if self.type is not None:
            rendered = self.type.description
            if _contains_any(rendered, CONTENT_TYPE_FORBIDDEN_CHARS):
                raise InvalidContentTypeError(rendered)

        if _contains_any(self.filename, FILENAME_FORBIDDEN_CHARS):
            raise InvalidFilenameError(self.filename)

        if self.content_id is not None:
            if not self.content_id or _contains_any(
                self.content_id, CONTENT_ID_FORBIDDEN_CHARS
            ):
                raise InvalidContentIDError(self.content_id)
