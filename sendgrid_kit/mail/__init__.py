from sendgrid_kit.mail.attachment import Attachment
from sendgrid_kit.mail.schemas import (
    Address,
    Content,
    ContentDisposition,
    ContentType,
    Personalization,
)
from sendgrid_kit.mail.send import Email

__all__ = [
    "Address",
    "Attachment",
    "Content",
    "ContentDisposition",
    "ContentType",
    "Email",
    "Personalization",
]
