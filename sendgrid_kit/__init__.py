from sendgrid_kit.auth import Authentication, AuthenticationType
from sendgrid_kit.config import SendGridSettings
from sendgrid_kit.mail import (
    Address,
    Attachment,
    Content,
    ContentDisposition,
    ContentType,
    Email,
    Personalization,
)
from sendgrid_kit.request import HttpMethod, Request
from sendgrid_kit.session import Session
from sendgrid_kit.stats import (
    Aggregation,
    CategoryStatisticGet,
    GlobalStatisticGet,
    StatisticFetcher,
    SubuserStatisticGet,
)

__all__ = [
    "Address",
    "Aggregation",
    "Attachment",
    "Authentication",
    "AuthenticationType",
    "CategoryStatisticGet",
    "Content",
    "ContentDisposition",
    "ContentType",
    "Email",
    "GlobalStatisticGet",
    "HttpMethod",
    "Personalization",
    "Request",
    "SendGridSettings",
    "Session",
    "StatisticFetcher",
    "SubuserStatisticGet",
]
