"""Settings schemas."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from app.schemas.base import CamelModel

INVALID_EMAILS_MESSAGE = "Invalid emails format"


class NotificationEmailsInput(BaseModel):
    """Comma separated recipient list, stored verbatim."""

    emails: str

    @field_validator("emails", mode="before")
    @classmethod
    def _require_string(cls, value: object) -> object:
        if not isinstance(value, str):
            raise ValueError(INVALID_EMAILS_MESSAGE)
        return value


class NotificationEmailsRead(CamelModel):
    emails: str


class NotificationEmailsUpdated(NotificationEmailsRead):
    success: bool = True
