"""Application-wide constants and shared values."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

NOTIFICATION_EMAILS_SETTING_KEY = "notification_emails"

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72
MIN_FULL_NAME_LENGTH = 2
MIN_PHONE_LENGTH = 10

BCRYPT_ROUNDS = 10


def utcnow() -> datetime:
    """Return timezone-aware current UTC datetime."""

    return datetime.now(UTC)


def new_id() -> str:
    """Return a random string primary key."""

    return str(uuid4())
