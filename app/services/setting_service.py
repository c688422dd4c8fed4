"""Key/value settings services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.constants import NOTIFICATION_EMAILS_SETTING_KEY
from app.core.errors import ValidationError, first_error_message
from app.models.setting import Setting
from app.repositories import setting_repo
from app.schemas.setting import INVALID_EMAILS_MESSAGE, NotificationEmailsInput


def get_setting(session: Session, key: str) -> str | None:
    """Return the stored value or ``None`` for a never-written key."""

    setting = setting_repo.get_setting_by_key(session, key)
    if setting is None:
        return None
    return setting.value


def set_setting(session: Session, key: str, value: str) -> None:
    """Update the row for ``key`` or insert it when absent."""

    setting = setting_repo.get_setting_by_key(session, key)
    if setting is not None:
        setting.value = value
        setting_repo.save_setting(session, setting)
        return

    try:
        setting_repo.save_setting(session, Setting(key=key, value=value))
    except IntegrityError:
        # A concurrent writer inserted the key first; last write wins.
        session.rollback()
        setting = setting_repo.get_setting_by_key(session, key)
        if setting is None:
            raise
        setting.value = value
        setting_repo.save_setting(session, setting)


def parse_notification_emails_input(payload: Mapping[str, Any]) -> NotificationEmailsInput:
    try:
        return NotificationEmailsInput.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(
            first_error_message(exc.errors(), fallback=INVALID_EMAILS_MESSAGE)
        ) from exc


def get_notification_emails(session: Session) -> str:
    return get_setting(session, NOTIFICATION_EMAILS_SETTING_KEY) or ""


def set_notification_emails(session: Session, emails: str) -> str:
    set_setting(session, NOTIFICATION_EMAILS_SETTING_KEY, emails)
    return emails


def parse_recipients(raw: str | None) -> list[str]:
    """Split a comma separated list, keeping trimmed entries that contain ``@``."""

    if not raw:
        return []
    return [address for address in (part.strip() for part in raw.split(",")) if "@" in address]
