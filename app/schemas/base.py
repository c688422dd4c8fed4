"""Shared schema helpers."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_email_shaped(value: str) -> bool:
    """Return whether ``value`` looks like ``local@domain.tld``."""

    return _EMAIL_PATTERN.fullmatch(value) is not None


def normalize_email(value: str) -> str:
    """Normalize an email address for storage and comparisons."""

    return value.strip().lower()


class CamelModel(BaseModel):
    """Model exchanged with the frontend using camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
