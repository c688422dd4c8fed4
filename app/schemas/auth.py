"""Authentication and admin account schema objects."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, field_validator

from app.core.constants import MAX_PASSWORD_BYTES, MIN_PASSWORD_LENGTH
from app.schemas.base import CamelModel, is_email_shaped, normalize_email

ADMIN_FIELDS_REQUIRED_MESSAGE = "Email, şifre ve ad gereklidir"
LOGIN_FIELDS_REQUIRED_MESSAGE = "Email ve şifre gereklidir"


class AdminCreateInput(BaseModel):
    """Validated payload for bootstrap and admin creation."""

    email: str
    password: str
    name: str

    @field_validator("email", "password", "name", mode="before")
    @classmethod
    def _require_value(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(ADMIN_FIELDS_REQUIRED_MESSAGE)
        return value

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        normalized = normalize_email(value)
        if not is_email_shaped(normalized):
            raise ValueError("Geçerli bir e-posta adresi giriniz.")
        return normalized

    @field_validator("password")
    @classmethod
    def _validate_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Şifre en az {MIN_PASSWORD_LENGTH} karakter olmalıdır.")
        # bcrypt refuses longer inputs.
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Şifre en fazla {MAX_PASSWORD_BYTES} bayt olabilir.")
        return value

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.strip()


class AdminLoginInput(BaseModel):
    """Validated login payload."""

    email: str
    password: str

    @field_validator("email", "password", mode="before")
    @classmethod
    def _require_value(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value):
            raise ValueError(LOGIN_FIELDS_REQUIRED_MESSAGE)
        return value

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return normalize_email(value)


class AdminUserRead(CamelModel):
    id: str
    email: str
    name: str


class AdminUserListItem(AdminUserRead):
    created_at: datetime


class LoginResponse(AdminUserRead):
    token: str


class SetupStatusResponse(CamelModel):
    needs_setup: bool


class SuccessResponse(CamelModel):
    success: bool = True
