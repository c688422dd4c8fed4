"""Lead form schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, Field, field_validator

from app.core.constants import MIN_FULL_NAME_LENGTH, MIN_PHONE_LENGTH
from app.schemas.base import CamelModel, is_email_shaped

CONSENT_REQUIRED_MESSAGE = "Devam etmek için onayı kabul etmelisiniz."


class LeadCreateInput(CamelModel):
    """Public lead form payload.

    Missing text fields default to an empty string so every field reports its
    own message instead of a generic "field required" error.
    """

    full_name: str = Field(default="", validate_default=True)
    email: str = Field(default="", validate_default=True)
    phone: str = Field(default="", validate_default=True)
    consent: bool = Field(default=False, validate_default=True)
    verification_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("verificationToken", "recaptchaToken", "verification_token"),
    )

    @field_validator("full_name", "email", "phone", mode="before")
    @classmethod
    def _strip_text(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("full_name")
    @classmethod
    def _validate_full_name(cls, value: str) -> str:
        if len(value) < MIN_FULL_NAME_LENGTH:
            raise ValueError("Ad Soyad en az 2 karakter olmalıdır.")
        return value

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        if not is_email_shaped(value):
            raise ValueError("Geçerli bir e-posta adresi giriniz.")
        return value

    @field_validator("phone")
    @classmethod
    def _validate_phone(cls, value: str) -> str:
        if len(value) < MIN_PHONE_LENGTH:
            raise ValueError("Geçerli bir telefon numarası giriniz.")
        return value

    @field_validator("consent", mode="before")
    @classmethod
    def _require_consent(cls, value: object) -> object:
        # Only a literal JSON true counts; "true" or 1 do not.
        if value is not True:
            raise ValueError(CONSENT_REQUIRED_MESSAGE)
        return value

    @field_validator("verification_token", mode="before")
    @classmethod
    def _normalize_token(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value


class LeadRead(CamelModel):
    id: str
    full_name: str
    email: str
    phone: str
    consent: bool
    created_at: datetime
