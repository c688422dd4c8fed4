"""Lead capture services."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from app.core.errors import ValidationError, first_error_message
from app.models.lead import Lead
from app.repositories import lead_repo
from app.schemas.lead import LeadCreateInput
from app.services.notification_service import LeadNotification
from app.services.verification_service import RecaptchaVerifier

logger = logging.getLogger(__name__)

VERIFICATION_REQUIRED_MESSAGE = "Güvenlik doğrulaması gerekli."
VERIFICATION_FAILED_MESSAGE = "Güvenlik doğrulaması başarısız. Lütfen tekrar deneyin."


def parse_lead_input(payload: Mapping[str, Any]) -> LeadCreateInput:
    """Return validated lead payload or raise with the first field's message."""

    try:
        return LeadCreateInput.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(first_error_message(exc.errors())) from exc


def verify_submission(verifier: RecaptchaVerifier, token: str | None) -> None:
    """Enforce the anti-automation check when a secret is configured."""

    if not verifier.enabled:
        return
    if not token:
        raise ValidationError(VERIFICATION_REQUIRED_MESSAGE)
    if not verifier.verify(token).success:
        raise ValidationError(VERIFICATION_FAILED_MESSAGE)


def submit_lead(session: Session, payload: Mapping[str, Any], verifier: RecaptchaVerifier) -> Lead:
    """Validate, verify and persist a public form submission."""

    input_data = parse_lead_input(payload)
    verify_submission(verifier, input_data.verification_token)

    lead = lead_repo.create_lead(
        session,
        Lead(
            full_name=input_data.full_name,
            email=input_data.email,
            phone=input_data.phone,
            consent=input_data.consent,
        ),
    )
    logger.info("Stored lead %s", lead.id)
    return lead


def list_leads(session: Session) -> Sequence[Lead]:
    """Return leads for the admin list, newest first."""

    return lead_repo.list_leads(session)


def to_notification(lead: Lead) -> LeadNotification:
    return LeadNotification(full_name=lead.full_name, email=lead.email, phone=lead.phone)
