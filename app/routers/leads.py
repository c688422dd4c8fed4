"""Lead capture and listing routes."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, BackgroundTasks, Body, Depends, status
from sqlalchemy.engine import Engine

from app.db.session import get_engine
from app.routers.deps import CurrentAdmin, DbSession, get_mailer, get_verifier
from app.schemas.lead import LeadRead
from app.services import lead_service
from app.services.notification_service import ResendMailer, notify_lead_recipients
from app.services.verification_service import RecaptchaVerifier

router = APIRouter(prefix="/api/leads", tags=["leads"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LeadRead)
def submit_lead(
    session: DbSession,
    background_tasks: BackgroundTasks,
    engine: Annotated[Engine, Depends(get_engine)],
    verifier: Annotated[RecaptchaVerifier, Depends(get_verifier)],
    mailer: Annotated[ResendMailer | None, Depends(get_mailer)],
    payload: Annotated[dict[str, Any], Body()],
):
    lead = lead_service.submit_lead(session, payload, verifier)
    background_tasks.add_task(
        notify_lead_recipients,
        engine,
        mailer,
        lead_service.to_notification(lead),
    )
    return lead


@router.get("", response_model=list[LeadRead])
def list_leads(session: DbSession, _admin_user: CurrentAdmin):
    return lead_service.list_leads(session)
