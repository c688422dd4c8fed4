"""Admin settings routes."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body

from app.routers.deps import CurrentAdmin, DbSession
from app.schemas.setting import NotificationEmailsRead, NotificationEmailsUpdated
from app.services import setting_service

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("/notification-emails", response_model=NotificationEmailsRead)
def get_notification_emails(session: DbSession, _admin_user: CurrentAdmin):
    return NotificationEmailsRead(emails=setting_service.get_notification_emails(session))


@router.post("/notification-emails", response_model=NotificationEmailsUpdated)
def update_notification_emails(
    session: DbSession,
    _admin_user: CurrentAdmin,
    payload: Annotated[dict[str, Any], Body()],
):
    input_data = setting_service.parse_notification_emails_input(payload)
    emails = setting_service.set_notification_emails(session, input_data.emails)
    return NotificationEmailsUpdated(emails=emails)
