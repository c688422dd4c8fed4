"""Shared route dependencies: settings, collaborators and the admin auth gate."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, Request
from sqlmodel import Session

from app.core.config import Settings
from app.core.errors import Unauthorized
from app.db.session import get_session
from app.models.admin_user import AdminUser
from app.services import auth_service
from app.services.chat_service import ChatRelay
from app.services.notification_service import ResendMailer
from app.services.verification_service import RecaptchaVerifier


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_verifier(request: Request) -> RecaptchaVerifier:
    return request.app.state.verifier


def get_mailer(request: Request) -> ResendMailer | None:
    return request.app.state.mailer


def get_chat_relay(request: Request) -> ChatRelay:
    return request.app.state.chat_relay


def get_bearer_token(authorization: Annotated[str | None, Header()] = None) -> str:
    """Return the raw bearer token or reject the request."""

    raw_token = auth_service.parse_bearer_token(authorization)
    if raw_token is None:
        raise Unauthorized()
    return raw_token


def require_admin(
    raw_token: Annotated[str, Depends(get_bearer_token)],
    session: Annotated[Session, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AdminUser:
    """Resolve the calling admin; every failure looks the same to the client."""

    admin_user = auth_service.get_admin_for_token(
        session,
        raw_token,
        secret_key=settings.secret_key,
    )
    if admin_user is None:
        raise Unauthorized()
    return admin_user


CurrentAdmin = Annotated[AdminUser, Depends(require_admin)]
DbSession = Annotated[Session, Depends(get_session)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]
