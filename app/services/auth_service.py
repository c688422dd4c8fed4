"""Bearer token issuing, validation and admin bootstrap services."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from sqlmodel import Session

from app.core.constants import utcnow
from app.core.errors import ValidationError
from app.core.security import generate_token, hash_token
from app.models.admin_user import AdminUser
from app.models.auth_token import AuthToken
from app.repositories import auth_token_repo
from app.services import admin_user_service

logger = logging.getLogger(__name__)

TOKEN_TTL = timedelta(hours=24)
BEARER_PREFIX = "Bearer "
SETUP_DONE_MESSAGE = "Admin zaten mevcut. Kurulum yapılamaz."


def issue_token(
    session: Session,
    admin_id: str,
    *,
    secret_key: str,
    ttl: timedelta = TOKEN_TTL,
    now: datetime | None = None,
) -> str:
    """Mint a token for ``admin_id`` with a fixed absolute lifetime."""

    issued_at = now or utcnow()
    raw_token = generate_token()
    auth_token_repo.create_auth_token(
        session,
        AuthToken(
            token_hash=hash_token(secret_key, raw_token),
            admin_id=admin_id,
            created_at=issued_at,
            expires_at=issued_at + ttl,
        ),
    )
    return raw_token


def validate_token(
    session: Session,
    raw_token: str,
    *,
    secret_key: str,
    now: datetime | None = None,
) -> str | None:
    """Return the owning admin id, or ``None`` for unknown or expired tokens."""

    if not raw_token:
        return None
    auth_token = auth_token_repo.get_active_auth_token(
        session,
        hash_token(secret_key, raw_token),
        now or utcnow(),
    )
    if auth_token is None:
        return None
    return auth_token.admin_id


def revoke_token(session: Session, raw_token: str, *, secret_key: str) -> None:
    """Delete the token; unknown tokens are ignored."""

    auth_token = auth_token_repo.get_auth_token_by_hash(session, hash_token(secret_key, raw_token))
    if auth_token is None:
        return
    auth_token_repo.delete_auth_token(session, auth_token)
    logger.info("Revoked token for admin %s", auth_token.admin_id)


def parse_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header."""

    if authorization is None or not authorization.startswith(BEARER_PREFIX):
        return None
    raw_token = authorization[len(BEARER_PREFIX) :].strip()
    if not raw_token or " " in raw_token:
        return None
    return raw_token


def get_admin_for_token(
    session: Session,
    raw_token: str,
    *,
    secret_key: str,
    now: datetime | None = None,
) -> AdminUser | None:
    """Return the admin owning a currently valid token."""

    admin_id = validate_token(session, raw_token, secret_key=secret_key, now=now)
    if admin_id is None:
        return None
    return admin_user_service.find_by_id(session, admin_id)


def needs_setup(session: Session) -> bool:
    """Return whether no admin exists yet."""

    return admin_user_service.count_admins(session) == 0


def setup_first_admin(session: Session, payload: Mapping[str, Any]) -> AdminUser:
    """Create the first admin; fails once any admin exists."""

    if not needs_setup(session):
        raise ValidationError(SETUP_DONE_MESSAGE)
    input_data = admin_user_service.parse_admin_create_input(payload)
    admin_user = admin_user_service.create_admin(session, input_data)
    logger.info("Bootstrapped first admin %s", admin_user.id)
    return admin_user


def login(
    session: Session,
    payload: Mapping[str, Any],
    *,
    secret_key: str,
    ttl: timedelta = TOKEN_TTL,
) -> tuple[AdminUser | None, str | None]:
    """Return ``(admin, token)`` for valid credentials or ``(None, None)``."""

    login_input = admin_user_service.parse_login_input(payload)
    admin_user = admin_user_service.verify_password(
        session,
        login_input.email,
        login_input.password,
    )
    if admin_user is None:
        logger.info("Failed admin login attempt")
        return None, None
    return admin_user, issue_token(session, admin_user.id, secret_key=secret_key, ttl=ttl)
