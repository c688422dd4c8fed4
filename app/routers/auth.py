"""Admin authentication routes."""

from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from app.core.errors import Unauthorized
from app.routers.deps import AppSettings, CurrentAdmin, DbSession, get_bearer_token
from app.schemas.auth import AdminUserRead, LoginResponse, SetupStatusResponse, SuccessResponse
from app.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["auth"])

INVALID_CREDENTIALS_MESSAGE = "Geçersiz email veya şifre"


@router.post("/setup", status_code=status.HTTP_201_CREATED, response_model=AdminUserRead)
def setup(session: DbSession, payload: Annotated[dict[str, Any], Body()]):
    return auth_service.setup_first_admin(session, payload)


@router.get("/setup-status", response_model=SetupStatusResponse)
def setup_status(session: DbSession):
    return SetupStatusResponse(needs_setup=auth_service.needs_setup(session))


@router.post("/login", response_model=LoginResponse)
def login(session: DbSession, settings: AppSettings, payload: Annotated[dict[str, Any], Body()]):
    admin_user, token = auth_service.login(
        session,
        payload,
        secret_key=settings.secret_key,
        ttl=timedelta(hours=settings.token_ttl_hours),
    )
    if admin_user is None or token is None:
        raise Unauthorized(INVALID_CREDENTIALS_MESSAGE)
    return LoginResponse(id=admin_user.id, email=admin_user.email, name=admin_user.name, token=token)


@router.post("/logout", response_model=SuccessResponse)
def logout(
    session: DbSession,
    settings: AppSettings,
    _admin_user: CurrentAdmin,
    raw_token: Annotated[str, Depends(get_bearer_token)],
):
    auth_service.revoke_token(session, raw_token, secret_key=settings.secret_key)
    return SuccessResponse()


@router.get("/me", response_model=AdminUserRead)
def me(admin_user: CurrentAdmin):
    return admin_user
