"""Admin account management routes."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from app.routers.deps import CurrentAdmin, DbSession
from app.schemas.auth import AdminUserListItem, AdminUserRead, SuccessResponse
from app.services import admin_user_service

router = APIRouter(prefix="/api/admin/users", tags=["admin"])


@router.get("", response_model=list[AdminUserListItem])
def list_admin_users(session: DbSession, _admin_user: CurrentAdmin):
    return admin_user_service.list_all(session)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AdminUserRead)
def create_admin_user(
    session: DbSession,
    _admin_user: CurrentAdmin,
    payload: Annotated[dict[str, Any], Body()],
):
    input_data = admin_user_service.parse_admin_create_input(payload)
    return admin_user_service.create_admin(session, input_data)


@router.delete("/{admin_id}", response_model=SuccessResponse)
def delete_admin_user(session: DbSession, admin_user: CurrentAdmin, admin_id: str):
    admin_user_service.delete_identity_as(session, admin_id, actor_id=admin_user.id)
    return SuccessResponse()
