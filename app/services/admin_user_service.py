"""Admin account (credential store) services."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.errors import DuplicateEmail, ValidationError, first_error_message
from app.core.security import DUMMY_PASSWORD_HASH, hash_password
from app.core.security import verify_password as check_password_hash
from app.models.admin_user import AdminUser
from app.repositories import admin_user_repo
from app.schemas.auth import (
    ADMIN_FIELDS_REQUIRED_MESSAGE,
    LOGIN_FIELDS_REQUIRED_MESSAGE,
    AdminCreateInput,
    AdminLoginInput,
)
from app.schemas.base import normalize_email

logger = logging.getLogger(__name__)

SELF_DELETE_MESSAGE = "Kendinizi silemezsiniz"
DUPLICATE_EMAIL_MESSAGE = "Bu email zaten kayıtlı"


def parse_admin_create_input(payload: Mapping[str, Any]) -> AdminCreateInput:
    """Return validated create payload or raise ``ValidationError``."""

    try:
        return AdminCreateInput.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(
            first_error_message(exc.errors(), fallback=ADMIN_FIELDS_REQUIRED_MESSAGE)
        ) from exc


def parse_login_input(payload: Mapping[str, Any]) -> AdminLoginInput:
    """Return validated login payload or raise ``ValidationError``."""

    try:
        return AdminLoginInput.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(
            first_error_message(exc.errors(), fallback=LOGIN_FIELDS_REQUIRED_MESSAGE)
        ) from exc


def create_identity(session: Session, *, email: str, password: str, name: str) -> AdminUser:
    """Validate and store a new admin with a bcrypt password hash."""

    input_data = parse_admin_create_input({"email": email, "password": password, "name": name})
    return create_admin(session, input_data)


def create_admin(session: Session, input_data: AdminCreateInput) -> AdminUser:
    """Store an already validated admin payload."""

    if admin_user_repo.get_admin_user_by_email(session, input_data.email) is not None:
        raise DuplicateEmail(DUPLICATE_EMAIL_MESSAGE)

    admin_user = AdminUser(
        email=input_data.email,
        password_hash=hash_password(input_data.password),
        name=input_data.name,
    )
    try:
        admin_user = admin_user_repo.create_admin_user(session, admin_user)
    except IntegrityError as exc:
        session.rollback()
        raise DuplicateEmail(DUPLICATE_EMAIL_MESSAGE) from exc
    logger.info("Created admin %s", admin_user.id)
    return admin_user


def find_by_email(session: Session, email: str) -> AdminUser | None:
    return admin_user_repo.get_admin_user_by_email(session, normalize_email(email))


def find_by_id(session: Session, admin_id: str) -> AdminUser | None:
    return admin_user_repo.get_admin_user_by_id(session, admin_id)


def list_all(session: Session) -> Sequence[AdminUser]:
    """Return admins for listing, newest first."""

    return admin_user_repo.list_admin_users(session)


def count_admins(session: Session) -> int:
    return admin_user_repo.count_admin_users(session)


def delete_identity(session: Session, admin_id: str) -> None:
    """Delete an admin and its tokens; unknown ids are ignored."""

    admin_user = admin_user_repo.get_admin_user_by_id(session, admin_id)
    if admin_user is None:
        return
    admin_user_repo.delete_admin_user(session, admin_user)
    logger.info("Deleted admin %s", admin_id)


def delete_identity_as(session: Session, admin_id: str, *, actor_id: str) -> None:
    """Delete ``admin_id`` on behalf of ``actor_id``, who may not delete themselves."""

    if admin_id == actor_id:
        raise ValidationError(SELF_DELETE_MESSAGE)
    delete_identity(session, admin_id)


def verify_password(session: Session, email: str, password: str) -> AdminUser | None:
    """Return the admin for matching credentials, ``None`` otherwise.

    Unknown emails still run a bcrypt comparison so the two failure cases take
    comparable time.
    """

    admin_user = find_by_email(session, email)
    if admin_user is None:
        check_password_hash(password, DUMMY_PASSWORD_HASH)
        return None
    if not check_password_hash(password, admin_user.password_hash):
        return None
    return admin_user
