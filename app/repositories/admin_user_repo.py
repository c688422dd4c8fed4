"""Database access helpers for admin users."""

from __future__ import annotations

from collections.abc import Sequence

from sqlmodel import Session, col, func, select

from app.models.admin_user import AdminUser
from app.models.auth_token import AuthToken


def list_admin_users(session: Session) -> Sequence[AdminUser]:
    """Return all admins, newest first."""

    return session.exec(select(AdminUser).order_by(col(AdminUser.created_at).desc())).all()


def count_admin_users(session: Session) -> int:
    """Return the number of registered admins."""

    return session.exec(select(func.count()).select_from(AdminUser)).one()


def get_admin_user_by_id(session: Session, admin_id: str) -> AdminUser | None:
    """Return admin by primary key."""

    return session.get(AdminUser, admin_id)


def get_admin_user_by_email(session: Session, email: str) -> AdminUser | None:
    """Return admin by unique (already normalized) email."""

    return session.exec(select(AdminUser).where(col(AdminUser.email) == email)).first()


def create_admin_user(session: Session, admin_user: AdminUser) -> AdminUser:
    """Persist a new admin."""

    session.add(admin_user)
    session.commit()
    session.refresh(admin_user)
    return admin_user


def delete_admin_user(session: Session, admin_user: AdminUser) -> None:
    """Hard-delete an admin together with its tokens."""

    for auth_token in session.exec(
        select(AuthToken).where(col(AuthToken.admin_id) == admin_user.id)
    ).all():
        session.delete(auth_token)
    session.flush()
    session.delete(admin_user)
    session.commit()
