"""Database access helpers for bearer tokens."""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Session, col, select

from app.models.auth_token import AuthToken


def create_auth_token(session: Session, auth_token: AuthToken) -> AuthToken:
    """Persist a newly issued token."""

    session.add(auth_token)
    session.commit()
    session.refresh(auth_token)
    return auth_token


def get_auth_token_by_hash(session: Session, token_hash: str) -> AuthToken | None:
    """Return token row by unique digest."""

    return session.exec(select(AuthToken).where(col(AuthToken.token_hash) == token_hash)).first()


def get_active_auth_token(session: Session, token_hash: str, now: datetime) -> AuthToken | None:
    """Return the token row if it exists and has not expired at ``now``."""

    return session.exec(
        select(AuthToken).where(
            col(AuthToken.token_hash) == token_hash,
            col(AuthToken.expires_at) > now,
        )
    ).first()


def delete_auth_token(session: Session, auth_token: AuthToken) -> None:
    """Hard-delete a token row."""

    session.delete(auth_token)
    session.commit()
