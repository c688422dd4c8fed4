"""Database access helpers for key/value settings."""

from __future__ import annotations

from sqlmodel import Session, col, select

from app.models.setting import Setting


def get_setting_by_key(session: Session, key: str) -> Setting | None:
    """Return setting row by unique key."""

    return session.exec(select(Setting).where(col(Setting.key) == key)).first()


def save_setting(session: Session, setting: Setting) -> Setting:
    """Insert or update a setting row."""

    session.add(setting)
    session.commit()
    session.refresh(setting)
    return setting
