"""Bearer token model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlmodel import Field, SQLModel

from app.core.constants import new_id, utcnow


class AuthToken(SQLModel, table=True):
    """Issued admin bearer tokens, stored as keyed digests."""

    __tablename__ = "auth_tokens"

    id: str = Field(default_factory=new_id, sa_column=Column(String(36), primary_key=True))
    token_hash: str = Field(sa_column=Column(String(64), unique=True, nullable=False))
    admin_id: str = Field(
        sa_column=Column(
            String(36),
            ForeignKey("admin_users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    expires_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
