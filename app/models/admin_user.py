"""Admin user model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, String
from sqlmodel import Field, SQLModel

from app.core.constants import new_id, utcnow


class AdminUser(SQLModel, table=True):
    """Admin credentials table."""

    __tablename__ = "admin_users"

    id: str = Field(default_factory=new_id, sa_column=Column(String(36), primary_key=True))
    email: str = Field(sa_column=Column(String(255), unique=True, nullable=False))
    password_hash: str = Field(sa_column=Column(String(255), nullable=False))
    name: str = Field(sa_column=Column(String(100), nullable=False))
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
