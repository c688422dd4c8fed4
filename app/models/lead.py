"""Lead model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, String
from sqlmodel import Field, SQLModel

from app.core.constants import new_id, utcnow


class Lead(SQLModel, table=True):
    """Contact details submitted through the public form."""

    __tablename__ = "leads"

    id: str = Field(default_factory=new_id, sa_column=Column(String(36), primary_key=True))
    full_name: str = Field(sa_column=Column(String(200), nullable=False))
    email: str = Field(sa_column=Column(String(255), nullable=False))
    phone: str = Field(sa_column=Column(String(50), nullable=False))
    consent: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
