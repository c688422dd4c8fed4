"""Key/value setting model."""

from __future__ import annotations

from sqlalchemy import Column, String, Text
from sqlmodel import Field, SQLModel

from app.core.constants import new_id


class Setting(SQLModel, table=True):
    """One row per configuration key."""

    __tablename__ = "settings"

    id: str = Field(default_factory=new_id, sa_column=Column(String(36), primary_key=True))
    key: str = Field(sa_column=Column(String(100), unique=True, nullable=False))
    value: str = Field(sa_column=Column(Text, nullable=False))
