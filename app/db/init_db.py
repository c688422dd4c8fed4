"""Database initialization utilities for local development and tests."""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import app.models  # noqa: F401
from app.core.config import get_settings
from app.core.logging_config import setup_logging
from app.db.session import create_db_engine

logger = logging.getLogger(__name__)


def create_db_and_tables(engine: Engine) -> None:
    """Create all tables from SQLModel metadata."""

    SQLModel.metadata.create_all(engine)


def init_db() -> None:
    """Create tables for the configured database."""

    settings = get_settings()
    setup_logging(settings.log_level)
    engine = create_db_engine(settings.database_url)
    create_db_and_tables(engine)
    logger.info("Database tables created")


if __name__ == "__main__":
    init_db()
