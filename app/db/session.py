"""Database engine and session dependency helpers."""

from __future__ import annotations

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine


def create_db_engine(database_url: str, *, echo: bool = False, **kwargs) -> Engine:
    """Build the process-wide engine; SQLite gets foreign keys enabled."""

    is_sqlite = database_url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    engine = create_engine(database_url, connect_args=connect_args, echo=echo, **kwargs)
    if is_sqlite:
        enable_sqlite_foreign_keys(engine)
    return engine


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on ``ON DELETE CASCADE`` support for every SQLite connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_engine(request: Request) -> Engine:
    """Return the engine created by ``create_app``."""

    return request.app.state.engine


def get_session(request: Request) -> Generator[Session, None, None]:
    """Yield a database session."""

    with Session(get_engine(request)) as session:
        yield session
