from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from app.core.config import Settings, get_settings
from app.core.errors import register_error_handlers
from app.core.logging_config import setup_logging
from app.db.init_db import create_db_and_tables
from app.db.session import create_db_engine
from app.routers.admin_users import router as admin_users_router
from app.routers.auth import router as auth_router
from app.routers.chat import router as chat_router
from app.routers.leads import router as leads_router
from app.routers.settings import router as settings_router
from app.services.chat_service import ChatRelay
from app.services.notification_service import ResendMailer
from app.services.verification_service import RecaptchaVerifier

logger = logging.getLogger(__name__)


def build_mailer(settings: Settings) -> ResendMailer | None:
    if not settings.resend_api_key:
        logger.warning("RESEND_API_KEY is not configured; lead notifications are disabled")
        return None
    return ResendMailer(
        settings.resend_api_key,
        settings.resend_from_email,
        timeout=settings.http_timeout_seconds,
    )


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Build the API with one engine and one set of collaborators per process."""

    settings = settings or get_settings()
    engine = engine or create_db_engine(settings.database_url, echo=settings.app_debug)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        create_db_and_tables(engine)
        yield
        engine.dispose()

    app = FastAPI(title=settings.app_name, debug=settings.app_debug, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.verifier = RecaptchaVerifier(
        settings.recaptcha_secret_key,
        min_score=settings.recaptcha_min_score,
        fail_open=settings.verification_fail_open,
        timeout=settings.http_timeout_seconds,
    )
    app.state.mailer = build_mailer(settings)
    app.state.chat_relay = ChatRelay.from_api_key(
        settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.http_timeout_seconds,
    )

    register_error_handlers(app)
    app.include_router(auth_router)
    app.include_router(admin_users_router)
    app.include_router(leads_router)
    app.include_router(settings_router)
    app.include_router(chat_router)
    return app


setup_logging(get_settings().log_level)
app = create_app()
