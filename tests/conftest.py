from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi import FastAPI
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel
from starlette.types import Message, Receive, Scope, Send

from app.core.config import Settings
from app.db.session import create_db_engine
from app.main import create_app
from app.routers.deps import get_chat_relay, get_mailer, get_verifier
from app.services import admin_user_service, auth_service
from app.services.chat_service import ChatRelay
from app.services.verification_service import RecaptchaVerifier

TEST_SECRET_KEY = "test-secret"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "test-password"


def _request(
    app: FastAPI,
    method: str,
    path: str,
    *,
    json_body: Any = None,
    headers: dict[str, str] | None = None,
) -> tuple[int, list[tuple[str, str]], str]:
    raw_headers: list[tuple[bytes, bytes]] = [(b"host", b"testserver")]
    request_body = b""

    for name, value in (headers or {}).items():
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    if json_body is not None:
        request_body = json.dumps(json_body).encode("utf-8")
        raw_headers.extend(
            [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(request_body)).encode("utf-8")),
            ]
        )
    else:
        raw_headers.append((b"content-length", b"0"))

    scope: Scope = {
        "type": "http",
        "asgi": {"version": "3.0", "spec_version": "2.3"},
        "http_version": "1.1",
        "method": method.upper(),
        "scheme": "http",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": raw_headers,
        "client": ("testclient", 50000),
        "server": ("testserver", 80),
        "root_path": "",
    }

    sent = False

    async def receive() -> Message:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": request_body, "more_body": False}

    messages: list[Message] = []

    async def send(message: Message) -> None:
        messages.append(message)

    receive_fn: Receive = receive
    send_fn: Send = send
    asyncio.run(app(scope, receive_fn, send_fn))

    status_code = 500
    response_headers: list[tuple[str, str]] = []
    body = b""
    for message in messages:
        if message["type"] == "http.response.start":
            status_code = message["status"]
            response_headers = [
                (key.decode("latin-1"), value.decode("latin-1"))
                for key, value in message.get("headers", [])
            ]
        if message["type"] == "http.response.body":
            body += message.get("body", b"")

    return status_code, response_headers, body.decode("utf-8", errors="ignore")


class FakeMailer:
    def __init__(self, *, result: bool = True, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.sent: list[dict[str, Any]] = []

    def send(self, *, to: list[str], subject: str, html: str) -> bool:
        if self.error is not None:
            raise self.error
        self.sent.append({"to": to, "subject": subject, "html": html})
        return self.result


class FakeCompletions:
    def __init__(self, reply: str | None = "Merhaba!", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def create(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self.reply))])


def fake_openai_client(completions: FakeCompletions) -> SimpleNamespace:
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def settings() -> Settings:
    return Settings(app_env="test", secret_key=TEST_SECRET_KEY, database_url="sqlite://")


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def completions() -> FakeCompletions:
    return FakeCompletions()


@pytest.fixture
def app(settings, engine, mailer, completions) -> FastAPI:
    app = create_app(settings=settings, engine=engine)
    app.dependency_overrides[get_verifier] = lambda: RecaptchaVerifier(None)
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_chat_relay] = lambda: ChatRelay(fake_openai_client(completions))
    return app


@pytest.fixture
def api(app) -> Callable[..., tuple[int, Any]]:
    """Call the app and decode the JSON response body."""

    def _call(
        method: str,
        path: str,
        *,
        json_body: Any = None,
        token: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[int, Any]:
        request_headers = dict(headers or {})
        if token is not None:
            request_headers["Authorization"] = f"Bearer {token}"
        status_code, _, body = _request(
            app,
            method,
            path,
            json_body=json_body,
            headers=request_headers,
        )
        return status_code, json.loads(body) if body else None

    return _call


@pytest.fixture
def admin_user(session):
    return admin_user_service.create_identity(
        session,
        email=ADMIN_EMAIL,
        password=ADMIN_PASSWORD,
        name="Admin",
    )


@pytest.fixture
def admin_token(session, admin_user) -> str:
    return auth_service.issue_token(session, admin_user.id, secret_key=TEST_SECRET_KEY)
