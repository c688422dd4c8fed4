"""Domain errors and their JSON error-body mapping."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppError(Exception):
    """Base error carrying a user-facing message and HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateEmail(ValidationError):
    """Email already registered for another admin."""


class Unauthorized(AppError):
    """Missing, malformed, unknown or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class UpstreamError(AppError):
    """An external collaborator call failed."""


def first_error_message(errors: Sequence[Any], *, fallback: str = "Geçersiz istek") -> str:
    """Return a readable message for the first pydantic error entry."""

    if not errors:
        return fallback
    first = errors[0]
    context_error = (first.get("ctx") or {}).get("error")
    if isinstance(context_error, Exception):
        return str(context_error)
    error_type = str(first.get("type") or "")
    if error_type == "missing" or error_type.endswith("_type"):
        return fallback
    message = first.get("msg")
    return message if isinstance(message, str) and message else fallback


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Render every handled error as ``{"error": message}``."""

    @app.exception_handler(AppError)
    async def _app_error(_request: Request, exc: AppError) -> JSONResponse:
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(first_error_message(exc.errors()), status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(str(exc.detail), exc.status_code)
