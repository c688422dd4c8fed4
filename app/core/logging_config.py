"""Logging configuration."""

from __future__ import annotations

import logging.config


def setup_logging(level: str = "INFO") -> None:
    """Configure root and uvicorn loggers with a shared console handler."""

    level = level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                    "datefmt": "%H:%M:%S",
                },
                # uvicorn pre-formats access lines
                "access_simple": {"format": "%(message)s"},
            },
            "handlers": {
                "console": {"class": "logging.StreamHandler", "formatter": "default"},
                "access": {"class": "logging.StreamHandler", "formatter": "access_simple"},
            },
            "loggers": {
                "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
                "uvicorn.access": {"level": "INFO", "handlers": ["access"], "propagate": False},
                "httpx": {"level": "WARNING"},
            },
            "root": {"level": level, "handlers": ["console"]},
        }
    )
