from __future__ import annotations

import logging
import os
from logging.config import dictConfig
from typing import Any

QUIET_LOGGERS = ("asyncio",)


def _default_logging_dict(level: str) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            name: {"level": "WARNING"} for name in QUIET_LOGGERS
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def configure_logging(level_name: str | int | None = None) -> None:
    """Configure console logging for the scraper.

    `level_name` may be a name like 'DEBUG' or a numeric level. When None,
    the LOG_LEVEL env var is used, falling back to INFO. Unknown names
    resolve to INFO.
    """
    if level_name is None:
        level_name = os.getenv("LOG_LEVEL", "INFO")

    if isinstance(level_name, str):
        level = getattr(logging, level_name.upper(), None)
        if not isinstance(level, int):
            level = logging.INFO
    else:
        level = level_name

    dictConfig(_default_logging_dict(logging.getLevelName(level)))
