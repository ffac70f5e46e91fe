"""Logging setup for the service and the CLI.

Standard-library logging configured once through ``dictConfig``: a single
console handler, level and format taken from the settings.
"""

from __future__ import annotations

import logging
import logging.config
import sys

from retailops.infrastructure.config import Settings


class ColoredFormatter(logging.Formatter):
    """Colours the level name when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname)
            if color:
                formatted = formatted.replace(
                    record.levelname, f"{color}{record.levelname}{self.RESET}", 1
                )
        return formatted


def setup_logging(settings: Settings) -> None:
    level = settings.LOG_LEVEL.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "()": ColoredFormatter,
                    "format": settings.LOG_FORMAT,
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "console",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "retailops": {"level": level, "handlers": ["console"], "propagate": False},
                "uvicorn.access": {"level": "WARNING"},
            },
            "root": {"level": "WARNING", "handlers": ["console"]},
        }
    )
