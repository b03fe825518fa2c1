"""Logging configuration"""

import logging
import sys
from logging.config import dictConfig

from dockerflow import logging as dockerflow_logging

from getfavicon.configs import settings

# Loggers written through the handler of the configured format.
SERVICE_LOGGERS: tuple[str, ...] = ("getfavicon", "request.summary", "uvicorn.error")

# Per-request lines come from `request.summary`, so uvicorn's own access log is muted.
MUTED_LOGGERS: tuple[str, ...] = ("uvicorn.access",)


def configure_logging() -> None:
    """Configure logging with MozLog, or rich console output for local development.

    Uvicorn's server logs go through the same handler as the service logs so that
    every line in production is a MozLog record.

    Raises:
        - `ValueError` for an unknown format, or a format other than `mozlog` in
          production.
    """
    match settings.logging.format:
        case "mozlog":
            handler = "console-mozlog"
        case "pretty":
            handler = "console-pretty"
        case _:
            raise ValueError(
                f"Invalid log format: {settings.logging.format}."
                f" Should either be 'mozlog' or 'pretty'."
            )

    if settings.current_env.lower() == "production" and handler != "console-mozlog":
        raise ValueError("Log format must be 'mozlog' in production")

    loggers: dict[str, dict] = {
        name: {
            "handlers": [handler],
            "level": settings.logging.level,
            "propagate": settings.logging.can_propagate,
        }
        for name in SERVICE_LOGGERS
    }
    loggers.update({name: {"handlers": [], "propagate": False} for name in MUTED_LOGGERS})

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {"format": "%(message)s"},
                "json": {"()": GCPCompatibleJSONFormatter, "logger_name": "getfavicon"},
            },
            "handlers": {
                "console-mozlog": {
                    "level": settings.logging.level,
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": sys.stdout,
                },
                "console-pretty": {
                    "level": settings.logging.level,
                    "class": "rich.logging.RichHandler",
                    "formatter": "text",
                },
            },
            "loggers": loggers,
        }
    )


class GCPCompatibleJSONFormatter(dockerflow_logging.JsonLogFormatter):
    """Dockerflow JSON formatter that also writes the numeric `severity` read by GCP."""

    SEVERITY_BY_LEVEL = {
        logging.CRITICAL: 600,
        logging.ERROR: 500,
        logging.WARNING: 400,
        logging.INFO: 200,
        logging.DEBUG: 100,
    }

    def convert_record(self, record):
        """Add `severity` next to the MozLog `Severity` field."""
        out = super().convert_record(record)
        out["severity"] = self.SEVERITY_BY_LEVEL.get(record.levelno, 0)
        return out
