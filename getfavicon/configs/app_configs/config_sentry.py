"""Sentry Configuration"""

import logging

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration
from sentry_sdk.types import Event, Hint

from getfavicon.configs import settings
from getfavicon.utils.version import fetch_app_version_from_file

logger = logging.getLogger(__name__)

REDACTED_TEXT = "[REDACTED]"


def configure_sentry() -> None:  # pragma: no cover
    """Configure and initialize Sentry integration."""
    if settings.sentry.mode == "disabled":
        return
    # This is the SHA-1 hash of the HEAD of the current branch stored in version.json file.
    version_sha = fetch_app_version_from_file().commit
    sentry_sdk.init(
        dsn=settings.sentry.dsn,
        integrations=[
            StarletteIntegration(),
            FastApiIntegration(),
        ],
        release=version_sha,
        debug="debug" == settings.sentry.mode,
        before_send=strip_sensitive_data,
        environment=settings.sentry.env,
        traces_sample_rate=settings.sentry.traces_sample_rate,
    )


def strip_sensitive_data(event: Event, hint: Hint) -> Event | None:
    """Drop icon payloads from Sentry events.

    Icon data strings are base64 images and can be large, so any frame variable
    holding a data URI is replaced before the event leaves the process.
    """
    try:
        for entry in event["exception"]["values"][0]["stacktrace"]["frames"]:
            for key, value in entry.get("vars", {}).items():
                if isinstance(value, str) and value.startswith(("data:", "'data:")):
                    entry["vars"][key] = REDACTED_TEXT
    except (KeyError, IndexError) as e:
        logger.warning(
            f"Encountered KeyError or IndexError for value {e} while filtering Sentry data."
        )

    return event
