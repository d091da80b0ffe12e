"""Configuration helpers for environment variables."""

from __future__ import annotations

import os
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv


logger = logging.getLogger(__name__)


_DEFAULT_TIMEZONE = "UTC"


def _should_load_dotenv() -> bool:
    """Return whether local dotenv loading should run."""
    app_env = os.getenv("APP_ENV", "dev").strip().lower()
    return app_env in {"dev", "local"}


if _should_load_dotenv():
    load_dotenv()


def get_env(name: str, default: str | None = None) -> str | None:
    """Return a raw environment value or default."""
    return os.getenv(name, default)


def app_env() -> str:
    """Return the current application environment."""
    return (get_env("APP_ENV", "dev") or "dev").strip() or "dev"


def payments_timezone() -> ZoneInfo:
    """Return the zone used by the system clock, UTC when unset or unknown."""
    raw_value = (get_env("PAYMENTS_TIMEZONE", "") or "").strip()
    if not raw_value:
        return ZoneInfo(_DEFAULT_TIMEZONE)

    try:
        return ZoneInfo(raw_value)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(
            "payments_timezone_invalid value=%s; falling back to %s",
            raw_value,
            _DEFAULT_TIMEZONE,
        )
        return ZoneInfo(_DEFAULT_TIMEZONE)
