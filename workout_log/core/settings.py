"""Runtime settings for the workout log."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

ENV_PREFIX = "WORKOUT_LOG_"


class SettingsError(ValueError):
    """Raised when an environment setting cannot be parsed."""


@dataclass(frozen=True)
class AppSettings:
    api_url: str = "http://127.0.0.1:8000"
    collection: str = "workouts"
    web_host: str = "127.0.0.1"
    web_port: int = 8088
    page_size: int = 10
    log_level: str = "INFO"
    timezone_name: str = "UTC"


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(ENV_PREFIX + key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise SettingsError(f"{ENV_PREFIX}{key} must be an integer, got '{raw}'") from exc
    if value <= 0:
        raise SettingsError(f"{ENV_PREFIX}{key} must be positive, got {value}")
    return value


def resolve_timezone(name: str) -> tzinfo:
    """Map an IANA zone name (e.g. ``Europe/Berlin``) to a tzinfo."""
    key = name.strip()
    if not key or key.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise SettingsError(f"Unknown timezone '{name}'") from exc


def load_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    env = os.environ if environ is None else environ
    defaults = AppSettings()
    return AppSettings(
        api_url=env.get(ENV_PREFIX + "API_URL", defaults.api_url),
        collection=env.get(ENV_PREFIX + "COLLECTION", defaults.collection),
        web_host=env.get(ENV_PREFIX + "WEB_HOST", defaults.web_host),
        web_port=_env_int(env, "WEB_PORT", defaults.web_port),
        page_size=_env_int(env, "PAGE_SIZE", defaults.page_size),
        log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        timezone_name=env.get(ENV_PREFIX + "TIMEZONE", defaults.timezone_name),
    )
