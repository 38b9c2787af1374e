"""Read-only JSON config for report settings.

Holds the log level, date patterns and an optional time-zone override.
All access is defensive: malformed or missing config falls back to defaults,
and nothing is ever written back.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from platformdirs import user_config_dir

from .formatting import DEFAULT_DST_PATTERN, DEFAULT_LOCAL_PATTERN, DEFAULT_UTC_PATTERN
from .options import OptionSyntax, syntax_for_platform

APP_NAME = "showfileinfo"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_LEVEL_ENV = "SHOWFILEINFO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


@dataclass(frozen=True)
class Settings:
    """Effective settings for one run."""

    option_syntax: OptionSyntax
    log_level: int = DEFAULT_LOG_LEVEL
    utc_pattern: str = DEFAULT_UTC_PATTERN
    local_pattern: str = DEFAULT_LOCAL_PATTERN
    dst_pattern: str = DEFAULT_DST_PATTERN
    local_tz: tzinfo | None = None


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _parse_log_level(value: object) -> int | None:
    """Accept level names (any case) or integer levels; anything else is ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def _load_pattern(data: dict[str, object], key: str, default: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        return default
    return value


def _load_time_zone(data: dict[str, object]) -> tzinfo | None:
    """Resolve the optional ``time_zone`` override; unknown names are ignored."""
    value = data.get("time_zone")
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return ZoneInfo(value.strip())
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def load_settings(os_name: str | None = None, environ: dict[str, str] | None = None) -> Settings:
    """Combine config file, environment and platform into ``Settings``."""
    if environ is None:
        environ = dict(os.environ)
    data = load_config()

    log_level = _parse_log_level(environ.get(LOG_LEVEL_ENV))
    if log_level is None:
        log_level = _parse_log_level(data.get("log_level"))
    if log_level is None:
        log_level = DEFAULT_LOG_LEVEL

    return Settings(
        option_syntax=syntax_for_platform(os_name),
        log_level=log_level,
        utc_pattern=_load_pattern(data, "utc_pattern", DEFAULT_UTC_PATTERN),
        local_pattern=_load_pattern(data, "local_pattern", DEFAULT_LOCAL_PATTERN),
        dst_pattern=_load_pattern(data, "dst_pattern", DEFAULT_DST_PATTERN),
        local_tz=_load_time_zone(data),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "LOG_LEVEL_ENV",
    "Settings",
    "load_config",
    "load_settings",
]
