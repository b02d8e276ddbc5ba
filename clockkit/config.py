"""
Clockkit - Settings
=====================
Process-wide defaults for clocks and decorators.

Settings are a frozen value object. They are read from the
environment once (or built explicitly in tests) and swapped with
set_settings(); nothing mutates them in place.

Environment variables:
    CLOCKKIT_DEFAULT_TIMEZONE   default timezone for real clocks   ("UTC")
    CLOCKKIT_CACHE_TTL_SECONDS  default CachingClock TTL           (1)
    CLOCKKIT_LOG_LEVEL          default LoggingClock level         ("debug")
    CLOCKKIT_LOGGER_NAME        default LoggingClock logger name   ("clockkit.clocks")
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import timezone as dt_timezone, tzinfo
from typing import Mapping, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from clockkit.errors import InvalidConfigurationError

ENV_PREFIX = "CLOCKKIT_"

# Syslog severities with no logging counterpart of the same name.
EXTRA_LOG_LEVELS: dict[str, int] = {
    "notice": logging.INFO + 5,
    "alert": logging.CRITICAL,
    "emergency": logging.CRITICAL,
}


# ══════════════════════════════════════════════════════════════
# TIMEZONE / LEVEL RESOLUTION
# ══════════════════════════════════════════════════════════════

def resolve_timezone(value: Union[str, tzinfo, None]) -> tzinfo:
    """
    Turn a timezone name or tzinfo into a tzinfo.

    None resolves to the configured default timezone.
    "UTC" resolves to datetime.timezone.utc.

    Raises:
        InvalidConfigurationError: If the name is not a known zone.
    """
    if value is None:
        value = get_settings().default_timezone
    if isinstance(value, tzinfo):
        return value
    if value.upper() == "UTC":
        return dt_timezone.utc
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidConfigurationError(
            f"Unknown timezone '{value}'."
        ) from exc


def resolve_log_level(level: Union[str, int]) -> int:
    """
    Turn a level tag ("debug", "WARN", "notice", 30) into a logging level number.

    Names registered with the logging module (including custom levels
    added with logging.addLevelName) are accepted in any case, as are
    the syslog severities in EXTRA_LOG_LEVELS.

    Raises:
        InvalidConfigurationError: If the tag is not a known level.
    """
    if isinstance(level, int):
        return level
    if level.lower() in EXTRA_LOG_LEVELS:
        return EXTRA_LOG_LEVELS[level.lower()]
    known = {
        name.upper(): value
        for name, value in logging.getLevelNamesMapping().items()
    }
    try:
        return known[level.upper()]
    except KeyError:
        names = sorted({name.lower() for name in known} | set(EXTRA_LOG_LEVELS))
        raise InvalidConfigurationError(
            f"Unknown log level '{level}'. "
            f"Expected one of: {', '.join(names)}."
        ) from None


# ══════════════════════════════════════════════════════════════
# SETTINGS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ClockSettings:
    """
    Defaults applied when a clock or decorator is built without
    explicit arguments.
    """

    default_timezone: str = "UTC"
    cache_ttl_seconds: int = 1
    log_level: str = "debug"
    logger_name: str = "clockkit.clocks"

    def __post_init__(self) -> None:
        resolve_timezone(self.default_timezone)
        resolve_log_level(self.log_level)
        if self.cache_ttl_seconds < 0:
            raise InvalidConfigurationError(
                f"cache_ttl_seconds must be >= 0, got {self.cache_ttl_seconds}."
            )
        if not self.logger_name:
            raise InvalidConfigurationError("logger_name must not be empty.")

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> ClockSettings:
        """
        Build settings from CLOCKKIT_* environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if f"{ENV_PREFIX}DEFAULT_TIMEZONE" in env:
            kwargs["default_timezone"] = env[f"{ENV_PREFIX}DEFAULT_TIMEZONE"]
        if f"{ENV_PREFIX}CACHE_TTL_SECONDS" in env:
            raw = env[f"{ENV_PREFIX}CACHE_TTL_SECONDS"]
            try:
                kwargs["cache_ttl_seconds"] = int(raw)
            except ValueError:
                raise InvalidConfigurationError(
                    f"{ENV_PREFIX}CACHE_TTL_SECONDS must be an integer, "
                    f"got '{raw}'."
                ) from None
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            kwargs["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"]
        if f"{ENV_PREFIX}LOGGER_NAME" in env:
            kwargs["logger_name"] = env[f"{ENV_PREFIX}LOGGER_NAME"]

        return cls(**kwargs)

    @property
    def zone(self) -> tzinfo:
        return resolve_timezone(self.default_timezone)


# ══════════════════════════════════════════════════════════════
# PROCESS-WIDE SETTINGS
# ══════════════════════════════════════════════════════════════

_settings: Optional[ClockSettings] = None


def get_settings() -> ClockSettings:
    """Return the active settings, loading them from the environment on first use."""
    global _settings
    if _settings is None:
        _settings = ClockSettings.from_env()
    return _settings


def set_settings(settings: Optional[ClockSettings]) -> None:
    """Replace the active settings. None reloads from the environment on next use."""
    global _settings
    _settings = settings
