"""
utctime - a datetime wrapper that is always in UTC.

    >>> from utctime import UtcTime, parse_rfc3339
    >>> t = parse_rfc3339("2023-01-01T12:00:00+02:00")
    >>> str(t)
    '2023-01-01T10:00:00Z'
    >>> t.us_date_long()
    'January 1, 2023'
"""

from datetime import datetime

from utctime.core.codecs import (
    UtcJSONEncoder,
    UtcSafeDumper,
    UtcSafeLoader,
    json_default,
    register_sqlite3,
    register_yaml,
)
from utctime.core.settings import Settings, apply_settings, load_settings
from utctime.core.utc_time import UtcTime
from utctime.primitives.debug_hook import (
    disable_debug_logging,
    enable_debug_logging,
    set_debug_hook,
)
from utctime.primitives.errors import (
    CodecInputError,
    ConfigError,
    NilReceiverError,
    ParseError,
    UtcTimeError,
    ZoneNotFoundError,
    ZoneResolutionError,
)
from utctime.primitives.layouts import TimeLayout
from utctime.primitives.zone_cache import validate_timezone_availability


def now() -> UtcTime:
    """Current instant in UTC."""
    return UtcTime.now()


def new(dt: datetime) -> UtcTime:
    """Wrap a datetime, normalizing it to UTC."""
    return UtcTime(dt)


def from_unix(seconds: int) -> UtcTime:
    return UtcTime.from_unix(seconds)


def from_unix_milli(millis: int) -> UtcTime:
    return UtcTime.from_unix_milli(millis)


def parse_rfc3339(text: str) -> UtcTime:
    return UtcTime.parse_rfc3339(text)


def parse_rfc3339_nano(text: str) -> UtcTime:
    return UtcTime.parse_rfc3339_nano(text)


def parse(layout: str, text: str) -> UtcTime:
    """Parse text with a strptime layout, e.g. ``parse("%Y-%m-%d", "2024-01-02")``."""
    return UtcTime.parse(layout, text)


__all__ = [
    "CodecInputError",
    "ConfigError",
    "NilReceiverError",
    "ParseError",
    "Settings",
    "TimeLayout",
    "UtcJSONEncoder",
    "UtcSafeDumper",
    "UtcSafeLoader",
    "UtcTime",
    "UtcTimeError",
    "ZoneNotFoundError",
    "ZoneResolutionError",
    "apply_settings",
    "disable_debug_logging",
    "enable_debug_logging",
    "from_unix",
    "from_unix_milli",
    "json_default",
    "load_settings",
    "new",
    "now",
    "parse",
    "parse_rfc3339",
    "parse_rfc3339_nano",
    "register_sqlite3",
    "register_yaml",
    "set_debug_hook",
    "validate_timezone_availability",
]
