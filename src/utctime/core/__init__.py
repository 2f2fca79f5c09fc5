"""Core package for utctime: the UtcTime value type and its integrations."""

from utctime.core.codecs import UtcJSONEncoder, UtcSafeDumper, UtcSafeLoader
from utctime.core.settings import Settings, apply_settings, load_settings
from utctime.core.utc_time import UtcTime

__all__ = [
    "Settings",
    "UtcJSONEncoder",
    "UtcSafeDumper",
    "UtcSafeLoader",
    "UtcTime",
    "apply_settings",
    "load_settings",
]
