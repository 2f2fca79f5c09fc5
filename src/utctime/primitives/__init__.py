"""Primitives package for utctime."""

from utctime.primitives.config_loader import ConfigLoader
from utctime.primitives.json_validator import JSONValidator
from utctime.primitives.layouts import TimeLayout
from utctime.primitives.logger import Logger
from utctime.primitives.zone_cache import ZoneCache

__all__ = ["ConfigLoader", "JSONValidator", "Logger", "TimeLayout", "ZoneCache"]
