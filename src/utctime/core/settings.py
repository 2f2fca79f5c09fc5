"""
Settings Core

Startup configuration: which IANA zones back the civil projections, and
whether the debug channel logs.

Nothing is applied at import time. Applications call
``apply_settings(load_settings())`` once during startup.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from utctime.primitives.config_loader import ConfigLoader
from utctime.primitives.debug_hook import disable_debug_logging, enable_debug_logging
from utctime.primitives.zone_cache import DEFAULT_ZONE_NAMES, ZoneCache, install_zone_cache

CONFIG_ENV_VAR = "UTCTIME_CONFIG"
DEBUG_ENV_VAR = "UTCTIME_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    debug: bool = False
    zones: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_ZONE_NAMES))
    log_file: Optional[str] = None


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from a JSON file and the environment.

    Args:
        config_path: Settings file. Defaults to $UTCTIME_CONFIG; without
            either, built-in defaults are used.

    Returns:
        Settings: Loaded settings. $UTCTIME_DEBUG, when set, overrides ``debug``.

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ConfigError: If the file is malformed or fails validation
    """
    path = config_path or os.environ.get(CONFIG_ENV_VAR)
    data = ConfigLoader().load(path) if path else {}

    debug = data.get("debug", False)
    env_debug = os.environ.get(DEBUG_ENV_VAR)
    if env_debug is not None:
        debug = env_debug.strip().lower() in _TRUTHY

    return Settings(
        debug=debug,
        zones={**DEFAULT_ZONE_NAMES, **data.get("zones", {})},
        log_file=data.get("log_file"),
    )


def apply_settings(settings: Settings) -> ZoneCache:
    """
    Install a zone cache for the configured zones and set up debug logging.

    Returns:
        ZoneCache: The newly installed cache (not yet resolved)
    """
    if settings.debug:
        enable_debug_logging(settings.log_file)
    else:
        disable_debug_logging()

    cache = ZoneCache(settings.zones)
    install_zone_cache(cache)
    return cache
