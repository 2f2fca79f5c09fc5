"""
ZoneCache Primitive

One-time resolution of the four US civil zones from the host zone database,
plus the fixed-offset zones used when that resolution fails.
"""

import threading
from datetime import timedelta, timezone, tzinfo
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from utctime.primitives.debug_hook import debug_log
from utctime.primitives.errors import ZoneNotFoundError, ZoneResolutionError

PACIFIC = "pacific"
EASTERN = "eastern"
CENTRAL = "central"
MOUNTAIN = "mountain"

# Resolution order
REGIONS = (PACIFIC, EASTERN, CENTRAL, MOUNTAIN)

DEFAULT_ZONE_NAMES = {
    PACIFIC: "America/Los_Angeles",
    EASTERN: "America/New_York",
    CENTRAL: "America/Chicago",
    MOUNTAIN: "America/Denver",
}

PST = timezone(timedelta(hours=-8), "PST")
EST = timezone(timedelta(hours=-5), "EST")
CST = timezone(timedelta(hours=-6), "CST")
MST = timezone(timedelta(hours=-7), "MST")

FIXED_ZONES = {
    PACIFIC: PST,
    EASTERN: EST,
    CENTRAL: CST,
    MOUNTAIN: MST,
}


def load_zone(name: str) -> tzinfo:
    """
    Resolve a zone name from the host zone database.

    An empty name means UTC.

    Raises:
        ZoneNotFoundError: If the name is not a known zone
    """
    if name == "":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ZoneNotFoundError(f"unknown time zone {name}") from e


class ZoneCache:
    """Resolves the civil zones once and serves them read-only afterwards."""

    def __init__(self, zone_names: Optional[Mapping[str, str]] = None):
        """
        Args:
            zone_names: IANA name per region. Missing regions use DEFAULT_ZONE_NAMES.
        """
        self.zone_names = {**DEFAULT_ZONE_NAMES, **(zone_names or {})}
        self._lock = threading.Lock()
        # (locations, error) published in a single assignment
        self._state = None

    def _resolve_locked(self):
        locations = {}
        for region in REGIONS:
            try:
                locations[region] = load_zone(self.zone_names[region])
            except ZoneNotFoundError as e:
                error = ZoneResolutionError(
                    f"failed to load {region.capitalize()} timezone: {e}"
                )
                error.__cause__ = e
                debug_log(
                    "timezone resolution failed; using fixed offsets",
                    {"region": region, "zone": self.zone_names[region], "error": str(e)},
                )
                return ({}, error)
        return (locations, None)

    def resolve(self) -> tuple[dict, Optional[ZoneResolutionError]]:
        """
        Resolve all regions on first call; later calls return the same result.

        Returns:
            tuple: (locations by region, error or None). Locations are empty on error.
        """
        state = self._state
        if state is None:
            with self._lock:
                if self._state is None:
                    self._state = self._resolve_locked()
                state = self._state
        return state

    @property
    def error(self) -> Optional[ZoneResolutionError]:
        """Resolution error, or None when every region loaded."""
        return self.resolve()[1]

    def location(self, region: str) -> tzinfo:
        """Zone for a region, falling back to its fixed offset if resolution failed."""
        locations, error = self.resolve()
        if error is not None:
            return FIXED_ZONES[region]
        return locations[region]

    def validate(self) -> None:
        """
        Raise if the civil zones could not be resolved.

        Raises:
            ZoneResolutionError: Wrapping the original resolution failure
        """
        error = self.error
        if error is not None:
            raise ZoneResolutionError(
                f"timezone locations not properly initialized: {error}"
            ) from error


_default_cache = ZoneCache()
_default_lock = threading.Lock()


def get_zone_cache() -> ZoneCache:
    """Return the process-wide zone cache."""
    return _default_cache


def install_zone_cache(cache: ZoneCache) -> ZoneCache:
    """
    Replace the process-wide zone cache, e.g. at startup from settings.

    Returns:
        ZoneCache: The cache that was replaced
    """
    global _default_cache
    with _default_lock:
        previous = _default_cache
        _default_cache = cache
    return previous


def validate_timezone_availability() -> None:
    """
    Check that Pacific, Eastern, Central and Mountain resolved from the zone database.

    Raises:
        ZoneResolutionError: If resolution failed; projections then use fixed offsets
    """
    get_zone_cache().validate()
