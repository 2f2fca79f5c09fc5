"""
UtcTime Core

A datetime wrapper whose value is always normalized to UTC.

Every constructor, parser, decoder and arithmetic operation returns a UtcTime
holding a timezone-aware UTC datetime. Naive datetimes are read as UTC wall
clock. ``UtcTime()`` is the zero value (0001-01-01T00:00:00Z) and stands for
"no timestamp".

The wrapped datetime is exposed as ``value``. Instances are frozen, so the
invariant cannot be broken by assignment.
"""

import json
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Optional, Union

from utctime.primitives import zone_cache
from utctime.primitives.errors import CodecInputError, ParseError
from utctime.primitives.layouts import TimeLayout, format_datetime, format_rfc3339
from utctime.primitives.timestamp_parser import (
    parse_flexible,
    parse_rfc3339,
    parse_rfc3339_nano,
    parse_with_layout,
    to_utc,
)

ZERO_DATETIME = datetime.min.replace(tzinfo=timezone.utc)
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class UtcTime:
    """A point on the timeline, stored in UTC."""

    value: datetime = ZERO_DATETIME

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise TypeError(f"UtcTime requires a datetime, got {type(self.value).__name__}")
        object.__setattr__(self, "value", to_utc(self.value))

    # Construction
    # ------------

    @classmethod
    def now(cls) -> "UtcTime":
        """Current instant in UTC."""
        return cls(datetime.now(timezone.utc))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "UtcTime":
        """Wrap a datetime of any zone, normalizing it to UTC."""
        return cls(dt)

    @classmethod
    def from_unix(cls, seconds: int) -> "UtcTime":
        """Instant ``seconds`` after the Unix epoch."""
        return cls(UNIX_EPOCH + timedelta(seconds=seconds))

    @classmethod
    def from_unix_milli(cls, millis: int) -> "UtcTime":
        """Instant ``millis`` milliseconds after the Unix epoch."""
        return cls(UNIX_EPOCH + timedelta(milliseconds=millis))

    @classmethod
    def parse_rfc3339(cls, text: str) -> "UtcTime":
        return cls(parse_rfc3339(text))

    @classmethod
    def parse_rfc3339_nano(cls, text: str) -> "UtcTime":
        return cls(parse_rfc3339_nano(text))

    @classmethod
    def parse(cls, layout: str, text: str) -> "UtcTime":
        """
        Parse text with a strptime layout.

        Raises:
            ParseError: If layout or text is empty, or text does not match layout
        """
        return cls(parse_with_layout(layout, text))

    # Comparison and arithmetic
    # -------------------------

    def before(self, other: "UtcTime") -> bool:
        return self.value < other.value

    def after(self, other: "UtcTime") -> bool:
        return self.value > other.value

    def equal(self, other: "UtcTime") -> bool:
        """Report whether both denote the same instant."""
        return self.value == other.value

    def add(self, duration: timedelta) -> "UtcTime":
        """
        Shift by a signed duration.

        Raises:
            OverflowError: If the result leaves the datetime range
        """
        return UtcTime(self.value + duration)

    def sub(self, other: "UtcTime") -> timedelta:
        """Signed duration ``self - other``."""
        return self.value - other.value

    def __add__(self, duration):
        if isinstance(duration, timedelta):
            return self.add(duration)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, UtcTime):
            return self.sub(other)
        if isinstance(other, timedelta):
            return self.add(-other)
        return NotImplemented

    def is_zero(self) -> bool:
        """Report whether this is the zero value."""
        return self.value == ZERO_DATETIME

    def start_of_day(self) -> "UtcTime":
        """Midnight UTC of this UTC date."""
        return UtcTime(datetime.combine(self.value.date(), time.min, timezone.utc))

    def end_of_day(self) -> "UtcTime":
        """Last representable instant (23:59:59.999999) of this UTC date."""
        return UtcTime(datetime.combine(self.value.date(), time.max, timezone.utc))

    def unix(self) -> int:
        """Whole seconds since the Unix epoch (floored)."""
        return (self.value - UNIX_EPOCH) // timedelta(seconds=1)

    def unix_milli(self) -> int:
        """Whole milliseconds since the Unix epoch (floored)."""
        return (self.value - UNIX_EPOCH) // timedelta(milliseconds=1)

    def utc(self) -> datetime:
        """The wrapped UTC datetime."""
        return self.value

    # Timezone projection
    # -------------------

    def pst(self) -> datetime:
        """Fixed UTC-8, never daylight adjusted."""
        return self.value.astimezone(zone_cache.PST)

    def est(self) -> datetime:
        """Fixed UTC-5, never daylight adjusted."""
        return self.value.astimezone(zone_cache.EST)

    def cst(self) -> datetime:
        """Fixed UTC-6, never daylight adjusted."""
        return self.value.astimezone(zone_cache.CST)

    def mst(self) -> datetime:
        """Fixed UTC-7, never daylight adjusted."""
        return self.value.astimezone(zone_cache.MST)

    def pacific(self) -> datetime:
        """Pacific time (PST/PDT), or fixed PST if the zone database is unavailable."""
        return self.value.astimezone(zone_cache.get_zone_cache().location(zone_cache.PACIFIC))

    def eastern(self) -> datetime:
        """Eastern time (EST/EDT), or fixed EST if the zone database is unavailable."""
        return self.value.astimezone(zone_cache.get_zone_cache().location(zone_cache.EASTERN))

    def central(self) -> datetime:
        """Central time (CST/CDT), or fixed CST if the zone database is unavailable."""
        return self.value.astimezone(zone_cache.get_zone_cache().location(zone_cache.CENTRAL))

    def mountain(self) -> datetime:
        """Mountain time (MST/MDT), or fixed MST if the zone database is unavailable."""
        return self.value.astimezone(zone_cache.get_zone_cache().location(zone_cache.MOUNTAIN))

    def in_zone(self, name: str) -> datetime:
        """
        Project into a named zone, e.g. ``America/Los_Angeles``.

        Raises:
            ZoneNotFoundError: If the name is not in the zone database
        """
        return self.value.astimezone(zone_cache.load_zone(name))

    def in_location(self, location: tzinfo) -> datetime:
        """Project into an already resolved zone."""
        return self.value.astimezone(location)

    # Formatting
    # ----------

    def format(self, layout: str) -> str:
        """Format with a strftime layout. Unknown text is passed through literally."""
        return format_datetime(self.value, layout)

    def time_format(self, layout: str) -> str:
        """Format with a TimeLayout entry. An empty layout yields an empty string."""
        return format_datetime(self.value, layout)

    def rfc3339(self) -> str:
        """e.g. ``2024-01-02T15:04:05Z``"""
        return format_rfc3339(self.value)

    def rfc3339_nano(self) -> str:
        """RFC 3339 with the fractional second, trailing zeros trimmed."""
        return format_rfc3339(self.value, nano=True)

    def iso8601(self) -> str:
        return format_rfc3339(self.value)

    def rfc822(self) -> str:
        return self.time_format(TimeLayout.RFC822)

    def rfc822z(self) -> str:
        return self.time_format(TimeLayout.RFC822Z)

    def rfc850(self) -> str:
        return self.time_format(TimeLayout.RFC850)

    def ansic(self) -> str:
        return self.time_format(TimeLayout.ANSIC)

    def kitchen(self) -> str:
        """e.g. ``3:04PM``"""
        return self.time_format(TimeLayout.KITCHEN)

    def us_date_short(self) -> str:
        return self.time_format(TimeLayout.US_DATE_SHORT)

    def us_date_long(self) -> str:
        return self.time_format(TimeLayout.US_DATE_LONG)

    def us_date_time_12(self) -> str:
        return self.time_format(TimeLayout.US_DATE_TIME_12)

    def us_date_time_24(self) -> str:
        return self.time_format(TimeLayout.US_DATE_TIME_24)

    def us_time_12(self) -> str:
        return self.time_format(TimeLayout.US_TIME_12)

    def us_time_24(self) -> str:
        return self.time_format(TimeLayout.US_TIME_24)

    def eu_date_short(self) -> str:
        return self.time_format(TimeLayout.EU_DATE_SHORT)

    def eu_date_long(self) -> str:
        return self.time_format(TimeLayout.EU_DATE_LONG)

    def eu_date_time_12(self) -> str:
        return self.time_format(TimeLayout.EU_DATE_TIME_12)

    def eu_date_time_24(self) -> str:
        return self.time_format(TimeLayout.EU_DATE_TIME_24)

    def eu_time_12(self) -> str:
        return self.time_format(TimeLayout.EU_TIME_12)

    def eu_time_24(self) -> str:
        return self.time_format(TimeLayout.EU_TIME_24)

    def date_only(self) -> str:
        return self.time_format(TimeLayout.DATE_ONLY)

    def time_only(self) -> str:
        return self.time_format(TimeLayout.TIME_ONLY)

    def weekday_long(self) -> str:
        return self.time_format(TimeLayout.WEEKDAY_LONG)

    def weekday_short(self) -> str:
        return self.time_format(TimeLayout.WEEKDAY_SHORT)

    def month_long(self) -> str:
        return self.time_format(TimeLayout.MONTH_LONG)

    def month_short(self) -> str:
        return self.time_format(TimeLayout.MONTH_SHORT)

    def __str__(self) -> str:
        return self.rfc3339()

    # Codecs
    # ------

    def marshal_json(self) -> bytes:
        """Quoted RFC 3339 string, e.g. ``b'"2024-01-02T15:04:05Z"'``."""
        return json.dumps(self.rfc3339()).encode("utf-8")

    @classmethod
    def unmarshal_json(cls, data: Union[bytes, str]) -> "UtcTime":
        """
        Decode a JSON string holding RFC 3339 text. Unquoted text is accepted too.

        ``null`` and ``""`` decode to the zero value.

        Raises:
            CodecInputError: If data is empty or holds a non-string JSON value
            ParseError: If the text is not RFC 3339
        """
        if len(data) == 0:
            raise CodecInputError("cannot unmarshal empty data into UtcTime")

        try:
            decoded = json.loads(data)
        except UnicodeDecodeError as e:
            raise ParseError(f"cannot unmarshal {data!r} into UtcTime: {e}") from e
        except json.JSONDecodeError:
            # Surrounding quotes are optional
            decoded = _decode_text(data) if isinstance(data, (bytes, bytearray)) else data

        if decoded is None or decoded == "":
            return cls()
        if not isinstance(decoded, str):
            raise CodecInputError(
                f"cannot unmarshal JSON {type(decoded).__name__} into UtcTime"
            )
        return cls(parse_rfc3339(decoded))

    def marshal_text(self) -> bytes:
        return self.rfc3339().encode("utf-8")

    @classmethod
    def unmarshal_text(cls, data: Union[bytes, str]) -> "UtcTime":
        """
        Decode text in any flexible layout. Empty input is the zero value.

        Raises:
            ParseError: If no flexible layout matches
        """
        if len(data) == 0:
            return cls()
        if isinstance(data, (bytes, bytearray)):
            data = _decode_text(data)
        return cls(parse_flexible(data))

    def marshal_yaml(self) -> Optional[str]:
        """RFC 3339 string, or None (YAML null) for the zero value."""
        if self.is_zero():
            return None
        return self.rfc3339()

    @classmethod
    def unmarshal_yaml(cls, value: Any) -> "UtcTime":
        """
        Decode a scalar produced by a YAML loader.

        Strings go through the flexible parser. A bare year loads as an int and
        an unquoted timestamp loads as a date or datetime; those are accepted too.
        None and ``""`` are the zero value.

        Raises:
            CodecInputError: If the scalar has any other type
            ParseError: If a string matches no flexible layout, or a datetime
                lies outside the UTC range
        """
        if value is None or value == "":
            return cls()
        if isinstance(value, datetime):
            return cls(_decoded_utc(value))
        if isinstance(value, date):
            return cls(datetime.combine(value, time.min, timezone.utc))
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise CodecInputError(f"cannot unmarshal YAML {type(value).__name__} into UtcTime")
        try:
            return cls(parse_flexible(value))
        except ParseError as e:
            raise ParseError(f"failed to parse time {value!r}: {e}") from e

    def db_value(self) -> datetime:
        """Driver parameter: the wrapped UTC datetime, also for the zero value."""
        return self.value

    @classmethod
    def scan(cls, value: Any) -> "UtcTime":
        """
        Decode a database column value.

        Accepts a datetime, a string, or bytes holding text.

        Raises:
            CodecInputError: If value is None or of an unsupported type
            ParseError: If text matches no flexible layout, or a datetime lies
                outside the UTC range
        """
        if value is None:
            raise CodecInputError("cannot scan None into UtcTime")
        if isinstance(value, datetime):
            return cls(_decoded_utc(value))
        if isinstance(value, str):
            return cls(parse_flexible(value))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls(parse_flexible(_decode_text(bytes(value))))
        raise CodecInputError(f"cannot scan non-time value of type {type(value).__name__} into UtcTime")


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CodecInputError(f"cannot decode {data!r} as UTF-8 text") from e


def _decoded_utc(value: datetime) -> datetime:
    try:
        return to_utc(value)
    except OverflowError as e:
        raise ParseError(f"time {value.isoformat()} is outside the UTC range") from e
