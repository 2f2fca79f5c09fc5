"""
TimestampParser Primitive

Parse timestamp text into timezone-aware UTC datetimes.

Every successful parse is normalized to UTC: an offset in the source text
shifts the instant and is not preserved. Text without an offset is read as UTC.
"""

import re
from datetime import datetime, timedelta, timezone

from utctime.primitives.errors import ParseError
from utctime.primitives.layouts import TimeLayout

RFC3339 = "RFC3339"
RFC3339_NANO = "RFC3339Nano"

# Date, "T", time, optional fraction (up to nanoseconds), "Z" or +hh:mm / -hh:mm
_RFC3339_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?(Z|[+-]\d{2}:\d{2})$"
)


def to_utc(dt: datetime) -> datetime:
    """Normalize a datetime to UTC, reading a naive value as UTC wall clock."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _parse_offset(text: str, designator: str) -> timezone:
    if designator == "Z":
        return timezone.utc
    hours, minutes = int(designator[1:3]), int(designator[4:6])
    if hours > 23 or minutes > 59:
        raise ParseError(f'parsing time "{text}": time zone offset out of range')
    offset = timedelta(hours=hours, minutes=minutes)
    return timezone(-offset if designator[0] == "-" else offset)


def _parse_rfc3339(text: str, layout_name: str) -> datetime:
    match = _RFC3339_PATTERN.match(text)
    if match is None:
        raise ParseError(f'parsing time "{text}" as {layout_name}: cannot parse')

    year, month, day, hour, minute, second, fraction, designator = match.groups()
    # Sub-microsecond digits are truncated
    microsecond = int((fraction or "0").ljust(6, "0")[:6])
    try:
        parsed = datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), microsecond,
            tzinfo=_parse_offset(text, designator),
        )
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise ParseError(f'parsing time "{text}" as {layout_name}: {e}') from e


def parse_rfc3339(text: str) -> datetime:
    """
    Parse RFC 3339 text, e.g. ``2024-01-02T15:04:05Z`` or ``...+02:00``.

    A fractional second is accepted, as in the nano variant.

    Raises:
        ParseError: If the text does not match the layout or a field is out of range
    """
    return _parse_rfc3339(text, RFC3339)


def parse_rfc3339_nano(text: str) -> datetime:
    """Parse RFC 3339 text with up to nine fractional-second digits."""
    return _parse_rfc3339(text, RFC3339_NANO)


def parse_with_layout(layout: str, text: str) -> datetime:
    """
    Parse text with a caller-supplied strptime layout

    Args:
        layout: strptime-style layout, e.g. ``%Y-%m-%d``
        text: Text to parse

    Returns:
        datetime: Parsed value in UTC

    Raises:
        ParseError: If the layout or text is empty, or the text does not match
    """
    if not layout:
        raise ParseError("Invalid layout: empty string")
    if not text:
        raise ParseError(f'parsing time "" as "{layout}": empty string')

    try:
        return to_utc(datetime.strptime(text, layout))
    except (ValueError, OverflowError) as e:
        raise ParseError(f'parsing time "{text}" as "{layout}": {e}') from e


def _strptime_parser(layout: str):
    return lambda text: parse_with_layout(layout, text)


# Priority order for flexible parsing
FLEXIBLE_LAYOUTS = (
    (RFC3339_NANO, parse_rfc3339_nano),
    (RFC3339, parse_rfc3339),
    (TimeLayout.DATE_TIME, _strptime_parser(TimeLayout.DATE_TIME)),
    (TimeLayout.DATE_ONLY, _strptime_parser(TimeLayout.DATE_ONLY)),
    (TimeLayout.YEAR_MONTH, _strptime_parser(TimeLayout.YEAR_MONTH)),
    (TimeLayout.YEAR, _strptime_parser(TimeLayout.YEAR)),
)


def parse_flexible(text: str) -> datetime:
    """
    Parse text with the first matching layout in FLEXIBLE_LAYOUTS.

    Fields a layout does not carry default to their minimum, so ``2024``
    reads as 2024-01-01T00:00:00Z.

    Raises:
        ParseError: The error from the first layout tried, when none match
    """
    first_error = None
    for _name, parser in FLEXIBLE_LAYOUTS:
        try:
            return parser(text)
        except ParseError as e:
            if first_error is None:
                first_error = e
    raise first_error
