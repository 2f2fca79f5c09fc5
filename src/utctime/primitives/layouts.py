"""
Layouts Primitive

Named layout strings and the formatter that applies them.

Layouts use the strftime dialect. Before handing a layout to
``datetime.strftime`` the formatter expands the directives whose output would
otherwise depend on the platform or the process locale, so the catalog always
renders the same English text:

    %a %A %b %B %p   weekday / month names and AM/PM
    %Y               four-digit year, also for years below 1000
    %e               day of month padded with a space
    %-d %-m %-H %-I %-M   unpadded numeric fields
"""

import re
from datetime import datetime


class TimeLayout:
    """Fixed catalog of named layouts"""

    # US regional formats (MM/DD/YYYY)
    US_DATE_SHORT = "%m/%d/%Y"
    US_DATE_LONG = "%B %-d, %Y"
    US_DATE_TIME_12 = "%m/%d/%Y %I:%M:%S %p"
    US_DATE_TIME_24 = "%m/%d/%Y %H:%M:%S"
    US_TIME_12 = "%-I:%M %p"
    US_TIME_24 = "%H:%M"

    # European formats (DD/MM/YYYY)
    EU_DATE_SHORT = "%d/%m/%Y"
    EU_DATE_LONG = "%-d %B %Y"
    EU_DATE_TIME_12 = "%d/%m/%Y %I:%M:%S %p"
    EU_DATE_TIME_24 = "%d/%m/%Y %H:%M:%S"
    EU_TIME_12 = "%-I:%M %p"
    EU_TIME_24 = "%H:%M"

    # Components
    DATE_ONLY = "%Y-%m-%d"
    TIME_ONLY = "%H:%M:%S"
    WEEKDAY_LONG = "%A"
    WEEKDAY_SHORT = "%a"
    MONTH_LONG = "%B"
    MONTH_SHORT = "%b"

    # Standards
    RFC822 = "%d %b %y %H:%M %Z"
    RFC822Z = "%d %b %y %H:%M %z"
    RFC850 = "%A, %d-%b-%y %H:%M:%S %Z"
    ANSIC = "%a %b %e %H:%M:%S %Y"
    KITCHEN = "%-I:%M%p"

    # Parse-side layouts
    DATE_TIME = "%Y-%m-%d %H:%M:%S"
    YEAR_MONTH = "%Y-%m"
    YEAR = "%Y"


WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_DIRECTIVE_PATTERN = re.compile(r"%(?:%|-?[A-Za-z])")


def _expand_directive(dt: datetime, directive: str) -> str:
    """Return the fixed expansion of a directive, or the directive itself for strftime."""
    if directive == "%a":
        return WEEKDAY_NAMES[dt.weekday()][:3]
    if directive == "%A":
        return WEEKDAY_NAMES[dt.weekday()]
    if directive == "%b":
        return MONTH_NAMES[dt.month - 1][:3]
    if directive == "%B":
        return MONTH_NAMES[dt.month - 1]
    if directive == "%p":
        return "PM" if dt.hour >= 12 else "AM"
    if directive == "%Y":
        return f"{dt.year:04d}"
    if directive == "%e":
        return f"{dt.day:2d}"
    if directive == "%-d":
        return str(dt.day)
    if directive == "%-m":
        return str(dt.month)
    if directive == "%-H":
        return str(dt.hour)
    if directive == "%-I":
        return str(dt.hour % 12 or 12)
    if directive == "%-M":
        return str(dt.minute)
    return directive


def format_datetime(dt: datetime, layout: str) -> str:
    """
    Format a datetime with a strftime-style layout.

    Literal text, including a layout with no directives at all, passes through
    unchanged. An empty layout yields an empty string.

    Args:
        dt: Datetime to format
        layout: strftime-style layout

    Returns:
        str: Formatted text
    """
    if not layout:
        return ""

    def substitute(match: re.Match) -> str:
        expanded = _expand_directive(dt, match.group(0))
        if expanded == match.group(0):
            return expanded
        # Expanded text is literal from here on
        return expanded.replace("%", "%%")

    return dt.strftime(_DIRECTIVE_PATTERN.sub(substitute, layout))


def format_rfc3339(dt: datetime, nano: bool = False) -> str:
    """
    Format an aware datetime as RFC 3339, using ``Z`` for a zero offset.

    Args:
        dt: Timezone-aware datetime
        nano: Include the fractional second, trimmed of trailing zeros and
            omitted entirely when zero

    Returns:
        str: e.g. ``2024-01-02T15:04:05Z`` or ``2024-01-02T15:04:05.5+02:00``
    """
    text = dt.isoformat(timespec="seconds")
    if nano and dt.microsecond:
        fraction = f"{dt.microsecond:06d}".rstrip("0")
        text = text[:19] + "." + fraction + text[19:]
    if dt.utcoffset() is not None and dt.utcoffset().total_seconds() == 0:
        text = text.replace("+00:00", "Z")
    return text
