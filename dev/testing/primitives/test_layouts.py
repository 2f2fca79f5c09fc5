"""
Tests for Layouts Primitive

Verifies the formatter expands the fixed directives independently of the
process locale and passes everything else through.
"""

from datetime import datetime, timedelta, timezone

import pytest

from utctime.primitives.layouts import TimeLayout, format_datetime, format_rfc3339

REFERENCE = datetime(2024, 1, 2, 15, 4, 5, tzinfo=timezone.utc)


class TestFormatDatetime:
    """Layout expansion"""

    @pytest.mark.parametrize(
        "layout, expected",
        [
            ("%-d", "2"),
            ("%-m", "1"),
            ("%-H", "15"),
            ("%-I", "3"),
            ("%-M", "4"),
            ("%e", " 2"),
            ("%a %A", "Tue Tuesday"),
            ("%b %B", "Jan January"),
            ("%p", "PM"),
            ("%Y", "2024"),
        ],
    )
    def test_fixed_directives(self, layout, expected):
        assert format_datetime(REFERENCE, layout) == expected

    def test_midnight_is_twelve_am(self):
        midnight = datetime(2024, 1, 2, 0, 30, tzinfo=timezone.utc)

        assert format_datetime(midnight, "%-I:%M %p") == "12:30 AM"

    def test_year_below_1000_is_four_digits(self):
        early = datetime(1, 1, 1, tzinfo=timezone.utc)

        assert format_datetime(early, TimeLayout.DATE_ONLY) == "0001-01-01"

    def test_literal_text_passes_through(self):
        assert format_datetime(REFERENCE, "invalid") == "invalid"

    def test_escaped_percent_is_kept(self):
        assert format_datetime(REFERENCE, "100%% on %-d") == "100% on 2"

    def test_empty_layout_yields_empty_string(self):
        assert format_datetime(REFERENCE, "") == ""

    def test_remaining_directives_use_strftime(self):
        assert format_datetime(REFERENCE, "%H:%M:%S %Z %z") == "15:04:05 UTC +0000"


class TestFormatRFC3339:
    """RFC 3339 rendering"""

    def test_utc_uses_z_designator(self):
        assert format_rfc3339(REFERENCE) == "2024-01-02T15:04:05Z"

    def test_seconds_precision_drops_fraction(self):
        value = REFERENCE.replace(microsecond=123456)

        assert format_rfc3339(value) == "2024-01-02T15:04:05Z"

    def test_nano_trims_trailing_zeros(self):
        value = REFERENCE.replace(microsecond=120000)

        assert format_rfc3339(value, nano=True) == "2024-01-02T15:04:05.12Z"

    def test_nano_omits_zero_fraction(self):
        assert format_rfc3339(REFERENCE, nano=True) == "2024-01-02T15:04:05Z"

    def test_non_utc_offset_is_written_out(self):
        value = REFERENCE.astimezone(timezone(timedelta(hours=2)))

        assert format_rfc3339(value) == "2024-01-02T17:04:05+02:00"
