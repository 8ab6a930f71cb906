"""Tests for listing entry parsers."""

import logging
from datetime import date

import pytest

from deckpoller.models.errors import ErrorKind, UnparseableDateError
from deckpoller.parsers.event_listing import classify_format, parse_event_date


class TestClassifyFormat:
    def test_recognizes_constructed_formats(self) -> None:
        """Each known format keyword maps to its label."""
        assert classify_format("Standard Daily #6002") == "Standard"
        assert classify_format("Modern Premier #6001") == "Modern"
        assert classify_format("Pauper Daily #12") == "Pauper"
        assert classify_format("Classic Daily #99") == "Classic"

    def test_sealed_block_checked_before_block(self) -> None:
        """The sealed pattern wins over the bare block pattern it contains."""
        assert classify_format("2022 Sealed RTR Block Constructed") == "RTR Block Sealed"

    def test_block_constructed(self) -> None:
        """Bare block events classify as block constructed."""
        assert classify_format("RTR Block Daily #7") == "RTR Block"

    def test_first_match_wins(self) -> None:
        """Earlier patterns take precedence when several match."""
        assert classify_format("Standard and Modern Showdown") == "Standard"

    def test_match_is_case_sensitive(self) -> None:
        """Lower-case keywords do not match."""
        assert classify_format("modern daily") == "modern daily"

    def test_unrecognized_returns_raw_name(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown names pass through unchanged and are logged."""
        with caplog.at_level(logging.WARNING):
            result = classify_format("Legacy Daily #5")

        assert result == "Legacy Daily #5"
        assert "Unrecognized format" in caplog.text

    def test_empty_name_degrades(self) -> None:
        """Empty names do not raise."""
        assert classify_format("") == ""


class TestParseEventDate:
    def test_parses_month_day(self) -> None:
        """Month and day come from the text, year from the caller."""
        assert parse_event_date("3/15", 2023) == date(2023, 3, 15)

    def test_uses_reference_year(self) -> None:
        """The same text maps to different years as supplied."""
        assert parse_event_date("12/31", 2012) == date(2012, 12, 31)

    def test_finds_date_inside_text(self) -> None:
        """Surrounding text is ignored."""
        assert parse_event_date("Posted 7/4 at noon", 2013) == date(2013, 7, 4)

    def test_garbage_raises(self) -> None:
        """Text without a month/day raises instead of defaulting to today."""
        with pytest.raises(UnparseableDateError) as exc_info:
            parse_event_date("garbage", 2023)

        assert exc_info.value.kind == ErrorKind.UNPARSEABLE_DATE
        assert exc_info.value.raw_date == "garbage"

    def test_impossible_date_raises(self) -> None:
        """Month/day pairs that are not calendar dates raise."""
        with pytest.raises(UnparseableDateError):
            parse_event_date("13/40", 2023)

    def test_leap_day_depends_on_year(self) -> None:
        """Feb 29 is only valid in leap years."""
        assert parse_event_date("2/29", 2024) == date(2024, 2, 29)
        with pytest.raises(UnparseableDateError):
            parse_event_date("2/29", 2023)

    def test_oversized_numbers_raise(self) -> None:
        """Month or day too large for a calendar date raises UnparseableDateError."""
        with pytest.raises(UnparseableDateError) as exc_info:
            parse_event_date("99999999999/1", 2023)

        assert exc_info.value.raw_date == "99999999999/1"
