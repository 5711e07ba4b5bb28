"""Tests for Wayback timestamp formatting."""

from __future__ import annotations

import pytest

from wayback_mcp.archive.timestamps import format_timestamp


class TestFormatTimestamp:
    def test_fourteen_digits_formatted(self) -> None:
        assert format_timestamp("20240315123045") == "2024-03-15 12:30:45"

    def test_out_of_range_values_are_not_validated(self) -> None:
        """Month 13 and hour 99 are sliced through as-is."""
        assert format_timestamp("20241332990000") == "2024-13-32 99:00:00"

    @pytest.mark.parametrize("value", ["", "2024", "20240315", "202403151230456"])
    def test_other_lengths_returned_unchanged(self, value: str) -> None:
        assert format_timestamp(value) == value

    def test_non_numeric_fourteen_chars_still_sliced(self) -> None:
        assert format_timestamp("abcdefghijklmn") == "abcd-ef-gh ij:kl:mn"
