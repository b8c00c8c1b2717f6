"""Unit tests for bucketls/utils/formatting.py."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add parent dir to path so bucketls is importable as a package
sys.path.insert(0, str(Path(__file__).parent.parent))

from bucketls.models import DARK_RED, RESET, WHITE, Color, DeletionTotals, ObjectRecord
from bucketls.utils.formatting import (
    color_for_size,
    format_object_line,
    format_progress,
    format_size,
    full_object_path,
    interpolate_color,
)

MIB = 1024 * 1024


class TestFormatSize:
    """Tests for format_size() function."""

    def test_bytes(self):
        """Sizes below 1024 are printed as plain bytes."""
        assert format_size(0) == "0 B"
        assert format_size(1) == "1 B"
        assert format_size(1023) == "1023 B"

    def test_kilobytes(self):
        assert format_size(1024) == "1.0 KB"
        assert format_size(1536) == "1.5 KB"
        assert format_size(1023 * 1024) == "1023.0 KB"

    def test_megabytes(self):
        assert format_size(MIB) == "1.0 MB"
        assert format_size(int(1.5 * MIB)) == "1.5 MB"
        assert format_size(2_000_000) == "1.9 MB"

    def test_larger_units(self):
        """Labels have no 'i' even though scaling is binary."""
        assert format_size(1024**3) == "1.0 GB"
        assert format_size(1024**4) == "1.0 TB"
        assert format_size(1024**5) == "1.0 PB"
        assert format_size(1024**6) == "1.0 EB"

    def test_beyond_largest_unit(self):
        """Sizes past the exabyte range are still labelled EB."""
        assert format_size(1024**7) == "1024.0 EB"
        assert format_size(3 * 1024**8) == "3145728.0 EB"


class TestInterpolateColor:
    """Tests for interpolate_color() function."""

    def test_factor_zero_is_start(self):
        assert interpolate_color(0, WHITE, DARK_RED) == WHITE

    def test_factor_one_is_end(self):
        assert interpolate_color(1, WHITE, DARK_RED) == DARK_RED

    def test_midpoint_truncates(self):
        """Channels are truncated toward zero, not rounded."""
        assert interpolate_color(0.5, WHITE, DARK_RED) == Color(237, 127, 127)

    @pytest.mark.parametrize("factor", [0.0, 0.1, 0.25, 0.333, 0.5, 0.75, 0.9, 1.0])
    def test_channels_stay_between_stops(self, factor):
        color = interpolate_color(factor, WHITE, DARK_RED)
        assert DARK_RED.r <= color.r <= WHITE.r
        assert DARK_RED.g <= color.g <= WHITE.g
        assert DARK_RED.b <= color.b <= WHITE.b

    def test_factor_outside_range_extrapolates(self):
        """Factors are not clamped."""
        color = interpolate_color(2, Color(0, 0, 0), Color(10, 20, 30))
        assert color == Color(20, 40, 60)


class TestColorForSize:
    """Tests for color_for_size() function."""

    def test_small_objects_are_white(self):
        assert color_for_size(0) == WHITE
        assert color_for_size(MIB) == WHITE

    def test_large_objects_are_dark_red(self):
        assert color_for_size(400 * MIB) == DARK_RED
        assert color_for_size(10 * 1024 * MIB) == DARK_RED

    def test_between_thresholds_interpolates(self):
        assert color_for_size(200 * MIB) == Color(237, 127, 127)

    def test_just_above_min_threshold(self):
        color = color_for_size(MIB + 1)
        assert color != WHITE
        assert color.r > DARK_RED.r

    def test_custom_thresholds(self):
        assert color_for_size(50, min_threshold=10, max_threshold=100) == Color(237, 127, 127)


class TestFullObjectPath:
    def test_s3_path(self):
        assert full_object_path("my-bucket", "a/b.txt") == "s3://my-bucket/a/b.txt"

    def test_other_scheme(self):
        assert full_object_path("b", "k", scheme="gs") == "gs://b/k"


class TestFormatObjectLine:
    """Tests for format_object_line() function."""

    @pytest.fixture
    def record(self):
        return ObjectRecord(
            key="logs/app.log",
            size=2_000_000,
            last_modified=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            storage_class="STANDARD_IA",
        )

    def test_plain_line(self, record):
        assert format_object_line(record) == "   1.9 MB 2024-01-02 03:04:05 STANDARD_IA logs/app.log"

    def test_size_column_is_right_aligned(self, record):
        small = ObjectRecord("k", 5, record.last_modified)
        assert format_object_line(small).startswith("      5 B ")

    def test_key_override(self, record):
        line = format_object_line(record, key="s3://bucket/logs/app.log")
        assert line.endswith(" s3://bucket/logs/app.log")

    def test_colored_line(self, record):
        line = format_object_line(record, color=DARK_RED)
        assert line.startswith("\x1b[38;2;220;0;0m")
        assert line.endswith(RESET)
        assert "logs/app.log" in line


class TestFormatProgress:
    def test_progress_line(self):
        totals = DeletionTotals(count=5, size=3 * MIB)
        assert format_progress(totals) == "Deleted 5 objects / 3.0 MB"

    def test_empty_progress(self):
        assert format_progress(DeletionTotals()) == "Deleted 0 objects / 0 B"
