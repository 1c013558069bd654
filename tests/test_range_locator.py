"""
Tests for wide/narrow range location.
"""

import random

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from diffing.models import Range
from diffing.range_locator import RangeLocator


BASELINE = b"abcabcabcabcabcabcabc"


class TestFindChangedRanges:
    """Tests for a single hash pass."""

    def test_identical_texts_have_no_ranges(self):
        """Test that equal texts produce no ranges."""
        assert RangeLocator().find_changed_ranges(BASELINE, BASELINE, 8) == []

    def test_single_change_opens_window_sized_range(self):
        """Test a change at offset 0 with a 2-byte window."""
        ranges = RangeLocator().find_changed_ranges(b"abcdefgh", b"xbcdefgh", 2)

        assert ranges == [Range(start=0, end=2)]

    def test_overlapping_windows_merge(self):
        """Test that consecutive differing windows extend one range."""
        ranges = RangeLocator().find_changed_ranges(b"abcdefgh", b"abcXefgh", 2)

        # Windows starting at 2 and 3 contain offset 3
        assert ranges == [Range(start=2, end=5)]

    def test_touching_ranges_merge(self):
        """Test that a window starting exactly at the last range end extends it."""
        ranges = RangeLocator().find_changed_ranges(b"abcdefgh", b"Xbcdefgh", 1)
        assert ranges == [Range(start=0, end=1)]

        ranges = RangeLocator().find_changed_ranges(b"abcdefgh", b"XYcdefgh", 1)
        assert ranges == [Range(start=0, end=2)]

    def test_distant_changes_open_separate_ranges(self):
        """Test that far apart changes stay in separate ranges."""
        ranges = RangeLocator().find_changed_ranges(b"abcdefghijkl", b"Xbcdefghijk1", 2)

        assert ranges == [Range(start=0, end=2), Range(start=10, end=12)]

    def test_short_texts_return_whole_span(self):
        """Test that texts shorter than the window are one candidate range."""
        assert RangeLocator().find_changed_ranges(b"abc", b"abd", 8) == [Range(start=0, end=3)]
        assert RangeLocator().find_changed_ranges(b"abc", b"abc", 8) == []

    def test_unequal_lengths_rejected(self):
        """Test that the locator requires equal lengths."""
        with pytest.raises(ValueError):
            RangeLocator().find_changed_ranges(b"abcdefgh", b"abcdefghi", 8)


class TestFindMinimalRanges:
    """Tests for the two-pass search."""

    def test_ranges_cover_every_change(self):
        """Test that every differing index lies inside some range."""
        candidate = b"1bcabcabca6cabcab4abc"

        ranges = RangeLocator().find_minimal_ranges(BASELINE, candidate)

        for index in (0, 10, 17):
            assert any(r.start <= index < r.end for r in ranges)

    def test_narrow_pass_shrinks_ranges(self):
        """Test that narrow ranges are much smaller than the wide window."""
        candidate = b"abcabcabcabXabcabcabc"

        ranges = RangeLocator().find_minimal_ranges(BASELINE, candidate)

        assert ranges == [Range(start=10, end=13)]

    def test_ranges_are_ordered_and_disjoint(self):
        """Test ordering and non-overlap on random inputs."""
        rng = random.Random(7)
        locator = RangeLocator()

        for _ in range(50):
            original = bytes(rng.choice(b"abc") for _ in range(200))
            candidate = bytearray(original)
            for index in rng.sample(range(200), 6):
                candidate[index] = ord("z")

            ranges = locator.find_minimal_ranges(original, bytes(candidate))

            for r in ranges:
                assert 0 <= r.start < r.end <= 200
            for left, right in zip(ranges, ranges[1:]):
                assert left.end <= right.start

    def test_identical_texts_have_no_minimal_ranges(self):
        """Test that equal texts skip the narrow pass entirely."""
        assert RangeLocator().find_minimal_ranges(BASELINE, BASELINE) == []
