"""
Range narrowing for equal-length texts.

A wide pass with an 8-byte window finds coarse regions whose window hashes
differ; a narrow pass with a 2-byte window repeats the scan inside each
coarse region to shrink it. The resulting ranges are a superset of the
real differences and are checked byte by byte by the comparator.
"""

from typing import Optional

from diffing.hasher import Hasher
from diffing.models import Range

WIDE_WINDOW = 8
NARROW_WINDOW = 2


class RangeLocator:
    """Locates byte ranges of two equal-length texts that are likely to differ."""

    def __init__(
        self,
        hasher: Optional[Hasher] = None,
        wide_window: int = WIDE_WINDOW,
        narrow_window: int = NARROW_WINDOW
    ):
        self.hasher = hasher or Hasher()
        self.wide_window = wide_window
        self.narrow_window = narrow_window

    def find_changed_ranges(
        self,
        original: bytes,
        updated: bytes,
        window_size: int
    ) -> list[Range]:
        """
        Find ranges whose window hashes differ between two texts.

        A differing window at offset i opens [i, i+window_size) unless it
        overlaps or touches the last open range, which is then extended.

        Args:
            original: Baseline bytes
            updated: Candidate bytes of the same length
            window_size: Window length in bytes

        Returns:
            Ordered, non-overlapping ranges
        """
        if len(original) != len(updated):
            raise ValueError(
                f"range location needs equal lengths, got {len(original)} and {len(updated)}"
            )

        if len(original) < window_size:
            if original == updated:
                return []
            return [Range(start=0, end=len(original))]

        original_hashes = self.hasher.window_hashes(original, window_size)
        updated_hashes = self.hasher.window_hashes(updated, window_size)

        ranges: list[Range] = []
        for i, (left, right) in enumerate(zip(original_hashes, updated_hashes)):
            if left == right:
                continue
            if ranges and ranges[-1].end >= i:
                ranges[-1].end = i + window_size
            else:
                ranges.append(Range(start=i, end=i + window_size))

        return ranges

    def find_minimal_ranges(self, original: bytes, updated: bytes) -> list[Range]:
        """
        Run the wide pass, then narrow each coarse range.

        Args:
            original: Baseline bytes
            updated: Candidate bytes of the same length

        Returns:
            Ordered, non-overlapping ranges in absolute offsets
        """
        wide_ranges = self.find_changed_ranges(original, updated, self.wide_window)

        ranges: list[Range] = []
        for wide in wide_ranges:
            narrow_ranges = self.find_changed_ranges(
                original[wide.start:wide.end],
                updated[wide.start:wide.end],
                self.narrow_window
            )
            ranges.extend(narrow.shifted(wide.start) for narrow in narrow_ranges)

        return ranges
