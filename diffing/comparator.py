"""
Exact byte comparison producing change records.
"""

from typing import Iterable

from diffing.models import ChangeRecord, Range


class IndexComparator:
    """Turns candidate ranges or full scans into per-index change records."""

    @staticmethod
    def compare_in_ranges(
        ranges: Iterable[Range],
        original: bytes,
        candidate: bytes
    ) -> list[ChangeRecord]:
        """
        Compare bytes inside each range and report the mismatches.

        Args:
            ranges: Ordered, non-overlapping ranges valid for both texts
            original: Baseline bytes
            candidate: Candidate bytes

        Returns:
            UPDATED records in ascending index order
        """
        records = []
        for span in ranges:
            for index in range(span.start, span.end):
                if original[index] != candidate[index]:
                    records.append(
                        ChangeRecord.updated(index, original[index], candidate[index])
                    )
        return records

    @staticmethod
    def compare_brute_force(original: bytes, candidate: bytes) -> list[ChangeRecord]:
        """
        Linear scan over both texts.

        The common prefix yields UPDATED records; the tail of the longer
        text yields ADDED (candidate longer) or REMOVED (original longer)
        records.

        Args:
            original: Baseline bytes
            candidate: Candidate bytes

        Returns:
            Change records in ascending index order
        """
        common = min(len(original), len(candidate))

        records = [
            ChangeRecord.updated(index, original[index], candidate[index])
            for index in range(common)
            if original[index] != candidate[index]
        ]
        records.extend(IndexComparator.added_tail(candidate, common))
        records.extend(IndexComparator.removed_tail(original, common))
        return records

    @staticmethod
    def added_tail(candidate: bytes, start: int) -> list[ChangeRecord]:
        """ADDED records for candidate[start:]."""
        return [
            ChangeRecord.added(index, candidate[index])
            for index in range(start, len(candidate))
        ]

    @staticmethod
    def removed_tail(original: bytes, start: int) -> list[ChangeRecord]:
        """REMOVED records for original[start:]."""
        return [
            ChangeRecord.removed(index, original[index])
            for index in range(start, len(original))
        ]
