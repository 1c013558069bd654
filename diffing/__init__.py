"""Diffing module for byte-level change detection."""

from diffing.cancellation import CancelSignal
from diffing.change_detector import FileDiffFinder
from diffing.comparator import IndexComparator
from diffing.exceptions import (
    DeadlineExceededError,
    DiffCancelledError,
    DiffFinderError,
    NonIncrementalVersionError,
    PayloadError,
    StaleVersionError,
    VersionError,
)
from diffing.hasher import Hasher
from diffing.models import ChangeKind, ChangeRecord, FileInformative, FileSnapshot, Range
from diffing.range_locator import RangeLocator

__all__ = [
    "CancelSignal",
    "ChangeKind",
    "ChangeRecord",
    "DeadlineExceededError",
    "DiffCancelledError",
    "DiffFinderError",
    "FileDiffFinder",
    "FileInformative",
    "FileSnapshot",
    "Hasher",
    "IndexComparator",
    "NonIncrementalVersionError",
    "PayloadError",
    "Range",
    "RangeLocator",
    "StaleVersionError",
    "VersionError",
]
