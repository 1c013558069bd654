"""
Data models for positional file deltas.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class ChangeKind(str, Enum):
    """Kind of change at a single byte offset."""
    UPDATED = "UPDATED"
    ADDED = "ADDED"
    REMOVED = "REMOVED"


@dataclass(frozen=True)
class FileSnapshot:
    """Baseline content and its version, fixed for the process lifetime."""
    content: bytes
    version: int


class FileInformative(Protocol):
    """Read access to a baseline file and its version."""

    def version(self) -> int: ...

    def content(self) -> bytes: ...

    def validate_version(self, version: int) -> None: ...


@dataclass
class Range:
    """Half-open byte interval [start, end) that may contain differences."""
    start: int
    end: int

    def shifted(self, offset: int) -> "Range":
        return Range(start=self.start + offset, end=self.end + offset)


@dataclass(frozen=True)
class ChangeRecord:
    """
    A single byte-level change.

    UPDATED carries both values, ADDED only the new value and REMOVED only
    the old value. Values are single bytes.
    """
    index: int
    kind: ChangeKind
    old_value: Optional[bytes] = None
    new_value: Optional[bytes] = None

    @classmethod
    def updated(cls, index: int, old_value: int, new_value: int) -> "ChangeRecord":
        return cls(
            index=index,
            kind=ChangeKind.UPDATED,
            old_value=bytes((old_value,)),
            new_value=bytes((new_value,)),
        )

    @classmethod
    def added(cls, index: int, new_value: int) -> "ChangeRecord":
        return cls(index=index, kind=ChangeKind.ADDED, new_value=bytes((new_value,)))

    @classmethod
    def removed(cls, index: int, old_value: int) -> "ChangeRecord":
        return cls(index=index, kind=ChangeKind.REMOVED, old_value=bytes((old_value,)))

    def to_dict(self) -> dict:
        """Wire shape used by the HTTP layer; bytes render as Latin-1 characters."""
        return {
            "OldValue": _render(self.old_value),
            "NewValue": _render(self.new_value),
            "Index": self.index,
            "Type": self.kind.value,
        }


def _render(value: Optional[bytes]) -> str:
    if value is None:
        return ""
    return value.decode("latin-1")
