"""
Version management for the baseline file.

Holds the baseline snapshot loaded at startup and enforces strictly
sequential versioning of submitted updates.
"""

from typing import Union

from diffing.exceptions import NonIncrementalVersionError, StaleVersionError
from diffing.models import FileInformative, FileSnapshot


class VersionManager:
    """
    Version guard over an immutable baseline snapshot.

    The snapshot is never advanced: every diff compares against the content
    and version the process was started with.
    """

    def __init__(self, content: Union[str, bytes], version: int):
        """
        Initialize version manager.

        Args:
            content: Baseline text; str is stored UTF-8 encoded
            version: Baseline version, a positive integer
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        if version <= 0:
            raise ValueError(f"file version must be a positive integer, got {version}")
        self._snapshot = FileSnapshot(content=content, version=version)

    def version(self) -> int:
        return self._snapshot.version

    def content(self) -> bytes:
        return self._snapshot.content

    def validate_version(self, version: int) -> None:
        """
        Check that a proposed version is the direct successor of the baseline.

        Args:
            version: Proposed version number

        Raises:
            StaleVersionError: version is not newer than the baseline
            NonIncrementalVersionError: version skips past baseline + 1
        """
        current = self._snapshot.version
        if version <= current:
            raise StaleVersionError(current, version)
        if version > current + 1:
            raise NonIncrementalVersionError(current, version)
