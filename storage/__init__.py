"""Storage module for the baseline file and admission control."""

from storage.cache import READINESS_KEY, InMemoryCache, init_cache
from storage.version_manager import FileInformative, VersionManager

__all__ = [
    "READINESS_KEY",
    "FileInformative",
    "InMemoryCache",
    "VersionManager",
    "init_cache",
]
