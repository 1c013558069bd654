"""
Exceptions raised by the diff finder.

Version guard failures and cancellation are terminal for the call that
raised them: no partial delta is returned and the baseline is untouched.
"""


class DiffFinderError(Exception):
    """Base exception for the diff finder."""


class VersionError(DiffFinderError):
    """Raised when a proposed version cannot follow the current baseline."""

    def __init__(self, message: str, current_version: int, proposed_version: int):
        super().__init__(message)
        self.current_version = current_version
        self.proposed_version = proposed_version


class StaleVersionError(VersionError):
    """Proposed version is not newer than the current baseline."""

    def __init__(self, current_version: int, proposed_version: int):
        super().__init__(
            f"newer version should be used. Current version is {current_version}",
            current_version,
            proposed_version,
        )


class NonIncrementalVersionError(VersionError):
    """Proposed version skips ahead of the next expected version."""

    def __init__(self, current_version: int, proposed_version: int):
        super().__init__(
            f"the latest version is {current_version}. "
            "Please use incremental number for versioning of file info.",
            current_version,
            proposed_version,
        )


class DiffCancelledError(DiffFinderError):
    """The cancel signal fired before the diff completed."""

    default_message = "context canceled"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class DeadlineExceededError(DiffCancelledError):
    """The cancel signal's deadline elapsed before the diff completed."""

    default_message = "context deadline exceeded"


class PayloadError(DiffFinderError):
    """A diff request payload is malformed or incomplete."""
