"""
Cancellation signal for diff computations.

A signal fires either when `cancel()` is called or when its deadline
passes, whichever comes first. Firing is one-shot.
"""

import threading
import time
from typing import Optional

from diffing.exceptions import DeadlineExceededError, DiffCancelledError


class CancelSignal:
    """Explicit cancellation plus an optional monotonic deadline."""

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Seconds from now until the deadline; None for no deadline
        """
        self._event = threading.Event()
        self._deadline: Optional[float] = None
        if timeout is not None:
            self._deadline = time.monotonic() + timeout

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancelSignal":
        return cls(timeout=seconds)

    @classmethod
    def background(cls) -> "CancelSignal":
        """A signal that only fires on explicit cancel()."""
        return cls()

    def cancel(self) -> None:
        self._event.set()

    def cancelled(self) -> bool:
        """True once cancel() has been called."""
        return self._event.is_set()

    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def fired(self) -> bool:
        return self.cancelled() or self.expired()

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, never negative; None without one."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def next_wait(self, poll_interval: float) -> float:
        """How long a waiter may block before checking the signal again."""
        remaining = self.remaining()
        if remaining is None:
            return poll_interval
        return min(poll_interval, remaining)

    def error(self) -> DiffCancelledError:
        """Exception describing why the signal fired."""
        if self.cancelled():
            return DiffCancelledError()
        return DeadlineExceededError()
