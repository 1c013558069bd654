"""
Change detection between the baseline file and a submitted candidate.

Picks a comparison path based on the sizes of both texts and runs it as a
background job that races the caller's cancel signal:

1. Identical texts -> empty delta
2. Either text shorter than the wide window -> brute-force scan
3. Equal lengths -> range narrowing, then exact comparison
4. Candidate longer -> range narrowing over the common prefix, then ADDED
   records for the candidate's tail
5. Candidate shorter -> range narrowing over the common prefix, then
   REMOVED records for the baseline's tail

Every call gets its own daemon thread, so an abandoned job never delays a
later one. If the signal fires first the caller gets DiffCancelledError
and the result is thrown away; the abandoned thread runs to completion.
"""

import asyncio
import re
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Optional, Union

from config import settings
from diffing.cancellation import CancelSignal
from diffing.comparator import IndexComparator
from diffing.models import ChangeRecord, FileInformative
from diffing.range_locator import WIDE_WINDOW, RangeLocator

# Lone surrogates cannot be UTF-8 encoded; they become U+FFFD
_SURROGATES = re.compile("[\ud800-\udfff]")


class FileDiffFinder:
    """
    Computes byte-level deltas against a fixed baseline.

    Also exposes the baseline's version, content and version validation so
    the API layer needs a single collaborator.
    """

    def __init__(
        self,
        file_info: FileInformative,
        locator: Optional[RangeLocator] = None,
        comparator: Optional[IndexComparator] = None,
        poll_interval: Optional[float] = None
    ):
        """
        Initialize diff finder.

        Args:
            file_info: Baseline provider
            locator: RangeLocator instance. Creates default if not provided.
            comparator: IndexComparator instance. Creates default if not provided.
            poll_interval: Seconds between cancel signal checks while waiting
        """
        self.file_info = file_info
        self.locator = locator or RangeLocator()
        self.comparator = comparator or IndexComparator()
        self.poll_interval = (
            poll_interval if poll_interval is not None else settings.DIFF_POLL_INTERVAL_SECONDS
        )

    def version(self) -> int:
        return self.file_info.version()

    def content(self) -> bytes:
        return self.file_info.content()

    def validate_version(self, version: int) -> None:
        self.file_info.validate_version(version)

    def diff(
        self,
        cancel_signal: CancelSignal,
        candidate: Union[str, bytes]
    ) -> list[ChangeRecord]:
        """
        Compute the delta, blocking until it completes or the signal fires.

        Args:
            cancel_signal: Deadline and/or explicit cancellation
            candidate: Updated text; str is UTF-8 encoded

        Returns:
            Ordered change records

        Raises:
            DiffCancelledError: The signal fired first (DeadlineExceededError
                when its deadline elapsed)
        """
        future = self._start(_as_bytes(candidate))

        while True:
            if future.done():
                return future.result()
            if cancel_signal.fired():
                raise cancel_signal.error()
            try:
                return future.result(timeout=cancel_signal.next_wait(self.poll_interval))
            except FuturesTimeoutError:
                continue

    async def diff_async(
        self,
        cancel_signal: CancelSignal,
        candidate: Union[str, bytes]
    ) -> list[ChangeRecord]:
        """Same contract as diff(), awaited without blocking the event loop."""
        future = asyncio.wrap_future(self._start(_as_bytes(candidate)))

        while True:
            if future.done():
                return future.result()
            if cancel_signal.fired():
                future.cancel()
                raise cancel_signal.error()
            await asyncio.wait({future}, timeout=cancel_signal.next_wait(self.poll_interval))

    def _start(self, candidate: bytes) -> Future:
        """Run compute_delta on a fresh daemon thread and return its future."""
        future: Future = Future()

        def run():
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = self.compute_delta(candidate)
            except Exception as e:
                future.set_exception(e)
            else:
                future.set_result(result)

        threading.Thread(target=run, name="diff", daemon=True).start()
        return future

    def compute_delta(self, candidate: bytes) -> list[ChangeRecord]:
        """
        Run the comparison path selected by the sizes of both texts.

        Updated and removed indexes are baseline offsets; added indexes
        are candidate offsets.
        """
        baseline = self.file_info.content()

        if candidate == baseline:
            return []

        if len(candidate) < WIDE_WINDOW or len(baseline) < WIDE_WINDOW:
            return self.comparator.compare_brute_force(baseline, candidate)

        if len(candidate) == len(baseline):
            return self._compare_equal_length(baseline, candidate)

        if len(candidate) > len(baseline):
            records = self._compare_equal_length(baseline, candidate[:len(baseline)])
            records.extend(self.comparator.added_tail(candidate, len(baseline)))
            return records

        records = self._compare_equal_length(baseline[:len(candidate)], candidate)
        records.extend(self.comparator.removed_tail(baseline, len(candidate)))
        return records

    def _compare_equal_length(self, original: bytes, candidate: bytes) -> list[ChangeRecord]:
        ranges = self.locator.find_minimal_ranges(original, candidate)
        return self.comparator.compare_in_ranges(ranges, original, candidate)


def _as_bytes(text: Union[str, bytes]) -> bytes:
    if isinstance(text, str):
        return _SURROGATES.sub("\ufffd", text).encode("utf-8")
    return bytes(text)
