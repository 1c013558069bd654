"""
Metrics Tracker Service

Tracks HTTP request durations per route path and exports them in the
Prometheus text exposition format for the /metrics endpoint.
Uses thread-safe in-memory histograms.
"""

import threading
from dataclasses import dataclass, field
from typing import Dict, List

DEFAULT_BUCKETS = [0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]

REQUEST_DURATION_METRIC = "http_request_duration_seconds"

# Label for requests that matched no route
UNMATCHED_ROUTE = "unmatched"


@dataclass
class DurationHistogram:
    """Cumulative bucket counts plus sum and count of observed durations."""
    buckets: List[float] = field(default_factory=lambda: list(DEFAULT_BUCKETS))
    bucket_counts: List[int] = field(default_factory=list)
    total: float = 0.0
    count: int = 0

    def __post_init__(self):
        if not self.bucket_counts:
            self.bucket_counts = [0] * len(self.buckets)

    def observe(self, value: float) -> None:
        for i, bound in enumerate(self.buckets):
            if value <= bound:
                self.bucket_counts[i] += 1
        self.total += value
        self.count += 1

    @property
    def mean(self) -> float:
        return self.total / self.count if self.count > 0 else 0.0

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "sum": self.total,
            "mean": self.mean,
            "buckets": {
                **{str(bound): n for bound, n in zip(self.buckets, self.bucket_counts)},
                "+Inf": self.count,
            },
        }


class MetricsTracker:
    """
    Thread-safe collector of request durations keyed by route path.
    """

    def __init__(self, buckets: List[float] = None):
        self._buckets = list(buckets or DEFAULT_BUCKETS)
        self._histograms: Dict[str, DurationHistogram] = {}
        self._lock = threading.Lock()

    def observe(self, path: str, seconds: float) -> None:
        """
        Record one request duration.

        Args:
            path: Route path template, e.g. '/diff'
            seconds: Elapsed wall time of the request
        """
        with self._lock:
            histogram = self._histograms.get(path)
            if histogram is None:
                histogram = DurationHistogram(buckets=list(self._buckets))
                self._histograms[path] = histogram
            histogram.observe(seconds)

    def get_stats(self) -> Dict[str, dict]:
        with self._lock:
            return {path: h.to_dict() for path, h in self._histograms.items()}

    def reset(self) -> None:
        """Drop all observations."""
        with self._lock:
            self._histograms.clear()

    def export_prometheus(self) -> str:
        """
        Export request durations in Prometheus text format.

        Returns:
            Exposition text ending with a newline
        """
        lines = [
            f"# HELP {REQUEST_DURATION_METRIC} Duration of HTTP requests.",
            f"# TYPE {REQUEST_DURATION_METRIC} histogram",
        ]
        with self._lock:
            for path in sorted(self._histograms):
                histogram = self._histograms[path]
                label = f'path="{path}"'
                for bound, n in zip(histogram.buckets, histogram.bucket_counts):
                    lines.append(f'{REQUEST_DURATION_METRIC}_bucket{{{label},le="{bound}"}} {n}')
                lines.append(f'{REQUEST_DURATION_METRIC}_bucket{{{label},le="+Inf"}} {histogram.count}')
                lines.append(f"{REQUEST_DURATION_METRIC}_sum{{{label}}} {histogram.total}")
                lines.append(f"{REQUEST_DURATION_METRIC}_count{{{label}}} {histogram.count}")
        return "\n".join(lines) + "\n"


# Global instance
metrics_tracker = MetricsTracker()
