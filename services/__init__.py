"""Services package for File Diff Finder."""

from services.metrics_tracker import MetricsTracker, metrics_tracker

__all__ = [
    "MetricsTracker",
    "metrics_tracker",
]
