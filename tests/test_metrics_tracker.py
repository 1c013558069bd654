"""
Tests for request duration metrics.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.metrics_tracker import MetricsTracker


class TestMetricsTracker:
    """Tests for histogram bookkeeping and export."""

    def test_observe_counts_buckets(self):
        tracker = MetricsTracker(buckets=[0.1, 1.0])
        tracker.observe("/diff", 0.05)
        tracker.observe("/diff", 0.5)
        tracker.observe("/diff", 2.0)

        stats = tracker.get_stats()["/diff"]

        assert stats["count"] == 3
        assert stats["buckets"] == {"0.1": 1, "1.0": 2, "+Inf": 3}
        assert abs(stats["sum"] - 2.55) < 1e-9

    def test_paths_are_tracked_separately(self):
        tracker = MetricsTracker()
        tracker.observe("/diff", 0.01)
        tracker.observe("/live", 0.01)

        assert set(tracker.get_stats()) == {"/diff", "/live"}

    def test_export_prometheus(self):
        tracker = MetricsTracker(buckets=[0.5])
        tracker.observe("/ready", 0.25)

        text = tracker.export_prometheus()

        assert "# TYPE http_request_duration_seconds histogram" in text
        assert 'http_request_duration_seconds_bucket{path="/ready",le="0.5"} 1' in text
        assert 'http_request_duration_seconds_bucket{path="/ready",le="+Inf"} 1' in text
        assert 'http_request_duration_seconds_count{path="/ready"} 1' in text
        assert text.endswith("\n")

    def test_reset(self):
        tracker = MetricsTracker()
        tracker.observe("/diff", 0.01)
        tracker.reset()

        assert tracker.get_stats() == {}
