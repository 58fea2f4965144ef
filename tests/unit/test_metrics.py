"""
Unit tests for metrics collection utilities.
"""

import pytest
from datetime import datetime

from tinyfmt.utils.logging import get_logger
from tinyfmt.utils.metrics import FormatRunMetrics, emit_metric, track_phase


def test_metrics_initialization():
    """Test run metrics initialization."""
    metrics = FormatRunMetrics()

    assert metrics.status == "running"
    assert metrics.files_formatted == 0
    assert metrics.files_changed == 0
    assert metrics.failures == {}


def test_metrics_start():
    """Test starting metrics collection."""
    metrics = FormatRunMetrics()

    metrics.start()

    assert isinstance(metrics.start_time, datetime)
    assert metrics.status == "running"


def test_metrics_complete_derives_status():
    """Test that completion status follows recorded failures."""
    ok = FormatRunMetrics()
    ok.start()
    ok.complete()

    assert ok.status == "completed"
    assert ok.duration_ms is not None
    assert ok.duration_ms >= 0

    bad = FormatRunMetrics()
    bad.start()
    bad.record_failure("bad.ts", ValueError("boom"))
    bad.complete()

    assert bad.status == "failed"


def test_metrics_complete_with_explicit_status():
    """Test completing with an explicit status."""
    metrics = FormatRunMetrics()

    metrics.start()
    metrics.complete(status="cancelled")

    assert metrics.status == "cancelled"


def test_record_file():
    """Test counting formatted and changed files."""
    metrics = FormatRunMetrics()

    metrics.record_file("a.ts", changed=True)
    metrics.record_file("b.ts", changed=False)

    assert metrics.files_formatted == 2
    assert metrics.files_changed == 1


def test_get_summary():
    """Test getting metrics summary."""
    metrics = FormatRunMetrics()

    metrics.start()
    metrics.record_file("a.ts", changed=True)
    metrics.record_failure("b.ts", OSError("missing"))
    metrics.record_phase("parse", 2.0)
    metrics.record_phase("parse", 4.0)
    metrics.complete()

    summary = metrics.get_metrics_summary()

    assert summary["status"] == "failed"
    assert summary["files_formatted"] == 1
    assert summary["files_changed"] == 1
    assert summary["files_failed"] == 1
    assert summary["failures"] == {"b.ts": "missing"}
    assert summary["phase_latencies"]["parse"] == {
        "count": 2,
        "min_ms": 2.0,
        "max_ms": 4.0,
        "avg_ms": 3.0,
    }
    assert summary["start_time"] is not None
    assert summary["end_time"] is not None


def test_track_phase_records_latency():
    """Test that track_phase times a successful phase."""
    metrics = FormatRunMetrics()
    logger = get_logger("test.track_phase")

    with track_phase(metrics, "render", "a.ts", logger):
        pass

    assert len(metrics.phase_latencies["render"]) == 1
    assert metrics.phase_latencies["render"][0] >= 0


def test_track_phase_records_latency_on_error():
    """Test that track_phase still records timing when the phase fails."""
    metrics = FormatRunMetrics()
    logger = get_logger("test.track_phase")

    with pytest.raises(ValueError):
        with track_phase(metrics, "parse", "a.ts", logger):
            raise ValueError("bad input")

    assert len(metrics.phase_latencies["parse"]) == 1


def test_track_phase_without_metrics():
    """Test that track_phase works without a metrics collector."""
    logger = get_logger("test.track_phase")

    with track_phase(None, "parse", "a.ts", logger):
        pass


def test_emit_metric():
    """Test emitting a metric."""
    # Should not raise
    emit_metric("files_failed", 0, status="completed")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
