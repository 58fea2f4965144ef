"""
Metrics collection and emission for formatting runs.

This module provides metrics tracking for:
- Run duration
- Files formatted, changed and failed
- Per-phase latency (parse, render)
"""

import time
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from tinyfmt.utils.logging import get_logger, log_phase_transition

logger = get_logger(__name__)


class FormatRunMetrics:
    """
    Collects metrics during one formatting run.

    Tracks:
    - Run start/end time
    - Formatted, changed and failed file counts
    - Phase timings
    """

    def __init__(self):
        self.start_time: Optional[datetime] = None
        self.end_time: Optional[datetime] = None
        self.duration_ms: Optional[int] = None

        self.files_formatted: int = 0
        self.files_changed: int = 0
        self.failures: Dict[str, str] = {}

        self.phase_latencies: Dict[str, List[float]] = {}

        self.status: str = "running"

    def start(self) -> None:
        """Mark run start."""
        self.start_time = datetime.now(timezone.utc)
        self.status = "running"
        logger.info("Formatting run started")

    def complete(self, status: Optional[str] = None) -> None:
        """
        Mark run completion.

        Args:
            status: Final status; derived from recorded failures when None
        """
        self.end_time = datetime.now(timezone.utc)
        if status is None:
            status = "failed" if self.failures else "completed"
        self.status = status

        if self.start_time:
            duration = (self.end_time - self.start_time).total_seconds()
            self.duration_ms = int(duration * 1000)

        logger.info(
            "Formatting run completed",
            extra={
                "status": self.status,
                "duration_ms": self.duration_ms,
                "files_formatted": self.files_formatted,
                "files_changed": self.files_changed,
                "files_failed": len(self.failures),
            }
        )

    def record_file(self, file_name: str, changed: bool) -> None:
        """
        Record a successfully formatted file.

        Args:
            file_name: File that was formatted
            changed: Whether formatting changed the file content
        """
        self.files_formatted += 1
        if changed:
            self.files_changed += 1

    def record_failure(self, file_name: str, error: Exception) -> None:
        """
        Record a file that could not be formatted.

        Args:
            file_name: File that failed
            error: Error raised while reading, parsing or writing it
        """
        self.failures[file_name] = str(error)

    def record_phase(self, phase: str, duration_ms: float) -> None:
        """
        Record the latency of one phase.

        Args:
            phase: Phase name (e.g., 'parse', 'render')
            duration_ms: Phase duration in milliseconds
        """
        self.phase_latencies.setdefault(phase, []).append(duration_ms)

    def get_metrics_summary(self) -> Dict[str, Any]:
        """
        Get summary of collected metrics.

        Returns:
            Dictionary of metrics
        """
        summary = {
            "status": self.status,
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "duration_ms": self.duration_ms,
            "files_formatted": self.files_formatted,
            "files_changed": self.files_changed,
            "files_failed": len(self.failures),
        }

        if self.phase_latencies:
            latency_stats = {}
            for phase, latencies in self.phase_latencies.items():
                if latencies:
                    latency_stats[phase] = {
                        "count": len(latencies),
                        "min_ms": round(min(latencies), 2),
                        "max_ms": round(max(latencies), 2),
                        "avg_ms": round(sum(latencies) / len(latencies), 2),
                    }
            summary["phase_latencies"] = latency_stats

        if self.failures:
            summary["failures"] = dict(self.failures)

        return summary


@contextmanager
def track_phase(
    metrics: Optional[FormatRunMetrics],
    phase: str,
    file_name: str,
    logger_adapter
) -> Iterator[None]:
    """
    Context manager to time one formatting phase of a file.

    Usage:
        with track_phase(metrics, "parse", path, logger):
            tree = manager.parse(text, path)

    Args:
        metrics: Run metrics (optional)
        phase: Phase name
        file_name: File being processed
        logger_adapter: Logger for phase transitions

    Yields:
        None
    """
    log_phase_transition(logger_adapter, file_name, phase, "started")
    start_time = time.perf_counter()
    status = "failed"

    try:
        yield
        status = "completed"
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000

        if metrics:
            metrics.record_phase(phase, duration_ms)

        log_phase_transition(logger_adapter, file_name, phase, status)


def emit_metric(metric_name: str, value: float, **tags: Any) -> None:
    """
    Emit a metric as a log record.

    Args:
        metric_name: Metric name
        value: Metric value
        **tags: Metric tags/labels
    """
    logger.info(
        f"Metric: {metric_name}",
        extra={
            "metric_name": metric_name,
            "metric_value": value,
            "metric_tags": tags,
        }
    )
