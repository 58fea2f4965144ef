"""
Utility modules for the tiny TypeScript formatter.
"""

from tinyfmt.utils.logging import (
    get_logger,
    setup_logging,
    LogContext,
    log_phase_transition,
    log_error_with_context,
)
from tinyfmt.utils.metrics import (
    FormatRunMetrics,
    track_phase,
    emit_metric,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "LogContext",
    "log_phase_transition",
    "log_error_with_context",
    "FormatRunMetrics",
    "track_phase",
    "emit_metric",
]
