"""Health report aggregation."""

from .aggregate import drop_checks, effective_severity, evaluate_report, health_status_from
from .parsing import parse_healthy, parse_severity

__all__ = [
    "drop_checks",
    "effective_severity",
    "evaluate_report",
    "health_status_from",
    "parse_healthy",
    "parse_severity",
]
