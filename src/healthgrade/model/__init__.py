"""Core data models for Healthgrade."""

from .entities import CheckStatus, HealthEvaluation
from .result import CheckResult, ResultBuilder
from .severity import (
    Severity,
    compare,
    comparing_severity,
    default_severity_for_value,
    highest_severity,
    is_invalid_combination,
    is_valid_combination,
    max_severity,
    severity_from_bool,
    severity_rank,
)

__all__ = [
    "CheckResult",
    "CheckStatus",
    "HealthEvaluation",
    "ResultBuilder",
    "Severity",
    "compare",
    "comparing_severity",
    "default_severity_for_value",
    "highest_severity",
    "is_invalid_combination",
    "is_valid_combination",
    "max_severity",
    "severity_from_bool",
    "severity_rank",
]
