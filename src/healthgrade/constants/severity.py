"""Constants for severity ranking and health-check entry fields."""

from __future__ import annotations

# Ranks are the ordering key for severities. Declaration order of the
# Severity members is never consulted.
SEVERITY_RANK: dict[str, int] = {
    "OK": 1,
    "INFO": 2,
    "WARN": 3,
    "CRITICAL": 4,
    "FATAL": 5,
}

SEVERITY_DETAIL: str = "severity"
HEALTHY_DETAIL: str = "healthy"
MESSAGE_DETAIL: str = "message"
ERROR_DETAIL: str = "error"
TIMESTAMP_DETAIL: str = "timestamp"

HEALTHY_TRUE_TEXT: str = "true"
