"""Report input exceptions."""

from __future__ import annotations

from healthgrade.exceptions.base import HealthgradeError


class ReportLoadError(HealthgradeError, ValueError):
    """Raised when a health report file cannot be read or decoded."""
