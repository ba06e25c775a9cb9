"""Evaluation entities produced by the aggregator."""

from __future__ import annotations

from dataclasses import dataclass

from healthgrade.model.severity import Severity


@dataclass(frozen=True)
class CheckStatus:
    """Parsed view of one usable entry in a health report."""

    name: str
    healthy: bool
    severity: Severity | None
    effective: Severity
    anomalous: bool = False


@dataclass(frozen=True)
class HealthEvaluation:
    """Overall severity of a health report with the per-check breakdown."""

    overall: Severity
    checks: tuple[CheckStatus, ...] = ()
    discarded: tuple[str, ...] = ()

    @property
    def anomalies(self) -> tuple[CheckStatus, ...]:
        """Checks that reported an invalid ``(healthy, severity)`` combination."""
        return tuple(check for check in self.checks if check.anomalous)
