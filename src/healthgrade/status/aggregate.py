"""Aggregate severity for a service instance or fleet.

The input is a mapping of check name to check entry, typically the JSON
body of a health-check endpoint::

    {
        "database": {"healthy": true},
        "deadlocks": {"healthy": false, "severity": "CRITICAL", "message": "..."}
    }

``health_status_from`` reduces it to the single worst effective severity.
It is a total function: malformed input degrades to a conservative value
and never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from typing import Any

from healthgrade.model.entities import CheckStatus, HealthEvaluation
from healthgrade.model.severity import (
    Severity,
    default_severity_for_value,
    highest_severity,
    is_invalid_combination,
    max_severity,
)
from healthgrade.status.parsing import parse_healthy, parse_severity
from healthgrade.types import CheckEntry

logger = logging.getLogger(__name__)


def health_status_from(report: object) -> Severity:
    """Return the overall severity of a health report.

    An absent, empty or non-mapping report is CRITICAL, as is a report
    where no entry is itself a mapping: with no usable signal the state is
    unknown. Otherwise the most severe effective severity wins.
    """
    entries, _ = _split_entries(report)
    return _overall({_entry_severity(entry) for _, entry in entries})


def evaluate_report(report: object) -> HealthEvaluation:
    """Like ``health_status_from``, but keep the per-check breakdown."""
    entries, discarded = _split_entries(report)
    checks: list[CheckStatus] = []
    for key, entry in entries:
        healthy = parse_healthy(entry)
        severity = parse_severity(entry)
        checks.append(
            CheckStatus(
                name=_check_name(key),
                healthy=healthy,
                severity=severity,
                effective=effective_severity(healthy, severity),
                anomalous=is_invalid_combination(healthy, severity),
            )
        )

    return HealthEvaluation(
        overall=_overall({check.effective for check in checks}),
        checks=tuple(checks),
        discarded=tuple(_check_name(key) for key in discarded),
    )


def effective_severity(healthy: bool, severity: Severity | None) -> Severity:
    """Severity one check contributes to the aggregate.

    An invalid combination is clamped up to at least WARN; a missing
    severity takes the default for the healthy flag; a healthy check keeps
    any severity above OK; an unhealthy check keeps its severity.
    """
    if is_invalid_combination(healthy, severity):
        logger.warning("Detected invalid (healthy, severity) combination: (%s, %s)", healthy, severity)
        return max_severity(Severity.WARN, severity)

    if severity is None:
        return default_severity_for_value(healthy)

    if healthy:
        return max_severity(Severity.OK, severity)

    return severity


def drop_checks(report: object, names: Iterable[str]) -> object:
    """Return *report* without the named checks; non-mapping input is returned unchanged."""
    if not isinstance(report, Mapping):
        return report
    excluded = set(names)
    return {name: entry for name, entry in report.items() if name not in excluded}


def _split_entries(report: object) -> tuple[list[tuple[Any, CheckEntry]], list[Any]]:
    """Split a report into mapping-shaped ``(key, entry)`` pairs and the keys of everything else."""
    if report is None:
        return [], []
    if not isinstance(report, Mapping):
        logger.warning("Health report is a %s, not a mapping; treating it as empty", type(report).__name__)
        return [], []

    entries: list[tuple[Any, CheckEntry]] = []
    discarded: list[Any] = []
    for key, entry in report.items():
        if isinstance(entry, Mapping):
            entries.append((key, entry))
        else:
            logger.debug("Ignoring health report entry of type %s", type(entry).__name__)
            discarded.append(key)
    return entries, discarded


def _entry_severity(entry: CheckEntry) -> Severity:
    return effective_severity(parse_healthy(entry), parse_severity(entry))


def _overall(severities: Collection[Severity]) -> Severity:
    if not severities:
        return Severity.CRITICAL
    if len(severities) == 1:
        return next(iter(severities))
    return highest_severity(severities)


def _check_name(key: Any) -> str:
    """Render a report key for display; keys whose ``repr`` fails render as their type name."""
    if isinstance(key, str):
        return key
    try:
        return repr(key)
    except Exception:
        return f"<{type(key).__name__}>"
