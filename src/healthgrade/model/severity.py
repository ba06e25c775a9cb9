"""Severity levels for health checks and the ordering between them.

A ``Severity`` describes both the status of a single service instance and
the aggregate status of a service made of many instances. Levels are
ordered by an explicit rank (see ``SEVERITY_RANK``), so reordering the
members below cannot change comparison results.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

from healthgrade.constants.severity import SEVERITY_RANK
from healthgrade.exceptions.arguments import check_argument, check_argument_not_none


class Severity(Enum):
    """Health status / severity of a check, an instance or a service.

    Values:
        OK: Everything is healthy. Only valid with ``healthy=True``.
        INFO: Diagnostic information; valid whether healthy or not.
        WARN: Something is, or may be, wrong and needs attention.
        CRITICAL: An actual problem that must be corrected quickly.
            Only valid with ``healthy=False``.
        FATAL: Reserved for a service with no running instances.
            Only valid with ``healthy=False``.
    """

    OK = "OK"
    INFO = "INFO"
    WARN = "WARN"
    CRITICAL = "CRITICAL"
    FATAL = "FATAL"

    @property
    def rank(self) -> int:
        """Ordering key; higher is more severe."""
        return SEVERITY_RANK[self.value]

    @classmethod
    def parse(cls, name: str) -> Severity | None:
        """Return the member named exactly *name*, or ``None`` if there is none."""
        try:
            return cls[name]
        except KeyError:
            return None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value


def severity_rank(severity: Severity) -> int:
    """Sort key ordering severities from lowest to highest."""
    return SEVERITY_RANK[severity.value]


def comparing_severity() -> Callable[[Severity], int]:
    """Return a key function that orders severities from lowest to highest.

    Use it with ``max``, ``min`` and ``sorted`` when reducing domain objects
    that carry a severity::

        worst = max(errors, key=lambda e: comparing_severity()(e.severity))
    """
    return severity_rank


def compare(first: Severity, second: Severity) -> int:
    """Return a negative, zero or positive int as *first* is less, equal or more severe."""
    return severity_rank(first) - severity_rank(second)


def max_severity(first: Severity | None, second: Severity | None) -> Severity:
    """Return the more severe of two severities.

    Raises:
        InvalidArgumentError: if either argument is ``None``.
    """
    first = check_argument_not_none(first, "first severity cannot be None")
    second = check_argument_not_none(second, "second severity cannot be None")
    return first if compare(first, second) > 0 else second


def highest_severity(severities: Iterable[Severity] | None) -> Severity:
    """Return the most severe value in a non-empty collection.

    Raises:
        InvalidArgumentError: if *severities* is ``None`` or empty.
    """
    values = list(severities) if severities is not None else []
    check_argument(bool(values), "severities cannot be empty or None")
    return max(values, key=severity_rank)


def is_invalid_combination(healthy: bool, severity: Severity | None) -> bool:
    """Whether ``(healthy, severity)`` is contradictory.

    A healthy check cannot be CRITICAL or FATAL, and an unhealthy check
    cannot be OK. A ``None`` severity is never invalid.
    """
    if severity is None:
        return False
    healthy_with_invalid_severity = healthy and severity in (Severity.CRITICAL, Severity.FATAL)
    unhealthy_with_invalid_severity = not healthy and severity is Severity.OK
    return healthy_with_invalid_severity or unhealthy_with_invalid_severity


def is_valid_combination(healthy: bool, severity: Severity | None) -> bool:
    """Inverse of ``is_invalid_combination``; ``None`` severity is always valid."""
    return not is_invalid_combination(healthy, severity)


def default_severity_for_value(healthy: bool) -> Severity:
    """Severity used when a check supplies none: OK if healthy, otherwise WARN."""
    return Severity.OK if healthy else Severity.WARN


def severity_from_bool(value: bool | None) -> Severity:
    """Return OK for ``True``; WARN for ``False`` or ``None``."""
    return Severity.OK if value is True else Severity.WARN
