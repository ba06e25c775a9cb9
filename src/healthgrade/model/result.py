"""Health-check result value object and its builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from healthgrade.constants.severity import (
    ERROR_DETAIL,
    HEALTHY_DETAIL,
    MESSAGE_DETAIL,
    TIMESTAMP_DETAIL,
)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single health check."""

    healthy: bool
    message: str | None = None
    error: BaseException | None = None
    details: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def detail(self, key: str) -> Any:
        """Return the detail stored under *key*, or ``None``."""
        return self.details.get(key)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the entry shape a health endpoint reports for one check.

        Details are flattened into the top level, so the ``severity`` detail
        sits beside ``healthy`` as the aggregator expects.
        """
        payload: dict[str, Any] = {
            HEALTHY_DETAIL: self.healthy,
            TIMESTAMP_DETAIL: self.timestamp.isoformat(),
        }
        if self.message is not None:
            payload[MESSAGE_DETAIL] = self.message
        if self.error is not None:
            payload[ERROR_DETAIL] = f"{type(self.error).__name__}: {self.error}"
        for key, value in self.details.items():
            payload.setdefault(key, value)
        return payload


class ResultBuilder:
    """Incrementally assembles a ``CheckResult``."""

    def __init__(self) -> None:
        self._healthy = False
        self._message: str | None = None
        self._error: BaseException | None = None
        self._details: dict[str, Any] = {}

    def healthy(self) -> ResultBuilder:
        self._healthy = True
        return self

    def unhealthy(self, error: BaseException | None = None) -> ResultBuilder:
        """Mark the result unhealthy, optionally recording *error* and its message."""
        self._healthy = False
        if error is not None:
            self._error = error
            self._message = str(error)
        return self

    def with_message(self, message: str, *args: object) -> ResultBuilder:
        """Set the message, applying ``%``-style *args* when given."""
        self._message = message % args if args else message
        return self

    def with_detail(self, key: str, value: Any) -> ResultBuilder:
        self._details[key] = value
        return self

    @property
    def details(self) -> dict[str, Any]:
        """Copy of the details recorded so far."""
        return dict(self._details)

    def build(self) -> CheckResult:
        return CheckResult(
            healthy=self._healthy,
            message=self._message,
            error=self._error,
            details=dict(self._details),
        )
