"""Builders for health-check results annotated with a severity.

Every result carries its severity name under the ``severity`` detail, which
is what ``health_status_from`` reads back when the results are reported by
a health endpoint. Builders reject a missing severity or error and any
``(healthy, severity)`` combination that ``is_valid_combination`` refuses.
"""

from __future__ import annotations

from typing import Any

from healthgrade.constants.severity import SEVERITY_DETAIL
from healthgrade.exceptions.arguments import check_argument, check_argument_not_none
from healthgrade.model.result import CheckResult, ResultBuilder
from healthgrade.model.severity import Severity, default_severity_for_value, is_valid_combination

__all__ = [
    "SEVERITY_DETAIL",
    "add_severity",
    "new_error_result",
    "new_error_result_builder",
    "new_healthy_result",
    "new_healthy_result_builder",
    "new_result_builder",
    "new_unhealthy_result",
    "new_unhealthy_result_builder",
    "result_with_severity",
]


_DEFAULT_FOR_VALUE: Any = object()


def new_healthy_result(
    message: str | None = None,
    *args: object,
    severity: Severity | None = Severity.OK,
) -> CheckResult:
    """Build a healthy result; *message* may be a ``%``-style template filled from *args*."""
    builder = new_healthy_result_builder(severity)
    return _with_message(builder, message, args).build()


def new_unhealthy_result(
    message: str | None = None,
    *args: object,
    severity: Severity | None = Severity.WARN,
) -> CheckResult:
    """Build an unhealthy result, WARN unless told otherwise."""
    builder = new_unhealthy_result_builder(severity)
    return _with_message(builder, message, args).build()


def new_error_result(
    error: BaseException | None,
    message: str | None = None,
    *args: object,
    severity: Severity | None = Severity.CRITICAL,
) -> CheckResult:
    """Build an unhealthy result caused by *error*, CRITICAL unless told otherwise."""
    builder = new_error_result_builder(error, severity=severity)
    return _with_message(builder, message, args).build()


def new_result_builder(healthy: bool, severity: Severity | None = _DEFAULT_FOR_VALUE) -> ResultBuilder:
    """Return a builder for the given healthy flag.

    When *severity* is omitted the default for the flag is used (OK or WARN);
    an explicit ``None`` is rejected like in every other builder.
    """
    if severity is _DEFAULT_FOR_VALUE:
        severity = default_severity_for_value(healthy)
    severity = _check_severity(severity)
    _check_valid_combination(healthy, severity)
    builder = ResultBuilder().healthy() if healthy else ResultBuilder().unhealthy()
    return add_severity(severity, builder)


def new_healthy_result_builder(severity: Severity | None = Severity.OK) -> ResultBuilder:
    severity = _check_severity(severity)
    _check_valid_combination(True, severity)
    return add_severity(severity, ResultBuilder().healthy())


def new_unhealthy_result_builder(severity: Severity | None = Severity.WARN) -> ResultBuilder:
    severity = _check_severity(severity)
    _check_valid_combination(False, severity)
    return add_severity(severity, ResultBuilder().unhealthy())


def new_error_result_builder(
    error: BaseException | None,
    message: str | None = None,
    *,
    severity: Severity | None = Severity.CRITICAL,
) -> ResultBuilder:
    """Return an unhealthy builder recording *error*; *message* replaces the error text."""
    error = check_argument_not_none(error, "error cannot be None")
    severity = _check_severity(severity)
    _check_valid_combination(False, severity)

    builder = ResultBuilder().unhealthy(error)
    if message is not None:
        builder.with_message(message)
    return add_severity(severity, builder)


def add_severity(severity: Severity | None, builder: ResultBuilder | None) -> ResultBuilder:
    """Stamp *severity* on *builder* under the ``severity`` detail."""
    builder = check_argument_not_none(builder, "builder cannot be None")
    severity = _check_severity(severity)
    return builder.with_detail(SEVERITY_DETAIL, severity.value)


def result_with_severity(severity: Severity | None, builder: ResultBuilder | None) -> CheckResult:
    return add_severity(severity, builder).build()


def _with_message(builder: ResultBuilder, message: str | None, args: tuple[object, ...]) -> ResultBuilder:
    """Apply *message* to *builder*; template *args* without a message are rejected."""
    if message is None:
        check_argument(not args, "message template arguments given without a message")
        return builder
    return builder.with_message(message, *args)


def _check_severity(severity: Severity | None) -> Severity:
    return check_argument_not_none(severity, "severity cannot be None")


def _check_valid_combination(healthy: bool, severity: Severity | None) -> None:
    check_argument(
        is_valid_combination(healthy, severity),
        f"Invalid combination (healthy, severity): ({healthy}, {severity})",
    )
