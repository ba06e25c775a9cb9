"""Health-check result builders."""

from .builders import (
    SEVERITY_DETAIL,
    add_severity,
    new_error_result,
    new_error_result_builder,
    new_healthy_result,
    new_healthy_result_builder,
    new_result_builder,
    new_unhealthy_result,
    new_unhealthy_result_builder,
    result_with_severity,
)

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
