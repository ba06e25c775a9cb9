"""Config data model for Healthgrade."""

from __future__ import annotations

from dataclasses import dataclass

from healthgrade.constants.config import DEFAULT_FAIL_ON, DEFAULT_OUTPUT_FORMAT
from healthgrade.model.severity import Severity
from healthgrade.types import OutputFormat


@dataclass(frozen=True)
class HealthgradeConfig:
    """Resolved evaluation config."""

    fail_on: Severity = Severity[DEFAULT_FAIL_ON]
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT  # type: ignore[assignment]
    ignored_checks: tuple[str, ...] = ()

