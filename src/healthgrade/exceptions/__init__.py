"""Shared exception hierarchy for Healthgrade."""

from __future__ import annotations

from .arguments import InvalidArgumentError
from .base import HealthgradeError
from .config import ConfigError
from .parsing import ReportLoadError

__all__ = [
    "ConfigError",
    "HealthgradeError",
    "InvalidArgumentError",
    "ReportLoadError",
]
