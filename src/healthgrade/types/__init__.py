"""Shared type aliases for Healthgrade."""

from .common import CheckEntry, HealthReport, JsonObject, JsonScalar, JsonValue, OutputFormat

__all__ = [
    "CheckEntry",
    "HealthReport",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "OutputFormat",
]
