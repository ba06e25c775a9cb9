"""Configuration-related exceptions."""

from __future__ import annotations

from healthgrade.exceptions.base import HealthgradeError


class ConfigError(HealthgradeError, ValueError):
    """Raised when healthgrade configuration is invalid."""
