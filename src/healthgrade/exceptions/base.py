"""Base exception for Healthgrade."""

from __future__ import annotations


class HealthgradeError(Exception):
    """Root of all errors raised by Healthgrade."""
