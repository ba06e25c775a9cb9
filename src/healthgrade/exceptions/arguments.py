"""Argument validation exceptions."""

from __future__ import annotations

from typing import TypeVar

from healthgrade.exceptions.base import HealthgradeError

T = TypeVar("T")


class InvalidArgumentError(HealthgradeError, ValueError):
    """Raised when a required argument is missing or an argument combination is invalid."""


def check_argument(condition: bool, message: str) -> None:
    """Raise ``InvalidArgumentError`` with *message* unless *condition* holds."""
    if not condition:
        raise InvalidArgumentError(message)


def check_argument_not_none(value: T | None, message: str) -> T:
    """Return *value*, raising ``InvalidArgumentError`` with *message* when it is ``None``."""
    if value is None:
        raise InvalidArgumentError(message)
    return value
