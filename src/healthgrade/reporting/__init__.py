"""Reporting helpers for health evaluations."""

from .payload import build_payload, check_to_dict
from .stdout import StdoutReporter

__all__ = ["StdoutReporter", "build_payload", "check_to_dict"]
