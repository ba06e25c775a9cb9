"""Constants for stdout and JSON reporting."""

from __future__ import annotations

SCHEMA_VERSION: str = "1"

ANSI_RESET: str = "\033[0m"
ANSI_GREEN: str = "\033[32m"
ANSI_CYAN: str = "\033[36m"
ANSI_YELLOW: str = "\033[33m"
ANSI_RED: str = "\033[31m"
ANSI_BOLD_RED: str = "\033[1;31m"

SEVERITY_COLORS: dict[str, str] = {
    "OK": ANSI_GREEN,
    "INFO": ANSI_CYAN,
    "WARN": ANSI_YELLOW,
    "CRITICAL": ANSI_RED,
    "FATAL": ANSI_BOLD_RED,
}

EVALUATION_TITLE: str = "Health evaluation"
