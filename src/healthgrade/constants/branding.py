"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "HEALTHGRADE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ HEALTHGRADE",
    "     // severity for health-check results",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} health status aggregator"))
