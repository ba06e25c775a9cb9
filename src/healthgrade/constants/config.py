"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "healthgrade.yaml"

DEFAULT_FAIL_ON: str = "CRITICAL"
DEFAULT_OUTPUT_FORMAT: str = "text"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"fail_on", "output_format", "ignored_checks"})

YAML_REPORT_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})
