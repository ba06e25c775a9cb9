"""Config loading and normalization for Healthgrade."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from healthgrade.config.model import HealthgradeConfig
from healthgrade.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    DEFAULT_FAIL_ON,
    DEFAULT_OUTPUT_FORMAT,
    VALID_OUTPUT_FORMATS,
)
from healthgrade.constants.severity import SEVERITY_RANK
from healthgrade.exceptions import ConfigError
from healthgrade.model.severity import Severity


def load_config(root: Path, config_path: Path | None = None) -> HealthgradeConfig:
    """Load and validate config from ``healthgrade.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return HealthgradeConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    output_format = raw.get("output_format", DEFAULT_OUTPUT_FORMAT)
    if not isinstance(output_format, str) or output_format not in VALID_OUTPUT_FORMATS:
        raise ConfigError(f"output_format must be one of {sorted(VALID_OUTPUT_FORMATS)}, got {output_format!r}")

    return HealthgradeConfig(
        fail_on=parse_severity_name(raw.get("fail_on", DEFAULT_FAIL_ON), "fail_on"),
        output_format=output_format,  # type: ignore[arg-type]
        ignored_checks=tuple(_ensure_string_list(raw.get("ignored_checks", []), "ignored_checks")),
    )


def parse_severity_name(value: Any, key_name: str) -> Severity:
    """Resolve a configured severity name, raising ConfigError for anything else."""
    severity = Severity.parse(value) if isinstance(value, str) else None
    if severity is None:
        raise ConfigError(f"{key_name} must be one of {list(SEVERITY_RANK)}, got {value!r}")
    return severity


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
