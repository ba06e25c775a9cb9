"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from healthgrade.config import HealthgradeConfig, load_config, parse_severity_name
from healthgrade.exceptions import ConfigError
from healthgrade.model import Severity


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == HealthgradeConfig()
    assert loaded.fail_on is Severity.CRITICAL
    assert loaded.output_format == "text"
    assert loaded.ignored_checks == ()


def test_load_config_reads_default_file(tmp_path: Path) -> None:
    (tmp_path / "healthgrade.yaml").write_text(
        "fail_on: WARN\noutput_format: json\nignored_checks:\n  - deadlocks\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    assert loaded.fail_on is Severity.WARN
    assert loaded.output_format == "json"
    assert loaded.ignored_checks == ("deadlocks",)


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(tmp_path, config_path) == HealthgradeConfig()


def test_load_config_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("fail_on: SEVERE\n", "fail_on"),
        ("fail_on: warn\n", "fail_on"),
        ("fail_on: 3\n", "fail_on"),
        ("output_format: xml\n", "output_format"),
        ("ignored_checks: database\n", "ignored_checks"),
        ("ignored_checks: [1, 2]\n", "ignored_checks"),
        ("threshold: WARN\n", "threshold"),
        ("- fail_on\n", "must be a YAML mapping"),
        ("fail_on: [\n", "Invalid YAML"),
    ],
    ids=[
        "unknown_severity",
        "lowercase_severity",
        "int_severity",
        "invalid_output_format",
        "scalar_ignored_checks",
        "non_string_ignored_checks",
        "unknown_key",
        "non_mapping",
        "invalid_yaml",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "healthgrade.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path, config_path)


def test_parse_severity_name() -> None:
    assert parse_severity_name("INFO", "fail_on") is Severity.INFO
    with pytest.raises(ConfigError, match="min_level"):
        parse_severity_name(None, "min_level")
