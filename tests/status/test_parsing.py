"""Tests for defensive parsing of check entries."""

from __future__ import annotations

import logging

import pytest

from healthgrade.model import Severity
from healthgrade.status import parse_healthy, parse_severity


class _TruthyText:
    def __str__(self) -> str:
        return "True"


class _BrokenText:
    def __str__(self) -> str:
        raise ValueError("boom")


@pytest.mark.parametrize(
    ("entry", "expected"),
    [
        ({"healthy": True}, True),
        ({"healthy": False}, False),
        ({"healthy": "True"}, True),
        ({"healthy": "tRuE"}, True),
        ({"healthy": " true"}, False),
        ({}, False),
        ({"healthy": _TruthyText()}, True),
        ({"healthy": 0}, False),
    ],
)
def test_parse_healthy(entry: dict[str, object], expected: bool) -> None:
    assert parse_healthy(entry) is expected


def test_parse_healthy_logs_conversion_failure(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="healthgrade")

    assert parse_healthy({"healthy": _BrokenText()}) is False
    assert "_BrokenText" in caplog.text


def test_parse_severity_absent_is_unspecified() -> None:
    assert parse_severity({"healthy": True}) is None


def test_parse_severity_known_name() -> None:
    assert parse_severity({"severity": "FATAL"}) is Severity.FATAL


def test_parse_severity_non_string_is_unspecified(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="healthgrade")

    assert parse_severity({"severity": ["WARN"]}) is None
    assert "type list" in caplog.text


def test_parse_severity_unknown_name_is_warn(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="healthgrade")

    assert parse_severity({"severity": "SEVERE"}) is Severity.WARN
    assert any(record.levelno == logging.ERROR for record in caplog.records)
    assert "'SEVERE'" in caplog.text
