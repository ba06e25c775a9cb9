"""Shared pytest fixtures for health reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture()
def healthy_report() -> dict[str, Any]:
    """Return a report where every check passes."""
    return {
        "deadlocks": {"healthy": True},
        "database": {"healthy": True},
        "rottenTomato": {"healthy": True, "message": "No errors in last 15 minutes"},
    }


@pytest.fixture()
def critical_report() -> dict[str, Any]:
    """Return a report with one CRITICAL check among healthy ones."""
    return {
        "deadlocks": {"healthy": True},
        "database": {"healthy": True},
        "extremelyImportant": {"healthy": False, "severity": "CRITICAL"},
        "junk": "this is NOT a map and will be ignored",
    }


@pytest.fixture()
def write_report(tmp_path: Path):
    """Write a report to a JSON file under ``tmp_path`` and return its path."""

    def _write(report: object, name: str = "health.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(report), encoding="utf-8")
        return path

    return _write
