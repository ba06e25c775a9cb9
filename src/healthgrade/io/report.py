"""Load health-check reports from JSON or YAML documents."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from healthgrade.constants.config import YAML_REPORT_SUFFIXES
from healthgrade.exceptions import ReportLoadError


def load_report(path: Path) -> object:
    """Read and decode a health report file.

    ``.yaml``/``.yml`` files are read with PyYAML, anything else as JSON. The
    decoded value is returned as is; it may be any shape.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReportLoadError(f"Cannot read health report at {path}: {exc}") from exc

    try:
        return load_report_text(text, report_format_for(path))
    except ReportLoadError as exc:
        raise ReportLoadError(f"{path}: {exc}") from exc


def load_report_text(text: str, fmt: str = "json") -> object:
    """Decode an in-memory health report in the given format (``json`` or ``yaml``)."""
    if fmt == "yaml":
        try:
            return yaml.safe_load(text)
        except (yaml.YAMLError, RecursionError) as exc:
            raise ReportLoadError(f"Invalid YAML health report: {exc}") from exc
    if fmt == "json":
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise ReportLoadError(f"Invalid JSON health report: {exc}") from exc
    raise ReportLoadError(f"Unsupported report format: {fmt!r}")


def report_format_for(path: Path) -> str:
    """Pick the decoder for a report file from its suffix; JSON unless it looks like YAML."""
    return "yaml" if path.suffix.lower() in YAML_REPORT_SUFFIXES else "json"
