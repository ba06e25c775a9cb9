"""Command handlers for the Healthgrade CLI."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from healthgrade.config import HealthgradeConfig, load_config
from healthgrade.exceptions import ConfigError, ReportLoadError
from healthgrade.io import load_report, load_report_text
from healthgrade.model import HealthEvaluation, Severity
from healthgrade.reporting import StdoutReporter, build_payload
from healthgrade.status import drop_checks, evaluate_report

STDIN_MARKER: str = "-"


def evaluate_fail_threshold(evaluation: HealthEvaluation, *, fail_on: Severity) -> int:
    """Return 1 if the overall severity reaches *fail_on*, 0 otherwise."""
    return 1 if evaluation.overall >= fail_on else 0


def resolve_config(args: argparse.Namespace) -> HealthgradeConfig:
    """Load config and apply CLI overrides on top of it."""
    config = load_config(Path.cwd(), args.config)
    if getattr(args, "fail_on", None) is not None:
        config = replace(config, fail_on=Severity[args.fail_on])
    if getattr(args, "output_format", None) is not None:
        config = replace(config, output_format=args.output_format)
    ignored = tuple(getattr(args, "ignore_check", None) or ())
    if ignored:
        config = replace(config, ignored_checks=(*config.ignored_checks, *ignored))
    return config


def read_report(source: str, input_format: str | None) -> object:
    """Read the report from a path, or from stdin when *source* is ``-``."""
    if source == STDIN_MARKER:
        try:
            text = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ReportLoadError(f"Cannot read health report from stdin: {exc}") from exc
        return load_report_text(text, input_format or "json")
    path = Path(source)
    if input_format is not None:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReportLoadError(f"Cannot read health report at {path}: {exc}") from exc
        return load_report_text(text, input_format)
    return load_report(path)


def handle_evaluate(args: argparse.Namespace) -> int:
    """Evaluate a health report and print the result."""
    try:
        config = resolve_config(args)
        report = read_report(args.report, args.input_format)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except ReportLoadError as exc:
        print(f"Report error: {exc}", file=sys.stderr)
        return 2

    evaluation = evaluate_report(drop_checks(report, config.ignored_checks))

    if config.output_format == "json":
        print(json.dumps(build_payload(evaluation), indent=2, sort_keys=True))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StdoutReporter(evaluation, color=use_color, fail_on=config.fail_on).render())

    return evaluate_fail_threshold(evaluation, fail_on=config.fail_on)


def handle_validate_config(args: argparse.Namespace) -> int:
    """Validate config and report the result."""
    try:
        load_config(Path.cwd(), args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
