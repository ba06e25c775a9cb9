"""CLI entrypoint for Healthgrade."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from healthgrade import __version__
from healthgrade.cli.handlers import handle_evaluate, handle_validate_config
from healthgrade.constants.branding import CLI_DESCRIPTION
from healthgrade.constants.config import VALID_OUTPUT_FORMATS
from healthgrade.constants.severity import SEVERITY_RANK


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="healthgrade",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("evaluate", help="Compute the overall severity of a health report")
    evaluate.add_argument("report", help="Health report file (JSON or YAML), or - to read stdin")
    evaluate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    evaluate.add_argument(
        "--fail-on",
        choices=list(SEVERITY_RANK),
        default=None,
        help="Exit with code 1 when the overall severity is at or above this level (default: CRITICAL)",
    )
    evaluate.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=None,
        help="Output format (default: text)",
    )
    evaluate.add_argument(
        "--input-format",
        choices=["json", "yaml"],
        default=None,
        help="Report format; inferred from the file suffix when omitted, JSON for stdin",
    )
    evaluate.add_argument(
        "-i",
        "--ignore-check",
        action="append",
        default=[],
        help="Drop a named check before aggregation (repeat flag for multiple values)",
    )
    evaluate.add_argument("--no-color", action="store_true", help="Disable colored output")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without evaluating")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)

    if args.command != "evaluate":
        parser.error(f"Unsupported command: {args.command}")

    return handle_evaluate(args)


if __name__ == "__main__":
    raise SystemExit(main())
