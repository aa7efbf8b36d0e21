"""Command line interface for workspace detection.

Usage:
  workspace-detector --root . [--manager yarn] [--summary]

Exit codes: 0 when a workspace root was found, 3 when none was found, 2 when
a manager name (flag or PREFERRED_WORKSPACE_MANAGER) is invalid and 1 for
configuration or report errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import settings
from .core import detect_workspace
from .manager import Manager, ParseManagerError
from .report import build_error_report
from .summary import render_summary
from .validators.report_schema import ReportValidationError, validate_report


EXIT_FOUND = 0
EXIT_ERROR = 1
EXIT_INVALID_MANAGER = 2
EXIT_NOT_FOUND = 3


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="workspace-detector",
        description="Detect the JavaScript workspace manager and root for a directory.",
    )
    parser.add_argument("--root", type=Path, default=Path("."), help="Directory to start from")
    parser.add_argument(
        "--manager",
        type=str,
        default=None,
        help="Only look for this manager's marker file (yarn, pnpm, rush, npm, lerna)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a Markdown summary instead of JSON",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        level = settings.log_level(args.log_level)
    except settings.ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        manager = Manager.parse(args.manager) if args.manager is not None else None
        report = detect_workspace(args.root, manager=manager)
        code = EXIT_FOUND if report["found"] else EXIT_NOT_FOUND
    except ParseManagerError as exc:
        report = build_error_report(exc)
        code = EXIT_INVALID_MANAGER

    try:
        validate_report(report)
    except ReportValidationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR

    _emit(report, args.summary)
    return code


def _emit(report: dict, summary: bool) -> None:
    if summary:
        sys.stdout.write(render_summary(report))
    else:
        print(json.dumps(report, indent=2))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
