"""JSON Schema checks for detection reports.

Every report printed by the CLI is checked against ``report.schema.json`` so
that consumers parsing the JSON can rely on its shape.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

DEFAULT_SCHEMA = Path(__file__).resolve().with_name("report.schema.json")


class ReportValidationError(ValueError):
    """Raised when a report does not match the report schema.

    ``problems`` holds ``(pointer, message)`` pairs, one per violation, where
    the pointer is ``<root>`` for the top-level object.
    """

    def __init__(self, problems: list[tuple[str, str]]) -> None:
        super().__init__(problems)
        self.problems = problems

    def __str__(self) -> str:
        lines = [f"- {pointer}: {message}" for pointer, message in self.problems]
        return "Report does not match schema:\n" + "\n".join(lines)


@lru_cache(maxsize=None)
def _validator(schema_path: Path) -> Draft202012Validator:
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_report(report: Any, schema_path: Path = DEFAULT_SCHEMA) -> None:
    """Raise ReportValidationError listing every schema violation in ``report``."""
    errors = sorted(_validator(schema_path).iter_errors(report), key=lambda e: list(e.path))
    if errors:
        raise ReportValidationError(
            [("/".join(str(p) for p in error.path) or "<root>", error.message) for error in errors]
        )
