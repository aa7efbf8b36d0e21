"""Report building and schema-friendly output."""

from __future__ import annotations

from typing import Any

from .manager import InvalidFileError, ParseManagerError
from .root import Root, RootNotFoundError


REPORT_VERSION = "1"


def build_report(root: Root) -> dict[str, Any]:
    """Return a schema-compatible report for a resolved workspace root."""
    return {
        "version": REPORT_VERSION,
        "found": True,
        "root": root.to_dict(),
        "error": None,
    }


def build_error_report(exc: Exception) -> dict[str, Any]:
    """Return a schema-compatible report describing a failed resolution.

    Only the detection failures have a report kind; anything else is a
    programming error and is raised back to the caller.
    """
    if isinstance(exc, RootNotFoundError):
        kind = "not-found"
    elif isinstance(exc, ParseManagerError):
        kind = "invalid-manager"
    elif isinstance(exc, InvalidFileError):
        kind = "invalid-file"
    else:
        raise TypeError(f"Cannot report on {type(exc).__name__}") from exc

    return {
        "version": REPORT_VERSION,
        "found": False,
        "root": None,
        "error": {
            "kind": kind,
            "message": str(exc),
        },
    }
