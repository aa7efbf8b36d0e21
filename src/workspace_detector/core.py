"""Core detection entrypoint.

This module MUST NOT print or configure logging so it can be used by
both the `workspace-detector` CLI and library callers embedding detection.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from .manager import Manager
from .report import build_error_report, build_report
from .root import RootNotFoundError, find_root, find_root_with_manager


logger = logging.getLogger(__name__)


def detect_workspace(
    cwd: str | os.PathLike[str],
    manager: Manager | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Detect the workspace governing ``cwd`` and return a report.

    Params:
        cwd: directory to start searching from
        manager: when given, skip the override and auto-detection and look
            only for this manager's marker
        environ: mapping consulted for PREFERRED_WORKSPACE_MANAGER; defaults
            to ``os.environ``

    Returns: dict report (see validators/report.schema.json). A missing root
    yields a report with ``found`` set to False.

    Raises ParseManagerError for a malformed override, and OSError for
    filesystem failures other than a missing marker.
    """
    try:
        if manager is not None:
            root = find_root_with_manager(cwd, manager)
        else:
            root = find_root(cwd, environ=environ)
    except RootNotFoundError as exc:
        logger.info("%s", exc)
        return build_error_report(exc)

    logger.info("Detected %s workspace at %s", root.manager.identifier, root.path)
    return build_report(root)
