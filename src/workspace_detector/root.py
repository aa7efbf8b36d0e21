"""Workspace root resolution.

The resolver walks from a starting directory towards the filesystem root and
stops at the first directory containing a marker file. The closest directory
always wins; ``SEARCH_ORDER`` only decides between markers found in the same
directory.

The starting path is made absolute and lexically normalised but symlinks are
not resolved, so a symlinked checkout is searched through its own parents
rather than those of its target.
"""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from .manager import SEARCH_ORDER, Manager


logger = logging.getLogger(__name__)


class RootNotFoundError(FileNotFoundError):
    """Raised when no ancestor directory contains any of the marker files."""

    def __init__(self, start: Path, files: Iterable[str]) -> None:
        self.start = start
        self.files = tuple(files)
        super().__init__(
            errno.ENOENT,
            f"No workspace marker ({', '.join(self.files)}) found in {start} or any parent directory",
            str(start),
        )

    def __str__(self) -> str:
        return self.strerror

    def __reduce__(self):
        return type(self), (self.start, self.files)


@dataclass(frozen=True)
class Root:
    """A resolved workspace: its manager and the directory holding the marker file."""

    manager: Manager
    path: Path

    @property
    def marker_path(self) -> Path:
        return self.path / self.manager.marker_file

    def to_dict(self) -> dict[str, str]:
        return {
            "manager": self.manager.identifier,
            "path": str(self.path),
            "markerFile": self.manager.marker_file,
        }


def find_root(
    cwd: str | os.PathLike[str],
    environ: Mapping[str, str] | None = None,
) -> Root:
    """Find the workspace root governing ``cwd``.

    When PREFERRED_WORKSPACE_MANAGER is set only that manager's marker is
    searched for. Otherwise every marker is tested in SEARCH_ORDER at each
    level before moving to the parent directory.

    Raises:
        ParseManagerError: If the override names an unknown manager. There is
            no fallback to auto-detection in that case.
        RootNotFoundError: If no ancestor contains a matching marker.
        OSError: Any other filesystem failure while testing for markers.
    """
    manager = Manager.preferred(environ)
    if manager is not None:
        logger.debug("Using preferred workspace manager %s", manager.identifier)
        return find_root_with_manager(cwd, manager)

    marker = search_up(cwd, [candidate.marker_file for candidate in SEARCH_ORDER])
    return Root(manager=Manager.from_path(marker), path=marker.parent)


def find_root_with_manager(cwd: str | os.PathLike[str], manager: Manager) -> Root:
    """Find the closest ancestor of ``cwd`` holding ``manager``'s marker file."""
    marker = search_up(cwd, [manager.marker_file])
    return Root(manager=manager, path=marker.parent)


def search_up(cwd: str | os.PathLike[str], files: Iterable[str]) -> Path:
    """Return the path of the first marker found walking up from ``cwd``.

    At each directory the candidate ``files`` are tested in order and the
    first one present wins. Only when none is present does the walk move on
    to the parent directory.

    Raises:
        RootNotFoundError: If the filesystem root is passed without a match.
    """
    start = Path(os.path.abspath(cwd))
    candidates = list(files)
    current = start

    while True:
        logger.debug("Looking for %s in %s", ", ".join(candidates), current)
        for name in candidates:
            candidate = current / name
            if _exists(candidate):
                logger.debug("Found workspace marker %s", candidate)
                return candidate

        parent = current.parent
        if parent == current:
            raise RootNotFoundError(start, candidates)
        current = parent


def _exists(path: Path) -> bool:
    # Only a missing entry counts as absent; other OSErrors propagate.
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True
