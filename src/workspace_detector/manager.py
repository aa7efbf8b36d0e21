"""Workspace manager registry.

Each supported manager is identified by a lowercase name and exactly one
marker file. A directory holding the marker file is governed by that manager.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path, PurePath

from . import settings


class ManagerError(ValueError):
    """Base error for manager lookups that cannot be satisfied."""


class ParseManagerError(ManagerError):
    """Raised when a string does not name a known manager."""

    def __init__(self, value: str) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"Invalid manager: {self.value}"


class InvalidFileError(ManagerError):
    """Raised when a path's file name is not a known marker file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(path)
        # `path` is normalised by pathlib; `original` is the input as given.
        self.original = os.fspath(path)
        self.path = Path(path)

    def __str__(self) -> str:
        return f"Invalid manager file: {self.original}"


class Manager(Enum):
    """Supported JavaScript workspace managers."""

    YARN = "yarn"
    PNPM = "pnpm"
    RUSH = "rush"
    NPM = "npm"
    LERNA = "lerna"

    @property
    def identifier(self) -> str:
        return self.value

    @property
    def marker_file(self) -> str:
        """Name of the file whose presence marks a directory as this manager's root."""
        return _MARKER_FILES[self]

    @classmethod
    def parse(cls, text: str) -> Manager:
        """Return the manager named by ``text``, ignoring case.

        Raises:
            ParseManagerError: If ``text`` is not one of the known identifiers.
                The error keeps ``text`` exactly as given.
        """
        try:
            return _BY_IDENTIFIER[text.lower()]
        except KeyError:
            raise ParseManagerError(text) from None

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Manager:
        """Return the manager whose marker file is the final component of ``path``.

        Only the file name is compared; any directory prefix is ignored.

        Raises:
            InvalidFileError: If the file name is not a marker file.
        """
        name = PurePath(path).name
        try:
            return _BY_MARKER_FILE[name]
        except KeyError:
            raise InvalidFileError(path) from None

    @classmethod
    def preferred(cls, environ: Mapping[str, str] | None = None) -> Manager | None:
        """Return the manager named by PREFERRED_WORKSPACE_MANAGER, if set.

        An unset variable means no preference. A set but unknown value raises
        ParseManagerError instead of falling back to auto-detection.
        """
        value = settings.preferred_manager_name(environ)
        if value is None:
            return None
        return cls.parse(value)


_MARKER_FILES: dict[Manager, str] = {
    Manager.YARN: "yarn.lock",
    Manager.PNPM: "pnpm-workspace.yaml",
    Manager.RUSH: "rush.json",
    Manager.NPM: "package-lock.json",
    Manager.LERNA: "lerna.json",
}

_BY_IDENTIFIER: dict[str, Manager] = {manager.identifier: manager for manager in Manager}
_BY_MARKER_FILE: dict[str, Manager] = {marker: manager for manager, marker in _MARKER_FILES.items()}

# Do not reorder. Lerna repos usually also carry a package manager lockfile,
# so lerna.json has to win over yarn.lock and friends in the same directory.
SEARCH_ORDER: tuple[Manager, ...] = (
    Manager.LERNA,
    Manager.RUSH,
    Manager.YARN,
    Manager.PNPM,
    Manager.NPM,
)
