"""workspace-detector core package.

Detects which JavaScript workspace manager (yarn, pnpm, rush, npm, lerna)
governs a directory and where the workspace root lives. Callable from CI
wrappers as well as the local CLI in ``scripts/detect.py``.
"""

from .manager import (
    SEARCH_ORDER,
    InvalidFileError,
    Manager,
    ManagerError,
    ParseManagerError,
)
from .root import Root, RootNotFoundError, find_root, find_root_with_manager, search_up

__all__ = [
    "InvalidFileError",
    "Manager",
    "ManagerError",
    "ParseManagerError",
    "Root",
    "RootNotFoundError",
    "SEARCH_ORDER",
    "find_root",
    "find_root_with_manager",
    "search_up",
]
