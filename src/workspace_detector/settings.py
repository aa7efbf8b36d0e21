"""Environment configuration for workspace detection.

Only two signals are read from the environment:

- ``PREFERRED_WORKSPACE_MANAGER`` names a manager explicitly and skips
  auto-detection.
- ``WORKSPACE_DETECTOR_LOG_LEVEL`` sets the logging level used by the CLI.

Both follow the same priority: explicit argument, then environment variable,
then default.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping


PREFERRED_MANAGER_ENV_VAR = "PREFERRED_WORKSPACE_MANAGER"
LOG_LEVEL_ENV_VAR = "WORKSPACE_DETECTOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigError(RuntimeError):
    """Raised when an ambient setting holds an unusable value."""


def preferred_manager_name(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the raw override value, or None when the variable is unset.

    An empty string still counts as set; it is the caller's job to reject it.
    """
    env = os.environ if environ is None else environ
    return env.get(PREFERRED_MANAGER_ENV_VAR)


def log_level(
    level: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Resolve the numeric logging level.

    Priority:
    1. Explicit ``level`` argument
    2. WORKSPACE_DETECTOR_LOG_LEVEL environment variable
    3. WARNING
    """
    env = os.environ if environ is None else environ
    name = level or env.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    name = name.strip().upper()
    if name not in _LOG_LEVELS:
        known = ", ".join(sorted(_LOG_LEVELS))
        raise ConfigError(f"Unknown log level '{name}'. Expected one of: {known}")
    return getattr(logging, name)
