"""Shared fixtures for workspace detection tests."""

import pytest

MARKER_FILES = (
    "yarn.lock",
    "pnpm-workspace.yaml",
    "rush.json",
    "package-lock.json",
    "lerna.json",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's environment from leaking into detection."""
    monkeypatch.delenv("PREFERRED_WORKSPACE_MANAGER", raising=False)
    monkeypatch.delenv("WORKSPACE_DETECTOR_LOG_LEVEL", raising=False)


@pytest.fixture
def tree(tmp_path):
    """A temporary directory whose ancestors hold no marker files.

    Detection walks all the way to the filesystem root, so a stray lockfile
    above the temp dir would change results; skip rather than fail then.
    """
    for parent in tmp_path.parents:
        for name in MARKER_FILES:
            if (parent / name).exists():
                pytest.skip(f"{parent / name} exists above the temporary directory")
    return tmp_path

