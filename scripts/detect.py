#!/usr/bin/env python3
"""Local CLI entrypoint to run workspace detection from a checkout.

Usage:
  python scripts/detect.py --root . [--manager yarn] [--summary]

This calls the same detect_workspace used by the installed
``workspace-detector`` command.
"""

from __future__ import annotations

from workspace_detector.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
