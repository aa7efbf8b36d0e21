"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string describing the detected workspace."""
    lines = []
    lines.append("# Workspace Detection Summary")
    lines.append("")

    root = report.get("root")
    if not report.get("found") or not root:
        error = report.get("error") or {}
        lines.append(f"No workspace detected ({error.get('kind', 'unknown')}).")
        message = error.get("message")
        if message:
            lines.append("")
            lines.append(f"> {message}")
        return "\n".join(lines) + "\n"

    lines.append("| Manager | Root | Marker |")
    lines.append("| --- | --- | --- |")
    lines.append(
        f"| {root.get('manager', '')} | {root.get('path', '')} | {root.get('markerFile', '')} |"
    )
    return "\n".join(lines) + "\n"
