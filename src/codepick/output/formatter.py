"""Text rendering of extraction results: list, tree, json and summary."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from codepick.extract.elements import ExtractedElement, FileResult
from codepick.workspace import make_relative

FORMATS = ("list", "tree", "json", "summary")
DEFAULT_FORMAT = "list"


def to_json(data) -> str:
    return json.dumps(data, indent=2, default=str)


def json_envelope(command: str, summary: dict | None = None, **payload) -> dict:
    """Standard JSON wrapper for CLI output: command name, summary, payload."""
    envelope = {"command": command, "summary": summary or {}}
    envelope.update(payload)
    return envelope


def element_line(element: ExtractedElement) -> str:
    return f"{element.type}: {element.name} (line {element.line})"


def format_list(results: Sequence[FileResult], base_dir: str | Path | None = None) -> str:
    out: list[str] = []
    for result in results:
        out.append(f"--- {make_relative(result.file_path, base_dir)} ---")
        if not result.elements:
            out.append("No elements found")
        for element in result.elements:
            out.append(element_line(element))
            if element.content:
                out.append(f"  {element.content}")
        out.append("")
    return "\n".join(out).strip()


def format_tree(results: Sequence[FileResult], base_dir: str | Path | None = None) -> str:
    out: list[str] = []
    for result in results:
        out.append(make_relative(result.file_path, base_dir))
        if not result.elements:
            out.append("  (No elements found)")
        # Group by type in first-seen order
        by_type: dict[str, list[ExtractedElement]] = {}
        for element in result.elements:
            by_type.setdefault(element.type, []).append(element)
        for element_type, elements in by_type.items():
            out.append(f"  {element_type} ({len(elements)})")
            for element in elements:
                out.append(f"    {element.name} (line {element.line})")
        out.append("")
    return "\n".join(out).strip()


def format_summary(results: Sequence[FileResult], base_dir: str | Path | None = None) -> str:
    total = sum(len(r.elements) for r in results)
    out = [f"Total elements extracted: {total}", ""]
    for result in results:
        out.append(f"{make_relative(result.file_path, base_dir)}: {len(result.elements)} elements")
    return "\n".join(out).strip()


def format_json(results: Sequence[FileResult], base_dir: str | Path | None = None) -> str:
    """Results verbatim, file paths as given (absolute)."""
    return to_json([r.to_dict() for r in results])


_FORMATTERS = {
    "list": format_list,
    "tree": format_tree,
    "json": format_json,
    "summary": format_summary,
}


def format_results(results: Sequence[FileResult], mode: str | None = DEFAULT_FORMAT,
                   base_dir: str | Path | None = None) -> str:
    """Render *results* in *mode*; unknown modes render as a list."""
    formatter = _FORMATTERS.get(mode or DEFAULT_FORMAT, format_list)
    return formatter(results, base_dir)


def format_table(headers: list[str], rows: list[list[str]],
                 budget: int = 0) -> str:
    if not rows:
        return "(none)"
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(str(cell)))
    lines = []
    header_line = "  ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    lines.append(header_line)
    lines.append("  ".join("-" * w for w in widths))
    display_rows = rows
    if budget and len(rows) > budget:
        display_rows = rows[:budget]
    for row in display_rows:
        line = "  ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row))
        lines.append(line.rstrip())
    if budget and len(rows) > budget:
        lines.append(f"(+{len(rows) - budget} more)")
    return "\n".join(lines)
