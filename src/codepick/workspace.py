"""Workspace root discovery, path scoping, and source file reading."""

from __future__ import annotations

import logging
from pathlib import Path

from codepick.exit_codes import FileReadError, ReadFailure

log = logging.getLogger(__name__)

DEFAULT_MAX_FILE_BYTES = 20 * 1024 * 1024

# Bytes sampled when sniffing for binary content
_BINARY_SNIFF_BYTES = 4096


def find_project_root(start: str = ".") -> Path:
    """Find the project root by looking for .git directory."""
    current = Path(start).resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return Path(start).resolve()


def resolve_path(root: Path, file_path: str) -> Path:
    """Resolve *file_path* against *root*. Absolute paths are kept as-is."""
    return (Path(root) / file_path).resolve()


def is_within_workspace(root: Path, path: Path) -> bool:
    try:
        Path(path).resolve().relative_to(Path(root).resolve())
    except ValueError:
        return False
    return True


def make_relative(path: str | Path, root: str | Path | None) -> str:
    """Display form of *path*: relative to *root* when inside it, else unchanged."""
    if root is None:
        return str(path)
    try:
        rel = Path(path).resolve().relative_to(Path(root).resolve())
    except ValueError:
        return str(path)
    return rel.as_posix() or "."


def shorten_path(path: str, max_len: int = 35) -> str:
    """Collapse the middle of a long path: ``src/.../deep/file.py``."""
    if len(path) <= max_len:
        return path
    parts = path.replace("\\", "/").split("/")
    if len(parts) <= 2:
        return "..." + path[-(max_len - 3):]
    tail = parts[-1]
    head = parts[0]
    shortened = f"{head}/.../{tail}"
    for part in reversed(parts[1:-1]):
        candidate = f"{head}/.../{part}/{tail}"
        if len(candidate) > max_len:
            break
        shortened = candidate
        tail = f"{part}/{tail}"
    return shortened


def read_source_text(path: str | Path, max_bytes: int = DEFAULT_MAX_FILE_BYTES) -> str:
    """Read a text file, trying utf-8 then latin-1.

    Raises FileReadError with a ``reason`` naming what went wrong.
    """
    path = Path(path)
    if not path.exists():
        raise FileReadError(f"File not found: {path}", ReadFailure.FILE_NOT_FOUND)
    if path.is_dir():
        raise FileReadError(
            f"Path is a directory, not a file: {path}",
            ReadFailure.TARGET_IS_DIRECTORY,
        )
    try:
        size = path.stat().st_size
        if max_bytes and size > max_bytes:
            raise FileReadError(
                f"File size exceeds the {max_bytes} byte limit: {path}",
                ReadFailure.FILE_TOO_LARGE,
            )
        raw = path.read_bytes()
    except OSError as exc:
        raise FileReadError(
            f"Error reading file {path}: {exc}",
            ReadFailure.READ_CONTENT_FAILURE,
        ) from exc

    if b"\x00" in raw[:_BINARY_SNIFF_BYTES]:
        raise FileReadError(f"Cannot extract from binary file: {path}", ReadFailure.BINARY_FILE)

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        log.debug("%s is not valid utf-8, decoding as latin-1", path)
        return raw.decode("latin-1")

