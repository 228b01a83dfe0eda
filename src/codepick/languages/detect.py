"""File-extension based language detection."""

from __future__ import annotations

import os

# Map file extensions to language tags
EXTENSION_MAP = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".py": "python",
    ".java": "java",
    ".go": "go",
}

LANGUAGES = ("javascript", "typescript", "python", "java", "go")

# Used when neither an explicit language nor the extension decides
FALLBACK_LANGUAGE = "javascript"


def detect_language(file_path: str) -> str | None:
    """Detect the language tag from a file path (case-insensitive extension)."""
    _, ext = os.path.splitext(str(file_path))
    return EXTENSION_MAP.get(ext.lower())


def resolve_language(file_path: str, language: str | None = None,
                     fallback: str = FALLBACK_LANGUAGE) -> str:
    """Explicit language, else the detected one, else *fallback*."""
    return language or detect_language(file_path) or fallback


def get_supported_extensions(language: str | None = None) -> list[str]:
    return sorted(ext for ext, lang in EXTENSION_MAP.items()
                  if language is None or lang == language)
