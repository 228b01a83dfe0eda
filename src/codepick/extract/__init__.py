"""Element extractors, one per extraction kind."""

from __future__ import annotations

import logging

from .comments import extract_comments
from .declarations import (
    extract_classes,
    extract_functions,
    extract_imports,
    extract_types,
    extract_variables,
)
from .elements import ExtractedElement, FileResult

log = logging.getLogger(__name__)

EXTRACTORS = {
    "comments": extract_comments,
    "functions": extract_functions,
    "classes": extract_classes,
    "imports": extract_imports,
    "variables": extract_variables,
    "types": extract_types,
}

KINDS = tuple(EXTRACTORS)


def extract(kind: str, text: str, language: str) -> list[ExtractedElement]:
    """Run the extractor for *kind*. Unknown kinds yield no elements."""
    extractor = EXTRACTORS.get(kind)
    if extractor is None:
        log.warning("Unknown extraction kind %r", kind)
        return []
    return extractor(text, language)


__all__ = [
    "EXTRACTORS",
    "KINDS",
    "ExtractedElement",
    "FileResult",
    "extract",
    "extract_classes",
    "extract_comments",
    "extract_functions",
    "extract_imports",
    "extract_types",
    "extract_variables",
]
