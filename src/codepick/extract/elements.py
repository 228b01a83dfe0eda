"""Extracted element and per-file result types."""

from __future__ import annotations

from dataclasses import dataclass, field

SINGLE_LINE_COMMENT = "single-line-comment"
MULTI_LINE_COMMENT = "multi-line-comment"
FUNCTION = "function"
CLASS = "class"
IMPORT = "import"
VARIABLE = "variable"
TYPE = "type"


@dataclass(frozen=True)
class ExtractedElement:
    type: str
    name: str
    line: int
    content: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "name": self.name,
            "line": self.line,
            "content": self.content,
        }


@dataclass(frozen=True)
class FileResult:
    """Elements found in one file, in source order."""

    file_path: str
    elements: tuple[ExtractedElement, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "filePath": self.file_path,
            "elements": [e.to_dict() for e in self.elements],
        }
