"""Comment extraction: single-line comments and multi-line blocks."""

from __future__ import annotations

from typing import NamedTuple

from codepick.extract.elements import (
    MULTI_LINE_COMMENT,
    SINGLE_LINE_COMMENT,
    ExtractedElement,
)
from codepick.languages.patterns import COMMENT_SYNTAX, CommentSyntax


class _OpenBlock(NamedTuple):
    start_line: int
    parts: list[str]


def _comment_name(line_no: int) -> str:
    return f"Comment at line {line_no}"


def _block_element(start_line: int, text: str) -> ExtractedElement:
    return ExtractedElement(
        type=MULTI_LINE_COMMENT,
        name=_comment_name(start_line),
        line=start_line,
        content=text.strip(),
    )


def _scan_line_tail(rest: str, line_no: int, syntax: CommentSyntax,
                    comments: list[ExtractedElement]) -> _OpenBlock | None:
    """Scan text outside any block; whichever marker comes first wins.

    Returns the block left open at end of line, if any.
    """
    while rest:
        single = syntax.single_line.search(rest)
        start = syntax.block_start.search(rest)
        if single and (start is None or single.start() <= start.start()):
            comments.append(ExtractedElement(
                type=SINGLE_LINE_COMMENT,
                name=_comment_name(line_no),
                line=line_no,
                content=single.group(1).strip(),
            ))
            return None
        if start is None:
            return None

        body = start.group("body")
        # Closed on the same line: the closer must follow the opener
        end = syntax.block_end.search(body)
        if end is None:
            return _OpenBlock(line_no, [body])
        comments.append(_block_element(line_no, end.group("body")))
        rest = body[end.end():]
    return None


def extract_comments(text: str, language: str) -> list[ExtractedElement]:
    """Extract comments from *text* in source order.

    A multi-line block is reported once, at the line it opens on, with the
    text of every line up to and including the closing one. A block still
    open at end of input is dropped. Several comments may share a line,
    e.g. ``/* a */ // b``.
    """
    syntax = COMMENT_SYNTAX.get(language)
    if syntax is None:
        return []

    comments: list[ExtractedElement] = []
    block: _OpenBlock | None = None

    for line_no, line in enumerate(text.split("\n"), 1):
        if block is None:
            block = _scan_line_tail(line, line_no, syntax, comments)
            continue

        block.parts.append(line)
        end = syntax.block_end.search(line)
        if end:
            comments.append(_block_element(block.start_line, "\n".join(block.parts)))
            block = _scan_line_tail(line[end.end():], line_no, syntax, comments)

    return comments
