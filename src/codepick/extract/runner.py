"""Extraction requests: validate, resolve files, extract, format.

``run_extraction`` never raises. Every failure comes back as an
``ExtractResult`` whose ``error`` holds ``{"message", "type"}``.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from codepick.config import Settings, load_settings
from codepick.exit_codes import (
    CodepickError,
    ErrorKind,
    ExtractionAbortedError,
    InvalidParamsError,
    NoFilesSpecifiedError,
    PathNotInWorkspaceError,
)
from codepick.extract import EXTRACTORS, KINDS
from codepick.extract.elements import FileResult
from codepick.languages import LANGUAGES, detect_language, resolve_language
from codepick.output.formatter import FORMATS, format_results
from codepick.workspace import (
    is_within_workspace,
    make_relative,
    read_source_text,
    resolve_path,
    shorten_path,
)

log = logging.getLogger(__name__)

Reader = Callable[[Path], str]


@dataclass
class ExtractRequest:
    kind: str
    files: list[str] = field(default_factory=list)
    language: str | None = None
    format: str | None = None
    # Accepted for compatibility; extraction does not use them yet.
    include_docstrings: bool = False
    include_signatures: bool = False

    @classmethod
    def from_params(cls, params: dict) -> ExtractRequest:
        """Build a request from tool-style parameters (``type``, ``file``/``files``...)."""
        files = params.get("files") or ([params["file"]] if params.get("file") else [])
        return cls(
            kind=params.get("type", ""),
            files=list(files),
            language=params.get("language") or None,
            format=params.get("format") or None,
            include_docstrings=bool(params.get("includeDocstrings")),
            include_signatures=bool(params.get("includeSignatures")),
        )


@dataclass
class ExtractResult:
    llm_content: str
    return_display: str
    results: list[FileResult] = field(default_factory=list)
    error: dict | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def total_elements(self) -> int:
        return sum(len(r.elements) for r in self.results)

    def to_dict(self) -> dict:
        data = {
            "llmContent": self.llm_content,
            "returnDisplay": self.return_display,
        }
        if self.error is not None:
            data["error"] = self.error
        return data


def validate_params(params: dict) -> str | None:
    """Check raw tool parameters. Returns an error message or None."""
    if not params.get("type"):
        return "params must have required property 'type'"
    if params["type"] not in KINDS:
        return "params/type must be equal to one of the allowed values"
    if params.get("format") is not None and params["format"] not in FORMATS:
        return "params/format must be equal to one of the allowed values"
    if params.get("language") is not None and params["language"] not in LANGUAGES:
        return "params/language must be equal to one of the allowed values"
    if not params.get("file") and not params.get("files"):
        return "Either 'file' or 'files' parameter must be specified"
    return None


def describe_request(request: ExtractRequest, root: Path) -> str:
    files = request.files
    if len(files) > 1:
        target = f"{len(files)} files"
    elif files:
        target = shorten_path(make_relative(resolve_path(root, files[0]), root))
    else:
        target = "unknown file"
    return f"Extracting {request.kind} from {target}"


def _error_result(exc: CodepickError) -> ExtractResult:
    return ExtractResult(
        llm_content=exc.format_message(),
        return_display=exc.display,
        error=exc.to_error(),
    )


def _resolve_files(request: ExtractRequest, root: Path) -> list[Path]:
    if not request.files:
        raise NoFilesSpecifiedError()
    if request.kind not in EXTRACTORS:
        raise InvalidParamsError(f"Unknown extraction type: {request.kind!r}")

    resolved = []
    for file_path in request.files:
        absolute = resolve_path(root, file_path)
        if not is_within_workspace(root, absolute):
            raise PathNotInWorkspaceError(file_path)
        resolved.append(absolute)
    return resolved


def _extract_files(request: ExtractRequest, files: list[Path], reader: Reader,
                   settings: Settings,
                   should_abort: Callable[[], bool] | None) -> list[FileResult]:
    extractor = EXTRACTORS[request.kind]
    results = []
    for path in files:
        if should_abort is not None and should_abort():
            raise ExtractionAbortedError()

        text = reader(path)
        if request.language is None and detect_language(str(path)) is None:
            log.debug("No language for %s, using %s patterns", path, settings.default_language)
        language = resolve_language(str(path), request.language, settings.default_language)

        elements = extractor(text, language)
        log.debug("%s: %d %s (%s)", path, len(elements), request.kind, language)
        results.append(FileResult(file_path=str(path), elements=tuple(elements)))
    return results


def run_extraction(request: ExtractRequest, root: Path,
                   reader: Reader | None = None,
                   settings: Settings | None = None,
                   should_abort: Callable[[], bool] | None = None) -> ExtractResult:
    """Extract ``request.kind`` from every requested file, in order.

    Files must resolve inside *root*; that is checked for all of them before
    anything is read. A read failure aborts the whole request.
    """
    root = Path(root).resolve()
    if settings is None:
        settings = load_settings(root)
    if reader is None:
        reader = functools.partial(read_source_text, max_bytes=settings.max_file_bytes)

    try:
        files = _resolve_files(request, root)
        results = _extract_files(request, files, reader, settings, should_abort)
        output = format_results(results, request.format or settings.default_format, root)
    except CodepickError as exc:
        if exc.kind == ErrorKind.FILE_READ_ERROR:
            log.warning("%s", exc.format_message())
        return _error_result(exc)
    except Exception as exc:
        log.debug("Extraction failed", exc_info=True)
        message = f"Error during extraction: {exc}"
        return ExtractResult(
            llm_content=message,
            return_display="Error during extraction",
            error={"message": message, "type": ErrorKind.UNKNOWN},
        )

    return ExtractResult(
        llm_content=output,
        return_display=f"Extracted {request.kind} from {len(files)} file(s)",
        results=results,
    )
