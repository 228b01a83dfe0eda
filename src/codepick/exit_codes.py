"""Standardized exit codes, error kinds, and exception types.

Every failure an extraction request can hit is one of the ``ErrorKind``
values below. The exception classes carry that kind, a short display string,
and an exit code, so the same error can be rendered as a structured result
(orchestrator, MCP tool) or as a Click error (CLI).
"""

from __future__ import annotations

import click

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_PATH = 3
EXIT_READ = 4

DESCRIPTIONS = {
    EXIT_SUCCESS: "success",
    EXIT_ERROR: "unexpected error",
    EXIT_USAGE: "invalid arguments or no files specified",
    EXIT_PATH: "file path is outside the workspace root",
    EXIT_READ: "a requested file could not be read",
}


class ErrorKind:
    NO_FILES_SPECIFIED = "no-files-specified"
    PATH_NOT_IN_WORKSPACE = "path-not-in-workspace"
    FILE_READ_ERROR = "file-read-error"
    INVALID_PARAMS = "invalid-params"
    ABORTED = "aborted"
    UNKNOWN = "unknown"


# Reasons a file read can fail; carried alongside FILE_READ_ERROR.
class ReadFailure:
    FILE_NOT_FOUND = "file-not-found"
    TARGET_IS_DIRECTORY = "target-is-directory"
    FILE_TOO_LARGE = "file-too-large"
    BINARY_FILE = "binary-file"
    READ_CONTENT_FAILURE = "read-content-failure"


_KIND_EXIT_CODES = {
    ErrorKind.NO_FILES_SPECIFIED: EXIT_USAGE,
    ErrorKind.INVALID_PARAMS: EXIT_USAGE,
    ErrorKind.PATH_NOT_IN_WORKSPACE: EXIT_PATH,
    ErrorKind.FILE_READ_ERROR: EXIT_READ,
}


def exit_code_for(kind: str) -> int:
    return _KIND_EXIT_CODES.get(kind, EXIT_ERROR)


class CodepickError(click.ClickException):
    """Base error. Subclasses fix ``kind``, ``display`` and ``exit_code``."""

    kind = ErrorKind.UNKNOWN
    display = "Error during extraction"
    exit_code = EXIT_ERROR

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

    def to_error(self) -> dict:
        return {"message": self.format_message(), "type": self.kind}


class NoFilesSpecifiedError(CodepickError):
    kind = ErrorKind.NO_FILES_SPECIFIED
    display = "No files specified"
    exit_code = EXIT_USAGE

    def __init__(self, message: str = "No files specified for extraction"):
        super().__init__(message)


class InvalidParamsError(CodepickError):
    kind = ErrorKind.INVALID_PARAMS
    display = "Invalid parameters"
    exit_code = EXIT_USAGE


class PathNotInWorkspaceError(CodepickError):
    kind = ErrorKind.PATH_NOT_IN_WORKSPACE
    display = "File not in workspace"
    exit_code = EXIT_PATH

    def __init__(self, file_path: str):
        super().__init__(f'File path "{file_path}" is not within workspace')
        self.file_path = file_path


class FileReadError(CodepickError):
    """A file could not be read. ``reason`` keeps the reader's own failure kind."""

    kind = ErrorKind.FILE_READ_ERROR
    display = "Error reading file"
    exit_code = EXIT_READ

    def __init__(self, message: str, reason: str = ReadFailure.READ_CONTENT_FAILURE):
        super().__init__(message)
        self.reason = reason

    def to_error(self) -> dict:
        error = super().to_error()
        error["reason"] = self.reason
        return error


class ExtractionAbortedError(CodepickError):
    kind = ErrorKind.ABORTED
    display = "Extraction aborted"

    def __init__(self, message: str = "Extraction aborted before all files were processed"):
        super().__init__(message)
