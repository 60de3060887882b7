"""Exceptions and message constants.

Parsing, printing and configuration layers raise these exceptions. The file
driver in :mod:`gig.formatter` converts them into
:class:`~gig.core.results.ErrorResult` objects so a batch never stops on a
single bad file.
"""
from __future__ import annotations

from pathlib import Path

# File processing
MSG_FAILED_TO_READ_FILE = "failed to read file"
MSG_FAILED_TO_PARSE_FILE = "failed to parse file"
MSG_FAILED_TO_FORMAT_FILE = "failed to format file"
MSG_FAILED_TO_WRITE_FILE = "failed to write file"

# Directory processing
MSG_FAILED_TO_CHECK_PATH = "failed to check path"
MSG_FAILED_TO_FIND_GO_FILES = "failed to find Go files in directory"
MSG_FILES_FAILED_TO_PROCESS = "{count} files failed to process"

# Configuration
MSG_INVALID_CONFIG = "invalid configuration"

# Status messages
WARN_DIRECTORY_WITHOUT_IN_PLACE = (
    "Processing directory without --in-place flag. No files will be modified."
)
INFO_USE_IN_PLACE = "Use --in-place flag to modify files or specify a single file for stdout output."
INFO_NO_GO_FILES = "No Go files found in directory: {path}"
INFO_FOUND_GO_FILES = "Found {count} Go files in directory: {path}"
INFO_CURRENT_PROJECT = "Current project: {project}"
INFO_PROCESSED = "Processed: {path}"
INFO_PROCESSED_COUNT = "Processed {count} files successfully"
INFO_ERROR_COUNT = "{count} files had errors"


class GigError(Exception):
    """Base class for all errors raised by gig.

    Parameters
    ----------
    cause : BaseException | str | None
        The underlying error.
    path : Path | str | None
        The file involved, if any.
    message : str | None
        What failed. Defaults to the class message.
    """

    default_message = "gig error"

    def __init__(
        self,
        cause: BaseException | str | None = None,
        path: Path | str | None = None,
        message: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(str(self))

    def with_path(self, path: Path | str) -> GigError:
        """Return a copy of this error that names ``path``."""
        return type(self)(self.cause, path=path, message=self.message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.path is not None:
            parts.append(str(self.path))
        if self.cause:
            parts.append(str(self.cause))
        return ": ".join(parts)


class SourceReadError(GigError):
    """The source file could not be read."""

    default_message = MSG_FAILED_TO_READ_FILE


class SourceParseError(GigError):
    """The source file is not valid Go."""

    default_message = MSG_FAILED_TO_PARSE_FILE


class SourcePrintError(GigError):
    """The rewritten source could not be rendered as valid Go."""

    default_message = MSG_FAILED_TO_FORMAT_FILE


class SourceWriteError(GigError):
    """The rewritten source could not be written back."""

    default_message = MSG_FAILED_TO_WRITE_FILE


class ConfigError(GigError):
    """A configuration file is missing, malformed or has invalid values."""

    default_message = MSG_INVALID_CONFIG
