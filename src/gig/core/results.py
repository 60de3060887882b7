"""Result types for file operations.

This module defines the result classes returned by the file driver:
- Result - Outcome of processing one file
- ErrorResult - Outcome of a file that could not be processed
- BatchResult - Aggregate outcome of processing several files
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


@dataclass
class Result:
    """Outcome of processing one file.

    File operations never raise exceptions. Instead, they return Result
    objects that indicate success or failure.

    Attributes:
        success: Whether the operation succeeded
        message: Human-readable description of what happened
        path: The file the result is about, if any
        files_changed: Files that were rewritten
        data: The rewritten source (bytes) for successful file operations
        diff: Unified diff of the change (empty string if nothing changed)
        diffs: Per-file diffs mapping path to diff string
    """

    success: bool
    message: str
    path: Path | None = None
    files_changed: list[Path] = field(default_factory=list)
    data: bytes | None = None
    diff: str | None = None
    diffs: dict[Path, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.success

    def is_error(self) -> bool:
        """Check if this result represents an error."""
        return not self.success

    @property
    def changed(self) -> bool:
        """True when the operation produced a different file content."""
        return bool(self.diff)

    def get_diff(self, path: Path | None = None) -> str | None:
        """Get diff for a specific file or the combined diff.

        Parameters
        ----------
        path : Path | None
            If provided, returns diff for that specific file.
            If None, returns the combined diff.

        Returns
        -------
        str | None
            The diff string, or None if no diff available.
        """
        if path is not None:
            return self.diffs.get(path)
        return self.diff


@dataclass
class ErrorResult(Result):
    """Result for failed operations - never raises automatically.

    Attributes:
        exception: The original exception, if any
        operation: Name of the attempted operation
    """

    success: bool = field(default=False, init=False)
    exception: Exception | None = None
    operation: str = ""

    def raise_if_error(self) -> None:
        """Explicitly re-raise the exception if the caller wants to."""
        if self.exception:
            raise self.exception
        raise RuntimeError(self.message)


@dataclass
class BatchResult:
    """Aggregate result for an operation applied to multiple files.

    A failed file never stops the batch, so a BatchResult can hold both
    successful and failed results.
    """

    results: list[Result] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if all operations succeeded."""
        return all(r.success for r in self.results)

    @property
    def succeeded(self) -> list[Result]:
        """Results that succeeded."""
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[Result]:
        """Results that failed."""
        return [r for r in self.results if not r.success]

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    @property
    def errors(self) -> dict[Path | None, str]:
        """Error messages of the failed results, keyed by file."""
        return {r.path: r.message for r in self.failed}

    @property
    def files_changed(self) -> list[Path]:
        """All files changed across all operations, in processing order."""
        files: list[Path] = []
        for r in self.results:
            for path in r.files_changed:
                if path not in files:
                    files.append(path)
        return files

    @property
    def diffs(self) -> dict[Path, str]:
        """Merged non-empty diffs from all results."""
        merged: dict[Path, str] = {}
        for r in self.results:
            merged.update({path: diff for path, diff in r.diffs.items() if diff})
        return merged

    @property
    def diff(self) -> str | None:
        """Combined diff from all results."""
        from gig.core.diff import combine_diffs

        all_diffs = self.diffs
        if not all_diffs:
            return None
        return combine_diffs(all_diffs)

    def append(self, result: Result) -> None:
        self.results.append(result)

    def __bool__(self) -> bool:
        return self.success

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)
