"""
Tests for gig.core.results module.

This module tests the Result, ErrorResult, and BatchResult classes which form
the foundation of gig's error handling strategy. File operations never raise
exceptions - they return Result objects instead.

Coverage targets:
- Result: success/failure states, boolean evaluation, diff access
- ErrorResult: error details, raise_if_error behavior
- BatchResult: aggregation, filtering, iteration, diff merging
"""
from __future__ import annotations

from pathlib import Path

import pytest

from gig.core.results import BatchResult, ErrorResult, Result
from gig.errors import SourceParseError


# =============================================================================
# Result Tests
# =============================================================================

class TestResult:
    """Tests for the base Result class."""

    def test_successful_result_creation(self):
        """
        A successful Result should have success=True and be truthy.
        """
        result = Result(success=True, message="Imports already organized")

        assert result.success is True
        assert bool(result) is True
        assert result.is_error() is False
        assert result.message == "Imports already organized"

    def test_failed_result_creation(self):
        """
        A failed Result should have success=False and be falsy.
        """
        result = Result(success=False, message="Operation failed")

        assert result.success is False
        assert bool(result) is False
        assert result.is_error() is True

    def test_result_defaults(self):
        result = Result(success=True, message="ok")

        assert result.path is None
        assert result.files_changed == []
        assert result.data is None
        assert result.diff is None
        assert result.diffs == {}

    def test_result_carries_rewritten_source(self):
        """
        The rewritten file content travels in the data field.
        """
        result = Result(success=True, message="ok", data=b"package main\n")
        assert result.data == b"package main\n"

    def test_changed(self):
        """
        A result is changed only when it carries a non-empty diff.
        """
        assert Result(success=True, message="ok", diff="--- a\n+++ b\n").changed is True
        assert Result(success=True, message="ok", diff="").changed is False
        assert Result(success=True, message="ok").changed is False

    def test_get_diff_for_path(self):
        path = Path("main.go")
        result = Result(success=True, message="ok", diff="combined", diffs={path: "one"})

        assert result.get_diff(path) == "one"
        assert result.get_diff(Path("other.go")) is None
        assert result.get_diff() == "combined"


# =============================================================================
# ErrorResult Tests
# =============================================================================

class TestErrorResult:
    """Tests for the ErrorResult class."""

    def test_always_failed(self):
        """
        ErrorResult is always unsuccessful and success cannot be passed in.
        """
        result = ErrorResult(message="failed to parse file")

        assert result.success is False
        assert bool(result) is False
        assert result.is_error() is True

    def test_error_details(self):
        error = SourceParseError("syntax error at line 3, column 1", path="main.go")

        result = ErrorResult(
            message=str(error),
            path=Path("main.go"),
            exception=error,
            operation="organize imports",
        )

        assert result.exception is error
        assert result.operation == "organize imports"
        assert result.path == Path("main.go")

    def test_raise_if_error_reraises_exception(self):
        error = SourceParseError("bad")
        result = ErrorResult(message=str(error), exception=error)

        with pytest.raises(SourceParseError):
            result.raise_if_error()

    def test_raise_if_error_without_exception(self):
        result = ErrorResult(message="something broke")

        with pytest.raises(RuntimeError, match="something broke"):
            result.raise_if_error()


# =============================================================================
# BatchResult Tests
# =============================================================================

class TestBatchResult:
    """Tests for the BatchResult class."""

    def test_empty_batch_is_successful(self):
        """
        An empty batch has no failures, so it counts as successful.
        """
        batch = BatchResult()

        assert batch.success is True
        assert bool(batch) is True
        assert len(batch) == 0
        assert batch.diff is None

    def test_mixed_results(self):
        ok = Result(success=True, message="ok", path=Path("a.go"))
        bad = ErrorResult(message="failed to parse file", path=Path("b.go"))
        batch = BatchResult([ok, bad])

        assert batch.success is False
        assert batch.succeeded == [ok]
        assert batch.failed == [bad]
        assert batch.success_count == 1
        assert batch.failure_count == 1
        assert batch.errors == {Path("b.go"): "failed to parse file"}

    def test_append_and_iterate(self):
        batch = BatchResult()
        first = Result(success=True, message="first")
        second = Result(success=True, message="second")

        batch.append(first)
        batch.append(second)

        assert len(batch) == 2
        assert list(batch) == [first, second]

    def test_files_changed_deduplicated(self):
        a, b = Path("a.go"), Path("b.go")
        batch = BatchResult([
            Result(success=True, message="1", files_changed=[a]),
            Result(success=True, message="2", files_changed=[b, a]),
        ])

        assert batch.files_changed == [a, b]

    def test_diffs_merged(self):
        a, b = Path("a.go"), Path("b.go")
        batch = BatchResult([
            Result(success=True, message="1", diffs={a: "diff a\n"}),
            Result(success=True, message="2", diffs={b: ""}),
        ])

        assert batch.diffs == {a: "diff a\n"}

    def test_combined_diff_sorted_by_path(self):
        batch = BatchResult([
            Result(success=True, message="1", diffs={Path("z.go"): "diff z\n"}),
            Result(success=True, message="2", diffs={Path("a.go"): "diff a"}),
        ])

        assert batch.diff == "diff a\ndiff z\n"
