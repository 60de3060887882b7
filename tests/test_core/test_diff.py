"""
Tests for gig.core.diff module.
"""
from __future__ import annotations

from pathlib import Path

from gig.core.diff import combine_diffs, generate_diff


class TestGenerateDiff:
    """Tests for generate_diff()."""

    def test_identical_content(self):
        assert generate_diff(b"package main\n", b"package main\n", Path("main.go")) == ""

    def test_headers_name_file(self):
        diff = generate_diff('import "os"\n', 'import (\n\t"os"\n)\n', Path("cmd/main.go"))

        lines = diff.splitlines()
        assert lines[0] == "--- a/cmd/main.go"
        assert lines[1] == "+++ b/cmd/main.go"

    def test_changed_lines(self):
        diff = generate_diff(b'import "os"\n', b'import (\n\t"os"\n)\n', Path("main.go"))

        assert '-import "os"' in diff
        assert "+import (" in diff
        assert '+\t"os"' in diff
        assert "+)" in diff

    def test_missing_final_newline(self):
        """Every diff line ends with a newline."""
        diff = generate_diff(b"a", b"b", Path("x.go"))
        assert diff.endswith("+b\n")

    def test_undecodable_bytes_replaced(self):
        diff = generate_diff(b"var s = \"caf\xe9\"\n", b"var s = \"cafe\"\n", Path("x.go"))

        assert "-var s = \"caf\ufffd\"\n" in diff
        assert "+var s = \"cafe\"\n" in diff

    def test_context_lines(self):
        original = "".join(f"line {i}\n" for i in range(20))
        modified = original.replace("line 10\n", "changed\n")

        diff = generate_diff(original, modified, Path("x.go"), context_lines=1)

        assert " line 9\n" in diff
        assert " line 8\n" not in diff


class TestCombineDiffs:
    """Tests for combine_diffs()."""

    def test_empty(self):
        assert combine_diffs({}) == ""
        assert combine_diffs({Path("a.go"): ""}) == ""

    def test_sorted_and_terminated(self):
        combined = combine_diffs({Path("b.go"): "B", Path("a.go"): "A\n"})
        assert combined == "A\nB\n"
