"""Unified diffs of organized Go files, for ``gig --diff``."""
from __future__ import annotations

import difflib
from pathlib import Path


def _diff_lines(content: str | bytes) -> list[str]:
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    lines = content.splitlines(keepends=True)
    if lines and not lines[-1].endswith("\n"):
        lines[-1] += "\n"
    return lines


def generate_diff(
    original: str | bytes,
    modified: str | bytes,
    path: Path,
    context_lines: int = 3,
) -> str:
    """Return the unified diff of one file, ``""`` when nothing changed.

    Headers read ``a/<path>`` and ``b/<path>``. Byte content is decoded as
    UTF-8 with undecodable bytes replaced, so a diff can always be shown.

    >>> generate_diff(b'import "os"\\n', b'import (\\n\\t"os"\\n)\\n', Path("main.go")).splitlines()[0]
    '--- a/main.go'
    """
    if original == modified:
        return ""
    return "".join(
        difflib.unified_diff(
            _diff_lines(original),
            _diff_lines(modified),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
            n=context_lines,
        )
    )


def combine_diffs(diffs: dict[Path, str]) -> str:
    """Concatenate per-file diffs in path order, skipping empty ones."""
    return "".join(
        diff if diff.endswith("\n") else diff + "\n"
        for _, diff in sorted(diffs.items(), key=lambda item: str(item[0]))
        if diff
    )
