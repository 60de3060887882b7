"""File system helpers: discovering Go files and writing them back."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path

GO_SUFFIX = ".go"
SKIPPED_DIRECTORIES = frozenset({"vendor", ".git"})


def is_go_file(name: str | Path) -> bool:
    """Check whether a file name is a Go source file (test files included)."""
    return str(name).endswith(GO_SUFFIX)


def _skip_directory(name: str) -> bool:
    return name in SKIPPED_DIRECTORIES or name.startswith(".")


def find_go_files(root: str | Path) -> list[Path]:
    """Recursively find Go source files below ``root``.

    ``vendor`` directories and hidden directories are skipped, except for
    ``root`` itself.

    Parameters
    ----------
    root : str | Path
        Directory to search.

    Returns
    -------
    list[Path]
        Go files in sorted order.

    Raises
    ------
    OSError
        If ``root`` cannot be listed.
    """
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    go_files: list[Path] = []

    def _raise(error: OSError) -> None:
        raise error

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames[:] = sorted(name for name in dirnames if not _skip_directory(name))
        for name in sorted(filenames):
            if is_go_file(name):
                go_files.append(Path(dirpath) / name)
    return go_files


def is_directory(path: str | Path) -> bool:
    """Check whether ``path`` is a directory.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")
    return path.is_dir()


def write_atomic(path: str | Path, data: bytes) -> None:
    """Replace the content of ``path`` with ``data`` in one step.

    The data is written to a temporary file next to ``path`` and renamed over
    it, so readers see either the old or the new content. The permission
    bits of an existing file are kept.
    """
    path = Path(path)
    try:
        mode = path.stat().st_mode & 0o7777
    except FileNotFoundError:
        mode = None

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        if mode is not None:
            os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
