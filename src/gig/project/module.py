"""Detection of the current Go module.

The module path of the project a file belongs to is read from the nearest
``go.mod`` above the file. Files in a GOPATH layout
(``$GOPATH/src/host/org/repo/...``) fall back to the three path segments
after ``src``.
"""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

GO_MOD = "go.mod"
MAX_PARENT_DEPTH = 20
SOURCE_ROOT_SEGMENT = "src"
MODULE_PATH_SEGMENTS = 3


def read_module_path(go_mod: Path) -> str:
    """Return the module path declared in a ``go.mod`` file.

    Parameters
    ----------
    go_mod : Path
        Path to the ``go.mod`` file.

    Returns
    -------
    str
        The value of the first ``module`` directive, ``""`` if there is none.

    Raises
    ------
    OSError
        If the file cannot be read.
    """
    for line in go_mod.read_text(encoding="utf-8", errors="replace").splitlines():
        if not line.startswith("module ") and not line.startswith("module\t"):
            continue
        value = line[len("module"):]
        if "//" in value:
            value = value.split("//", 1)[0]
        return value.strip().strip('"`')
    return ""


def _module_from_gopath(path: Path) -> str:
    parts = path.as_posix().split("/")
    if SOURCE_ROOT_SEGMENT not in parts:
        return ""
    after = [part for part in parts[parts.index(SOURCE_ROOT_SEGMENT) + 1:] if part]
    if len(after) < MODULE_PATH_SEGMENTS:
        return ""
    return "/".join(after[:MODULE_PATH_SEGMENTS])


def get_project_module(file_path: str | Path) -> str:
    """Find the module path of the project containing ``file_path``.

    Walks at most :data:`MAX_PARENT_DEPTH` parent directories looking for a
    ``go.mod`` declaring a module.

    Parameters
    ----------
    file_path : str | Path
        A file inside the project. Relative paths are resolved against the
        current working directory.

    Returns
    -------
    str
        The module path, or ``""`` when it cannot be determined.
    """
    path = Path(file_path).absolute()

    for depth, directory in enumerate(path.parents):
        if depth >= MAX_PARENT_DEPTH:
            break
        go_mod = directory / GO_MOD
        if not go_mod.is_file():
            continue
        try:
            module = read_module_path(go_mod)
        except OSError as e:
            logger.debug("Cannot read %s: %s", go_mod, e)
            continue
        if module:
            logger.debug("Module %s declared in %s", module, go_mod)
            return module

    module = _module_from_gopath(path.parent)
    if module:
        logger.debug("Module %s inferred from GOPATH layout of %s", module, path)
    return module
