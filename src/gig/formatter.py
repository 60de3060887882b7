"""Organize the imports of Go files.

:func:`format_source` is the pure transform of one file's content.
:func:`process_file`, :func:`process_batch` and :func:`process_path` wrap it
with file system access and return :class:`~gig.core.results.Result`
objects; they never raise for a bad file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from gig import errors
from gig.config import FormatterConfig
from gig.core.diff import generate_diff
from gig.core.results import BatchResult, ErrorResult, Result
from gig.errors import GigError, SourceReadError, SourceWriteError
from gig.imports.organizer import ImportOrganizer
from gig.project.files import find_go_files, is_directory, write_atomic
from gig.syntax.parser import parse_source
from gig.syntax.printer import print_imports_only, print_source
from gig.syntax.tree import SourceTree

logger = logging.getLogger(__name__)


def organize_tree(
    tree: SourceTree,
    config: FormatterConfig,
    file_path: str | Path | None = None,
) -> SourceTree:
    """Return ``tree`` with its imports organized according to ``config``."""
    if not tree.import_declarations:
        return tree
    project_prefix = config.project_prefix_for(file_path)
    logger.debug("Current project for %s: %r", file_path or "<source>", project_prefix)
    organizer = ImportOrganizer(config.org_prefixes, project_prefix)
    return organizer.organize(tree)


def format_source(
    source: bytes,
    config: FormatterConfig,
    file_path: str | Path | None = None,
) -> bytes:
    """Organize the imports of Go source.

    Parameters
    ----------
    source : bytes
        Content of a Go file.
    config : FormatterConfig
        Organization prefixes and current project.
    file_path : str | Path | None
        Location of the file, used to find its ``go.mod`` when
        ``config.current_project`` is empty.

    Returns
    -------
    bytes
        The rewritten source. Source without imports is returned unchanged.

    Raises
    ------
    SourceParseError
        If ``source`` is not valid Go.
    SourcePrintError
        If the rewritten source is not valid Go.
    """
    tree = parse_source(source)
    return print_source(organize_tree(tree, config, file_path))


def preview_imports(
    source: bytes,
    config: FormatterConfig,
    file_path: str | Path | None = None,
) -> bytes:
    """Return the package clause and the organized import block of ``source``."""
    tree = parse_source(source)
    return print_imports_only(organize_tree(tree, config, file_path))


def _read_source(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise SourceReadError(e, path=path) from e


def process_file(file_path: str | Path, config: FormatterConfig) -> Result:
    """Organize the imports of one file.

    In in-place mode the file is rewritten when its content changes; the
    write is atomic, so a failure leaves the original file intact.

    Parameters
    ----------
    file_path : str | Path
        The Go file to process.
    config : FormatterConfig
        Formatter settings.

    Returns
    -------
    Result
        On success ``data`` holds the rewritten source and ``diff`` the
        unified diff. Failures are returned as :class:`ErrorResult`.
    """
    path = Path(file_path)
    try:
        source = _read_source(path)
        output = format_source(source, config, path)
    except GigError as e:
        error = e if e.path is not None else e.with_path(path)
        logger.debug("Processing %s failed: %s", path, error)
        return ErrorResult(
            message=str(error),
            path=path,
            exception=error,
            operation="organize imports",
        )

    diff = generate_diff(source, output, path)
    if not diff:
        return Result(
            success=True,
            message=f"Imports already organized in {path}",
            path=path,
            data=output,
            diff="",
        )

    if not config.in_place:
        return Result(
            success=True,
            message=f"Would organize imports in {path}",
            path=path,
            data=output,
            diff=diff,
            diffs={path: diff},
        )

    try:
        write_atomic(path, output)
    except OSError as e:
        error = SourceWriteError(e, path=path)
        return ErrorResult(
            message=str(error),
            path=path,
            exception=error,
            operation="organize imports",
        )

    return Result(
        success=True,
        message=f"Organized imports in {path}",
        path=path,
        files_changed=[path],
        data=output,
        diff=diff,
        diffs={path: diff},
    )


def process_batch(file_paths: Iterable[str | Path], config: FormatterConfig) -> BatchResult:
    """Process several files independently.

    A failing file is recorded and the batch continues with the next one.
    """
    batch = BatchResult()
    for file_path in file_paths:
        result = process_file(file_path, config)
        batch.append(result)
        if not result.success:
            logger.error(result.message)
        elif config.in_place:
            logger.info(errors.INFO_PROCESSED.format(path=file_path))

    logger.info(errors.INFO_PROCESSED_COUNT.format(count=batch.success_count))
    if batch.failure_count:
        logger.warning(errors.INFO_ERROR_COUNT.format(count=batch.failure_count))
    return batch


def process_path(path: str | Path, config: FormatterConfig) -> BatchResult:
    """Process a single Go file, or every Go file below a directory.

    Returns
    -------
    BatchResult
        One result per processed file. A path that cannot be inspected
        yields a batch with a single :class:`ErrorResult`.
    """
    path = Path(path)
    try:
        directory = is_directory(path)
    except OSError as e:
        message = f"{errors.MSG_FAILED_TO_CHECK_PATH}: {e}"
        logger.error("%s: %s", message, path)
        return BatchResult([ErrorResult(message=message, path=path, exception=e)])

    if not directory:
        return BatchResult([process_file(path, config)])

    if not config.in_place:
        logger.warning(errors.WARN_DIRECTORY_WITHOUT_IN_PLACE)
        logger.info(errors.INFO_USE_IN_PLACE)

    try:
        go_files = find_go_files(path)
    except OSError as e:
        message = f"{errors.MSG_FAILED_TO_FIND_GO_FILES}: {e}"
        logger.error("%s: %s", message, path)
        return BatchResult([ErrorResult(message=message, path=path, exception=e)])

    if not go_files:
        logger.info(errors.INFO_NO_GO_FILES.format(path=path))
        return BatchResult()

    logger.info(errors.INFO_FOUND_GO_FILES.format(count=len(go_files), path=path))
    if config.current_project:
        logger.info(errors.INFO_CURRENT_PROJECT.format(project=config.current_project))
    return process_batch(go_files, config)
