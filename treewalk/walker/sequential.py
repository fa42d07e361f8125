"""Recursive depth-first walker used as the correctness and timing baseline."""

import logging
import os

from treewalk.walker.queue import Task
from treewalk.walker.scanner import (
    EntryFilter,
    FileCallback,
    WalkError,
    WalkFailure,
    WalkOptions,
    scan_directory,
)

logger = logging.getLogger(__name__)


async def walk_sequential(
    root: str | os.PathLike,
    *,
    concurrency: int = 8,
    max_depth: int | None = None,
    follow_symlinks: bool = False,
    on_file: FileCallback | None = None,
    entry_filter: EntryFilter | None = None,
    strict: bool = False,
) -> None:
    """Walk ``root`` one directory at a time, descending into each subdirectory immediately.

    ``concurrency`` is accepted so both walkers share a signature; it has no
    effect here. Call depth grows with tree depth, so a tree deeper than the
    interpreter's recursion limit raises ``RecursionError``.
    """
    options = WalkOptions.build(
        concurrency=concurrency,
        max_depth=max_depth,
        follow_symlinks=follow_symlinks,
        on_file=on_file,
        entry_filter=entry_filter,
        strict=strict,
    )
    start = os.path.abspath(root)
    failures: list[WalkFailure] = []

    async def visit(directory: str, depth: int) -> None:
        await scan_directory(Task(directory_path=directory, depth=depth), options, visit, failures)

    logger.debug("Starting sequential walk of %s", start)
    await visit(start, 0)
    logger.debug("Finished sequential walk of %s (%d failures)", start, len(failures))

    if options.strict and failures:
        raise WalkError(failures)
