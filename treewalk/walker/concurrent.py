"""Queue-driven directory walker with a fixed pool of agents."""

import asyncio
import logging
import os

from treewalk.walker.queue import DONE, Task, WorkQueue
from treewalk.walker.scanner import (
    EntryFilter,
    FileCallback,
    WalkError,
    WalkFailure,
    WalkOptions,
    scan_directory,
)

logger = logging.getLogger(__name__)


async def walk_concurrent(
    root: str | os.PathLike,
    *,
    concurrency: int = 8,
    max_depth: int | None = None,
    follow_symlinks: bool = False,
    on_file: FileCallback | None = None,
    entry_filter: EntryFilter | None = None,
    strict: bool = False,
) -> None:
    """Walk ``root`` without recursion, scanning up to ``concurrency`` directories at once.

    Returns once every discovered directory has been scanned. Failures are
    contained to the directory they happen in; with ``strict`` they are
    raised together as a ``WalkError`` after the walk drains.
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
    queue = WorkQueue()
    failures: list[WalkFailure] = []

    async def enqueue(directory: str, depth: int) -> None:
        queue.submit(Task(directory_path=directory, depth=depth))

    async def agent() -> None:
        while True:
            task = await queue.take()
            if task is DONE:
                return
            try:
                await scan_directory(task, options, enqueue, failures)
            finally:
                queue.complete(task)

    logger.debug("Starting concurrent walk of %s with %d agents", start, options.concurrency)
    queue.submit(Task(directory_path=start, depth=0))
    await asyncio.gather(*(agent() for _ in range(options.concurrency)))
    logger.debug("Finished concurrent walk of %s (%d failures)", start, len(failures))

    if options.strict and failures:
        raise WalkError(failures)
