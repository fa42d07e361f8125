"""Directory scanning rules shared by the concurrent and sequential walkers."""

import asyncio
import inspect
import logging
import os
import stat
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from treewalk.walker.queue import Task

logger = logging.getLogger(__name__)

FileCallback = Callable[[str, int], Awaitable[None] | None]
EntryFilter = Callable[[str, os.DirEntry], bool]
DirectoryCallback = Callable[[str, int], Awaitable[None]]


class WalkError(Exception):
    """Raised by a strict walk when any directory or callback failed."""

    def __init__(self, failures: list["WalkFailure"]):
        self.failures = failures
        super().__init__(f"{len(failures)} failure(s) during traversal")


@dataclass
class WalkFailure:
    path: str
    error: BaseException


def _ignore_file(path: str, depth: int) -> None:
    return None


def _accept_all(path: str, entry: os.DirEntry) -> bool:
    return True


@dataclass(frozen=True)
class WalkOptions:
    """Options for a single traversal call."""

    concurrency: int = 8
    max_depth: int | None = None
    follow_symlinks: bool = False
    on_file: FileCallback = field(default=_ignore_file)
    entry_filter: EntryFilter = field(default=_accept_all)
    strict: bool = False

    def __post_init__(self) -> None:
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    @classmethod
    def build(
        cls,
        concurrency: int = 8,
        max_depth: int | None = None,
        follow_symlinks: bool = False,
        on_file: FileCallback | None = None,
        entry_filter: EntryFilter | None = None,
        strict: bool = False,
    ) -> "WalkOptions":
        return cls(
            concurrency=concurrency,
            max_depth=max_depth,
            follow_symlinks=follow_symlinks,
            on_file=on_file or _ignore_file,
            entry_filter=entry_filter or _accept_all,
            strict=strict,
        )

    def allows_depth(self, depth: int) -> bool:
        return self.max_depth is None or depth <= self.max_depth


def _list_directory(directory: str) -> list[os.DirEntry]:
    with os.scandir(directory) as entries:
        return list(entries)


async def scan_directory(
    task: Task,
    options: WalkOptions,
    on_directory: DirectoryCallback,
    failures: list[WalkFailure],
) -> None:
    """Scan one directory, reporting files and handing subdirectories on.

    Listing errors and errors raised by ``on_file`` abandon the rest of this
    directory only. They are logged and appended to ``failures``.
    ``RecursionError`` always propagates so a recursive walk never drops a
    subtree without telling the caller.
    """
    directory, depth = task.directory_path, task.depth

    try:
        entries = await asyncio.to_thread(_list_directory, directory)
        for entry in entries:
            child = os.path.join(directory, entry.name)
            if not options.entry_filter(child, entry):
                continue

            if entry.is_dir(follow_symlinks=False):
                await _handle_directory(child, depth, options, on_directory)
            elif entry.is_file(follow_symlinks=False):
                await _handle_file(child, depth, options)
            elif options.follow_symlinks and entry.is_symlink():
                await _handle_symlink(child, depth, options, on_directory, failures)
    except RecursionError:
        # Raised by the recursive walker on trees deeper than the interpreter stack.
        raise
    except Exception as e:
        logger.debug("Abandoning directory %s: %s", directory, e)
        failures.append(WalkFailure(path=directory, error=e))


async def _handle_directory(
    child: str,
    depth: int,
    options: WalkOptions,
    on_directory: DirectoryCallback,
) -> None:
    if options.allows_depth(depth + 1):
        await on_directory(child, depth + 1)


async def _handle_file(child: str, depth: int, options: WalkOptions) -> None:
    result = options.on_file(child, depth)
    if inspect.isawaitable(result):
        await result


async def _handle_symlink(
    child: str,
    depth: int,
    options: WalkOptions,
    on_directory: DirectoryCallback,
    failures: list[WalkFailure],
) -> None:
    try:
        target = await asyncio.to_thread(os.stat, child)
    except OSError as e:
        logger.debug("Skipping unresolvable symlink %s: %s", child, e)
        failures.append(WalkFailure(path=child, error=e))
        return

    if stat.S_ISDIR(target.st_mode):
        await _handle_directory(child, depth, options, on_directory)
    elif stat.S_ISREG(target.st_mode):
        await _handle_file(child, depth, options)
