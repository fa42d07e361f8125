"""Directory tree walkers."""

from .concurrent import walk_concurrent
from .queue import DONE, Task, WorkQueue
from .scanner import WalkError, WalkFailure, WalkOptions, scan_directory
from .sequential import walk_sequential

__all__ = [
    "walk_concurrent",
    "walk_sequential",
    "scan_directory",
    "WorkQueue",
    "Task",
    "DONE",
    "WalkOptions",
    "WalkError",
    "WalkFailure",
]
