"""treewalk - Bounded-concurrency directory tree traversal."""

__version__ = "0.1.0"

from treewalk.walker import WalkError, WalkOptions, walk_concurrent, walk_sequential

__all__ = ["walk_concurrent", "walk_sequential", "WalkOptions", "WalkError"]
