"""Synthetic directory trees for benchmarks and parity checks."""

import logging
import math
import os
import random
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MAX_DIRS_PER_PARENT = 1000


@dataclass
class TreeCount:
    files: int = 0
    dirs: int = 0


def create_random_tree(
    base: Path,
    max_layers: int = 10,
    max_dirs_per_layer: int = 100,
    max_files_per_dir: int = 5,
    seed: int | str | None = None,
) -> None:
    """Create a random layered tree under ``base``. The same seed gives the same tree."""
    rng = random.Random(seed)
    layers = max(1, int(rng.random() * max_layers))
    current_dirs = [base]

    for depth in range(layers):
        next_dirs: list[Path] = []
        for directory in current_dirs:
            dirs_here = int(rng.random() * max_dirs_per_layer)
            files_here = int(rng.random() * max_files_per_dir)

            for i in range(files_here):
                (directory / f"file_{depth}_{i}.txt").write_text(f"depth={depth},i={i}")

            for j in range(dirs_here):
                subdir = directory / f"dir_{depth}_{j}"
                subdir.mkdir(parents=True, exist_ok=True)
                next_dirs.append(subdir)
        current_dirs = next_dirs

    logger.debug("Created random tree under %s with %d layers", base, layers)


def create_tree_to_target_dirs(
    base: Path,
    target_dirs: int,
    max_depth: int = 10,
    max_files_per_dir: int = 2,
) -> int:
    """Create roughly ``target_dirs`` subdirectories spread evenly level by level.

    Every directory that gets expanded also receives ``max_files_per_dir`` small
    files. Returns the number of directories created, excluding ``base``.
    """
    created = 0
    current_level = [base]
    depth = 0

    while created < target_dirs and depth < max_depth and current_level:
        next_level: list[Path] = []
        for directory in current_level:
            if created >= target_dirs:
                break
            remaining = target_dirs - created
            per_dir = max(1, math.ceil(remaining / len(current_level)))
            to_create = min(per_dir, MAX_DIRS_PER_PARENT, remaining)

            for i in range(to_create):
                subdir = directory / f"d_{depth}_{i}"
                subdir.mkdir(parents=True, exist_ok=True)
                next_level.append(subdir)
                created += 1

            for f in range(max_files_per_dir):
                (directory / f"f_{depth}_{f}.txt").write_text(f"{depth}:{f}")

        current_level = next_level
        depth += 1

    logger.debug("Created %d directories under %s", created, base)
    return created


def count_tree(base: Path) -> TreeCount:
    """Count regular files and directories under ``base``, following symlinks."""
    count = TreeCount()
    for dirpath, dirnames, filenames in os.walk(base, followlinks=True):
        count.dirs += len(dirnames)
        count.files += sum(1 for name in filenames if os.path.isfile(os.path.join(dirpath, name)))
    return count
