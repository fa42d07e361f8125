"""Shared fixtures for walker tests."""

import asyncio
from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Root with two files and one subdirectory holding one file."""
    root = tmp_path / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "b.txt").write_text("b")
    (sub / "c.txt").write_text("c")
    return root


def _collect(walker, root: Path, **options) -> list[tuple[str, int]]:
    found: list[tuple[str, int]] = []

    def on_file(path: str, depth: int) -> None:
        found.append((Path(path).relative_to(root).as_posix(), depth))

    asyncio.run(walker(root, on_file=on_file, **options))
    return sorted(found)


@pytest.fixture
def collect():
    """Run a walker and return sorted (path relative to root, depth) pairs."""
    return _collect
