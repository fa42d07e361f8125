"""Configuration module for treewalk."""

from dataclasses import dataclass, field
from pathlib import Path


def _get_working_root() -> Path:
    return Path.cwd()


@dataclass
class WalkerConfig:
    concurrency: int = 8
    max_depth: int | None = None
    follow_symlinks: bool = False


@dataclass
class BenchConfig:
    runs: int = 5
    scenarios: tuple[int, ...] = (10, 100, 1_000, 10_000, 100_000, 1_000_000)
    concurrency: int = 16
    tree_max_depth: int = 10
    max_files_per_dir: int = 2
    huge_threshold: int = 200_000
    allow_huge: bool = False


@dataclass
class Config:
    reports_dir: Path = field(default_factory=lambda: _get_working_root() / "reports")
    docs_dir: Path = field(default_factory=lambda: _get_working_root() / "docs")
    walker: WalkerConfig = field(default_factory=WalkerConfig)
    bench: BenchConfig = field(default_factory=BenchConfig)
