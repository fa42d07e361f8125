"""Benchmark tooling built on the walker callback contract."""

from .models import BenchmarkReport, RunResult, ScenarioResult, Summary
from .progress import ProgressReporter
from .publish import ReportNotFoundError, publish_latest
from .report import build_html, summarize, write_report
from .runner import run_benchmark, run_scenario, time_walkers
from .trees import count_tree, create_random_tree, create_tree_to_target_dirs

__all__ = [
    "BenchmarkReport",
    "RunResult",
    "ScenarioResult",
    "Summary",
    "ProgressReporter",
    "ReportNotFoundError",
    "publish_latest",
    "build_html",
    "summarize",
    "write_report",
    "run_benchmark",
    "run_scenario",
    "time_walkers",
    "count_tree",
    "create_random_tree",
    "create_tree_to_target_dirs",
]
