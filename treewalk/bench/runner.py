"""Benchmark runs comparing the concurrent walker with the sequential baseline."""

import asyncio
import logging
import shutil
import tempfile
import time
from datetime import datetime, timezone
from pathlib import Path

from treewalk.bench.models import (
    BenchmarkReport,
    RunResult,
    ScenarioResult,
    ScenarioSummary,
    WalkerTiming,
)
from treewalk.bench.progress import BenchStats, ProgressReporter
from treewalk.bench.report import summarize
from treewalk.bench.trees import create_tree_to_target_dirs
from treewalk.config import BenchConfig
from treewalk.walker import walk_concurrent, walk_sequential

logger = logging.getLogger(__name__)


async def _time_walk(walk, root: Path, **options) -> WalkerTiming:
    files = 0

    def count(path: str, depth: int) -> None:
        nonlocal files
        files += 1

    started = time.perf_counter()
    await walk(root, on_file=count, **options)
    elapsed_ms = (time.perf_counter() - started) * 1000
    return WalkerTiming(ms=elapsed_ms, files=files)


def time_walkers(root: Path, concurrency: int = 16, iteration: int = 0) -> RunResult:
    """Time the concurrent walker then the sequential walker over ``root``."""
    non_recursive = asyncio.run(_time_walk(walk_concurrent, root, concurrency=concurrency))
    recursive = asyncio.run(_time_walk(walk_sequential, root))
    return RunResult(iteration=iteration, non_recursive=non_recursive, recursive=recursive)


def run_scenario(
    target_dirs: int,
    runs: int,
    config: BenchConfig,
    reporter: ProgressReporter,
) -> ScenarioResult:
    if not config.allow_huge and target_dirs > config.huge_threshold:
        reason = "target too large for default run (use --allow-huge)"
        reporter.report_skipped(target_dirs, reason)
        return ScenarioResult(target_dirs=target_dirs, skipped=True, reason=reason)

    result = ScenarioResult(target_dirs=target_dirs)
    for i in range(runs):
        tmp = Path(tempfile.mkdtemp(prefix="walk-report-"))
        try:
            create_tree_to_target_dirs(
                tmp,
                target_dirs,
                max_depth=config.tree_max_depth,
                max_files_per_dir=config.max_files_per_dir,
            )
            run = time_walkers(tmp, concurrency=config.concurrency, iteration=i)
            if run.non_recursive.files != run.recursive.files:
                logger.warning(
                    "File counts differ for scenario %d: concurrent=%d sequential=%d",
                    target_dirs,
                    run.non_recursive.files,
                    run.recursive.files,
                )
            result.runs.append(run)
            reporter.report_iteration(target_dirs, i, runs)
        finally:
            shutil.rmtree(tmp, ignore_errors=True)

    result.summary = ScenarioSummary(
        non_recursive=summarize([r.non_recursive.ms for r in result.runs]),
        recursive=summarize([r.recursive.ms for r in result.runs]),
    )
    return result


def run_benchmark(config: BenchConfig, reporter: ProgressReporter | None = None) -> BenchmarkReport:
    reporter = reporter or ProgressReporter()
    stats = BenchStats()
    report = BenchmarkReport(
        generated_at=datetime.now(timezone.utc).isoformat(),
        runs_per_scenario=config.runs,
    )

    for target in config.scenarios:
        reporter.report_scenario_start(target, config.runs)
        scenario = run_scenario(target, config.runs, config, reporter)
        report.scenarios.append(scenario)

        if scenario.skipped:
            stats.scenarios_skipped += 1
        else:
            stats.scenarios_run += 1
            stats.iterations += len(scenario.runs)
        logger.info("Finished scenario %d (%d runs)", target, len(scenario.runs))

    reporter.report_completion(stats)
    return report
