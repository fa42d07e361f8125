"""Progress reporting utilities for benchmark runs."""

import sys
import time
from dataclasses import dataclass, field


@dataclass
class BenchStats:
    """Statistics for an ongoing benchmark."""

    scenarios_run: int = 0
    scenarios_skipped: int = 0
    iterations: int = 0
    start_time: float = field(default_factory=time.time)

    @property
    def elapsed_seconds(self) -> float:
        return time.time() - self.start_time


class ProgressReporter:
    """Reports benchmark progress to the user."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def report_scenario_start(self, target_dirs: int, runs: int) -> None:
        print(f"Running scenario targetDirs={target_dirs} over {runs} runs...", file=self.stream)

    def report_iteration(self, target_dirs: int, iteration: int, runs: int) -> None:
        print(f"scenario={target_dirs} iter={iteration + 1}/{runs} done", file=self.stream)

    def report_skipped(self, target_dirs: int, reason: str) -> None:
        print(f"scenario={target_dirs} skipped: {reason}", file=self.stream)

    def report_completion(self, stats: BenchStats) -> None:
        duration = _format_duration(stats.elapsed_seconds)
        print(
            f"\nBenchmark complete: {stats.scenarios_run:,} scenarios, "
            f"{stats.iterations:,} runs, {stats.scenarios_skipped:,} skipped ({duration})",
            file=self.stream,
        )


def _format_duration(seconds: float) -> str:
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
