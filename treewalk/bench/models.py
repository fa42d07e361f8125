"""Data models for benchmark results."""

from dataclasses import asdict, dataclass, field


@dataclass
class Summary:
    """Timing summary over repeated runs, in milliseconds."""

    mean: float
    median: float
    p95: float


@dataclass
class WalkerTiming:
    ms: float
    files: int


@dataclass
class RunResult:
    """One timed pass of both walkers over the same tree."""

    iteration: int
    non_recursive: WalkerTiming
    recursive: WalkerTiming

    def to_dict(self) -> dict:
        return {
            "iteration": self.iteration,
            "nonRecursive": {"ms": self.non_recursive.ms, "files": self.non_recursive.files},
            "recursive": {"ms": self.recursive.ms, "files": self.recursive.files},
        }


@dataclass
class ScenarioSummary:
    non_recursive: Summary
    recursive: Summary


@dataclass
class ScenarioResult:
    """All runs for one target directory count."""

    target_dirs: int
    skipped: bool = False
    reason: str | None = None
    runs: list[RunResult] = field(default_factory=list)
    summary: ScenarioSummary | None = None

    def to_dict(self) -> dict:
        data: dict = {"targetDirs": self.target_dirs, "skipped": self.skipped}
        if self.reason is not None:
            data["reason"] = self.reason
        data["runs"] = [run.to_dict() for run in self.runs]
        if self.summary is None:
            data["summary"] = None
        else:
            data["summary"] = {
                "nonRecursive": asdict(self.summary.non_recursive),
                "recursive": asdict(self.summary.recursive),
            }
        return data


@dataclass
class BenchmarkReport:
    generated_at: str
    runs_per_scenario: int
    scenarios: list[ScenarioResult] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "generatedAt": self.generated_at,
            "runsPerScenario": self.runs_per_scenario,
            "scenarios": [scenario.to_dict() for scenario in self.scenarios],
        }
