"""Tests for the command line interface."""

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from treewalk.cli import cli, default_filter
from treewalk.walker import scanner


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / ".git").mkdir()
    (root / "README.md").write_text("readme")
    (root / ".env").write_text("SECRET=1")
    (root / "src" / "main.py").write_text("print()")
    (root / "node_modules" / "pkg" / "index.js").write_text("")
    (root / ".git" / "HEAD").write_text("ref")
    return root


def _printed(output: str, root: Path) -> list[str]:
    return sorted(Path(line).relative_to(root).as_posix() for line in output.splitlines())


class TestDefaultFilter:
    """Tests for default_filter."""

    def test_rejects_hidden_and_dependency_cache(self, project_tree: Path):
        accepted = {
            entry.name
            for entry in os.scandir(project_tree)
            if default_filter(os.path.join(project_tree, entry.name), entry)
        }
        assert accepted == {"README.md", "src"}


class TestWalkCommand:
    """Tests for the walk command."""

    def test_prints_visible_files(self, project_tree: Path):
        result = CliRunner().invoke(cli, ["walk", str(project_tree)])

        assert result.exit_code == 0
        assert _printed(result.output, project_tree) == ["README.md", "src/main.py"]

    def test_sequential_matches_concurrent(self, project_tree: Path):
        runner = CliRunner()
        concurrent = runner.invoke(cli, ["walk", str(project_tree), "--concurrency", "2"])
        sequential = runner.invoke(cli, ["walk", str(project_tree), "--sequential"])

        assert _printed(concurrent.output, project_tree) == _printed(sequential.output, project_tree)

    def test_include_hidden(self, project_tree: Path):
        result = CliRunner().invoke(cli, ["walk", str(project_tree), "--include-hidden"])

        assert _printed(result.output, project_tree) == [
            ".env",
            ".git/HEAD",
            "README.md",
            "node_modules/pkg/index.js",
            "src/main.py",
        ]

    def test_max_depth(self, project_tree: Path):
        result = CliRunner().invoke(cli, ["walk", str(project_tree), "--max-depth", "0"])

        assert _printed(result.output, project_tree) == ["README.md"]

    def test_rejects_zero_concurrency(self, project_tree: Path):
        result = CliRunner().invoke(cli, ["walk", str(project_tree), "--concurrency", "0"])

        assert result.exit_code == 2

    def test_strict_reports_failures(self, project_tree: Path, monkeypatch):
        src = str(project_tree / "src")
        real_list = scanner._list_directory

        def list_directory(directory: str):
            if directory == src:
                raise PermissionError(13, "Permission denied", directory)
            return real_list(directory)

        monkeypatch.setattr(scanner, "_list_directory", list_directory)

        relaxed = CliRunner().invoke(cli, ["walk", str(project_tree)])
        strict = CliRunner().invoke(cli, ["walk", str(project_tree), "--strict"])

        assert relaxed.exit_code == 0
        assert strict.exit_code == 1
        assert f"Error: {src}" in strict.output


class TestBenchAndPublish:
    """Tests for the bench and publish commands."""

    def test_bench_writes_report_then_publish(self, tmp_path: Path):
        reports = tmp_path / "reports"
        docs = tmp_path / "docs"
        runner = CliRunner()

        bench = runner.invoke(cli, ["bench", "--runs", "1", "--scenario", "5", "--out", str(reports)])
        assert bench.exit_code == 0
        assert "scenario=5 iter=1/1 done" in bench.output
        assert len(list(reports.glob("report-*.json"))) == 1

        published = runner.invoke(cli, ["publish", "--reports", str(reports), "--docs", str(docs)])
        assert published.exit_code == 0
        assert (docs / "index.html").exists()

    def test_publish_without_reports(self, tmp_path: Path):
        result = CliRunner().invoke(
            cli, ["publish", "--reports", str(tmp_path / "none"), "--docs", str(tmp_path / "docs")]
        )

        assert result.exit_code == 1
        assert "No reports found" in result.output
