"""CLI interface for treewalk."""

import asyncio
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

import click

from treewalk.bench import ProgressReporter, ReportNotFoundError, publish_latest, run_benchmark, write_report
from treewalk.config import Config
from treewalk.walker import WalkError, walk_concurrent, walk_sequential

DEPENDENCY_CACHE_DIR = "node_modules"


def default_filter(path: str, entry: os.DirEntry) -> bool:
    """Skip hidden entries and anything inside a dependency cache directory."""
    return DEPENDENCY_CACHE_DIR not in path and not entry.name.startswith(".")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = Config()


@cli.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".")
@click.option("--concurrency", type=click.IntRange(min=1), default=None, help="Directories scanned at once")
@click.option("--max-depth", type=click.IntRange(min=0), default=None, help="Deepest level to descend to")
@click.option("--follow-symlinks", is_flag=True, help="Follow symbolic links")
@click.option("--sequential", is_flag=True, help="Use the recursive baseline walker")
@click.option("--strict", is_flag=True, help="Exit with an error if any directory failed")
@click.option("--include-hidden", is_flag=True, help="Do not skip hidden entries or node_modules")
@click.pass_context
def walk(
    ctx: click.Context,
    root: Path,
    concurrency: int | None,
    max_depth: int | None,
    follow_symlinks: bool,
    sequential: bool,
    strict: bool,
    include_hidden: bool,
) -> None:
    """Print every file under ROOT."""
    config: Config = ctx.obj["config"]
    walker = walk_sequential if sequential else walk_concurrent

    def print_file(path: str, depth: int) -> None:
        click.echo(path)

    try:
        asyncio.run(
            walker(
                root,
                concurrency=concurrency or config.walker.concurrency,
                max_depth=max_depth if max_depth is not None else config.walker.max_depth,
                follow_symlinks=follow_symlinks or config.walker.follow_symlinks,
                on_file=print_file,
                entry_filter=None if include_hidden else default_filter,
                strict=strict,
            )
        )
    except WalkError as e:
        for failure in e.failures:
            click.echo(f"Error: {failure.path}: {failure.error}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


@cli.command()
@click.option("--runs", type=click.IntRange(min=1), default=None, help="Runs per scenario")
@click.option(
    "--scenario",
    "scenarios",
    type=click.IntRange(min=1),
    multiple=True,
    help="Target directory count (repeatable)",
)
@click.option("--allow-huge", is_flag=True, help="Run scenarios above the size threshold")
@click.option("--out", "out_dir", type=click.Path(file_okay=False, path_type=Path), help="Report directory")
@click.pass_context
def bench(
    ctx: click.Context,
    runs: int | None,
    scenarios: tuple[int, ...],
    allow_huge: bool,
    out_dir: Path | None,
) -> None:
    """Time both walkers over synthetic trees and write a JSON/HTML report."""
    config: Config = ctx.obj["config"]
    bench_config = replace(
        config.bench,
        runs=runs or config.bench.runs,
        scenarios=scenarios or config.bench.scenarios,
        allow_huge=allow_huge or config.bench.allow_huge,
    )

    try:
        report = run_benchmark(bench_config, ProgressReporter())
    except KeyboardInterrupt:
        click.echo("\nBenchmark interrupted.")
        sys.exit(130)

    json_path, html_path = write_report(report, out_dir or config.reports_dir)
    click.echo(f"Wrote {json_path}")
    click.echo(f"Wrote {html_path}")


@cli.command()
@click.option("--reports", "reports_dir", type=click.Path(file_okay=False, path_type=Path), help="Report directory")
@click.option("--docs", "docs_dir", type=click.Path(file_okay=False, path_type=Path), help="Docs directory")
@click.pass_context
def publish(ctx: click.Context, reports_dir: Path | None, docs_dir: Path | None) -> None:
    """Copy the latest report into the docs directory."""
    config: Config = ctx.obj["config"]

    try:
        index = publish_latest(reports_dir or config.reports_dir, docs_dir or config.docs_dir)
    except ReportNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Published latest report to {index}")


def main() -> None:
    """Entry point for the CLI."""
    cli(standalone_mode=True)  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
