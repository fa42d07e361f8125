"""Copy the newest benchmark report into the docs directory."""

import logging
import re
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_REPORT_NAME = re.compile(r"^report-(\d+)\.html$")

DOCS_README = (
    "# GitHub Pages\n\n"
    "This directory is published via GitHub Pages. "
    "The latest benchmark report is available as index.html."
)


class ReportNotFoundError(Exception):
    """Raised when no benchmark report exists to publish."""


@dataclass
class LatestReport:
    html: Path
    json: Path


def find_latest_report(reports_dir: Path) -> LatestReport | None:
    if not reports_dir.is_dir():
        return None

    candidates = []
    for path in reports_dir.iterdir():
        match = _REPORT_NAME.match(path.name)
        if match:
            candidates.append((int(match.group(1)), path))

    if not candidates:
        return None

    _, html = max(candidates)
    return LatestReport(html=html, json=html.with_suffix(".json"))


def publish_latest(reports_dir: Path, docs_dir: Path) -> Path:
    """Publish the newest report as ``docs_dir/index.html`` and return that path."""
    latest = find_latest_report(reports_dir)
    if latest is None:
        raise ReportNotFoundError(f"No reports found in {reports_dir}")

    docs_dir.mkdir(parents=True, exist_ok=True)
    index = docs_dir / "index.html"
    shutil.copyfile(latest.html, index)

    if latest.json.exists():
        shutil.copyfile(latest.json, docs_dir / "report.json")
    else:
        logger.debug("No JSON alongside %s", latest.html)

    (docs_dir / "README.md").write_text(DOCS_README, encoding="utf-8")
    logger.info("Published %s to %s", latest.html, index)
    return index
