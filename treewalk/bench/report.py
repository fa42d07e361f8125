"""Summaries and JSON/HTML rendering of benchmark results."""

import json
import logging
import time
from pathlib import Path

from treewalk.bench.models import BenchmarkReport, Summary

logger = logging.getLogger(__name__)

_HTML_TEMPLATE = """<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Dir Traversal Report</title>
    <style>
      body { font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; margin: 20px; }
      .grid { display: grid; grid-template-columns: 1fr; gap: 24px; }
      @media (min-width: 900px) { .grid { grid-template-columns: 1fr 1fr; } }
      canvas { width: 100%; height: 360px; }
      table { border-collapse: collapse; width: 100%; }
      th, td { padding: 8px 10px; border-bottom: 1px solid #ddd; text-align: right; }
      th:first-child, td:first-child { text-align: left; }
      code { background: #f5f5f5; padding: 2px 4px; border-radius: 4px; }
    </style>
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
  </head>
  <body>
    <h2>Directory Traversal Report</h2>
    <p>Generated at <code>__GENERATED_AT__</code>, runs per scenario: <code>__RUNS__</code></p>
    <div class="grid">
      <div>
        <h3>Mean duration (ms) by scenario</h3>
        <canvas id="meanChart"></canvas>
      </div>
      <div>
        <h3>Median duration (ms) by scenario</h3>
        <canvas id="medianChart"></canvas>
      </div>
    </div>
    <h3>Summary</h3>
    <table id="summaryTable">
      <thead>
        <tr><th>Target Dirs</th><th>NR mean</th><th>NR median</th><th>NR p95</th><th>R mean</th><th>R median</th><th>R p95</th></tr>
      </thead>
      <tbody>
__ROWS__
      </tbody>
    </table>
    <script>
      const REPORT = __REPORT_JSON__;
      const scenarios = REPORT.scenarios.filter(s => !s.skipped);
      const labels = scenarios.map(s => s.targetDirs.toLocaleString());
      const series = (key, stat) => scenarios.map(s => s.summary[key][stat]);

      new Chart(document.getElementById('meanChart'), {
        type: 'bar',
        data: {
          labels,
          datasets: [
            { label: 'Non-Recursive (mean)', backgroundColor: '#4CAF50', data: series('nonRecursive', 'mean') },
            { label: 'Recursive (mean)', backgroundColor: '#2196F3', data: series('recursive', 'mean') }
          ]
        },
        options: { responsive: true, scales: { y: { beginAtZero: true } } }
      });

      new Chart(document.getElementById('medianChart'), {
        type: 'line',
        data: {
          labels,
          datasets: [
            { label: 'Non-Recursive (median)', borderColor: '#4CAF50', data: series('nonRecursive', 'median') },
            { label: 'Recursive (median)', borderColor: '#2196F3', data: series('recursive', 'median') }
          ]
        },
        options: { responsive: true, scales: { y: { beginAtZero: true } } }
      });
    </script>
  </body>
</html>
"""


def summarize(samples: list[float]) -> Summary:
    if not samples:
        return Summary(mean=0.0, median=0.0, p95=0.0)

    ordered = sorted(samples)
    mean = sum(samples) / len(samples)
    median = ordered[len(ordered) // 2]
    p95 = ordered[int(len(ordered) * 0.95)]
    return Summary(mean=mean, median=median, p95=p95)


def _summary_rows(report: dict) -> str:
    rows = []
    for scenario in report["scenarios"]:
        if scenario["skipped"]:
            continue
        nr = scenario["summary"]["nonRecursive"]
        r = scenario["summary"]["recursive"]
        cells = [f"{scenario['targetDirs']:,}"]
        cells += [f"{value:.2f}" for value in (nr["mean"], nr["median"], nr["p95"])]
        cells += [f"{value:.2f}" for value in (r["mean"], r["median"], r["p95"])]
        rows.append("        <tr>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>")
    return "\n".join(rows)


def build_html(report: dict) -> str:
    """Render a report document as a standalone page with charts and a summary table."""
    # Keep the embedded JSON from closing the script element early.
    report_json = json.dumps(report).replace("</", "<\\/")
    return (
        _HTML_TEMPLATE.replace("__GENERATED_AT__", str(report["generatedAt"]))
        .replace("__RUNS__", str(report["runsPerScenario"]))
        .replace("__ROWS__", _summary_rows(report))
        .replace("__REPORT_JSON__", report_json)
    )


def write_report(report: BenchmarkReport, out_dir: Path) -> tuple[Path, Path]:
    """Write ``report-<epoch-ms>.json`` and the matching ``.html`` into ``out_dir``."""
    out_dir = out_dir.resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    data = report.to_dict()
    base = f"report-{int(time.time() * 1000)}"
    json_path = out_dir / f"{base}.json"
    html_path = out_dir / f"{base}.html"

    json_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    html_path.write_text(build_html(data), encoding="utf-8")
    logger.info("Wrote report %s", json_path)
    return json_path, html_path
