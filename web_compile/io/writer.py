"""
Writer — serialize the web build report to JSON.

Filesystem layout:
    <output_dir>/web_build_report.json
"""
import json
from pathlib import Path

from web_compile.io.schema import WebBuildReport

REPORT_FILENAME = "web_build_report.json"


def write_report(report: WebBuildReport, output_dir: Path) -> Path:
    """
    Write web_build_report.json into *output_dir*.

    Creates *output_dir* if it does not exist.
    Returns the report path.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / REPORT_FILENAME
    path.write_text(
        json.dumps(
            report.model_dump(mode="json"),
            indent=2,
            sort_keys=True,
        )
        + "\n"
    )
    return path
