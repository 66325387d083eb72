"""JSON report generation for analyses and release verdicts."""

import json
from pathlib import Path

from ossready.readiness.models import AnalysisResult
from ossready.readiness.release import ReleaseVerdict


def generate_json_report(report: AnalysisResult | ReleaseVerdict, pretty: bool = True) -> str:
    """Generate a JSON report.

    Args:
        report: AnalysisResult or ReleaseVerdict to serialize
        pretty: Whether to pretty-print the JSON

    Returns:
        JSON string with keys in declaration order
    """
    data = report.to_dict()

    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


def save_json_report(report: AnalysisResult | ReleaseVerdict, output_path: Path) -> None:
    """Save a JSON report to a file.

    Args:
        report: AnalysisResult or ReleaseVerdict to serialize
        output_path: Path to save the report
    """
    json_content = generate_json_report(report)
    output_path.write_text(json_content + "\n", encoding="utf-8")
