"""Text and tabular views of validation results."""

from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from wordentropy.metrics import ValidationResult, summarize_results

REPORT_TITLE = "=== Entropy Validation Report ==="
REPORT_RULE = "================================="


def _format_metrics(result: ValidationResult) -> str:
    parts = []
    for key, value in result.metrics_dict().items():
        if isinstance(value, float):
            parts.append(f"{key}={value:.6g}")
        else:
            parts.append(f"{key}={value}")
    return "{" + ", ".join(parts) + "}"


def format_validation_report(results: Sequence[ValidationResult]) -> str:
    """Render results as a numbered report followed by a pass/fail summary."""
    lines: List[str] = ["", REPORT_TITLE, ""]

    for index, result in enumerate(results, start=1):
        status = "✓ PASS" if result.valid else "✗ FAIL"
        lines.append(f"Check {index}: {status}")
        lines.append(f"  {result.message}")
        lines.append(f"  Metrics: {_format_metrics(result)}")
        lines.append("")

    summary = summarize_results(results)
    lines.append(f"Summary: {summary.passed} passed, {summary.failed} failed out of {summary.total} checks")
    lines.append(REPORT_RULE)
    return "\n".join(lines) + "\n"


def results_frame(results: Sequence[ValidationResult]) -> pd.DataFrame:
    """One row per check; metric fields become columns (NaN where a check lacks them)."""
    rows = []
    for index, result in enumerate(results, start=1):
        row = {"check": index, "kind": result.check, "valid": result.valid, "message": result.message}
        row.update(result.metrics_dict())
        rows.append(row)
    return pd.DataFrame(rows, columns=None if rows else ["check", "kind", "valid", "message"])


__all__ = ["format_validation_report", "results_frame"]
