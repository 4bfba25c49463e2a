from __future__ import annotations

from ..models.validation_result import ValidationResult

"""SUMMARY line rendering.

Format:
SUMMARY processed={n} valid={n} invalid={n} blank={n} null_or_blank={n}
duplicates={n} elapsed_sec={x} throughput_rps={y}
"""

__all__ = [
    "format_metric",
    "render_summary_line",
]


def format_metric(value: float) -> str:
    """Format a float without scientific notation; integral values lose the decimal."""
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # Very small numbers would otherwise render as 1e-05
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 2))


def render_summary_line(result: ValidationResult) -> str:
    """Render the SUMMARY line for a validation run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> from pan_validation.models import SummaryReport
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> report = SummaryReport(5, 0, 2, 3, 3, 0)
        >>> result = ValidationResult(Path("pan.csv"), [], report, t, t, 0.0, 0.0)
        >>> render_summary_line(result)
        'SUMMARY processed=5 valid=0 invalid=2 blank=3 null_or_blank=3 duplicates=0 elapsed_sec=0 throughput_rps=0'
    """
    report = result.report
    return (
        f"SUMMARY processed={report.total_processed} "
        f"valid={report.total_valid} "
        f"invalid={report.total_invalid} "
        f"blank={report.total_blank} "
        f"null_or_blank={report.null_or_blank} "
        f"duplicates={report.duplicates_collapsed} "
        f"elapsed_sec={format_metric(result.elapsed_seconds)} "
        f"throughput_rps={format_metric(result.throughput_records_per_sec)}"
    )
