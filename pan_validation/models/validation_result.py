from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .classification import ClassificationResult
from .summary_report import SummaryReport

"""ValidationResult: the outcome of one pipeline run with timing metrics."""

__all__ = [
    "ValidationResult",
]


@dataclass(frozen=True)
class ValidationResult:
    """Aggregated results of a validation run.

    Contains the classification list, the summary counts and the metrics
    needed for the SUMMARY output line.
    """
    source: Path  # input file
    classifications: list[ClassificationResult]  # one per distinct cleaned value, sorted
    report: SummaryReport
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float  # end - start
    throughput_records_per_sec: float  # total_processed / elapsed
    output_files: list[Path] = field(default_factory=list)  # files written by the sinks

    @property
    def invalid(self) -> list[ClassificationResult]:
        return [c for c in self.classifications if not c.is_valid]
