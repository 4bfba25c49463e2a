from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from ..models.classification import ClassificationResult
from ..models.summary_report import SummaryReport

"""Dataset writer: classification and summary CSV sinks."""

__all__ = [
    "CLASSIFICATION_COLUMNS",
    "write_classification",
    "write_summary",
]

CLASSIFICATION_COLUMNS = ["PAN_NUMBER", "Category"]


def write_classification(results: Sequence[ClassificationResult], path: Path) -> Path:
    """Write one ``PAN_NUMBER,Category`` row per classified value."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(
        [(r.value, r.category.value) for r in results],
        columns=CLASSIFICATION_COLUMNS,
    )
    df.to_csv(path, index=False, encoding="utf-8")
    return path


def write_summary(report: SummaryReport, path: Path) -> Path:
    """Write the summary counts as a one-row CSV."""
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame([report.as_row()]).to_csv(path, index=False, encoding="utf-8")
    return path
