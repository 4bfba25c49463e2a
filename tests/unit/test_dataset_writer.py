from __future__ import annotations
from pathlib import Path

import pandas as pd

from pan_validation.dataset.writer import CLASSIFICATION_COLUMNS, write_classification, write_summary
from pan_validation.models.summary_report import SummaryReport
from pan_validation.validation.classifier import classify_all


def test_write_classification(temp_workdir: Path):
    results = classify_all(["BNZPA2318K", "AAAAA0000A"])
    path = write_classification(results, temp_workdir / "out" / "classification.csv")
    assert path.exists()
    df = pd.read_csv(path, dtype=str)
    assert list(df.columns) == CLASSIFICATION_COLUMNS
    assert df.values.tolist() == [
        ["AAAAA0000A", "Invalid PAN"],
        ["BNZPA2318K", "Valid PAN"],
    ]


def test_write_classification_empty(temp_workdir: Path):
    path = write_classification([], temp_workdir / "classification.csv")
    assert path.read_text(encoding="utf-8").strip() == "PAN_NUMBER,Category"


def test_write_summary(temp_workdir: Path):
    report = SummaryReport(5, 0, 2, 3, null_or_blank=2, duplicates_collapsed=1)
    path = write_summary(report, temp_workdir / "out" / "summary.csv")
    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert lines == [
        "Total_PAN_Processed,Total_Valid_PAN,Total_Invalid_PAN,Total_Blank_PAN,Null_Or_Blank_PAN,Duplicates_Collapsed",
        "5,0,2,3,2,1",
    ]
