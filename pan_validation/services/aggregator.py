from __future__ import annotations

from collections.abc import Sequence

from ..models.classification import Category, ClassificationResult
from ..models.summary_report import SummaryReport
from ..validation.normalizer import count_blank

"""Aggregator: derive the SummaryReport from raw records and classifications."""

__all__ = [
    "AggregationError",
    "aggregate",
]


class AggregationError(Exception):
    """Raised when classifications cannot have come from the given records."""


def aggregate(
    records: Sequence[str | None], results: Sequence[ClassificationResult]
) -> SummaryReport:
    """Count processed, valid, invalid and blank records.

    ``total_blank`` is ``total_processed - (total_valid + total_invalid)``.
    Because classification runs on distinct cleaned values, that figure also
    includes duplicates merged by deduplication; the split is reported in
    ``null_or_blank`` and ``duplicates_collapsed``.

    Raises:
        AggregationError: if there are more classified values than non-blank
            records.
    """
    total_processed = len(records)
    total_valid = sum(1 for r in results if r.category is Category.VALID)
    total_invalid = sum(1 for r in results if r.category is Category.INVALID)
    null_or_blank = count_blank(records)

    duplicates_collapsed = (total_processed - null_or_blank) - (total_valid + total_invalid)
    if duplicates_collapsed < 0:
        raise AggregationError(
            f"{total_valid + total_invalid} classified values but only "
            f"{total_processed - null_or_blank} non-blank records"
        )

    return SummaryReport(
        total_processed=total_processed,
        total_valid=total_valid,
        total_invalid=total_invalid,
        total_blank=total_processed - (total_valid + total_invalid),
        null_or_blank=null_or_blank,
        duplicates_collapsed=duplicates_collapsed,
    )
