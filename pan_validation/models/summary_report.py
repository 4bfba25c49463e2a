from __future__ import annotations

from dataclasses import dataclass

"""SummaryReport model: the aggregate counts of one validation run."""

__all__ = [
    "SummaryReport",
]


@dataclass(frozen=True)
class SummaryReport:
    """Aggregate counts computed from the raw records and classifications.

    total_blank keeps the historical formula
    ``total_processed - (total_valid + total_invalid)``, which also absorbs
    duplicates collapsed by deduplication. null_or_blank and
    duplicates_collapsed split that figure into its two sources, so
    ``total_blank == null_or_blank + duplicates_collapsed`` always holds.
    """
    total_processed: int  # all raw records, null/blank included
    total_valid: int  # distinct values classified VALID
    total_invalid: int  # distinct values classified INVALID
    total_blank: int  # processed - (valid + invalid), never negative
    null_or_blank: int = 0  # raw records that were null/empty/whitespace
    duplicates_collapsed: int = 0  # non-blank raw records merged by dedup

    @property
    def total_classified(self) -> int:
        return self.total_valid + self.total_invalid

    def as_row(self) -> dict[str, int]:
        """Return the counts keyed by their output column names."""
        return {
            "Total_PAN_Processed": self.total_processed,
            "Total_Valid_PAN": self.total_valid,
            "Total_Invalid_PAN": self.total_invalid,
            "Total_Blank_PAN": self.total_blank,
            "Null_Or_Blank_PAN": self.null_or_blank,
            "Duplicates_Collapsed": self.duplicates_collapsed,
        }
