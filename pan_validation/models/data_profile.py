from __future__ import annotations

from dataclasses import dataclass, field

"""DataQualityProfile model.

Holds the exploratory checks run over raw records before cleaning:
missing values, blanks, padding, casing, raw pattern hits and duplicates.
"""

__all__ = [
    "DataQualityProfile",
]


@dataclass(frozen=True)
class DataQualityProfile:
    total_records: int
    missing: int  # null records
    blank: int  # empty or whitespace-only strings
    untrimmed: int  # value != value.strip()
    not_uppercase: int  # value != value.upper()
    raw_format_matches: int  # raw value already matches the PAN pattern
    duplicates: dict[str, int] = field(default_factory=dict)  # raw value -> occurrences (>1)

    @property
    def duplicate_values(self) -> int:
        return len(self.duplicates)
