from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""Classification models for the PAN validation tool.

A ClassificationResult pairs one distinct cleaned value with its Category.
The category is a pure function of the value; the violations tuple records
which rules the value broke so invalid entries can be explained in the
error log.
"""

__all__ = [
    "Category",
    "Violation",
    "ClassificationResult",
]


class Category(Enum):
    """Classification outcome for a cleaned PAN value.

    - VALID: matches the structural pattern and trips no heuristic detector
    - INVALID: any single rule failed
    """
    VALID = "Valid PAN"
    INVALID = "Invalid PAN"


class Violation(Enum):
    """Rule broken by an invalid value (UPPER_SNAKE, used as error_type)."""
    FORMAT_MISMATCH = "FORMAT_MISMATCH"
    ADJACENT_REPEAT = "ADJACENT_REPEAT"
    SEQUENTIAL_LETTERS = "SEQUENTIAL_LETTERS"
    SEQUENTIAL_DIGITS = "SEQUENTIAL_DIGITS"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    Violation.FORMAT_MISMATCH: "does not match 5 letters, 4 digits, 1 letter",
    Violation.ADJACENT_REPEAT: "adjacent repeated character in first 5 characters",
    Violation.SEQUENTIAL_LETTERS: "letter segment is a strict ascending run",
    Violation.SEQUENTIAL_DIGITS: "digit segment is a strict ascending run",
}


@dataclass(frozen=True)
class ClassificationResult:
    """One classified distinct cleaned value."""
    value: str  # cleaned (trimmed, upper-cased) PAN
    category: Category
    violations: tuple[Violation, ...] = ()  # empty iff VALID

    @property
    def is_valid(self) -> bool:
        return self.category is Category.VALID
