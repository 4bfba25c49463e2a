from __future__ import annotations

from collections.abc import Iterable

from ..models.classification import Category, ClassificationResult, Violation
from .detectors import DIGIT_SEGMENT, LETTER_SEGMENT, has_adjacent_repeat, is_strictly_sequential
from .matcher import matches_format

"""Classifier: compose the matcher and the detectors into Valid/Invalid.

A value is Valid only if all four rules pass:

1. it matches the structural format
2. no adjacent repeat in the first 5 characters
3. the letter segment (chars 1-5) is not a strict ascending run
4. the digit segment (chars 6-9) is not a strict ascending run

Rules are evaluated per value with no cross-record state.
"""

__all__ = [
    "find_violations",
    "classify",
    "classify_one",
    "classify_all",
]


def find_violations(value: str) -> tuple[Violation, ...]:
    """Return every rule ``value`` breaks, in rule order."""
    violations: list[Violation] = []
    if not matches_format(value):
        violations.append(Violation.FORMAT_MISMATCH)
    if has_adjacent_repeat(value):
        violations.append(Violation.ADJACENT_REPEAT)
    if is_strictly_sequential(value[LETTER_SEGMENT]):
        violations.append(Violation.SEQUENTIAL_LETTERS)
    if is_strictly_sequential(value[DIGIT_SEGMENT]):
        violations.append(Violation.SEQUENTIAL_DIGITS)
    return tuple(violations)


def classify(value: str) -> Category:
    """Classify one cleaned value."""
    if (
        matches_format(value)
        and not has_adjacent_repeat(value)
        and not is_strictly_sequential(value[LETTER_SEGMENT])
        and not is_strictly_sequential(value[DIGIT_SEGMENT])
    ):
        return Category.VALID
    return Category.INVALID


def classify_one(value: str) -> ClassificationResult:
    violations = find_violations(value)
    category = Category.INVALID if violations else Category.VALID
    return ClassificationResult(value=value, category=category, violations=violations)


def classify_all(values: Iterable[str]) -> list[ClassificationResult]:
    """Classify each distinct value, sorted by value for stable output."""
    return [classify_one(v) for v in sorted(set(values))]
