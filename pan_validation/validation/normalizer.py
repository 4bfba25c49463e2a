from __future__ import annotations

from collections.abc import Iterable

"""Normalizer: trim + upper-case raw PAN strings.

Null, empty and whitespace-only records are dropped here and never reach the
classifier; they are accounted for only in the summary counts.
"""

__all__ = [
    "normalize",
    "clean_records",
    "count_blank",
]


def normalize(value: str | None) -> str | None:
    """Return ``value`` trimmed and upper-cased, or None if nothing is left.

    Idempotent: ``normalize(normalize(x)) == normalize(x)``.
    """
    if value is None:
        return None
    stripped = value.strip()
    if not stripped:
        return None
    return stripped.upper()


def clean_records(records: Iterable[str | None]) -> set[str]:
    """Normalize every record and return the distinct non-blank values.

    Uniqueness is decided after normalization, so `` abcde1234f `` and
    ``ABCDE1234F`` collapse to one entry.
    """
    cleaned: set[str] = set()
    for raw in records:
        value = normalize(raw)
        if value is not None:
            cleaned.add(value)
    return cleaned


def count_blank(records: Iterable[str | None]) -> int:
    """Count records that normalize to nothing (null/empty/whitespace)."""
    return sum(1 for raw in records if normalize(raw) is None)
