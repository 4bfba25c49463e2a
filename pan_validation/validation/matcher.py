from __future__ import annotations

import re

"""Structural matcher for the PAN format: 5 letters, 4 digits, 1 letter."""

__all__ = [
    "PAN_PATTERN",
    "matches_format",
]

PAN_PATTERN = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")


def matches_format(value: str) -> bool:
    """Return True if the whole of ``value`` matches the PAN layout.

    Case-sensitive; callers normalize first.
    """
    return PAN_PATTERN.fullmatch(value) is not None
