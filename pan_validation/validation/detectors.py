from __future__ import annotations

"""Heuristic anomaly detectors.

Both predicates flag values that satisfy the structural format but look
fabricated. They only ever slice the input, so short strings are compared
over whatever characters exist and never raise.
"""

__all__ = [
    "ADJACENCY_WINDOW",
    "LETTER_SEGMENT",
    "DIGIT_SEGMENT",
    "has_adjacent_repeat",
    "is_strictly_sequential",
]

# Only the leading letter block is checked for repeats
ADJACENCY_WINDOW = 5

LETTER_SEGMENT = slice(0, 5)
DIGIT_SEGMENT = slice(5, 9)


def has_adjacent_repeat(value: str) -> bool:
    """Return True if any character in the first 5 equals its successor.

    >>> has_adjacent_repeat("AAAAA12345")
    True
    >>> has_adjacent_repeat("ABCDE1234F")
    False
    """
    head = value[:ADJACENCY_WINDOW]
    for current, following in zip(head, head[1:]):
        if current == following:
            return True
    return False


def is_strictly_sequential(value: str) -> bool:
    """Return True if each character's code is exactly one above the previous.

    Strings of length 0 or 1 are vacuously sequential.

    >>> is_strictly_sequential("ABCDE")
    True
    >>> is_strictly_sequential("1235")
    False
    """
    for current, following in zip(value, value[1:]):
        if ord(following) - ord(current) != 1:
            return False
    return True
