"""Core cleaning and classification rules."""

from .classifier import classify, classify_all, find_violations
from .detectors import has_adjacent_repeat, is_strictly_sequential
from .matcher import matches_format
from .normalizer import clean_records, count_blank, normalize

__all__ = [
    "classify",
    "classify_all",
    "clean_records",
    "count_blank",
    "find_violations",
    "has_adjacent_repeat",
    "is_strictly_sequential",
    "matches_format",
    "normalize",
]
