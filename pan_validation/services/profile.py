from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from ..models.data_profile import DataQualityProfile
from ..validation.matcher import matches_format

"""Data-quality profile of raw records, run before cleaning.

Checks performed on the raw (uncleaned) values:
- missing: null records
- blank: empty or whitespace-only strings
- untrimmed: leading/trailing whitespace
- not_uppercase: contains lowercase letters
- raw_format_matches: already matches the PAN layout without cleaning
- duplicates: identical raw values seen more than once
"""

__all__ = [
    "profile_records",
    "render_profile_lines",
]


def profile_records(records: Sequence[str | None]) -> DataQualityProfile:
    missing = 0
    blank = 0
    untrimmed = 0
    not_uppercase = 0
    raw_matches = 0
    counts: Counter[str] = Counter()

    for raw in records:
        if raw is None:
            missing += 1
            continue
        counts[raw] += 1
        if not raw.strip():
            blank += 1
            continue
        if raw != raw.strip():
            untrimmed += 1
        if raw != raw.upper():
            not_uppercase += 1
        if matches_format(raw):
            raw_matches += 1

    duplicates = {value: n for value, n in sorted(counts.items()) if n > 1}
    return DataQualityProfile(
        total_records=len(records),
        missing=missing,
        blank=blank,
        untrimmed=untrimmed,
        not_uppercase=not_uppercase,
        raw_format_matches=raw_matches,
        duplicates=duplicates,
    )


def render_profile_lines(profile: DataQualityProfile, max_duplicates: int = 10) -> list[str]:
    """Render the profile as log-ready ``key=value`` lines."""
    lines = [
        f"profile records={profile.total_records} missing={profile.missing} "
        f"blank={profile.blank} untrimmed={profile.untrimmed} "
        f"not_uppercase={profile.not_uppercase} raw_format_matches={profile.raw_format_matches} "
        f"duplicate_values={profile.duplicate_values}"
    ]
    for value, n in list(profile.duplicates.items())[:max_duplicates]:
        lines.append(f"duplicate value={value!r} count={n}")
    if profile.duplicate_values > max_duplicates:
        lines.append(f"duplicate ... {profile.duplicate_values - max_duplicates} more")
    return lines
