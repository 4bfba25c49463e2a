from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pandas as pd
import pandas._libs.parsers as parsers

"""Dataset reader: delimited file -> ordered list of raw PAN records.

The first line is the header row and is skipped. Blank lines are kept and
surface as null records so that they count towards the processed total.
All cells are read as strings. pandas' default NA markers (NA, NULL, None,
nan, N/A, ...) become None and so count as blank, not only the \\N marker of
a database bulk load; markers listed in keep_na_strings stay literal.
"""

__all__ = [
    "DatasetReadError",
    "MissingColumnError",
    "read_raw_records",
]


class DatasetReadError(Exception):
    """Raised when the input file is missing or cannot be parsed."""


class MissingColumnError(Exception):
    """Raised when the configured PAN column is not in the header row."""


def _na_options(keep_na_strings: Iterable[str] | None) -> tuple[bool, list[str] | None]:
    if keep_na_strings:
        custom_na = parsers.STR_NA_VALUES - set(keep_na_strings)
        return False, sorted(custom_na)
    return True, None


def read_raw_records(
    path: Path,
    column: str | None = None,
    encoding: str = "utf-8",
    keep_na_strings: Iterable[str] | None = None,
) -> list[str | None]:
    """Read one column of raw PAN records, preserving order and duplicates.

    Parameters
    ----------
    path: delimited input file (header on the first line)
    column: header name of the PAN column; None selects the first column
    encoding: file encoding
    keep_na_strings: strings that must stay literal instead of becoming null
    """
    if not path.exists():
        raise DatasetReadError(f"input file not found: {path}")
    keep_default_na, na_values = _na_options(keep_na_strings)
    try:
        df = pd.read_csv(
            path,
            dtype=str,
            encoding=encoding,
            skip_blank_lines=False,
            # an over-wide first data row must not become the index
            index_col=False,
            keep_default_na=keep_default_na,
            na_values=na_values,
        )
    except pd.errors.EmptyDataError as e:
        raise DatasetReadError(f"input file is empty: {path}") from e
    except (pd.errors.ParserError, UnicodeDecodeError, LookupError) as e:
        raise DatasetReadError(f"cannot parse {path}: {e}") from e

    columns = [str(c).strip() for c in df.columns]
    if column is None:
        index = 0
    elif column.strip() in columns:
        index = columns.index(column.strip())
    else:
        raise MissingColumnError(f"column '{column}' not in header: {columns}")

    series = df.iloc[:, index]
    return [None if pd.isna(v) else str(v) for v in series.tolist()]
