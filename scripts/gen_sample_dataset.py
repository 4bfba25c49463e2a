#!/usr/bin/env python3
"""Sample dataset generation for manual runs and performance smoke checks.

Writes a single-column delimited file in the layout the validator reads:
- Line 1: header row (PAN_NUMBER)
- Line 2+: one raw PAN record per line

The records mix well-formed valid PANs with the kinds of dirt the cleaning
stage has to cope with: degenerate-but-well-formed fakes, malformed values,
blanks, padded and lower-case variants, and exact duplicates.
"""
from __future__ import annotations

import argparse
import string
import sys
from pathlib import Path

import numpy as np
import pandas as pd

from pan_validation.models.classification import Category
from pan_validation.validation.classifier import classify

LETTERS = np.array(list(string.ascii_uppercase))
DIGITS = np.array(list(string.digits))

# Share of each record kind; the remainder is valid PANs
DEFAULT_MIX = {
    "degenerate": 0.10,
    "malformed": 0.10,
    "blank": 0.05,
    "padded": 0.05,
    "lowercase": 0.05,
    "duplicate": 0.05,
}


def _random_pan(rng: np.random.Generator) -> str:
    return "".join(rng.choice(LETTERS, 5)) + "".join(rng.choice(DIGITS, 4)) + rng.choice(LETTERS)


def random_valid_pan(rng: np.random.Generator) -> str:
    """Draw random PANs until one passes every rule."""
    while True:
        candidate = _random_pan(rng)
        if classify(candidate) is Category.VALID:
            return candidate


def degenerate_pan(rng: np.random.Generator) -> str:
    """Well-formed but fabricated-looking: repeated or sequential segments."""
    start = int(rng.integers(0, 22))
    digit_start = int(rng.integers(0, 7))
    choices = [
        str(LETTERS[start]) * 5 + "0000" + str(LETTERS[start]),
        "".join(LETTERS[start:start + 5]) + "".join(DIGITS[digit_start:digit_start + 4]) + "F",
        "".join(LETTERS[start:start + 5]) + "7391" + "K",
    ]
    return choices[int(rng.integers(0, len(choices)))]


def malformed_pan(rng: np.random.Generator) -> str:
    pan = random_valid_pan(rng)
    choices = [pan[:-1], pan[1:] + "9", pan[:4] + "7" + pan[5:], pan + "Z"]
    return choices[int(rng.integers(0, len(choices)))]


def generate_pan_values(rows: int, seed: int = 42, mix: dict[str, float] | None = None) -> list[str | None]:
    """Generate ``rows`` raw PAN records with the requested dirt mix."""
    rng = np.random.default_rng(seed)
    mix = mix or DEFAULT_MIX
    kinds = list(mix) + ["valid"]
    weights = np.array(list(mix.values()) + [max(0.0, 1.0 - sum(mix.values()))])
    drawn = rng.choice(kinds, size=rows, p=weights / weights.sum())

    values: list[str | None] = []
    for kind in drawn:
        if kind == "degenerate":
            values.append(degenerate_pan(rng))
        elif kind == "malformed":
            values.append(malformed_pan(rng))
        elif kind == "blank":
            values.append(None if rng.random() < 0.5 else "   ")
        elif kind == "padded":
            values.append(f"  {random_valid_pan(rng)} ")
        elif kind == "lowercase":
            values.append(random_valid_pan(rng).lower())
        elif kind == "duplicate" and values:
            values.append(values[int(rng.integers(0, len(values)))])
        else:
            values.append(random_valid_pan(rng))
    return values


def create_csv_file(output_path: Path, rows: int, seed: int = 42) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame({"PAN_NUMBER": generate_pan_values(rows, seed)})
    df.to_csv(output_path, index=False)
    print(f"Created CSV file: {output_path}")
    print(f"  Rows: {rows:,} (+ 1 header row)")


def main() -> int:
    """Main CLI interface for dataset generation."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic PAN dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate default 10k rows
  %(prog)s data/pan_numbers.csv

  # Generate a larger dataset with a different seed
  %(prog)s data/large.csv --rows 500000 --seed 123
        """
    )
    parser.add_argument("output", type=Path, help="Output CSV file path")
    parser.add_argument("--rows", type=int, default=10_000, help="Number of data rows (default: 10,000)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducible data (default: 42)")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be generated without creating files")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1

    print("Dataset generation plan:")
    print(f"  Output file: {args.output}")
    print(f"  Rows: {args.rows:,}")
    print(f"  Random seed: {args.seed}")

    if args.dry_run:
        print("\n[DRY RUN] Would generate files but not creating them.")
        return 0

    try:
        create_csv_file(args.output, args.rows, args.seed)
    except OSError as e:
        print(f"\nError generating dataset: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
