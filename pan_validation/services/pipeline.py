from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ValidationConfig
from ..dataset.reader import DatasetReadError, MissingColumnError, read_raw_records
from ..dataset.writer import write_classification, write_summary
from ..logging.error_log import ErrorLogBuffer
from ..models.classification import ClassificationResult
from ..models.error_record import ErrorRecord
from ..models.validation_result import ValidationResult
from ..validation.classifier import classify_one
from ..validation.normalizer import clean_records
from .aggregator import aggregate
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Pipeline orchestration for a validation run.

Coordinates one run end to end:
1. read raw records from the configured file
2. clean and deduplicate
3. classify each distinct value (progress bar on TTY)
4. aggregate the summary counts
5. write classification.csv, summary.csv and the invalid-value log when an
   output directory is configured
"""

CLASSIFICATION_FILE = "classification.csv"
SUMMARY_FILE = "summary.csv"


class PipelineError(Exception):
    """Base exception for fatal pipeline errors."""
    pass


def load_records(config: ValidationConfig, input_path: Path | None = None) -> tuple[Path, list[str | None]]:
    """Read the raw records for a run, wrapping reader errors as PipelineError."""
    source = input_path if input_path is not None else Path(config.input_path)
    try:
        records = read_raw_records(
            source,
            column=config.column,
            encoding=config.encoding,
            keep_na_strings=config.keep_na_strings,
        )
    except (DatasetReadError, MissingColumnError) as e:
        raise PipelineError(str(e)) from e
    logger.debug(f"read {len(records)} records from {source}")
    return source, records


def _classify_with_progress(values: set[str]) -> list[ClassificationResult]:
    results: list[ClassificationResult] = []
    invalid = 0
    with ProgressTracker(len(values)) as progress:
        for value in sorted(values):
            result = classify_one(value)
            if not result.is_valid:
                invalid += 1
            results.append(result)
            progress.advance()
            progress.set_postfix(invalid=invalid)
    return results


def _error_records(source: Path, results: list[ClassificationResult]) -> list[ErrorRecord]:
    return [
        ErrorRecord.from_violation(source.name, r.value, violation)
        for r in results
        for violation in r.violations
    ]


def run_validation(config: ValidationConfig, input_path: Path | None = None) -> ValidationResult:
    """Run cleaning, classification and aggregation for the configured input.

    Args:
        config: Validation configuration
        input_path: Overrides ``config.input_path`` when given

    Returns:
        ValidationResult with classifications, summary counts and metrics

    Raises:
        PipelineError: If the input cannot be read
    """
    start_time = datetime.now(UTC)
    source, records = load_records(config, input_path)

    cleaned = clean_records(records)
    logger.info(f"cleaned {len(cleaned)} distinct values from {len(records)} records")

    results = _classify_with_progress(cleaned)
    report = aggregate(records, results)
    if report.duplicates_collapsed:
        logger.warning(
            f"{report.duplicates_collapsed} duplicate records collapsed; "
            f"blank={report.total_blank} includes them"
        )

    output_files: list[Path] = []
    if config.output_directory:
        out_dir = Path(config.output_directory)
        output_files.append(write_classification(results, out_dir / CLASSIFICATION_FILE))
        output_files.append(write_summary(report, out_dir / SUMMARY_FILE))
        error_log = ErrorLogBuffer(out_dir / "logs")
        error_log.extend(_error_records(source, results))
        log_path = error_log.flush()
        if log_path is not None:
            output_files.append(log_path)
        for path in output_files:
            logger.info(f"wrote {path}")

    end_time = datetime.now(UTC)
    elapsed = (end_time - start_time).total_seconds()
    throughput = report.total_processed / elapsed if elapsed > 0 else 0.0
    return ValidationResult(
        source=source,
        classifications=results,
        report=report,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed,
        throughput_records_per_sec=throughput,
        output_files=output_files,
    )
