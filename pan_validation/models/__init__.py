"""Domain models for the PAN validation tool.

This package contains the value objects passed between the cleaning,
classification and aggregation stages and the run-level result objects.
"""

from .classification import Category, ClassificationResult, Violation
from .data_profile import DataQualityProfile
from .error_record import ErrorRecord
from .summary_report import SummaryReport
from .validation_result import ValidationResult

__all__ = [
    # Classification models
    "Category",
    "ClassificationResult",
    "Violation",
    # Reporting models
    "DataQualityProfile",
    "ErrorRecord",
    "SummaryReport",
    "ValidationResult",
]
