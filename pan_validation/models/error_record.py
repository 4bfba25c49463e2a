from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from .classification import Violation

"""ErrorRecord model for the invalid-value log.

One record is written per rule an invalid value broke. Records serialize to
a fixed JSON Lines schema: timestamp, file, value, error_type, message.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Source file the value was read from
        value: Cleaned PAN value that failed classification
        error_type: Violation name in UPPER_SNAKE_CASE format
        message: Human readable description of the violation
    """
    timestamp: str  # ISO8601 UTC
    file: str
    value: str
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(file: str, value: str, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord with current UTC timestamp."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            file=file,
            value=value,
            error_type=error_type,
            message=message,
        )

    @staticmethod
    def from_violation(file: str, value: str, violation: Violation) -> ErrorRecord:
        return ErrorRecord.create(file, value, violation.value, violation.description)

    def to_json_line(self) -> str:
        """Serialize ErrorRecord to JSON Lines format (no extra keys)."""
        return json.dumps(asdict(self), ensure_ascii=False)
