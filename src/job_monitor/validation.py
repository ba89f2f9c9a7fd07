"""Structural validation of raw job log records."""

from __future__ import annotations

from typing import Iterable, Sequence

from .config import EXPECTED_COLUMNS, RECORD_FORMAT_HINT
from .models import EventType, parse_pid, parse_timestamp


class RecordValidationError(ValueError):
    """Raised for the first record that breaks the log format."""

    def __init__(self, record_number: int, reason: str) -> None:
        super().__init__(f"Line {record_number}: {reason}")
        self.record_number = record_number
        self.reason = reason


class RecordValidator:
    """Checks raw CSV fields before any LogEntry is built.

    Checks run in a fixed order (column count, timestamp, event type, pid)
    and stop at the first failure so the reported cause is deterministic.
    """

    def __init__(self, expected_columns: int = EXPECTED_COLUMNS) -> None:
        self.expected_columns = expected_columns

    def validate(self, fields: Sequence[str], record_number: int) -> None:
        if len(fields) != self.expected_columns:
            raise RecordValidationError(
                record_number,
                f"Expected {self.expected_columns} columns, found {len(fields)}"
                f" - Format should be: {RECORD_FORMAT_HINT}",
            )

        timestamp, _description, event_type, pid = fields

        try:
            parse_timestamp(timestamp)
        except ValueError:
            raise RecordValidationError(
                record_number,
                f"Invalid timestamp format '{timestamp}'"
                " - Expected format: HH:MM:SS (e.g., 09:30:15)",
            ) from None

        try:
            EventType.parse(event_type)
        except ValueError:
            raise RecordValidationError(
                record_number,
                f"Invalid process type '{event_type.strip()}'"
                " - Must be either 'START' or 'END'",
            ) from None

        try:
            parse_pid(pid)
        except ValueError:
            raise RecordValidationError(
                record_number,
                f"Invalid PID format '{pid}' - Must be a valid number",
            ) from None

    def validate_all(self, rows: Iterable[Sequence[str]]) -> int:
        """Validate every row in order and return how many were checked."""
        count = 0
        for count, fields in enumerate(rows, start=1):
            self.validate(fields, count)
        return count
