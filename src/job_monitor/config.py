"""Configuration models and constants for the job monitor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

EXPECTED_COLUMNS = 4
TIMESTAMP_FORMAT = "%H:%M:%S"
RECORD_FORMAT_HINT = "timestamp,job_description,START/END,PID"


@dataclass(slots=True, frozen=True)
class ReportThresholds:
    """Duration limits used to classify completed jobs."""

    warning: timedelta = timedelta(minutes=5)
    error: timedelta = timedelta(minutes=10)

    @property
    def warning_minutes(self) -> float:
        return self.warning.total_seconds() / 60.0

    @property
    def error_minutes(self) -> float:
        return self.error.total_seconds() / 60.0
