"""Classification of completed jobs and report rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, TextIO

from .config import ReportThresholds
from .models import CompletedJob

REPORT_HEADER = "=== JOB ANALYSIS REPORT ==="
SUMMARY_HEADER = "=== SUMMARY ==="


class Severity(str, Enum):
    OK = "OK"
    WARNING = "WARNING"
    ERROR = "ERROR"


def classify(duration_minutes: float, thresholds: ReportThresholds) -> Severity:
    if duration_minutes > thresholds.error_minutes:
        return Severity.ERROR
    if duration_minutes > thresholds.warning_minutes:
        return Severity.WARNING
    return Severity.OK


@dataclass(slots=True)
class ReportSummary:
    total: int = 0
    warnings: int = 0
    errors: int = 0

    @property
    def ok(self) -> int:
        return self.total - self.warnings - self.errors


class ReportGenerator:
    """Render the job analysis report to a text sink."""

    def __init__(self, thresholds: Optional[ReportThresholds] = None) -> None:
        self.thresholds = thresholds or ReportThresholds()

    def format_line(self, job: CompletedJob, severity: Severity) -> str:
        line = f"{severity.value}: {job}"
        if severity is Severity.ERROR:
            line += f" (took longer than {format_minutes(self.thresholds.error_minutes)} minutes)"
        elif severity is Severity.WARNING:
            line += f" (took longer than {format_minutes(self.thresholds.warning_minutes)} minutes)"
        return line

    def write(self, jobs: Iterable[CompletedJob], sink: TextIO) -> ReportSummary:
        summary = ReportSummary()
        lines = [REPORT_HEADER]
        for job in jobs:
            severity = classify(job.duration_minutes, self.thresholds)
            summary.total += 1
            if severity is Severity.ERROR:
                summary.errors += 1
            elif severity is Severity.WARNING:
                summary.warnings += 1
            lines.append(self.format_line(job, severity))

        lines.append("")
        lines.append(SUMMARY_HEADER)
        lines.append(f"Total jobs: {summary.total}")
        lines.append(f"Warnings: {summary.warnings}")
        lines.append(f"Errors: {summary.errors}")
        sink.write("\n".join(lines) + "\n")
        sink.flush()
        return summary


def format_minutes(minutes: float) -> str:
    """Render a threshold without a trailing ``.0`` for whole minutes."""
    return f"{minutes:g}"
