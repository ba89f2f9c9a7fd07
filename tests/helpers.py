"""Builders for log entries and completed jobs used across tests."""

from datetime import datetime

from job_monitor.models import CompletedJob, EventType, LogEntry


def at(stamp: str):
    return datetime.strptime(stamp, "%H:%M:%S").time()


def make_entry(stamp: str, event: str, pid: int, description: str = "Job") -> LogEntry:
    return LogEntry(
        timestamp=at(stamp),
        description=description,
        event_type=EventType(event),
        pid=pid,
    )


def make_job(start: str, end: str, pid: int = 1, description: str = "Job") -> CompletedJob:
    return CompletedJob(
        description=description,
        pid=pid,
        start_time=at(start),
        end_time=at(end),
    )
