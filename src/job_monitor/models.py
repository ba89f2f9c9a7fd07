"""Domain models for job lifecycle events."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum

from .config import TIMESTAMP_FORMAT

PID_MIN = -(2**63)
PID_MAX = 2**63 - 1

_PID_PATTERN = re.compile(r"[+-]?[0-9]+")
_TIMESTAMP_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}:[0-9]{2}")


class EventType(str, Enum):
    START = "START"
    END = "END"

    @classmethod
    def parse(cls, value: str) -> "EventType":
        """Match a raw field against the two event names, case-sensitively."""
        try:
            return cls(value.strip())
        except ValueError:
            raise ValueError(f"unknown event type: {value!r}") from None


def parse_timestamp(value: str) -> time:
    text = value.strip()
    # strptime alone accepts single-digit fields such as "9:5:3"
    if not _TIMESTAMP_PATTERN.fullmatch(text):
        raise ValueError(f"invalid timestamp: {value!r}")
    return datetime.strptime(text, TIMESTAMP_FORMAT).time()


def parse_pid(value: str) -> int:
    text = value.strip()
    # int() alone would also accept digit separators such as "1_000"
    if not _PID_PATTERN.fullmatch(text):
        raise ValueError(f"invalid pid: {value!r}")
    pid = int(text)
    if not PID_MIN <= pid <= PID_MAX:
        raise ValueError(f"pid out of range: {value!r}")
    return pid


@dataclass(slots=True, frozen=True)
class LogEntry:
    """A single validated row of the job log."""

    timestamp: time
    description: str
    event_type: EventType
    pid: int

    @classmethod
    def from_fields(
        cls, timestamp: str, description: str, event_type: str, pid: str
    ) -> "LogEntry":
        return cls(
            timestamp=parse_timestamp(timestamp),
            description=description.strip(),
            event_type=EventType.parse(event_type),
            pid=parse_pid(pid),
        )

    @property
    def is_start(self) -> bool:
        return self.event_type is EventType.START

    @property
    def is_end(self) -> bool:
        return self.event_type is EventType.END


@dataclass(slots=True, frozen=True)
class CompletedJob:
    """A job whose START and END events were both observed."""

    description: str
    pid: int
    start_time: time
    end_time: time

    @property
    def duration_seconds(self) -> float:
        start = datetime.combine(date.min, self.start_time)
        end = datetime.combine(date.min, self.end_time)
        return (end - start).total_seconds()

    @property
    def duration_minutes(self) -> float:
        return self.duration_seconds / 60.0

    def __str__(self) -> str:
        return (
            f"Job: {self.description} (PID: {self.pid}) - "
            f"Duration: {self.duration_minutes:.2f} minutes"
        )
