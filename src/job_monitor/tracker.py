"""Pairing of START/END events into completed jobs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import time
from typing import Iterable

from .models import CompletedJob, LogEntry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TrackingStats:
    """Counters for events that did not produce a completed job."""

    completed: int = 0
    unmatched_ends: int = 0
    orphaned_starts: int = 0
    overwritten_starts: int = 0


class EventTracker:
    """Matches START and END events by pid, in input order.

    A second START for a pid that is still open replaces the earlier start
    time. ENDs without an open START and STARTs that never end are dropped;
    they only show up in ``stats``.
    """

    def __init__(self) -> None:
        self.stats = TrackingStats()

    def track(self, entries: Iterable[LogEntry]) -> list[CompletedJob]:
        open_starts: dict[int, time] = {}
        stats = TrackingStats()
        completed: list[CompletedJob] = []

        for entry in entries:
            if entry.is_start:
                if entry.pid in open_starts:
                    stats.overwritten_starts += 1
                open_starts[entry.pid] = entry.timestamp
                continue

            start_time = open_starts.pop(entry.pid, None)
            if start_time is None:
                stats.unmatched_ends += 1
                continue
            completed.append(
                CompletedJob(
                    description=entry.description,
                    pid=entry.pid,
                    start_time=start_time,
                    end_time=entry.timestamp,
                )
            )

        stats.completed = len(completed)
        stats.orphaned_starts = len(open_starts)
        self.stats = stats
        logger.debug(
            "Tracked %d jobs: unmatched_ends=%d orphaned_starts=%d overwritten_starts=%d",
            stats.completed,
            stats.unmatched_ends,
            stats.orphaned_starts,
            stats.overwritten_starts,
        )
        return completed


def track_jobs(entries: Iterable[LogEntry]) -> list[CompletedJob]:
    return EventTracker().track(entries)
