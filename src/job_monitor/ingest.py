"""Reading job log records from CSV streams."""

from __future__ import annotations

import csv
import logging
from typing import Iterator, Optional, TextIO

from .models import LogEntry
from .validation import RecordValidator

logger = logging.getLogger(__name__)


def read_records(stream: TextIO) -> Iterator[list[str]]:
    """Yield the fields of each non-empty CSV record; there is no header row."""
    for row in csv.reader(stream):
        if not row:
            continue
        yield row


def load_entries(
    stream: TextIO, validator: Optional[RecordValidator] = None
) -> list[LogEntry]:
    """Validate and parse the whole stream into log entries.

    Every record is validated before the first one is parsed. Raises
    RecordValidationError for the first invalid record.
    """
    validator = validator or RecordValidator()
    records = list(read_records(stream))
    validator.validate_all(records)
    entries = [LogEntry.from_fields(*fields) for fields in records]
    logger.debug("Loaded %d log entries.", len(entries))
    return entries
