"""End-to-end pipeline: validate, pair, report."""

from __future__ import annotations

import io
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Optional, TextIO

from .config import ReportThresholds
from .ingest import load_entries
from .reporting import ReportGenerator, ReportSummary
from .tracker import EventTracker

logger = logging.getLogger(__name__)


def analyze_stream(
    source: TextIO,
    sink: TextIO,
    *,
    thresholds: Optional[ReportThresholds] = None,
) -> ReportSummary:
    entries = load_entries(source)
    jobs = EventTracker().track(entries)
    return ReportGenerator(thresholds).write(jobs, sink)


def analyze_log_file(
    input_path: Path,
    output_path: Optional[Path] = None,
    *,
    thresholds: Optional[ReportThresholds] = None,
) -> ReportSummary:
    """Analyze a job log file and write the report to a file or stdout.

    The report is rendered in memory first and the output file is only
    created once the whole pipeline succeeded, so a failing run leaves no
    partial report behind.
    """
    input_path = Path(input_path)
    logger.debug("Reading job log from %s", input_path)
    report = io.StringIO()
    with open(input_path, newline="", encoding="utf-8") as source:
        summary = analyze_stream(source, report, thresholds=thresholds)

    with ExitStack() as stack:
        if output_path is not None:
            sink = stack.enter_context(open(Path(output_path), "w", encoding="utf-8"))
        else:
            sink = sys.stdout
        sink.write(report.getvalue())
        sink.flush()

    if output_path is not None:
        logger.info("Report written to %s", output_path)
    return summary
