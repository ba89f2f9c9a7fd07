"""Command-line interface for the job monitor."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Optional

import typer

from .analyzer import analyze_log_file
from .validation import RecordValidationError

app = typer.Typer(help="Report job durations from a START/END CSV log.")

logger = logging.getLogger(__name__)


@app.command()
def analyze(
    input_path: Path = typer.Argument(
        ...,
        metavar="CSV_FILE",
        help="Job log with rows of timestamp,job_description,START/END,PID.",
    ),
    output_path: Optional[Path] = typer.Argument(
        None,
        metavar="[OUTPUT_FILE]",
        help="Write the report here instead of standard output.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
) -> None:
    """Pair START/END events and flag jobs that ran longer than 5 or 10 minutes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    try:
        analyze_log_file(input_path, output_path)
    except RecordValidationError as exc:
        typer.echo(f"CSV format error: {exc}", err=True)
        raise typer.Exit(code=1)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        logger.debug("Failed to read %s", input_path, exc_info=True)
        typer.echo(f"Error reading file: {exc}", err=True)
        raise typer.Exit(code=1)
