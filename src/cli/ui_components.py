"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Lets several commands share message formats, tables and the log handler.
"""

from __future__ import annotations

import logging
import os
import signal
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from core.domain.models import ConversionOutcome, DiscoveryReport
from core.services.folder_conversion import ConversionRecord


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr through Rich; DEBUG with --verbose, WARNING otherwise."""

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def quote_path(path: Path) -> str:
    """Quote a path for display; bytes that are not UTF-8 show as `\\xNN` escapes."""

    text = os.fsencode(path).decode("utf-8", "backslashreplace")
    return f'"{text}"'


def describe_discovery(report: DiscoveryReport) -> str:
    found = report.accessible
    failed = report.inaccessible
    if found and not failed:
        return f"Processing {found} files"
    if found and failed:
        return f"Found {found} usable files and {failed} inaccessible files"
    if failed:
        return f"All {failed} discovered files were inaccessible"
    return "Didn't discover any files in the input directory"


def format_exit_status(outcome: ConversionOutcome) -> str:
    code = outcome.returncode
    if code is None:
        return outcome.detail or "could not start the conversion tool"
    if code < 0:
        try:
            name = signal.Signals(-code).name
        except ValueError:
            return f"signal: {-code}"
        return f"signal: {-code} ({name})"
    return f"exit status: {code}"


def format_conversion(record: ConversionRecord) -> str:
    source = quote_path(record.input_path)
    target = quote_path(record.output_path)
    if record.outcome.ok:
        return f"Successfully converted {source} to {target}"
    return f"Failed to convert {source} to {target}: {format_exit_status(record.outcome)}"


def format_elapsed(seconds: float) -> str:
    total_ms = int(round(seconds * 1000))
    total_s = total_ms // 1000
    return (
        f"Finished in {total_s // 60} minutes, {total_s % 60} seconds, "
        f"and {total_ms % 1000} milliseconds"
    )


def build_doctor_table() -> Table:
    table = Table(title="oddjobs doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
