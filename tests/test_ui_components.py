"""Tests for CLI message formatting."""

import os
import sys
from pathlib import Path

import pytest

from cli.ui_components import (
    describe_discovery,
    format_conversion,
    format_elapsed,
    format_exit_status,
    quote_path,
)
from core.domain.models import ConversionOutcome, DiscoveredFile, DiscoveryReport
from core.services.folder_conversion import ConversionRecord


def _report(found: int, failed: int) -> DiscoveryReport:
    files = [DiscoveredFile(path=Path(f"f{i}")) for i in range(found)]
    return DiscoveryReport(files=files, inaccessible=failed)


@pytest.mark.parametrize(
    "found, failed, expected",
    [
        (3, 0, "Processing 3 files"),
        (2, 5, "Found 2 usable files and 5 inaccessible files"),
        (0, 4, "All 4 discovered files were inaccessible"),
        (0, 0, "Didn't discover any files in the input directory"),
    ],
)
def test_describe_discovery(found, failed, expected):
    assert describe_discovery(_report(found, failed)) == expected


def test_exit_status_variants():
    assert format_exit_status(ConversionOutcome.failure(1)) == "exit status: 1"
    assert format_exit_status(ConversionOutcome.failure(-9)) == "signal: 9 (SIGKILL)"
    assert format_exit_status(ConversionOutcome.failure(None, detail="No such file")) == "No such file"


def test_conversion_lines():
    ok = ConversionRecord(Path("in/a.mkv"), Path("out/a.mkv.mp4"), ConversionOutcome.success())
    bad = ConversionRecord(Path("in/b.mkv"), Path("out/b.mkv.mp4"), ConversionOutcome.failure(234))
    assert format_conversion(ok) == f'Successfully converted "{Path("in/a.mkv")}" to "{Path("out/a.mkv.mp4")}"'
    assert format_conversion(bad) == (
        f'Failed to convert "{Path("in/b.mkv")}" to "{Path("out/b.mkv.mp4")}": exit status: 234'
    )


def test_quote_path_plain():
    assert quote_path(Path("in") / "clip.mkv") == f'"{Path("in") / "clip.mkv"}"'


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX byte filenames")
def test_quote_path_escapes_non_utf8_bytes():
    path = Path(os.fsdecode(b"in/bad\xff.mkv"))
    quoted = quote_path(path)
    assert quoted == '"in/bad\\xff.mkv"'
    quoted.encode("utf-8")


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0.0, "Finished in 0 minutes, 0 seconds, and 0 milliseconds"),
        (125.042, "Finished in 2 minutes, 5 seconds, and 42 milliseconds"),
        (3600.5, "Finished in 60 minutes, 0 seconds, and 500 milliseconds"),
    ],
)
def test_format_elapsed(seconds, expected):
    assert format_elapsed(seconds) == expected
