"""Folder conversion orchestration.

The CLI delegates the whole batch to `convert_folder`: tool check, discovery,
collision-safe output naming and the sequential conversion loop. Printing is
left to the caller through `ConversionHooks`, so the flow stays reusable from
tests or other entry-points.
"""

from __future__ import annotations

import errno
import logging
import os
import random
import stat
import string
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator

from core.domain.exit_codes import ExitCode
from core.domain.models import ConversionOutcome, DiscoveredFile, DiscoveryReport
from core.interfaces.converter import MediaConverter

logger = logging.getLogger(__name__)

SUFFIX_ALPHABET = string.ascii_letters + string.digits
SUFFIX_LENGTH = 16


@dataclass
class ConvertFolderRequest:
    """Parameters of a folder conversion run."""

    input_directory: Path
    output_directory: Path
    output_extension: str
    follow_links: bool = False
    include_hidden: bool = False


@dataclass
class ConversionHooks:
    """Optional callbacks for UI layers."""

    input_invalid: Callable[[Path], None] | None = None
    discovered: Callable[[DiscoveryReport], None] | None = None
    converted: Callable[["ConversionRecord"], None] | None = None


@dataclass(frozen=True)
class ConversionRecord:
    input_path: Path
    output_path: Path
    outcome: ConversionOutcome


@dataclass
class ConversionRunResult:
    """Output of a `convert_folder` invocation."""

    exit_code: ExitCode
    discovery: DiscoveryReport | None = None
    records: list[ConversionRecord] = field(default_factory=list)
    elapsed_seconds: float | None = None


def random_suffix(rng: random.Random, length: int = SUFFIX_LENGTH) -> str:
    return "".join(rng.choice(SUFFIX_ALPHABET) for _ in range(length))


def build_output_path(
    directory: Path,
    filename: str,
    extension: str,
    *,
    rng: random.Random | None = None,
) -> Path:
    """Build `<directory>/<filename>.<extension>`.

    With `rng`, a collision suffix is inserted:
    `<directory>/<filename> (<16 alphanumerics>).<extension>`.
    The original filename keeps its own extension.
    """

    file_id = filename
    if rng is not None:
        file_id = f"{file_id} ({random_suffix(rng)})"
    return directory / f"{file_id}.{extension}"


def _walk(root: Path, *, follow_links: bool, include_hidden: bool) -> Iterator[Path | OSError]:
    """Yield regular files under `root`, or the error met on an inaccessible entry.

    Rules:
    - A missing root yields nothing; a root that is a file yields itself.
    - The root is always resolved and never filtered as hidden.
    - Without `follow_links`, symbolic links below the root are skipped.
    """

    try:
        st = root.stat()
    except FileNotFoundError:
        return
    except OSError as exc:
        yield exc
        return

    if stat.S_ISREG(st.st_mode):
        yield root
    elif stat.S_ISDIR(st.st_mode):
        yield from _walk_dir(
            root,
            follow_links=follow_links,
            include_hidden=include_hidden,
            ancestors=frozenset({(st.st_dev, st.st_ino)}),
        )


def _walk_dir(
    directory: Path,
    *,
    follow_links: bool,
    include_hidden: bool,
    ancestors: frozenset[tuple[int, int]],
) -> Iterator[Path | OSError]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        yield exc
        return

    for entry in entries:
        if not include_hidden and entry.name.startswith("."):
            continue

        subdir: Path | None = None
        found: Path | OSError | None = None
        key: tuple[int, int] | None = None
        try:
            is_link = entry.is_symlink()
            if is_link and not follow_links:
                continue
            if entry.is_dir(follow_symlinks=follow_links):
                entry_stat = entry.stat(follow_symlinks=follow_links)
                key = (entry_stat.st_dev, entry_stat.st_ino)
                if key in ancestors:
                    found = OSError(errno.ELOOP, "File system loop found", entry.path)
                else:
                    subdir = Path(entry.path)
            elif entry.is_file(follow_symlinks=follow_links):
                found = Path(entry.path)
            elif is_link and not os.path.exists(entry.path):
                found = FileNotFoundError(errno.ENOENT, "Broken symbolic link", entry.path)
        except OSError as exc:
            found = exc

        if found is not None:
            yield found
        elif subdir is not None and key is not None:
            yield from _walk_dir(
                subdir,
                follow_links=follow_links,
                include_hidden=include_hidden,
                ancestors=ancestors | {key},
            )


def discover_files(request: ConvertFolderRequest) -> DiscoveryReport:
    """Walk the input directory and flag files whose output name is taken.

    A name is taken when the output file already exists, or when a file
    discovered earlier in the same walk maps to it.
    """

    files: list[DiscoveredFile] = []
    inaccessible = 0
    claimed: set[Path] = set()

    for item in _walk(
        request.input_directory,
        follow_links=request.follow_links,
        include_hidden=request.include_hidden,
    ):
        if isinstance(item, OSError):
            logger.debug("Inaccessible entry: %s", item)
            inaccessible += 1
            continue

        candidate = build_output_path(request.output_directory, item.name, request.output_extension)
        scramble = candidate in claimed or candidate.exists()
        claimed.add(candidate)
        files.append(DiscoveredFile(path=item, scramble=scramble))

    logger.debug("Discovery done: %d usable, %d inaccessible", len(files), inaccessible)
    return DiscoveryReport(files=files, inaccessible=inaccessible)


def discovery_verdict(report: DiscoveryReport) -> ExitCode:
    if report.accessible > 0:
        return ExitCode.SUCCESS
    if report.inaccessible > 0:
        return ExitCode.ALL_INACCESSIBLE
    return ExitCode.NO_FILES


def convert_folder(
    request: ConvertFolderRequest,
    *,
    converter: MediaConverter,
    rng: random.Random,
    hooks: ConversionHooks | None = None,
    clock: Callable[[], float] = time.perf_counter,
) -> ConversionRunResult:
    hooks = hooks or ConversionHooks()

    if not converter.is_available():
        return ConversionRunResult(exit_code=ExitCode.TOOL_NOT_FOUND)

    # A bad input path is reported, then walked anyway.
    input_directory = request.input_directory
    if not input_directory.exists() or not input_directory.is_dir():
        logger.debug("Input path is not a directory: %s", input_directory)
        if hooks.input_invalid:
            hooks.input_invalid(input_directory)

    report = discover_files(request)
    if hooks.discovered:
        hooks.discovered(report)

    verdict = discovery_verdict(report)
    if not verdict.ok:
        return ConversionRunResult(exit_code=verdict, discovery=report)

    records: list[ConversionRecord] = []
    started = clock()
    for file in report.files:
        output_path = build_output_path(
            request.output_directory,
            file.path.name,
            request.output_extension,
            rng=rng if file.scramble else None,
        )
        outcome = converter.convert(file.path, output_path)
        record = ConversionRecord(input_path=file.path, output_path=output_path, outcome=outcome)
        records.append(record)
        if hooks.converted:
            hooks.converted(record)

    return ConversionRunResult(
        exit_code=ExitCode.SUCCESS,
        discovery=report,
        records=records,
        elapsed_seconds=max(clock() - started, 0.0),
    )
