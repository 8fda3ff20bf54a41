"""FFmpeg adapter (subprocess).

Implements `core.interfaces.converter.MediaConverter` by shelling out to the
`ffmpeg` binary: `ffmpeg -i <input> <output>`, one blocking process per file.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from core.config import AppSettings
from core.domain.models import ConversionOutcome

logger = logging.getLogger(__name__)


class FFmpegConverter:
    """Runs ffmpeg and turns its exit status into a `ConversionOutcome`."""

    def __init__(self, binary: str | None = None, settings: AppSettings | None = None) -> None:
        if binary is None:
            binary = (settings or AppSettings()).ffmpeg_binary
        self._binary = binary

    @property
    def binary(self) -> str:
        return self._binary

    def resolve(self) -> str | None:
        """Absolute path of the binary through PATH, or None."""

        return shutil.which(self._binary)

    def is_available(self) -> bool:
        return self.resolve() is not None

    def version(self) -> str | None:
        """First line of `ffmpeg -version`, or None when it cannot be run."""

        try:
            proc = subprocess.run(
                [self._binary, "-version"],
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("Could not run %s -version: %s", self._binary, exc)
            return None
        lines = proc.stdout.splitlines()
        return lines[0].strip() if lines else None

    def convert(self, input_path: Path, output_path: Path) -> ConversionOutcome:
        # stdin closed: ffmpeg must never sit on an overwrite prompt.
        args = [self._binary, "-i", str(input_path), str(output_path)]
        logger.debug("Running %s", args)
        try:
            proc = subprocess.run(
                args,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("Could not start %s: %s", self._binary, exc)
            return ConversionOutcome.failure(None, detail=str(exc))

        if proc.returncode == 0:
            return ConversionOutcome.success()

        stderr_tail = proc.stderr.decode("utf-8", errors="replace").strip().splitlines()[-1:]
        logger.debug("%s exited with %s: %s", self._binary, proc.returncode, "".join(stderr_tail))
        return ConversionOutcome.failure(proc.returncode)
