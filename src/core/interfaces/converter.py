"""Contract for media conversion tools.

Why Protocol:
- Structural contract (duck typing) with no rigid inheritance.
- The folder conversion service can run against ffmpeg or against a fake in
  tests without knowing the difference.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.models import ConversionOutcome


@runtime_checkable
class MediaConverter(Protocol):
    """Minimal contract for a conversion tool.

    Design rules:
    - `convert` blocks until the tool exits.
    - A failing file is an outcome, never an exception.
    """

    def is_available(self) -> bool:
        """Return True when the tool can be resolved on this system."""

        ...

    def convert(self, input_path: Path, output_path: Path) -> ConversionOutcome:
        """Convert one file and report how the tool exited."""

        ...
