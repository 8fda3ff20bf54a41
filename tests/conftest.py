"""Shared fixtures: fake converters and a populated input tree."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.domain.models import ConversionOutcome


class FakeConverter:
    """In-memory `MediaConverter`: records calls, fails on chosen file names."""

    def __init__(self, *, available: bool = True, fail_for: tuple[str, ...] = ()) -> None:
        self.available = available
        self.fail_for = set(fail_for)
        self.calls: list[tuple[Path, Path]] = []

    def is_available(self) -> bool:
        return self.available

    def convert(self, input_path: Path, output_path: Path) -> ConversionOutcome:
        self.calls.append((input_path, output_path))
        if input_path.name in self.fail_for:
            return ConversionOutcome.failure(1)
        return ConversionOutcome.success()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ODDJOBS_FFMPEG_BINARY", "ODDJOBS_PUBLIC_IP_URL", "ODDJOBS_HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_converter() -> FakeConverter:
    return FakeConverter()


@pytest.fixture
def make_converter():
    def _make(**kwargs) -> FakeConverter:
        return FakeConverter(**kwargs)

    return _make


@pytest.fixture
def media_tree(tmp_path: Path) -> tuple[Path, Path]:
    """Input dir with three media files (one nested) and an empty output dir."""

    src = tmp_path / "in"
    out = tmp_path / "out"
    (src / "season1").mkdir(parents=True)
    out.mkdir()
    (src / "clip.mkv").write_bytes(b"a")
    (src / "intro.avi").write_bytes(b"b")
    (src / "season1" / "ep01.mov").write_bytes(b"c")
    return src, out
