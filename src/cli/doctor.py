"""Doctor command for environment diagnostics."""

from __future__ import annotations

from rich.console import Console

from adapters.ffmpeg_converter import FFmpegConverter
from adapters.public_ip import PublicIPLookupError, fetch_public_ip
from cli.ui_components import build_doctor_table
from core.config import AppSettings

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        body = fetch_public_ip(settings=settings)
    except PublicIPLookupError as exc:
        return False, f"{exc} ({settings.public_ip_url})"
    return True, f"{settings.public_ip_url} -> {body.strip()}"


def run() -> None:
    """Check that ffmpeg and the public IP endpoint are usable."""

    settings = AppSettings()
    converter = FFmpegConverter(settings=settings)

    table = build_doctor_table()

    resolved = converter.resolve()
    if resolved:
        table.add_row("FFmpeg", "OK", resolved)
        table.add_row("FFmpeg version", "OK", converter.version() or "unknown")
    else:
        table.add_row("FFmpeg", "FAIL", f"'{converter.binary}' not found on PATH")

    ok_http, detail_http = _check_http(settings)
    table.add_row("Public IP endpoint", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not resolved:
        _console.print(
            "\n[yellow]Note:[/yellow] `ffmpeg-convert-folder` exits early until ffmpeg is on your PATH."
        )
