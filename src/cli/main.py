"""oddjobs CLI (Typer).

Commands:
- `ffmpeg-convert-folder`: batch conversion of a directory tree through ffmpeg.
- `random`: booleans, bounded integers and digit strings.
- `whoami`: the public IP address this machine uses.
- `doctor`: environment diagnostics.

Each command maps its result to an `ExitCode` and only turns it into an
integer when leaving the process.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.ffmpeg_converter import FFmpegConverter
from adapters.http_client import build_client
from adapters.public_ip import PublicIPLookupError, fetch_public_ip
from cli import doctor
from cli.random_app import app as random_app
from cli.ui_components import (
    configure_logging,
    describe_discovery,
    format_conversion,
    format_elapsed,
)
from core import __version__
from core.config import AppSettings
from core.domain.exit_codes import ExitCode
from core.interfaces.converter import MediaConverter
from core.services.folder_conversion import (
    ConversionHooks,
    ConversionRecord,
    ConvertFolderRequest,
    convert_folder,
)

app = typer.Typer(
    name="oddjobs",
    no_args_is_help=True,
    help="Small everyday jobs: batch media conversion, random values, public IP.",
)
app.add_typer(random_app, name="random")
app.command(name="doctor")(doctor.run)

_console = Console(soft_wrap=True, highlight=False, emoji=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"oddjobs {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs on stderr."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    configure_logging(verbose)


def _say(message: str, *, style: str | None = None) -> None:
    _console.print(message, style=style, markup=False)


def _build_converter(settings: AppSettings) -> MediaConverter:
    return FFmpegConverter(settings=settings)


def _print_record(record: ConversionRecord) -> None:
    _say(format_conversion(record), style="green" if record.outcome.ok else "red")


@app.command(name="ffmpeg-convert-folder")
def ffmpeg_convert_folder(
    input_directory: Path = typer.Argument(..., help="The directory to search for files in."),
    output_directory: Path = typer.Argument(..., help="The directory where processed files will be placed."),
    output_extension: str = typer.Argument(..., help="The format to output files in (e.g. mp4)."),
    access_symlinks: bool = typer.Option(
        False,
        "--access-symlinks",
        "--access_symlinks",
        help="Traverses symbolic links while recursively finding files.",
    ),
    access_hidden: bool = typer.Option(
        False,
        "--access-hidden",
        "--access_hidden",
        help="Includes hidden files and reads hidden folders.",
    ),
) -> None:
    """Converts all files from folder A to a specified format and places them in folder B."""

    settings = AppSettings()
    request = ConvertFolderRequest(
        input_directory=input_directory,
        output_directory=output_directory,
        output_extension=output_extension,
        follow_links=access_symlinks,
        include_hidden=access_hidden,
    )
    hooks = ConversionHooks(
        input_invalid=lambda _path: _say("The search path did not exist or wasn't a directory", style="yellow"),
        discovered=lambda report: _say(describe_discovery(report)),
        converted=_print_record,
    )

    result = convert_folder(
        request,
        converter=_build_converter(settings),
        rng=random.Random(),
        hooks=hooks,
    )

    if result.exit_code is ExitCode.TOOL_NOT_FOUND:
        _say("FFmpeg not detected, check your PATH", style="red")
    if result.elapsed_seconds is not None:
        _say(format_elapsed(result.elapsed_seconds))

    raise typer.Exit(code=int(result.exit_code))


@app.command()
def whoami() -> None:
    """Returns the IP address this machine uses to connect to the Internet."""

    settings = AppSettings()
    try:
        with build_client(settings) as client:
            body = fetch_public_ip(settings=settings, client=client)
    except PublicIPLookupError as exc:
        typer.echo(str(exc), nl=False)
        raise typer.Exit(code=int(exc.exit_code))

    typer.echo(body, nl=False)


def run() -> None:
    # Windows terminals default to cp1252; paths in status lines may not fit.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()


if __name__ == "__main__":
    run()
