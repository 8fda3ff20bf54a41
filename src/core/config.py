"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (ffmpeg/HTTP) read config consistently.

Every default reproduces the fixed behaviour of the commands; the settings
only exist so a deployment (or a test) can point them somewhere else.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core import __version__


PUBLIC_IP_URL = "https://icanhazip.com/"


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "oddjobs"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "oddjobs"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "oddjobs"
    return Path.home() / ".config" / "oddjobs"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without dirtying the services.
    - A single config contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ODDJOBS_",
        extra="ignore",
        case_sensitive=False,
        # Per-user config only; a .env in the working directory is ignored.
        env_file=str(get_user_env_file()),
        env_file_encoding="utf-8",
    )

    ffmpeg_binary: str = Field(
        default="ffmpeg",
        min_length=1,
        description="Conversion tool, resolved through PATH.",
    )
    public_ip_url: str = Field(
        default=PUBLIC_IP_URL,
        min_length=8,
        description="Endpoint that answers with the caller's public IP as plain text.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default=f"oddjobs/{__version__}",
        min_length=1,
        description="User-Agent for outgoing HTTP requests.",
    )
