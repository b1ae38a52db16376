"""Application configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets storage and logging read paths/levels from a single contract.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "meetbook"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "meetbook"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "meetbook"
    return Path.home() / ".config" / "meetbook"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# meetbook user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    `data_file` is optional: when unset, the path stored in the user
    preferences wins, and failing that `default_data_file()`.
    """

    model_config = SettingsConfigDict(
        env_prefix="MEETBOOK_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    data_file: Path | None = Field(
        default=None,
        description="JSON file holding persons and meetings.",
    )
    prefs_file: Path = Field(
        default_factory=lambda: get_user_config_dir() / "preferences.json",
        description="JSON file holding user preferences.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Root logging level (DEBUG, INFO, WARNING, ...).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives a copy of every log record.",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @staticmethod
    def default_data_file() -> Path:
        return get_user_config_dir() / "data" / "addressbook.json"
