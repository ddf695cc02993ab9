"""Application configuration.

Environment variables (prefix `SPANNERLY_`) are read through
pydantic-settings. The pure tools in `core.services` take no settings; only
the CLI consumes this module.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.case_variant import CaseVariant

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "spannerly"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "spannerly"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "spannerly"
    return Path.home() / ".config" / "spannerly"


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


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# spannerly user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central CLI configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SPANNERLY_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user's global one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_case_variant: CaseVariant = Field(
        default=CaseVariant.default(),
        description="Case variant used by `spannerly case` when --to is omitted.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level when --verbose is not given.",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation of JSON output (0 for compact).",
    )

    @field_validator("default_case_variant", mode="before")
    @classmethod
    def _parse_variant(cls, value: object) -> object:
        if isinstance(value, str):
            return CaseVariant.parse(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
