"""Configuration of the client.

- Environment variables are read through pydantic-settings, typed and
  validated at the edge.
- The transport adapter and the CLI read the same settings object.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pinterest_api.core.errors import InvalidArgument

APP_NAME = "pinterest-api"


def normalize_api_version(api_version: str) -> str:
    """`" /v3/ "` -> `"v3"`; a blank version is rejected."""

    version = api_version.strip().strip("/").strip()
    if not version:
        raise InvalidArgument("The api version should not be empty.")
    return version


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


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
    """Write/update variables in the user's global .env file."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pinterest-api user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ApiSettings(BaseSettings):
    """Central configuration of the client."""

    model_config = SettingsConfigDict(
        env_prefix="PINTEREST_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    access_token: SecretStr | None = Field(
        default=None,
        description="OAuth access token sent as a bearer token.",
    )
    base_url: str = Field(
        default="https://api.pinterest.com/",
        min_length=8,
        description="API root URL, without the version segment.",
    )
    api_version: str = Field(
        default="v1",
        min_length=1,
        description="Version path segment; also stripped from continuation URLs.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="pinterest-api-client/0.1",
        min_length=1,
        description="User-Agent header sent with every request.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("api_version")
    @classmethod
    def _normalize_api_version(cls, value: str) -> str:
        return normalize_api_version(value)

    def api_root(self) -> str:
        """Versioned root URL, always ending with a slash."""

        return f"{self.base_url.rstrip('/')}/{self.api_version}/"
