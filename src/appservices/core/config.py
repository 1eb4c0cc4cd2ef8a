"""Configuration for the App Services client.

Scope:
- Centralizes environment variables (pydantic-settings) so the CLI and the
  client read the same contract.
- Persists credentials in a per-user `.env` for the `configure` command.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Public cloud base url.
URL = "https://realm.mongodb.com/"
# v3 admin API path.
API_ADMIN_V3_PATH = "api/admin/v3.0/"
DEFAULT_BASE_URL = URL + API_ADMIN_V3_PATH
DEFAULT_AUTH_URL = DEFAULT_BASE_URL + "auth/providers/mongodb-cloud/login"
JSON_MEDIA_TYPE = "application/json"
USER_AGENT = "appservices-python"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "appservices"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "appservices"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "appservices"
    return Path.home() / ".config" / "appservices"


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
    """Write or update variables in the user's global `.env`."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# appservices user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Client settings loaded from the environment and `.env` files."""

    model_config = SettingsConfigDict(
        env_prefix="APPSERVICES_",
        extra="ignore",
        case_sensitive=False,
        # Project `.env` first, then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Admin API root. Must end with a trailing slash.",
    )
    auth_url: str = Field(
        default=DEFAULT_AUTH_URL,
        min_length=8,
        description="Login endpoint exchanging an API key pair for a token.",
    )
    user_agent: str | None = Field(
        default=None,
        description="Prefix prepended to the default User-Agent.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    with_raw: bool = Field(
        default=False,
        description="Keep raw response bytes on every Response.",
    )

    public_api_key: str | None = Field(
        default=None,
        description="Atlas programmatic API public key (login username).",
    )
    private_api_key: SecretStr | None = Field(
        default=None,
        description="Atlas programmatic API private key.",
    )

    debug: bool = Field(
        default=False,
        description="Log at DEBUG level.",
    )

    @property
    def has_credentials(self) -> bool:
        return bool(self.public_api_key) and self.private_api_key is not None
