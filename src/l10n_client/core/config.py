"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets the HTTP adapter and the CLI read the same settings contract.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import dotenv_values, set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "l10n-client"
DEFAULT_BASE_URL = "https://api.crowdin.com/api/v2"
ENTERPRISE_BASE_URL_TEMPLATE = "https://{organization}.api.crowdin.com/api/v2"


def get_user_env_file() -> Path:
    """`.env` inside the platform's per-user config dir (XDG, AppData, Library)."""

    return Path(typer.get_app_dir(APP_NAME)) / ".env"


def read_user_env_vars(env_path: Path | None = None) -> dict[str, str]:
    env_path = env_path or get_user_env_file()
    if not env_path.exists():
        return {}
    return {key: value for key, value in dotenv_values(env_path).items() if value is not None}


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Merge `values` into the user's .env; `None` leaves an existing entry untouched."""

    env_path = env_path or get_user_env_file()
    if not env_path.exists():
        env_path.parent.mkdir(parents=True, exist_ok=True)
        env_path.write_text(f"# {APP_NAME} user config\n", encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value)
    return env_path


class AppSettings(BaseSettings):
    """Central client configuration.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without polluting executors.
    - A single configuration contract for the CLI and the HTTP adapter.
    """

    model_config = SettingsConfigDict(
        env_prefix="L10N_CLIENT_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_token: str | None = Field(
        default=None,
        description="Personal access token sent as a Bearer token.",
    )
    organization: str | None = Field(
        default=None,
        description="Crowdin Enterprise organization domain (e.g. 'acme').",
    )
    base_url: str | None = Field(
        default=None,
        description="Explicit API base URL; overrides the organization-derived one.",
    )
    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="l10n-client/0.1",
        min_length=1,
        description="User-Agent sent with every API request.",
    )
    page_limit: int = Field(
        default=25,
        ge=1,
        le=500,
        description="Default page size used by the CLI list commands.",
    )

    def api_base_url(self) -> str:
        """Resolve the effective base URL (override > enterprise > crowdin.com)."""

        if self.base_url:
            return self.base_url.rstrip("/")
        if self.organization:
            return ENTERPRISE_BASE_URL_TEMPLATE.format(organization=self.organization.strip())
        return DEFAULT_BASE_URL
