"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from l10n_client.client import LocalizationClient
from l10n_client.core.config import (
    AppSettings,
    get_user_env_file,
    read_user_env_vars,
    write_user_env_vars,
)
from l10n_client.core.errors import L10nClientError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    async with LocalizationClient(settings) as client:
        try:
            page = await client.projects_groups.list_projects(limit=1)
        except L10nClientError as exc:
            return False, exc.message
    return True, f"{len(page)} project(s) visible on first page"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="l10n-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    has_token = bool(settings.api_token)
    if has_token:
        table.add_row("API token", "OK", "Bearer token configured")
    else:
        table.add_row("API token", "MISSING", "Run `l10n doctor setup` or set L10N_CLIENT_API_TOKEN")
    table.add_row("Organization", "OK", settings.organization or "(crowdin.com)")
    table.add_row("Base URL", "OK", settings.api_base_url())
    user_env = get_user_env_file()
    if read_user_env_vars(user_env):
        table.add_row("User config", "OK", str(user_env))
    else:
        table.add_row("User config", "NONE", f"{user_env} (optional)")

    # Connectivity
    if has_token:
        ok_api, detail_api = asyncio.run(_check_api(settings))
        table.add_row("API access", "OK" if ok_api else "FAIL", detail_api)
    else:
        table.add_row("API access", "SKIPPED", "No token")

    _console.print(table)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores the token in the user config .env)."""

    organization = typer.prompt(
        "Enterprise organization (leave empty for crowdin.com)",
        default="",
        show_default=False,
    ).strip()
    api_token = typer.prompt("API token", hide_input=True, confirmation_prompt=False).strip()

    if not api_token:
        raise typer.BadParameter("API token is required")

    env_path = write_user_env_vars(
        {
            "L10N_CLIENT_API_TOKEN": api_token,
            "L10N_CLIENT_ORGANIZATION": organization or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
