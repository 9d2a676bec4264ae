"""Typer CLI entry point.

Thin layer: parses options, calls the executors through `LocalizationClient`
and renders the result with Rich. No API logic lives here.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated, Any, Awaitable, Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from l10n_client.cli import doctor
from l10n_client.cli.ui_components import (
    build_groups_table,
    build_projects_table,
    build_strings_table,
    format_pagination,
    print_banner,
)
from l10n_client.client import LocalizationClient
from l10n_client.core.config import AppSettings
from l10n_client.core.domain.common import Pagination
from l10n_client.core.domain.strings import StringScope, StringsListParams
from l10n_client.core.errors import L10nClientError
from l10n_client.core.utils import fetch_all

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Browse a Crowdin workspace from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; our own debug lines already cover it.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _run(coro: Awaitable[T]) -> T:
    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except L10nClientError as exc:
        _console.print(f"[red]Error:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc


def _print_footer(pagination: Pagination | None, count: int) -> None:
    if pagination is None:
        _console.print(f"{count} item(s)", style="dim")
    else:
        _console.print(format_pagination(pagination, count), style="dim")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every request.")] = False,
    banner: Annotated[bool, typer.Option("--banner/--no-banner", help="Show the banner.")] = False,
) -> None:
    _configure_logging(verbose)
    if banner:
        print_banner(_console, AppSettings().api_base_url())


@app.command()
def projects(
    group_id: Annotated[Optional[int], typer.Option("--group-id", help="Enterprise group filter.")] = None,
    user_id: Annotated[Optional[int], typer.Option("--user-id", help="Owner filter.")] = None,
    manager: Annotated[bool, typer.Option("--manager", help="Only projects you manage.")] = False,
    limit: Annotated[Optional[int], typer.Option("--limit", min=1, max=500)] = None,
    offset: Annotated[int, typer.Option("--offset", min=0)] = 0,
    fetch_every_page: Annotated[bool, typer.Option("--all", help="Walk every page.")] = False,
) -> None:
    """List projects."""

    settings = AppSettings()
    page_size = limit or settings.page_limit

    async def _list() -> tuple[list[Any], Pagination | None]:
        async with LocalizationClient(settings) as client:
            executor = client.projects_groups
            if fetch_every_page:
                items = await fetch_all(
                    lambda lim, off: executor.list_projects(user_id, group_id, manager, lim, off),
                    page_size=page_size,
                )
                return items, None
            page = await executor.list_projects(user_id, group_id, manager, page_size, offset)
            return page.data, page.pagination

    items, pagination = _run(_list())
    _console.print(build_projects_table(items))
    _print_footer(pagination, len(items))


@app.command()
def groups(
    parent_id: Annotated[Optional[int], typer.Option("--parent-id", help="Parent group (0 = root).")] = None,
    limit: Annotated[Optional[int], typer.Option("--limit", min=1, max=500)] = None,
    offset: Annotated[int, typer.Option("--offset", min=0)] = 0,
) -> None:
    """List Enterprise groups."""

    settings = AppSettings()

    async def _list() -> tuple[list[Any], Pagination]:
        async with LocalizationClient(settings) as client:
            page = await client.projects_groups.list_groups(parent_id, limit or settings.page_limit, offset)
            return page.data, page.pagination

    items, pagination = _run(_list())
    _console.print(build_groups_table(items))
    _print_footer(pagination, len(items))


@app.command()
def strings(
    project_id: Annotated[int, typer.Argument(help="Project id.")],
    file_id: Annotated[Optional[int], typer.Option("--file-id")] = None,
    croql: Annotated[Optional[str], typer.Option("--croql", help="CroQL query.")] = None,
    text_filter: Annotated[Optional[str], typer.Option("--filter", help="Free-text filter.")] = None,
    scope: Annotated[Optional[StringScope], typer.Option("--scope", case_sensitive=False)] = None,
    limit: Annotated[Optional[int], typer.Option("--limit", min=1, max=500)] = None,
    offset: Annotated[int, typer.Option("--offset", min=0)] = 0,
) -> None:
    """List source strings of a project."""

    settings = AppSettings()
    params = StringsListParams(
        file_id=file_id,
        croql=croql,
        filter=text_filter,
        scope=scope,
        limit=limit or settings.page_limit,
        offset=offset,
    )

    async def _list() -> tuple[list[Any], Pagination]:
        async with LocalizationClient(settings) as client:
            page = await client.source_strings.list_strings(project_id, params)
            return page.data, page.pagination

    items, pagination = _run(_list())
    _console.print(build_strings_table(items))
    _print_footer(pagination, len(items))


def run() -> None:
    app()
