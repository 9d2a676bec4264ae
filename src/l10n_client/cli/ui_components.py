"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from the visual details.
- Lets several commands reuse the same tables/panels.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from l10n_client.core.domain.common import Pagination
from l10n_client.core.domain.projects import EnterpriseProject, Group, ProjectBase
from l10n_client.core.domain.strings import SourceString


def print_banner(console: Console, base_url: str) -> None:
    title = Text("l10n-client", style="bold cyan")
    subtitle = Text(base_url, style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_projects_table(projects: Iterable[ProjectBase]) -> Table:
    table = Table(title="Projects")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Identifier", style="magenta")
    table.add_column("Source", style="green")
    table.add_column("Targets", style="dim")
    table.add_column("Group", style="yellow")
    for project in projects:
        group = ""
        if isinstance(project, EnterpriseProject) and project.group_id is not None:
            group = str(project.group_id)
        table.add_row(
            str(project.id),
            project.name,
            project.identifier or "",
            project.source_language_id or "",
            ", ".join(project.target_language_ids),
            group,
        )
    return table


def build_groups_table(groups: Iterable[Group]) -> Table:
    table = Table(title="Groups")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Parent", style="dim")
    table.add_column("Projects", style="green")
    table.add_column("Subgroups", style="green")
    for group in groups:
        table.add_row(
            str(group.id),
            group.name,
            "" if group.parent_id is None else str(group.parent_id),
            "" if group.projects_count is None else str(group.projects_count),
            "" if group.subgroups_count is None else str(group.subgroups_count),
        )
    return table


def _short_text(value: str | dict[str, str] | None, max_chars: int = 60) -> str:
    if value is None:
        return ""
    if isinstance(value, dict):
        value = value.get("other") or next(iter(value.values()), "")
    text = value.replace("\n", " ").strip()
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1].rstrip() + "…"


def build_strings_table(strings: Iterable[SourceString]) -> Table:
    table = Table(title="Source Strings")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Identifier", style="magenta")
    table.add_column("Text", style="white")
    table.add_column("File", style="dim")
    table.add_column("Hidden", style="yellow")
    for item in strings:
        table.add_row(
            str(item.id),
            item.identifier or "",
            _short_text(item.text),
            "" if item.file_id is None else str(item.file_id),
            "yes" if item.is_hidden else "",
        )
    return table


def format_pagination(pagination: Pagination, count: int) -> str:
    text = f"{count} item(s) at offset {pagination.offset} (limit {pagination.limit})"
    if pagination.total is not None:
        text += f" of {pagination.total}"
    return text
