"""High-level entry point bundling every resource executor."""

from __future__ import annotations

import httpx

from l10n_client.adapters.http_client import CrowdinApiClient
from l10n_client.adapters.resources import (
    ProjectsGroupsApiExecutor,
    SourceFilesApiExecutor,
    SourceStringsApiExecutor,
    StorageApiExecutor,
    StringTranslationsApiExecutor,
    TeamsApiExecutor,
)
from l10n_client.core.config import AppSettings
from l10n_client.core.interfaces.parser import JsonParser


class LocalizationClient:
    """One transport shared by all executors.

    Usage:
        async with LocalizationClient(AppSettings(api_token="...")) as client:
            projects = await client.projects_groups.list_projects()
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        json_parser: JsonParser | None = None,
    ) -> None:
        self.api = CrowdinApiClient(settings, http_client=http_client, json_parser=json_parser)

        self.projects_groups = ProjectsGroupsApiExecutor(self.api)
        self.source_strings = SourceStringsApiExecutor(self.api)
        self.source_files = SourceFilesApiExecutor(self.api)
        self.storage = StorageApiExecutor(self.api)
        self.teams = TeamsApiExecutor(self.api)
        self.string_translations = StringTranslationsApiExecutor(self.api)

    @property
    def settings(self) -> AppSettings:
        return self.api.settings

    async def __aenter__(self) -> LocalizationClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.api.aclose()
