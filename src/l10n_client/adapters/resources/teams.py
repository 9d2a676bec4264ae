"""Teams API."""

from __future__ import annotations

from typing import Iterable

from l10n_client.adapters.resources.base import ApiExecutor
from l10n_client.core.domain.common import ResponseList
from l10n_client.core.domain.teams import (
    AddTeamRequest,
    AddTeamToProjectRequest,
    ProjectTeamResources,
    Team,
    TeamPatch,
)
from l10n_client.core.utils import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    create_query_params_from_paging,
    throw_if_status_not_204,
)

BASE_TEAMS_URL = "/teams"


def _team_url(team_id: int) -> str:
    return f"{BASE_TEAMS_URL}/{team_id}"


class TeamsApiExecutor(ApiExecutor):
    async def add_team_to_project(
        self,
        project_id: int,
        request: AddTeamToProjectRequest,
    ) -> ProjectTeamResources:
        result = await self._api_client.send_post_request(f"/projects/{project_id}/teams", request)
        return self._json_parser.parse_response_object(ProjectTeamResources, result.payload)

    async def list_teams(self, limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET) -> ResponseList[Team]:
        query_params = create_query_params_from_paging(limit, offset)
        result = await self._api_client.send_get_request(BASE_TEAMS_URL, query_params)
        return self._json_parser.parse_response_list(Team, result.payload)

    async def add_team(self, request: AddTeamRequest) -> Team:
        result = await self._api_client.send_post_request(BASE_TEAMS_URL, request)
        return self._json_parser.parse_response_object(Team, result.payload)

    async def get_team(self, team_id: int) -> Team:
        result = await self._api_client.send_get_request(_team_url(team_id))
        return self._json_parser.parse_response_object(Team, result.payload)

    async def delete_team(self, team_id: int) -> None:
        status_code = await self._api_client.send_delete_request(_team_url(team_id))
        throw_if_status_not_204(status_code, f"Team {team_id} removal failed")

    async def edit_team(self, team_id: int, patches: Iterable[TeamPatch]) -> Team:
        result = await self._api_client.send_patch_request(_team_url(team_id), list(patches))
        return self._json_parser.parse_response_object(Team, result.payload)
