"""Projects & Groups API.

Groups exist only on Crowdin Enterprise; projects on both flavours. Project
methods return `ProjectResource`, so the caller gets `Project`,
`ProjectSettings` or `EnterpriseProject` depending on the payload.
"""

from __future__ import annotations

from typing import Iterable

from l10n_client.adapters.resources.base import ApiExecutor
from l10n_client.core.domain.common import ResponseList
from l10n_client.core.domain.projects import (
    AddGroupRequest,
    AddProjectRequest,
    Group,
    GroupPatch,
    ProjectPatch,
    ProjectResource,
)
from l10n_client.core.utils import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    add_param_if_present,
    create_query_params_from_paging,
    throw_if_status_not_204,
)

BASE_GROUPS_URL = "/groups"
BASE_PROJECTS_URL = "/projects"


def _group_url(group_id: int) -> str:
    return f"{BASE_GROUPS_URL}/{group_id}"


def _project_url(project_id: int) -> str:
    return f"{BASE_PROJECTS_URL}/{project_id}"


class ProjectsGroupsApiExecutor(ApiExecutor):
    # Groups

    async def list_groups(
        self,
        parent_id: int | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> ResponseList[Group]:
        query_params = create_query_params_from_paging(limit, offset)
        add_param_if_present(query_params, "parentId", parent_id)

        result = await self._api_client.send_get_request(BASE_GROUPS_URL, query_params)
        return self._json_parser.parse_response_list(Group, result.payload)

    async def add_group(self, request: AddGroupRequest) -> Group:
        result = await self._api_client.send_post_request(BASE_GROUPS_URL, request)
        return self._json_parser.parse_response_object(Group, result.payload)

    async def get_group(self, group_id: int) -> Group:
        result = await self._api_client.send_get_request(_group_url(group_id))
        return self._json_parser.parse_response_object(Group, result.payload)

    async def delete_group(self, group_id: int) -> None:
        status_code = await self._api_client.send_delete_request(_group_url(group_id))
        throw_if_status_not_204(status_code, f"Group {group_id} removal failed")

    async def edit_group(self, group_id: int, patches: Iterable[GroupPatch]) -> Group:
        result = await self._api_client.send_patch_request(_group_url(group_id), list(patches))
        return self._json_parser.parse_response_object(Group, result.payload)

    # Projects

    async def list_projects(
        self,
        user_id: int | None = None,
        group_id: int | None = None,
        has_manager_access: bool = False,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> ResponseList[ProjectResource]:
        query_params = create_query_params_from_paging(limit, offset)
        add_param_if_present(query_params, "userId", user_id)
        add_param_if_present(query_params, "groupId", group_id)
        add_param_if_present(query_params, "hasManagerAccess", has_manager_access)

        result = await self._api_client.send_get_request(BASE_PROJECTS_URL, query_params)
        return self._json_parser.parse_response_list(ProjectResource, result.payload)

    async def add_project(self, request: AddProjectRequest) -> ProjectResource:
        result = await self._api_client.send_post_request(BASE_PROJECTS_URL, request)
        return self._json_parser.parse_response_object(ProjectResource, result.payload)

    async def get_project(self, project_id: int) -> ProjectResource:
        result = await self._api_client.send_get_request(_project_url(project_id))
        return self._json_parser.parse_response_object(ProjectResource, result.payload)

    async def delete_project(self, project_id: int) -> None:
        status_code = await self._api_client.send_delete_request(_project_url(project_id))
        throw_if_status_not_204(status_code, f"Project {project_id} removal failed")

    async def edit_project(self, project_id: int, patches: Iterable[ProjectPatch]) -> ProjectResource:
        result = await self._api_client.send_patch_request(_project_url(project_id), list(patches))
        return self._json_parser.parse_response_object(ProjectResource, result.payload)
