"""Source Strings API."""

from __future__ import annotations

from typing import Any, Iterable

from l10n_client.adapters.resources.base import ApiExecutor
from l10n_client.core.domain.common import ResponseList
from l10n_client.core.domain.strings import (
    AddStringRequest,
    SourceString,
    SourceStringPatch,
    StringsListParams,
)
from l10n_client.core.utils import throw_if_status_not_204


def _strings_url(project_id: int) -> str:
    return f"/projects/{project_id}/strings"


def _string_url(project_id: int, string_id: int) -> str:
    return f"/projects/{project_id}/strings/{string_id}"


class SourceStringsApiExecutor(ApiExecutor):
    async def list_strings(
        self,
        project_id: int,
        params: StringsListParams | None = None,
        **filters: Any,
    ) -> ResponseList[SourceString]:
        """List strings, filtered either by `params` or by the same fields as keywords.

        `list_strings(2, file_id=48, scope=StringScope.TEXT)` is shorthand for
        `list_strings(2, StringsListParams(file_id=48, scope=StringScope.TEXT))`.
        """

        if params is None:
            params = StringsListParams(**filters)
        elif filters:
            raise TypeError("Pass either a StringsListParams or keyword filters, not both")
        result = await self._api_client.send_get_request(_strings_url(project_id), params.to_query_params())
        return self._json_parser.parse_response_list(SourceString, result.payload)

    async def add_string(self, project_id: int, request: AddStringRequest) -> SourceString:
        result = await self._api_client.send_post_request(_strings_url(project_id), request)
        return self._json_parser.parse_response_object(SourceString, result.payload)

    async def get_string(
        self,
        project_id: int,
        string_id: int,
        denormalize_placeholders: bool = False,
    ) -> SourceString:
        query_params = {"denormalizePlaceholders": "1"} if denormalize_placeholders else None
        result = await self._api_client.send_get_request(_string_url(project_id, string_id), query_params)
        return self._json_parser.parse_response_object(SourceString, result.payload)

    async def delete_string(self, project_id: int, string_id: int) -> None:
        status_code = await self._api_client.send_delete_request(_string_url(project_id, string_id))
        throw_if_status_not_204(status_code, f"String {string_id} removal failed")

    async def edit_string(
        self,
        project_id: int,
        string_id: int,
        patches: Iterable[SourceStringPatch],
    ) -> SourceString:
        result = await self._api_client.send_patch_request(_string_url(project_id, string_id), list(patches))
        return self._json_parser.parse_response_object(SourceString, result.payload)
