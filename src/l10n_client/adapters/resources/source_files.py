"""Source Files API.

Adding or updating a file is a two-step flow: upload the bytes with
`StorageApiExecutor.add_storage`, then reference the returned storage id here.
"""

from __future__ import annotations

from typing import Iterable

from l10n_client.adapters.resources.base import ApiExecutor
from l10n_client.core.domain.common import ResponseList
from l10n_client.core.domain.files import (
    AddFileRequest,
    DownloadLink,
    File,
    FilePatch,
    FilesListParams,
    ReplaceFileRequest,
    RestoreFileRequest,
)
from l10n_client.core.utils import throw_if_status_not_204


def _files_url(project_id: int) -> str:
    return f"/projects/{project_id}/files"


def _file_url(project_id: int, file_id: int) -> str:
    return f"/projects/{project_id}/files/{file_id}"


class SourceFilesApiExecutor(ApiExecutor):
    async def list_files(
        self,
        project_id: int,
        params: FilesListParams | None = None,
    ) -> ResponseList[File]:
        params = params or FilesListParams()
        result = await self._api_client.send_get_request(_files_url(project_id), params.to_query_params())
        return self._json_parser.parse_response_list(File, result.payload)

    async def add_file(self, project_id: int, request: AddFileRequest) -> File:
        result = await self._api_client.send_post_request(_files_url(project_id), request)
        return self._json_parser.parse_response_object(File, result.payload)

    async def get_file(self, project_id: int, file_id: int) -> File:
        result = await self._api_client.send_get_request(_file_url(project_id, file_id))
        return self._json_parser.parse_response_object(File, result.payload)

    async def update_or_restore_file(
        self,
        project_id: int,
        file_id: int,
        request: ReplaceFileRequest | RestoreFileRequest,
    ) -> File:
        result = await self._api_client.send_put_request(_file_url(project_id, file_id), request)
        return self._json_parser.parse_response_object(File, result.payload)

    async def delete_file(self, project_id: int, file_id: int) -> None:
        status_code = await self._api_client.send_delete_request(_file_url(project_id, file_id))
        throw_if_status_not_204(status_code, f"File {file_id} removal failed")

    async def edit_file(self, project_id: int, file_id: int, patches: Iterable[FilePatch]) -> File:
        result = await self._api_client.send_patch_request(_file_url(project_id, file_id), list(patches))
        return self._json_parser.parse_response_object(File, result.payload)

    async def download_file(self, project_id: int, file_id: int) -> DownloadLink:
        result = await self._api_client.send_get_request(f"{_file_url(project_id, file_id)}/download")
        return self._json_parser.parse_response_object(DownloadLink, result.payload)
