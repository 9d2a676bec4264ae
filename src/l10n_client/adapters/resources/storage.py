"""Storage API (raw uploads referenced later by files, screenshots, ...)."""

from __future__ import annotations

from urllib.parse import quote

from l10n_client.adapters.resources.base import ApiExecutor
from l10n_client.core.domain.common import ResponseList
from l10n_client.core.domain.files import Storage
from l10n_client.core.utils import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    create_query_params_from_paging,
    throw_if_status_not_204,
)

BASE_STORAGES_URL = "/storages"


class StorageApiExecutor(ApiExecutor):
    async def list_storages(
        self,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> ResponseList[Storage]:
        query_params = create_query_params_from_paging(limit, offset)
        result = await self._api_client.send_get_request(BASE_STORAGES_URL, query_params)
        return self._json_parser.parse_response_list(Storage, result.payload)

    async def add_storage(self, content: bytes, file_name: str) -> Storage:
        # The file name travels in a header, so it must be URL-encoded.
        headers = {
            "Crowdin-API-FileName": quote(file_name),
            "Content-Type": "application/octet-stream",
        }
        result = await self._api_client.send_post_request(BASE_STORAGES_URL, content, headers)
        return self._json_parser.parse_response_object(Storage, result.payload)

    async def get_storage(self, storage_id: int) -> Storage:
        result = await self._api_client.send_get_request(f"{BASE_STORAGES_URL}/{storage_id}")
        return self._json_parser.parse_response_object(Storage, result.payload)

    async def delete_storage(self, storage_id: int) -> None:
        status_code = await self._api_client.send_delete_request(f"{BASE_STORAGES_URL}/{storage_id}")
        throw_if_status_not_204(status_code, f"Storage {storage_id} removal failed")
