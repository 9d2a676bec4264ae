"""HTTP transport contract.

Why Protocol:
- Executors build paths and bodies; the transport owns I/O, auth and error mapping.
- Tests replace it with an `AsyncMock` without touching the network.

Design rules:
- Every method is async because it performs I/O.
- Paths are relative to the configured API base URL.
- Error statuses are raised by the transport, never returned.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from l10n_client.core.domain.common import ApiResult
from l10n_client.core.interfaces.parser import JsonParser


@runtime_checkable
class ApiTransport(Protocol):
    json_parser: JsonParser

    async def send_get_request(
        self,
        path: str,
        query_params: Mapping[str, str] | None = None,
    ) -> ApiResult:
        ...

    async def send_post_request(
        self,
        path: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResult:
        ...

    async def send_patch_request(self, path: str, body: Any) -> ApiResult:
        ...

    async def send_put_request(self, path: str, body: Any) -> ApiResult:
        ...

    async def send_delete_request(
        self,
        path: str,
        query_params: Mapping[str, str] | None = None,
    ) -> int:
        """Return the raw status code; executors decide whether it is the expected one."""

        ...
