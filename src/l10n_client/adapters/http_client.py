"""httpx-based transport.

Why a wrapper:
- Standardizes base URL, timeouts, auth headers and logging for every executor.
- Maps httpx failures and API error bodies to the library's exception taxonomy.
- Easy to test: executors only see `ApiTransport`, and the httpx client itself
  can be injected (e.g. with `httpx.MockTransport`).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from l10n_client.adapters.json_parser import DefaultJsonParser
from l10n_client.core.config import AppSettings
from l10n_client.core.domain.common import ApiResult
from l10n_client.core.errors import (
    ApiStatusError,
    ApiValidationError,
    DeserializationError,
    TransportError,
)
from l10n_client.core.interfaces.parser import JsonParser

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    authorized: bool = True,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the API defaults.

    Why a builder:
    - Centralizes timeouts/headers so every resource behaves the same way.
    - `authorized=False` gives a bare client for pre-signed download links,
      which reject an extra `Authorization` header.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if authorized and settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        base_url=settings.api_base_url() if authorized else "",
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


def serialize_body(body: Any) -> Any:
    """Convert request objects (models, lists of patches, enums) into plain JSON."""

    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, (list, tuple)):
        return [serialize_body(item) for item in body]
    if isinstance(body, Mapping):
        return {key: serialize_body(value) for key, value in body.items()}
    if isinstance(body, Enum):
        return body.value
    return body


def _collect_validation_errors(raw_errors: list[Any]) -> dict[str, list[str]]:
    # [{"error": {"key": "name", "errors": [{"code": "isEmpty", "message": "..."}]}}]
    errors: dict[str, list[str]] = {}
    for item in raw_errors:
        if not isinstance(item, dict) or not isinstance(item.get("error"), dict):
            continue
        error = item["error"]
        key = str(error.get("key") or "request")
        for detail in error.get("errors") or []:
            if isinstance(detail, dict):
                message = detail.get("message") or detail.get("code")
                if message:
                    errors.setdefault(key, []).append(str(message))
    return errors


def error_from_response(method: str, path: str, response: httpx.Response) -> ApiStatusError:
    """Build the exception describing an error response."""

    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and isinstance(body.get("errors"), list):
        errors = _collect_validation_errors(body["errors"])
        message = "; ".join(f"{key}: {', '.join(msgs)}" for key, msgs in errors.items())
        logger.warning("%s %s -> HTTP %s (validation): %s", method, path, status, message)
        return ApiValidationError(message or "Request validation failed", status_code=status, errors=errors)

    message = response.reason_phrase or f"HTTP {status}"
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        message = str(body["error"].get("message") or message)
    logger.warning("%s %s -> HTTP %s: %s", method, path, status, message)
    return ApiStatusError(
        message,
        status_code=status,
        details={"method": method, "path": path, "body": body},
    )


class CrowdinApiClient:
    """`ApiTransport` implementation on top of `httpx.AsyncClient`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        json_parser: JsonParser | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = http_client or build_async_client(self._settings)
        self._owns_client = http_client is None
        self.json_parser: JsonParser = json_parser or DefaultJsonParser()
        if not self._settings.api_token:
            logger.debug("No API token configured; requests are sent unauthenticated")

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def __aenter__(self) -> CrowdinApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _send(
        self,
        method: str,
        path: str,
        *,
        query_params: Mapping[str, str] | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {}
        if isinstance(body, (bytes, bytearray)):
            kwargs["content"] = bytes(body)
        elif body is not None:
            kwargs["json"] = serialize_body(body)

        logger.debug("%s %s params=%s", method, path, dict(query_params or {}))
        try:
            response = await self._client.request(
                method,
                path,
                params=dict(query_params) if query_params else None,
                headers=dict(headers) if headers else None,
                **kwargs,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"{method} {path} timed out",
                details={"method": method, "path": path},
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(
                f"{method} {path} failed: {exc}",
                details={"method": method, "path": path},
            ) from exc

        if response.status_code >= 400:
            raise error_from_response(method, path, response)
        logger.debug("%s %s -> HTTP %s", method, path, response.status_code)
        return response

    @staticmethod
    def _to_result(response: httpx.Response) -> ApiResult:
        if response.status_code == 204 or not response.content:
            return ApiResult(status_code=response.status_code)
        try:
            payload = response.json()
        except ValueError as exc:
            raise DeserializationError(
                f"Response from {response.request.url} is not valid JSON",
                status_code=response.status_code,
            ) from exc
        return ApiResult(status_code=response.status_code, payload=payload)

    async def send_get_request(
        self,
        path: str,
        query_params: Mapping[str, str] | None = None,
    ) -> ApiResult:
        return self._to_result(await self._send("GET", path, query_params=query_params))

    async def send_post_request(
        self,
        path: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResult:
        return self._to_result(await self._send("POST", path, body=body, headers=headers))

    async def send_patch_request(self, path: str, body: Any) -> ApiResult:
        return self._to_result(await self._send("PATCH", path, body=body))

    async def send_put_request(self, path: str, body: Any) -> ApiResult:
        return self._to_result(await self._send("PUT", path, body=body))

    async def send_delete_request(
        self,
        path: str,
        query_params: Mapping[str, str] | None = None,
    ) -> int:
        response = await self._send("DELETE", path, query_params=query_params)
        return response.status_code

    async def download(self, url: str) -> bytes:
        """Fetch the bytes behind a pre-signed download link."""

        try:
            async with build_async_client(self._settings, authorized=False) as client:
                response = await client.get(url)
        except httpx.TransportError as exc:
            raise TransportError(f"Download from {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise error_from_response("GET", url, response)
        return response.content
