"""Root-level pytest configuration and shared fixtures.

Adds the src/ directory to sys.path so l10n_client can be imported without installation.
Provides payload builders and mock transports used across all test suites.

Key exports:
    - make_mock_client: AsyncMock-based `ApiTransport` with the default parser
    - single / page: builders for `{"data": ...}` envelopes
    - make_http_client: httpx.AsyncClient backed by httpx.MockTransport
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from l10n_client.adapters.json_parser import DefaultJsonParser  # noqa: E402
from l10n_client.core.config import AppSettings  # noqa: E402
from l10n_client.core.domain.common import ApiResult  # noqa: E402

TEST_BASE_URL = "https://api.test/api/v2"


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------


def single(data: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap one entity the way the API returns it."""
    return {"data": data}


def page(items: List[Dict[str, Any]], offset: int = 0, limit: int = 25) -> Dict[str, Any]:
    """Wrap entities in a list envelope with pagination."""
    return {
        "data": [{"data": item} for item in items],
        "pagination": {"offset": offset, "limit": limit},
    }


# ---------------------------------------------------------------------------
# Mock transport factories
# ---------------------------------------------------------------------------


def make_mock_client(
    payload: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
    delete_status: int = 204,
) -> MagicMock:
    """Build a mock ApiTransport whose send_* methods return the given payload.

    Args:
        payload: JSON body every non-delete call returns.
        status_code: Status code attached to that body.
        delete_status: Status code send_delete_request returns.

    Returns:
        MagicMock with AsyncMock send_* methods and a real DefaultJsonParser.
    """
    result = ApiResult(status_code=status_code, payload=payload)
    client = MagicMock()
    client.json_parser = DefaultJsonParser()
    client.send_get_request = AsyncMock(return_value=result)
    client.send_post_request = AsyncMock(return_value=result)
    client.send_patch_request = AsyncMock(return_value=result)
    client.send_put_request = AsyncMock(return_value=result)
    client.send_delete_request = AsyncMock(return_value=delete_status)
    return client


def make_http_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """httpx client that routes every request to `handler`."""
    return httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        base_url=TEST_BASE_URL,
        headers={"Authorization": "Bearer test-token"},
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> AppSettings:
    """Settings isolated from any .env file."""
    return AppSettings(
        _env_file=None,
        api_token="test-token",
        base_url=TEST_BASE_URL,
        http_timeout_seconds=5,
    )


@pytest.fixture
def group_payload() -> Dict[str, Any]:
    return {
        "id": 7,
        "name": "Mobile",
        "description": "Mobile apps",
        "parentId": 0,
        "organizationId": 200000999,
        "userId": 6,
        "subgroupsCount": 0,
        "projectsCount": 3,
        "webUrl": "https://acme.crowdin.com/u/workspace/groups/7",
        "createdAt": "2023-09-20T11:34:40+00:00",
        "updatedAt": "2023-09-20T11:34:40+00:00",
    }


@pytest.fixture
def string_payload() -> Dict[str, Any]:
    return {
        "id": 2814,
        "projectId": 2,
        "branchId": 12,
        "identifier": "6a1821e6499ebae94de4b880fd93b985",
        "text": "Not all videos are shown to users. See the tips.",
        "type": "text",
        "context": "shown on main page",
        "maxLength": 35,
        "isHidden": False,
        "isDuplicate": True,
        "masterStringId": 1,
        "hasPlurals": False,
        "isIcu": False,
        "labelIds": [3],
        "createdAt": "2023-09-20T12:43:57+00:00",
        "updatedAt": "2023-09-20T13:24:01+00:00",
        "fileId": 48,
        "directoryId": 13,
    }
