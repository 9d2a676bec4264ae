"""Query-string and status helpers shared by every executor."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, TypeVar

from l10n_client.core.domain.common import ResponseList
from l10n_client.core.errors import UnexpectedStatusError

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 25
DEFAULT_OFFSET = 0
# Largest `limit` the API accepts on list endpoints.
MAX_LIMIT = 500


def create_query_params_from_paging(limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET) -> dict[str, str]:
    return {"limit": str(limit), "offset": str(offset)}


def encode_query_value(value: Any) -> str:
    """Encode one typed value the way the API expects it in a query string.

    - bool -> "1" / "0"
    - Enum -> its wire value
    - list/tuple/set of ids -> comma-joined
    """

    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(encode_query_value(item) for item in value)
    return str(value)


def add_param_if_present(params: dict[str, str], key: str, value: Any) -> dict[str, str]:
    """Add `key` only when `value` is not None. Falsy values (0, False, "") are kept."""

    if value is not None:
        params[key] = encode_query_value(value)
    return params


def throw_if_status_not_204(status_code: int, message: str) -> None:
    if status_code != 204:
        logger.warning("%s (HTTP %s)", message, status_code)
        raise UnexpectedStatusError(message, status_code=status_code, expected=204)


async def fetch_all(
    list_page: Callable[[int, int], Awaitable[ResponseList[T]]],
    *,
    page_size: int = DEFAULT_LIMIT,
    max_items: int | None = None,
) -> list[T]:
    """Walk `limit`/`offset` pages sequentially until the server returns a short page.

    `list_page(limit, offset)` is any executor list call bound to its filters, e.g.
    `lambda limit, offset: executor.list_groups(None, limit, offset)`.

    A page is short when it holds fewer rows than the limit the server reports
    back, so a `page_size` above the server cap still walks every page.
    """

    if page_size < 1:
        raise ValueError("page_size must be positive")

    page_size = min(page_size, MAX_LIMIT)
    items: list[T] = []
    offset = 0
    while True:
        page = await list_page(page_size, offset)
        items.extend(page.data)
        if max_items is not None and len(items) >= max_items:
            return items[:max_items]
        served_limit = min(page_size, page.pagination.limit or page_size)
        if not page.data or len(page.data) < served_limit:
            return items
        offset += len(page.data)
