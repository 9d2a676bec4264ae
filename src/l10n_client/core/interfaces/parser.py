"""JSON parser contract.

Why Protocol:
- Executors only need "decode one" and "decode a page"; any implementation
  (the default pydantic one, or a test double) fits structurally.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from l10n_client.core.domain.common import ResponseList


@runtime_checkable
class JsonParser(Protocol):
    """Turns raw API payloads into typed models.

    `model` is either a model class or an annotated union (polymorphic shapes).
    """

    def parse_response_object(self, model: Any, payload: Any) -> Any:
        """Decode a `{"data": {...}}` payload into exactly one `model`."""

        ...

    def parse_response_list(self, model: Any, payload: Any) -> ResponseList[Any]:
        """Decode a `{"data": [{"data": ...}], "pagination": ...}` payload, keeping order."""

        ...
