"""Default JSON parser (pydantic `TypeAdapter`).

Payload shapes:
- single object: {"data": {...}}
- list:          {"data": [{"data": {...}}, ...], "pagination": {"offset": 0, "limit": 25}}

`TypeAdapter` accepts both model classes and annotated unions, so polymorphic
resources (projects, file import options) decode through the same path.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from l10n_client.core.domain.common import Pagination, ResponseList
from l10n_client.core.errors import DeserializationError

logger = logging.getLogger(__name__)


def _type_name(model: Any) -> str:
    return getattr(model, "__name__", None) or repr(model)


def _unwrap_data(payload: Any, model: Any) -> Any:
    if not isinstance(payload, dict) or "data" not in payload:
        raise DeserializationError(
            f"Expected an object with a 'data' key while decoding {_type_name(model)}",
            details={"payload_type": type(payload).__name__},
        )
    return payload["data"]


class DefaultJsonParser:
    def parse_response_object(self, model: Any, payload: Any) -> Any:
        data = _unwrap_data(payload, model)
        try:
            return TypeAdapter(model).validate_python(data)
        except ValidationError as exc:
            raise DeserializationError(
                f"Could not decode {_type_name(model)}: {exc.error_count()} validation error(s)",
                details={"errors": exc.errors(include_url=False)},
            ) from exc

    def parse_response_list(self, model: Any, payload: Any) -> ResponseList[Any]:
        items = _unwrap_data(payload, model)
        if not isinstance(items, list):
            raise DeserializationError(f"Expected a list of {_type_name(model)} under 'data'")

        adapter = TypeAdapter(model)
        decoded: list[Any] = []
        for index, item in enumerate(items):
            raw = item.get("data") if isinstance(item, dict) and "data" in item else item
            try:
                decoded.append(adapter.validate_python(raw))
            except ValidationError as exc:
                raise DeserializationError(
                    f"Could not decode {_type_name(model)} at index {index}",
                    details={"index": index, "errors": exc.errors(include_url=False)},
                ) from exc

        try:
            pagination = Pagination.model_validate(payload.get("pagination") or {})
        except ValidationError as exc:
            raise DeserializationError("Invalid pagination block") from exc

        logger.debug("Decoded %d %s item(s)", len(decoded), _type_name(model))
        return ResponseList(data=decoded, pagination=pagination)
