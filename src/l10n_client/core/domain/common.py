"""Shared domain building blocks (Pydantic v2).

Why here:
- Every resource model shares the same wire conventions (camelCase keys,
  `{"data": ...}` envelopes, JSON-Patch edits).
- Keeping them in one module stops each resource from re-inventing them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Iterator, Mapping, TypeVar

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

T = TypeVar("T")


def wire_keys(value: Mapping[str, Any]) -> set[str]:
    """Keys of a raw mapping in wire (camelCase) form, whichever form the caller used."""

    return {to_camel(key) if "_" in key else key for key in value}


class ApiModel(BaseModel):
    """Base for every wire model: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize as the API expects it (aliases, no nulls)."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass
class ApiResult:
    """HTTP status code plus the decoded JSON body (`None` for no-content)."""

    status_code: int
    payload: Any = None


class Pagination(ApiModel):
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=25, ge=0)
    total: int | None = Field(
        default=None,
        description="Total number of items when the server reports it.",
    )


@dataclass
class ResponseList(Generic[T]):
    """Ordered page of entities plus the pagination metadata it came with."""

    data: list[T] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> T:
        return self.data[index]


class PatchOperation(str, Enum):
    """JSON-Patch operations accepted by `PATCH` endpoints."""

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    TEST = "test"


class PatchEntry(ApiModel):
    """One JSON-Patch operation. Resource modules narrow `path` with their own enum."""

    op: PatchOperation = PatchOperation.REPLACE
    path: str
    value: Any = None

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # `value: null` clears a field, so only `remove` may drop it.
        data = handler(self)
        if self.op is not PatchOperation.REMOVE:
            data.setdefault("value", None)
        return data


class UserInfo(ApiModel):
    id: int
    username: str | None = None
    full_name: str | None = None
    avatar_url: str | None = None
