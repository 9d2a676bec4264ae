"""Source strings models and list parameters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import Field

from l10n_client.core.domain.common import ApiModel, PatchEntry
from l10n_client.core.utils import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    add_param_if_present,
    create_query_params_from_paging,
)


class StringScope(str, Enum):
    """Field the `filter` query parameter is matched against."""

    IDENTIFIER = "identifier"
    TEXT = "text"
    CONTEXT = "context"


class SourceString(ApiModel):
    id: int
    project_id: int
    file_id: int | None = None
    branch_id: int | None = None
    directory_id: int | None = None
    identifier: str | None = None
    # Plain text, or a plural-form mapping ({"one": ..., "other": ...}).
    text: str | dict[str, str] | None = None
    type: str | None = None
    context: str | None = None
    max_length: int | None = None
    is_hidden: bool | None = None
    is_duplicate: bool | None = None
    master_string_id: int | None = None
    has_plurals: bool | None = None
    is_icu: bool | None = None
    label_ids: list[int] = Field(default_factory=list)
    web_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AddStringRequest(ApiModel):
    text: str | dict[str, str]
    identifier: str | None = None
    file_id: int | None = None
    context: str | None = None
    is_hidden: bool | None = None
    max_length: int | None = None
    label_ids: list[int] | None = None


class SourceStringPatchPath(str, Enum):
    IDENTIFIER = "/identifier"
    TEXT = "/text"
    CONTEXT = "/context"
    IS_HIDDEN = "/isHidden"
    MAX_LENGTH = "/maxLength"
    LABEL_IDS = "/labelIds"


class SourceStringPatch(PatchEntry):
    path: SourceStringPatchPath


@dataclass(frozen=True)
class StringsListParams:
    """Filters for `GET /projects/{projectId}/strings`."""

    denormalize_placeholders: bool | None = None
    label_ids: list[int] | None = None
    file_id: int | None = None
    branch_id: int | None = None
    directory_id: int | None = None
    croql: str | None = None
    filter: str | None = None
    scope: StringScope | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    def to_query_params(self) -> dict[str, str]:
        params = create_query_params_from_paging(self.limit, self.offset)
        add_param_if_present(params, "denormalizePlaceholders", self.denormalize_placeholders)
        add_param_if_present(params, "labelIds", self.label_ids)
        add_param_if_present(params, "fileId", self.file_id)
        add_param_if_present(params, "branchId", self.branch_id)
        add_param_if_present(params, "directoryId", self.directory_id)
        add_param_if_present(params, "croql", self.croql)
        add_param_if_present(params, "filter", self.filter)
        add_param_if_present(params, "scope", self.scope)
        return params
