"""String translations & votes models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import Field

from l10n_client.core.domain.common import ApiModel, UserInfo
from l10n_client.core.utils import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    add_param_if_present,
    create_query_params_from_paging,
)


class VoteMark(str, Enum):
    UP = "up"
    DOWN = "down"


class TranslationVote(ApiModel):
    id: int
    user: UserInfo | None = None
    translation_id: int
    voted_at: datetime | None = None
    mark: VoteMark


class AddVoteRequest(ApiModel):
    mark: VoteMark
    translation_id: int


@dataclass(frozen=True)
class TranslationVotesListParams:
    """Filters for `GET /projects/{projectId}/votes`."""

    string_id: int | None = None
    language_id: str | None = None
    translation_id: int | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    def to_query_params(self) -> dict[str, str]:
        params = create_query_params_from_paging(self.limit, self.offset)
        add_param_if_present(params, "stringId", self.string_id)
        add_param_if_present(params, "languageId", self.language_id)
        add_param_if_present(params, "translationId", self.translation_id)
        return params


class StringTranslation(ApiModel):
    id: int
    text: str | None = None
    plural_category_name: str | None = None
    user: UserInfo | None = None
    rating: int | None = None
    provider: str | None = None
    is_pre_translated: bool | None = None
    created_at: datetime | None = None


class AddTranslationRequest(ApiModel):
    string_id: int
    language_id: str = Field(..., min_length=1)
    text: str
    plural_category_name: str | None = None


@dataclass(frozen=True)
class StringTranslationsListParams:
    """Filters for `GET /projects/{projectId}/translations`.

    `string_id` and `language_id` are required by the endpoint.
    """

    string_id: int
    language_id: str
    denormalize_placeholders: bool | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    def to_query_params(self) -> dict[str, str]:
        params = create_query_params_from_paging(self.limit, self.offset)
        add_param_if_present(params, "stringId", self.string_id)
        add_param_if_present(params, "languageId", self.language_id)
        add_param_if_present(params, "denormalizePlaceholders", self.denormalize_placeholders)
        return params
