"""String Translations API (translations and translation votes)."""

from __future__ import annotations

from l10n_client.adapters.resources.base import ApiExecutor
from l10n_client.core.domain.common import ResponseList
from l10n_client.core.domain.translations import (
    AddTranslationRequest,
    AddVoteRequest,
    StringTranslation,
    StringTranslationsListParams,
    TranslationVote,
    TranslationVotesListParams,
)
from l10n_client.core.utils import throw_if_status_not_204


def _translations_url(project_id: int) -> str:
    return f"/projects/{project_id}/translations"


def _votes_url(project_id: int) -> str:
    return f"/projects/{project_id}/votes"


class StringTranslationsApiExecutor(ApiExecutor):
    # Translations

    async def list_string_translations(
        self,
        project_id: int,
        params: StringTranslationsListParams,
    ) -> ResponseList[StringTranslation]:
        result = await self._api_client.send_get_request(_translations_url(project_id), params.to_query_params())
        return self._json_parser.parse_response_list(StringTranslation, result.payload)

    async def add_translation(self, project_id: int, request: AddTranslationRequest) -> StringTranslation:
        result = await self._api_client.send_post_request(_translations_url(project_id), request)
        return self._json_parser.parse_response_object(StringTranslation, result.payload)

    async def get_translation(self, project_id: int, translation_id: int) -> StringTranslation:
        result = await self._api_client.send_get_request(f"{_translations_url(project_id)}/{translation_id}")
        return self._json_parser.parse_response_object(StringTranslation, result.payload)

    async def delete_translation(self, project_id: int, translation_id: int) -> None:
        status_code = await self._api_client.send_delete_request(f"{_translations_url(project_id)}/{translation_id}")
        throw_if_status_not_204(status_code, f"Translation {translation_id} removal failed")

    # Votes

    async def list_translation_votes(
        self,
        project_id: int,
        params: TranslationVotesListParams | None = None,
    ) -> ResponseList[TranslationVote]:
        params = params or TranslationVotesListParams()
        result = await self._api_client.send_get_request(_votes_url(project_id), params.to_query_params())
        return self._json_parser.parse_response_list(TranslationVote, result.payload)

    async def add_vote(self, project_id: int, request: AddVoteRequest) -> TranslationVote:
        result = await self._api_client.send_post_request(_votes_url(project_id), request)
        return self._json_parser.parse_response_object(TranslationVote, result.payload)

    async def get_vote(self, project_id: int, vote_id: int) -> TranslationVote:
        result = await self._api_client.send_get_request(f"{_votes_url(project_id)}/{vote_id}")
        return self._json_parser.parse_response_object(TranslationVote, result.payload)

    async def cancel_vote(self, project_id: int, vote_id: int) -> None:
        status_code = await self._api_client.send_delete_request(f"{_votes_url(project_id)}/{vote_id}")
        throw_if_status_not_204(status_code, f"Vote {vote_id} cancellation failed")
