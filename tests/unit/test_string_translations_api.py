"""Unit tests for StringTranslationsApiExecutor (translations and votes)."""

import pytest

from conftest import make_mock_client, page, single
from l10n_client.adapters.resources import StringTranslationsApiExecutor
from l10n_client.core.domain.translations import (
    AddTranslationRequest,
    AddVoteRequest,
    StringTranslationsListParams,
    TranslationVote,
    TranslationVotesListParams,
    VoteMark,
)
from l10n_client.core.errors import UnexpectedStatusError

VOTE = {
    "id": 6643,
    "user": {
        "id": 12,
        "username": "john_smith",
        "fullName": "John Smith",
        "avatarUrl": "",
    },
    "translationId": 19069345,
    "votedAt": "2023-09-19T12:42:12+00:00",
    "mark": "up",
}

TRANSLATION = {
    "id": 190695,
    "text": "Цю стрічку перекладено",
    "pluralCategoryName": "few",
    "user": {"id": 19, "username": "john_doe"},
    "rating": 10,
    "provider": None,
    "isPreTranslated": False,
    "createdAt": "2023-09-23T11:26:54+00:00",
}


class TestVotes:
    @pytest.mark.asyncio
    async def test_list_votes_with_filters(self) -> None:
        client = make_mock_client(page([VOTE]))
        params = TranslationVotesListParams(string_id=35434, language_id="uk")

        result = await StringTranslationsApiExecutor(client).list_translation_votes(2, params)

        client.send_get_request.assert_awaited_once_with(
            "/projects/2/votes",
            {"limit": "25", "offset": "0", "stringId": "35434", "languageId": "uk"},
        )
        vote = result[0]
        assert isinstance(vote, TranslationVote)
        assert vote.mark is VoteMark.UP
        assert vote.user.full_name == "John Smith"

    @pytest.mark.asyncio
    async def test_list_votes_without_filters(self) -> None:
        client = make_mock_client(page([]))

        result = await StringTranslationsApiExecutor(client).list_translation_votes(2)

        client.send_get_request.assert_awaited_once_with("/projects/2/votes", {"limit": "25", "offset": "0"})
        assert len(result) == 0

    @pytest.mark.asyncio
    async def test_add_vote(self) -> None:
        client = make_mock_client(single(VOTE), status_code=201)
        request = AddVoteRequest(mark=VoteMark.UP, translation_id=19069345)

        vote = await StringTranslationsApiExecutor(client).add_vote(2, request)

        client.send_post_request.assert_awaited_once_with("/projects/2/votes", request)
        assert request.to_wire() == {"mark": "up", "translationId": 19069345}
        assert vote.id == 6643

    @pytest.mark.asyncio
    async def test_get_vote(self) -> None:
        client = make_mock_client(single({**VOTE, "mark": "down"}))

        vote = await StringTranslationsApiExecutor(client).get_vote(2, 6643)

        client.send_get_request.assert_awaited_once_with("/projects/2/votes/6643")
        assert vote.mark is VoteMark.DOWN

    @pytest.mark.asyncio
    async def test_cancel_vote(self) -> None:
        client = make_mock_client()

        await StringTranslationsApiExecutor(client).cancel_vote(2, 6643)

        client.send_delete_request.assert_awaited_once_with("/projects/2/votes/6643")

    @pytest.mark.asyncio
    async def test_cancel_vote_unexpected_status(self) -> None:
        client = make_mock_client(delete_status=200)

        with pytest.raises(UnexpectedStatusError, match="Vote 6643 cancellation failed"):
            await StringTranslationsApiExecutor(client).cancel_vote(2, 6643)


class TestTranslations:
    @pytest.mark.asyncio
    async def test_list_string_translations(self) -> None:
        client = make_mock_client(page([TRANSLATION]))
        params = StringTranslationsListParams(string_id=35434, language_id="uk", denormalize_placeholders=True)

        result = await StringTranslationsApiExecutor(client).list_string_translations(2, params)

        client.send_get_request.assert_awaited_once_with(
            "/projects/2/translations",
            {
                "limit": "25",
                "offset": "0",
                "stringId": "35434",
                "languageId": "uk",
                "denormalizePlaceholders": "1",
            },
        )
        assert result[0].plural_category_name == "few"
        assert result[0].provider is None

    @pytest.mark.asyncio
    async def test_add_translation(self) -> None:
        client = make_mock_client(single(TRANSLATION), status_code=201)
        request = AddTranslationRequest(string_id=35434, language_id="uk", text="Цю стрічку перекладено")

        translation = await StringTranslationsApiExecutor(client).add_translation(2, request)

        client.send_post_request.assert_awaited_once_with("/projects/2/translations", request)
        assert translation.id == 190695

    @pytest.mark.asyncio
    async def test_get_translation(self) -> None:
        client = make_mock_client(single(TRANSLATION))

        translation = await StringTranslationsApiExecutor(client).get_translation(2, 190695)

        client.send_get_request.assert_awaited_once_with("/projects/2/translations/190695")
        assert translation.user.username == "john_doe"

    @pytest.mark.asyncio
    async def test_delete_translation_unexpected_status(self) -> None:
        client = make_mock_client(delete_status=500)

        with pytest.raises(UnexpectedStatusError, match="Translation 190695 removal failed"):
            await StringTranslationsApiExecutor(client).delete_translation(2, 190695)
