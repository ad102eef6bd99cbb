"""Tests for session token acquisition."""
import asyncio

from unittest.mock import AsyncMock

from trivia_bot.quiz.store import SessionScope
from trivia_bot.trivia_api.exceptions import NetworkError
from trivia_bot.utils.token_manager import ensure_token


class TestEnsureToken:

    async def test_existing_token_no_request(self):
        """Token already stored: returned without calling the API."""
        scope = SessionScope(token="existing_token")
        client = AsyncMock()

        result = await ensure_token(scope, client)

        assert result == "existing_token"
        client.fetch_token.assert_not_awaited()

    async def test_token_fetched_and_stored(self):
        scope = SessionScope()
        client = AsyncMock()
        client.fetch_token.return_value = "new_token"

        result = await ensure_token(scope, client)

        assert result == "new_token"
        assert scope.token == "new_token"
        client.fetch_token.assert_awaited_once()

    async def test_second_call_reuses_token(self):
        scope = SessionScope()
        client = AsyncMock()
        client.fetch_token.return_value = "new_token"

        await ensure_token(scope, client)
        await ensure_token(scope, client)

        client.fetch_token.assert_awaited_once()

    async def test_failure_leaves_token_absent(self):
        """Token request fails: None, nothing stored, no exception."""
        scope = SessionScope()
        client = AsyncMock()
        client.fetch_token.side_effect = NetworkError("offline")

        result = await ensure_token(scope, client)

        assert result is None
        assert scope.token is None

    async def test_retry_after_failure(self):
        scope = SessionScope()
        client = AsyncMock()
        client.fetch_token.side_effect = [NetworkError("offline"), "late_token"]

        assert await ensure_token(scope, client) is None
        assert await ensure_token(scope, client) == "late_token"

    async def test_concurrent_callers_share_request(self):
        scope = SessionScope()
        client = AsyncMock()

        async def slow_fetch():
            await asyncio.sleep(0)
            return "shared_token"

        client.fetch_token.side_effect = slow_fetch

        results = await asyncio.gather(
            ensure_token(scope, client),
            ensure_token(scope, client),
            ensure_token(scope, client),
        )

        assert results == ["shared_token"] * 3
        client.fetch_token.assert_awaited_once()
