"""Session token acquisition for Open Trivia DB."""
import logging
from typing import Optional

from trivia_bot.quiz.store import SessionScope
from trivia_bot.trivia_api.exceptions import TriviaAPIError

logger = logging.getLogger(__name__)


async def ensure_token(scope: SessionScope, client) -> Optional[str]:
    """
    Returns the session token, requesting it when the scope holds none.

    If the scope already holds a token no request is made. The scope is
    empty on first use and after the provider rejected the token. On
    failure the error is logged and None is returned; question requests
    then go out without a token.

    Args:
        scope: Process-wide scope the token is stored in
        client: TriviaClient (anything with `fetch_token()`)

    Returns:
        Token string or None
    """
    if scope.token:
        return scope.token

    # Concurrent callers share a single token request
    async with scope.token_lock:
        # Another caller may have fetched it while we waited
        if scope.token:
            return scope.token

        try:
            token = await client.fetch_token()
        except TriviaAPIError as e:
            logger.error("Failed to obtain session token: %s", e)
            return None

        scope.token = token
        logger.info("Session token stored")
        return token
