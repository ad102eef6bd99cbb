"""Open Trivia DB API client built on aiohttp."""
import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from .endpoints import (
    BASE_API_URL, QUESTIONS_PATH, TOKEN_PATH, DEFAULT_AMOUNT, DEFAULT_HEADERS,
    RESPONSE_SUCCESS, RESPONSE_NO_RESULTS, RESPONSE_INVALID_PARAMETER,
    RESPONSE_TOKEN_NOT_FOUND, RESPONSE_TOKEN_EMPTY, RESPONSE_RATE_LIMIT,
)
from .exceptions import (
    TriviaAPIError, NetworkError, InvalidResponseError, NoResultsError,
    InvalidParameterError, TokenError, RateLimitError,
)
from .models import Question, question_from_record

logger = logging.getLogger(__name__)

_RESPONSE_ERRORS = {
    RESPONSE_NO_RESULTS: (NoResultsError, "Not enough questions for this query"),
    RESPONSE_INVALID_PARAMETER: (InvalidParameterError, "Query contains an invalid parameter"),
    RESPONSE_TOKEN_NOT_FOUND: (TokenError, "Session token does not exist"),
    RESPONSE_TOKEN_EMPTY: (TokenError, "Session token has returned all possible questions"),
    RESPONSE_RATE_LIMIT: (RateLimitError, "Too many requests, try again in a few seconds"),
}


def _check_response_code(data: Dict[str, Any]) -> None:
    """Raise the matching TriviaAPIError for a non-zero response_code."""
    code = data.get("response_code", RESPONSE_SUCCESS)
    if code == RESPONSE_SUCCESS:
        return
    exc_cls, message = _RESPONSE_ERRORS.get(code, (TriviaAPIError, "Unknown response code"))
    logger.warning("Open Trivia DB response_code=%s: %s", code, message)
    raise exc_cls(f"{message} (response_code={code})")


class TriviaClient:
    """Async client for Open Trivia DB."""

    def __init__(self, base_url: str = BASE_API_URL, timeout: float = 30):
        """
        Args:
            base_url: API root, without trailing slash
            timeout: Total timeout of one request in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "TriviaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # URL building
    # ------------------------------------------------------------------

    @property
    def questions_url(self) -> str:
        return self.base_url + QUESTIONS_PATH

    @property
    def token_url(self) -> str:
        return self.base_url + TOKEN_PATH

    @staticmethod
    def build_questions_params(
        amount: int = DEFAULT_AMOUNT,
        query: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> Dict[str, str]:
        """
        Query parameters of a question batch request.

        `amount` always comes first, then `token` when one is known, then every
        query pair verbatim. A query key named `amount` or `token` overwrites
        the reserved value but keeps its position.
        """
        params = {"amount": str(amount)}
        if token:
            params["token"] = token
        for key, value in (query or {}).items():
            params[key] = str(value)
        return params

    @staticmethod
    def build_token_params() -> Dict[str, str]:
        return {"command": "request"}

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, headers=DEFAULT_HEADERS
            )
        return self._session

    async def _get_json(self, url: str, params: Dict[str, str]) -> Dict[str, Any]:
        session = self._get_session()
        try:
            async with session.get(url, params=params) as resp:
                if resp.status >= 400:
                    logger.error("Open Trivia DB HTTP %d for %s", resp.status, url)
                    raise NetworkError(f"HTTP {resp.status} from {url}")
                try:
                    return await resp.json(content_type=None)
                except json.JSONDecodeError as e:
                    logger.error("Open Trivia DB returned non-JSON body: %s", e)
                    raise InvalidResponseError(f"Response is not JSON: {e}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Request to %s failed: %r", url, e)
            raise NetworkError(f"Request to {url} failed: {e!r}")

    async def fetch_token(self) -> str:
        """
        Request a new session token.

        Returns:
            Opaque token string

        Raises:
            TriviaAPIError: Transport failure or non-zero response_code
        """
        data = await self._get_json(self.token_url, self.build_token_params())
        _check_response_code(data)
        logger.info("Session token received")
        return data["token"]

    async def fetch_questions(
        self,
        amount: int = DEFAULT_AMOUNT,
        query: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> List[Question]:
        """
        Fetch a batch of questions.

        Args:
            amount: Number of questions to request
            query: Extra parameters (category, difficulty, type, ...)
            token: Session token, omitted from the request when None

        Returns:
            Decorated questions in the order they were received

        Raises:
            TriviaAPIError: Transport failure or non-zero response_code
        """
        params = self.build_questions_params(amount, query, token)
        data = await self._get_json(self.questions_url, params)
        _check_response_code(data)
        questions = [question_from_record(record) for record in data["results"]]
        logger.info("Fetched %d questions (requested %s)", len(questions), params["amount"])
        return questions

    async def close(self):
        """Close the underlying HTTP session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
