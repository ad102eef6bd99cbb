"""Custom exceptions for Open Trivia DB errors."""


class TriviaAPIError(Exception):
    """Base exception for Open Trivia DB errors."""
    pass


class NetworkError(TriviaAPIError):
    """Network connectivity issues or a non-2xx HTTP status."""
    pass


class InvalidResponseError(TriviaAPIError):
    """API returned a body that is not JSON."""
    pass


class NoResultsError(TriviaAPIError):
    """Not enough questions for the requested query (response_code 1)."""
    pass


class InvalidParameterError(TriviaAPIError):
    """Query contained an argument the API rejected (response_code 2)."""
    pass


class TokenError(TriviaAPIError):
    """Session token not found or exhausted (response_code 3 and 4)."""
    pass


class RateLimitError(TriviaAPIError):
    """Too many requests from this IP (response_code 5)."""
    pass
