"""Open Trivia DB endpoints and response codes."""

BASE_API_URL = "https://opentdb.com"

QUESTIONS_PATH = "/api.php"
TOKEN_PATH = "/api_token.php"

DEFAULT_AMOUNT = 10

# response_code values documented at https://opentdb.com/api_config.php
RESPONSE_SUCCESS = 0
RESPONSE_NO_RESULTS = 1
RESPONSE_INVALID_PARAMETER = 2
RESPONSE_TOKEN_NOT_FOUND = 3
RESPONSE_TOKEN_EMPTY = 4
RESPONSE_RATE_LIMIT = 5

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
