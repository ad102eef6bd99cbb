"""Configuration settings using pydantic-settings."""
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Telegram Bot
    BOT_TOKEN: str = Field(..., description="Telegram Bot API token")

    # Open Trivia DB
    TRIVIA_BASE_URL: str = Field(
        default="https://opentdb.com",
        description="Open Trivia DB root URL"
    )
    TRIVIA_TIMEOUT: int = Field(default=30, description="API request timeout in seconds")

    # Quiz
    DEFAULT_QUESTION_AMOUNT: int = Field(
        default=10,
        gt=0,
        description="Question count used when none was chosen (retry, deep links)"
    )
    QUESTION_TYPE: str = Field(
        default="multiple",
        description="Question type sent with every batch request (multiple/boolean)"
    )
    TRIVIA_CATEGORY: Optional[int] = Field(
        default=None,
        description="Open Trivia DB category id, any category when unset"
    )
    TRIVIA_DIFFICULTY: Optional[str] = Field(
        default=None,
        description="easy/medium/hard, any difficulty when unset"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    def question_query(self) -> Dict[str, Any]:
        """Extra parameters sent with every question batch request."""
        query: Dict[str, Any] = {"type": self.QUESTION_TYPE}
        if self.TRIVIA_CATEGORY is not None:
            query["category"] = self.TRIVIA_CATEGORY
        if self.TRIVIA_DIFFICULTY:
            query["difficulty"] = self.TRIVIA_DIFFICULTY
        return query


QUESTION_COUNTS = [5, 10, 15, 20]
