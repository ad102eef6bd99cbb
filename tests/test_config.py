"""Tests for settings loaded from the environment."""
import pytest
from pydantic import ValidationError

from trivia_bot.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("BOT_TOKEN", "123:abc")

        settings = Settings(_env_file=None)

        assert settings.TRIVIA_BASE_URL == "https://opentdb.com"
        assert settings.DEFAULT_QUESTION_AMOUNT == 10
        assert settings.question_query() == {"type": "multiple"}

    def test_query_with_category_and_difficulty(self, monkeypatch):
        monkeypatch.setenv("BOT_TOKEN", "123:abc")
        monkeypatch.setenv("TRIVIA_CATEGORY", "9")
        monkeypatch.setenv("TRIVIA_DIFFICULTY", "hard")

        settings = Settings(_env_file=None)

        assert settings.question_query() == {"type": "multiple", "category": 9, "difficulty": "hard"}

    def test_bot_token_required(self, monkeypatch):
        monkeypatch.delenv("BOT_TOKEN", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_amount_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("BOT_TOKEN", "123:abc")
        monkeypatch.setenv("DEFAULT_QUESTION_AMOUNT", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
