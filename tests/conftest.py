"""Shared fixtures for the trivia bot tests."""
import pytest
from unittest.mock import AsyncMock

from trivia_bot.quiz.machine import QuizMachine
from trivia_bot.quiz.store import SessionScope
from trivia_bot.trivia_api.models import Question


@pytest.fixture
def raw_records():
    """Result records as Open Trivia DB returns them."""
    return [
        {
            "type": "multiple",
            "difficulty": "easy",
            "category": "Science: Mathematics",
            "question": "2+2?",
            "correct_answer": "4",
            "incorrect_answers": ["3", "5"],
        },
        {
            "type": "multiple",
            "difficulty": "medium",
            "category": "Geography",
            "question": "What is the capital of &quot;Australia&quot;?",
            "correct_answer": "Canberra",
            "incorrect_answers": ["Sydney", "Melbourne", "Perth"],
        },
    ]


@pytest.fixture
def single_question():
    return [Question(text="2+2?", answers=("3", "5", "4"), correct_answer="4")]


@pytest.fixture
def three_questions():
    return [
        Question(text="2+2?", answers=("3", "5", "4"), correct_answer="4"),
        Question(text="Capital of France?", answers=("Lyon", "Nice", "Paris"), correct_answer="Paris"),
        Question(text="H2O is?", answers=("Salt", "Water"), correct_answer="Water"),
    ]


@pytest.fixture
def scope():
    return SessionScope(token="session_token_abc")


@pytest.fixture
def provider(three_questions):
    """Question provider returning three questions."""
    mock = AsyncMock()
    mock.fetch_questions.return_value = three_questions
    mock.fetch_token.return_value = "fresh_token"
    return mock


@pytest.fixture
def machine(scope, provider):
    return QuizMachine(scope, provider, default_query={"type": "multiple"})
