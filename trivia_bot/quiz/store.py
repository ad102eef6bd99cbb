"""Quiz data: question repository, process-wide scope and per-game state."""
import asyncio
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from trivia_bot.trivia_api.models import Question


class Page(str, Enum):
    INTRO = "intro"
    QUESTION = "question"
    ANSWER = "answer"
    OUTRO = "outro"
    ERROR = "error"


class QuestionRepository:
    """Ordered batch of questions of the current game. Replaced as a whole."""

    def __init__(self, questions: Iterable[Question] = ()):
        self._questions: Tuple[Question, ...] = tuple(questions)

    def replace(self, questions: Iterable[Question]) -> None:
        self._questions = tuple(questions)

    def clear(self) -> None:
        self._questions = ()

    def __len__(self) -> int:
        return len(self._questions)

    def __getitem__(self, index: int) -> Question:
        return self._questions[index]

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)


class SessionScope:
    """Process-wide data that outlives individual games."""

    def __init__(self, token: Optional[str] = None):
        self.token = token
        self.token_lock = asyncio.Lock()


class QuizState:
    """
    Per-game state.

    The session token is read through the injected SessionScope, so
    `reset()` can never clear it.
    """

    def __init__(self, scope: SessionScope):
        self.scope = scope
        self.reset()

    def reset(self) -> None:
        self.page: Page = Page.INTRO
        self.current_question_index: Optional[int] = None
        self.user_answers: List[str] = []
        self.feedback: Optional[str] = None
        self.error: Optional[str] = None

    @property
    def session_token(self) -> Optional[str]:
        return self.scope.token


# ============================================================================
# DERIVATIONS (never stored on the state)
# ============================================================================

def score(state: QuizState, repository: QuestionRepository) -> int:
    """Number of answers that match the correct answer of their question."""
    return sum(
        1
        for index, answer in enumerate(state.user_answers)
        if answer == repository[index].correct_answer
    )


def progress(state: QuizState, repository: QuestionRepository) -> Optional[Tuple[int, int]]:
    """(current question number, total questions), None before a game starts."""
    if state.current_question_index is None:
        return None
    return state.current_question_index + 1, len(repository)
