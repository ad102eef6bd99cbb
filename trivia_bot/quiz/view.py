"""Snapshot of a game handed to the renderer."""
from dataclasses import dataclass
from typing import Optional, Tuple

from trivia_bot.trivia_api.models import Question

from .store import Page, QuestionRepository, QuizState, score, progress


@dataclass(frozen=True)
class QuizView:
    """Everything the renderer needs. Redrawing from it alone is enough."""
    page: Page
    score: int
    start_enabled: bool
    question: Optional[Question] = None
    feedback: Optional[str] = None
    progress: Optional[Tuple[int, int]] = None
    error: Optional[str] = None
    loading: bool = False


def build_view(state: QuizState, repository: QuestionRepository) -> QuizView:
    question = None
    index = state.current_question_index
    if state.page in (Page.QUESTION, Page.ANSWER) and index is not None and index < len(repository):
        question = repository[index]

    return QuizView(
        page=state.page,
        score=score(state, repository),
        start_enabled=bool(state.session_token),
        question=question,
        feedback=state.feedback if state.page is Page.ANSWER else None,
        progress=progress(state, repository) if state.page is not Page.INTRO else None,
        error=state.error if state.page is Page.ERROR else None,
        loading=state.page is Page.QUESTION and question is None,
    )
