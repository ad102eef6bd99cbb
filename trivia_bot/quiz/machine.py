"""Quiz state machine: intro → question → answer → … → outro."""
import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from trivia_bot.trivia_api.endpoints import DEFAULT_AMOUNT
from trivia_bot.trivia_api.exceptions import TriviaAPIError, TokenError
from trivia_bot.trivia_api.models import Question

from .store import Page, QuestionRepository, QuizState, SessionScope, score, progress
from .view import QuizView, build_view

logger = logging.getLogger(__name__)

CORRECT_FEEDBACK = "You got it!"
INCORRECT_FEEDBACK = "Too bad! The correct answer was: {correct}"
LOAD_ERROR_MESSAGE = "Could not load questions: {reason}"


class InvalidTransitionError(Exception):
    """An action was triggered on a page that does not accept it."""

    def __init__(self, action: str, page: Page):
        super().__init__(f"{action} is not allowed on page '{page.value}'")
        self.action = action
        self.page = page


class QuizMachine:
    """
    Drives one game.

    Transitions are plain synchronous methods; `start_quiz` is the only
    coroutine and awaits the provider between `begin_game` and
    `load_questions`.
    """

    def __init__(
        self,
        scope: SessionScope,
        provider,
        default_query: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            scope: Process-wide scope holding the session token
            provider: Object with `fetch_questions(amount, query, token)`
            default_query: Extra parameters sent with every question request
        """
        self.scope = scope
        self.provider = provider
        self.default_query = dict(default_query or {})
        self.state = QuizState(scope)
        self.repository = QuestionRepository()
        self.last_amount: int = DEFAULT_AMOUNT
        self._loading = False

    # ------------------------------------------------------------------
    # Derived data
    # ------------------------------------------------------------------

    @property
    def loading(self) -> bool:
        return self._loading

    def current_question(self) -> Optional[Question]:
        index = self.state.current_question_index
        if index is None or index >= len(self.repository):
            return None
        return self.repository[index]

    def score(self) -> int:
        return score(self.state, self.repository)

    def progress(self) -> Optional[Tuple[int, int]]:
        return progress(self.state, self.repository)

    def view(self) -> QuizView:
        return build_view(self.state, self.repository)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _move(self, action: str, page: Page) -> None:
        previous = self.state.page
        self.state.page = page
        logger.debug("Quiz: %s --[%s]--> %s", previous.value, action, page.value)

    def reset(self) -> None:
        """Back to the intro page with an empty repository (token kept)."""
        self.state.reset()
        self.repository.clear()
        logger.debug("Quiz: reset to %s", self.state.page.value)

    def begin_game(self) -> None:
        """Reset the game (token kept) and point at the first question."""
        self.reset()
        self.state.current_question_index = 0
        self._move("StartQuiz", Page.QUESTION)

    def load_questions(self, questions: Iterable[Question]) -> None:
        """Replace the repository with a freshly fetched batch."""
        self.repository.replace(questions)

    def fail(self, message: str) -> None:
        """Leave the game on the error page with a visible message."""
        self.state.current_question_index = None
        self.state.error = message
        self._move("LoadFailed", Page.ERROR)

    async def start_quiz(self, amount: int = DEFAULT_AMOUNT, query: Optional[Dict[str, Any]] = None) -> bool:
        """
        Start a new game with `amount` questions.

        Returns:
            True once questions are loaded, False if the start was ignored
            because another one is in flight or the provider failed
        """
        if self._loading:
            logger.info("StartQuiz ignored: questions are already being loaded")
            return False

        params = dict(self.default_query)
        params.update(query or {})

        token = self.scope.token
        self._loading = True
        self.last_amount = amount
        try:
            self.begin_game()
            try:
                questions = await self.provider.fetch_questions(amount, params, token=token)
            except TriviaAPIError as e:
                logger.error("Failed to load %d questions: %s", amount, e)
                if isinstance(e, TokenError) and token is not None and self.scope.token == token:
                    # Expired or exhausted: the next start requests a new one
                    logger.warning("Session token rejected, dropping it")
                    self.scope.token = None
                self.fail(LOAD_ERROR_MESSAGE.format(reason=e))
                return False
            self.load_questions(questions)
        finally:
            self._loading = False

        if not len(self.repository):
            logger.warning("Provider returned no questions for amount=%d", amount)
            self.fail(LOAD_ERROR_MESSAGE.format(reason="no questions returned"))
            return False
        return True

    def submit_answer(self, selected: str) -> str:
        """
        Record `selected` for the current question.

        Any string is accepted, including one that is not among the offered
        answers.

        Returns:
            Feedback text

        Raises:
            InvalidTransitionError: Not on a loaded question page
        """
        question = self.current_question()
        if self.state.page is not Page.QUESTION or question is None:
            raise InvalidTransitionError("SubmitAnswer", self.state.page)

        self.state.user_answers.append(selected)
        if selected == question.correct_answer:
            self.state.feedback = CORRECT_FEEDBACK
        else:
            self.state.feedback = INCORRECT_FEEDBACK.format(correct=question.correct_answer)

        self._move("SubmitAnswer", Page.ANSWER)
        return self.state.feedback

    def next_question(self) -> Page:
        """
        Advance past the feedback page.

        Raises:
            InvalidTransitionError: Not on the answer page
        """
        if self.state.page is not Page.ANSWER:
            raise InvalidTransitionError("NextQuestion", self.state.page)

        if self.state.current_question_index == len(self.repository) - 1:
            self._move("NextQuestion", Page.OUTRO)
        else:
            self.state.current_question_index += 1
            self._move("NextQuestion", Page.QUESTION)
        return self.state.page
