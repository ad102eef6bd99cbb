"""Registry of running games, one per Telegram chat."""
import logging
from typing import Any, Dict, Optional

from trivia_bot.quiz.machine import QuizMachine
from trivia_bot.quiz.store import SessionScope
from trivia_bot.trivia_api.endpoints import DEFAULT_AMOUNT

logger = logging.getLogger(__name__)


class GameRegistry:
    """
    Holds the process-wide SessionScope and the provider client, and creates
    a QuizMachine for every chat on first use.

    Games live in memory only and are kept until the process exits: one
    small object per chat that ever pressed /start.
    """

    def __init__(
        self,
        client,
        scope: Optional[SessionScope] = None,
        default_query: Optional[Dict[str, Any]] = None,
        default_amount: int = DEFAULT_AMOUNT,
    ):
        self.client = client
        self.scope = scope or SessionScope()
        self.default_query = dict(default_query or {})
        self.default_amount = default_amount
        self._games: Dict[int, QuizMachine] = {}
        # chat_id -> message_id of the message currently showing the game
        self._screens: Dict[int, int] = {}

    def get(self, chat_id: int) -> QuizMachine:
        game = self._games.get(chat_id)
        if game is None:
            game = QuizMachine(self.scope, self.client, default_query=self.default_query)
            game.last_amount = self.default_amount
            self._games[chat_id] = game
            logger.debug("New game for chat_id=%d", chat_id)
        return game

    def set_screen(self, chat_id: int, message_id: int) -> None:
        """Make `message_id` the only message whose buttons drive the game."""
        self._screens[chat_id] = message_id

    def is_screen(self, chat_id: int, message_id: int) -> bool:
        return self._screens.get(chat_id) == message_id

    def __len__(self) -> int:
        return len(self._games)
