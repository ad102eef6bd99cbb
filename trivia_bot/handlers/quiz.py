import logging
from typing import Optional

from aiogram import Router, F
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import Message, CallbackQuery

from trivia_bot.quiz.machine import QuizMachine, InvalidTransitionError
from trivia_bot.services.games import GameRegistry
from trivia_bot.services.render import render, LOADING_TEXT
from trivia_bot.utils.token_manager import ensure_token

logger = logging.getLogger(__name__)
router = Router()

STALE_BUTTON_TEXT = "This button is no longer active."
ALREADY_LOADING_TEXT = "Questions are already loading..."


def _parse_int(data: str) -> Optional[int]:
    """'start:10' -> 10, None for malformed callback data."""
    parts = data.split(":", 1)
    if len(parts) != 2:
        return None
    try:
        return int(parts[1])
    except ValueError:
        return None


async def _reject_old_screen(callback: CallbackQuery, games: GameRegistry) -> bool:
    """Answer and return True if the button belongs to a message the game has left."""
    message = callback.message
    if games.is_screen(message.chat.id, message.message_id):
        return False
    logger.info("Ignored %r from old message %d in chat %d", callback.data, message.message_id, message.chat.id)
    await callback.answer(STALE_BUTTON_TEXT)
    return True


async def _show(message: Message, game: QuizMachine):
    """Redraw the whole screen from the current game view."""
    text, keyboard = render(game.view())
    try:
        await message.edit_text(text, reply_markup=keyboard, parse_mode="HTML")
    except TelegramBadRequest as e:
        if "message is not modified" not in str(e):
            raise


async def _start(callback: CallbackQuery, games: GameRegistry, amount: int):
    game = games.get(callback.message.chat.id)
    if game.loading:
        await callback.answer(ALREADY_LOADING_TEXT)
        return
    await callback.answer()

    games.set_screen(callback.message.chat.id, callback.message.message_id)
    await callback.message.edit_text(LOADING_TEXT)
    # No-op while a token is held; replaces one dropped after a token error
    await ensure_token(games.scope, games.client)
    await game.start_quiz(amount)
    await _show(callback.message, game)


@router.callback_query(F.data.startswith("start:"))
async def start_quiz(callback: CallbackQuery, games: GameRegistry):
    """StartQuiz with the chosen number of questions; the pressed message becomes the game screen."""
    amount = _parse_int(callback.data)
    if amount is None or amount <= 0:
        logger.warning("Malformed start callback: %r", callback.data)
        await callback.answer(STALE_BUTTON_TEXT)
        return
    await _start(callback, games, amount)


@router.callback_query(F.data == "retry")
async def retry_quiz(callback: CallbackQuery, games: GameRegistry):
    """StartQuiz again with the previous number of questions."""
    if await _reject_old_screen(callback, games):
        return
    game = games.get(callback.message.chat.id)
    await _start(callback, games, game.last_amount)


@router.callback_query(F.data.startswith("ans:"))
async def submit_answer(callback: CallbackQuery, games: GameRegistry):
    """SubmitAnswer with the answer behind the pressed button."""
    if await _reject_old_screen(callback, games):
        return
    game = games.get(callback.message.chat.id)
    index = _parse_int(callback.data)
    question = game.current_question()

    if index is None or question is None or not 0 <= index < len(question.answers):
        await callback.answer(STALE_BUTTON_TEXT)
        return

    try:
        game.submit_answer(question.answers[index])
    except InvalidTransitionError as e:
        logger.info("Ignored stale answer in chat %d: %s", callback.message.chat.id, e)
        await callback.answer(STALE_BUTTON_TEXT)
        return

    await callback.answer()
    await _show(callback.message, game)


@router.callback_query(F.data == "next")
async def next_question(callback: CallbackQuery, games: GameRegistry):
    """NextQuestion from the feedback page."""
    if await _reject_old_screen(callback, games):
        return
    game = games.get(callback.message.chat.id)
    try:
        game.next_question()
    except InvalidTransitionError as e:
        logger.info("Ignored stale continue in chat %d: %s", callback.message.chat.id, e)
        await callback.answer(STALE_BUTTON_TEXT)
        return

    await callback.answer()
    await _show(callback.message, game)
