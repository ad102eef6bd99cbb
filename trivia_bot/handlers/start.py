import logging

from aiogram import Router, F
from aiogram.filters import CommandStart
from aiogram.types import Message, CallbackQuery

from trivia_bot.handlers.quiz import ALREADY_LOADING_TEXT, STALE_BUTTON_TEXT
from trivia_bot.services.games import GameRegistry
from trivia_bot.services.render import render
from trivia_bot.utils.token_manager import ensure_token

logger = logging.getLogger(__name__)
router = Router()


@router.message(CommandStart())
async def cmd_start(message: Message, games: GameRegistry):
    """Show the intro page, fetching the session token on first use."""
    game = games.get(message.chat.id)
    if game.loading:
        # The loading screen is redrawn once the batch arrives
        await message.answer(ALREADY_LOADING_TEXT)
        return
    game.reset()

    await ensure_token(games.scope, games.client)

    text, keyboard = render(game.view())
    sent = await message.answer(text, reply_markup=keyboard, parse_mode="HTML")
    games.set_screen(message.chat.id, sent.message_id)


@router.callback_query(F.data == "connect")
async def retry_connect(callback: CallbackQuery, games: GameRegistry):
    """Retry the token request from the intro page."""
    if not games.is_screen(callback.message.chat.id, callback.message.message_id):
        await callback.answer(STALE_BUTTON_TEXT)
        return
    await callback.answer()
    game = games.get(callback.message.chat.id)

    token = await ensure_token(games.scope, games.client)
    if token is None:
        await callback.message.answer("⚠️ Still no connection. Try again in a minute.")
        return

    text, keyboard = render(game.view())
    await callback.message.edit_text(text, reply_markup=keyboard, parse_mode="HTML")
