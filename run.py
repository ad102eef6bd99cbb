"""Main entry point for Trivia Bot."""
import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import BotCommand

from trivia_bot.config import Settings
from trivia_bot.handlers import start, quiz
from trivia_bot.services.games import GameRegistry
from trivia_bot.trivia_api.client import TriviaClient
from trivia_bot.utils.token_manager import ensure_token

logger = logging.getLogger(__name__)


async def main(settings: Settings):
    """Main function to start the bot."""
    logger.info("Starting Trivia Bot...")

    async with TriviaClient(base_url=settings.TRIVIA_BASE_URL, timeout=settings.TRIVIA_TIMEOUT) as client:
        games = GameRegistry(
            client,
            default_query=settings.question_query(),
            default_amount=settings.DEFAULT_QUESTION_AMOUNT,
        )

        # Token is process-wide: request it once up front, /start retries if this fails
        await ensure_token(games.scope, client)

        bot = Bot(token=settings.BOT_TOKEN)
        dp = Dispatcher(storage=MemoryStorage())
        dp["games"] = games

        dp.include_router(start.router)
        dp.include_router(quiz.router)

        await bot.set_my_commands([
            BotCommand(command="start", description="New quiz"),
        ])

        try:
            logger.info("Starting bot polling...")
            await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
        finally:
            await bot.session.close()
            logger.info("Bot stopped")


if __name__ == "__main__":
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    try:
        asyncio.run(main(settings))
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)
