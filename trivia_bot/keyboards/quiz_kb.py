from typing import Sequence

from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from trivia_bot.config import QUESTION_COUNTS

LABELS = ["A", "B", "C", "D"]


def question_count_keyboard(counts: Sequence[int] = QUESTION_COUNTS) -> InlineKeyboardMarkup:
    buttons = []
    for count in counts:
        buttons.append([InlineKeyboardButton(
            text=f"▶️ {count} questions",
            callback_data=f"start:{count}",
        )])
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def connect_keyboard() -> InlineKeyboardMarkup:
    """Shown on the intro page while no session token is available."""
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="🔌 Connect", callback_data="connect")],
    ])


def answers_keyboard(answers: Sequence[str]) -> InlineKeyboardMarkup:
    # callback_data is limited to 64 bytes, so answers are sent by index
    buttons = []
    for i, answer in enumerate(answers):
        label = LABELS[i] if i < len(LABELS) else str(i + 1)
        buttons.append([InlineKeyboardButton(
            text=f"{label}) {answer}",
            callback_data=f"ans:{i}",
        )])
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def continue_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="➡️ Continue", callback_data="next")],
    ])


def retry_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(text="🔄 Retry", callback_data="retry")],
    ])
