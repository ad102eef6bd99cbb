"""Turns a QuizView into Telegram message text and keyboard."""
import html
from typing import Optional, Tuple

from aiogram.types import InlineKeyboardMarkup

from trivia_bot.keyboards.quiz_kb import (
    question_count_keyboard, connect_keyboard, answers_keyboard,
    continue_keyboard, retry_keyboard,
)
from trivia_bot.quiz.store import Page
from trivia_bot.quiz.view import QuizView

INTRO_TEXT = (
    "🧠 <b>Trivia Quiz</b>\n\n"
    "Answer questions from the Open Trivia Database one at a time.\n"
    "How many questions do you want?"
)
CONNECTING_TEXT = (
    "🧠 <b>Trivia Quiz</b>\n\n"
    "⚠️ Could not connect to the question server yet."
)
LOADING_TEXT = "⏳ Loading questions..."


def clean(text: str) -> str:
    """Decode the API's HTML entities and escape for Telegram HTML."""
    return html.escape(html.unescape(text))


def _status_line(view: QuizView) -> str:
    current, total = view.progress or (0, 0)
    return f"❓ Question {current} of {total} · 🏆 Score: {view.score}"


def render(view: QuizView) -> Tuple[str, Optional[InlineKeyboardMarkup]]:
    """Build the whole screen for `view`. Safe to call repeatedly."""
    if view.page is Page.INTRO:
        if view.start_enabled:
            return INTRO_TEXT, question_count_keyboard()
        return CONNECTING_TEXT, connect_keyboard()

    if view.page is Page.QUESTION:
        if view.loading:
            return LOADING_TEXT, None
        text = f"{_status_line(view)}\n\n<b>{clean(view.question.text)}</b>"
        answers = [html.unescape(answer) for answer in view.question.answers]
        return text, answers_keyboard(answers)

    if view.page is Page.ANSWER:
        text = f"{_status_line(view)}\n\n{clean(view.feedback or '')}"
        return text, continue_keyboard()

    if view.page is Page.OUTRO:
        _, total = view.progress or (0, 0)
        text = (
            f"🏁 <b>Quiz finished!</b>\n\n"
            f"🏆 Score: {view.score} of {total}\n\n"
            f"Play again?"
        )
        return text, question_count_keyboard()

    if view.page is Page.ERROR:
        text = f"😞 {clean(view.error or 'Something went wrong.')}"
        return text, retry_keyboard()

    raise ValueError(f"Unknown page: {view.page!r}")
