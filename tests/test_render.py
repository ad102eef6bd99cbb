"""Tests for building Telegram screens from a quiz view."""
from trivia_bot.quiz.store import Page
from trivia_bot.quiz.view import QuizView
from trivia_bot.services.render import render, clean, LOADING_TEXT
from trivia_bot.trivia_api.models import Question


def _buttons(keyboard):
    return [button for row in keyboard.inline_keyboard for button in row]


QUESTION = Question(
    text="Who wrote &quot;Hamlet&quot;?",
    answers=("Marlowe", "O&#039;Neill", "Shakespeare"),
    correct_answer="Shakespeare",
)


class TestRender:

    def test_intro_with_token(self):
        text, keyboard = render(QuizView(page=Page.INTRO, score=0, start_enabled=True))

        assert "Trivia Quiz" in text
        data = [b.callback_data for b in _buttons(keyboard)]
        assert data == ["start:5", "start:10", "start:15", "start:20"]

    def test_intro_without_token(self):
        text, keyboard = render(QuizView(page=Page.INTRO, score=0, start_enabled=False))

        assert "Could not connect" in text
        assert [b.callback_data for b in _buttons(keyboard)] == ["connect"]

    def test_loading(self):
        view = QuizView(page=Page.QUESTION, score=0, start_enabled=True, progress=(1, 0), loading=True)

        assert render(view) == (LOADING_TEXT, None)

    def test_question(self):
        view = QuizView(
            page=Page.QUESTION, score=1, start_enabled=True,
            question=QUESTION, progress=(2, 10),
        )
        text, keyboard = render(view)

        assert "Question 2 of 10" in text
        assert "Score: 1" in text
        assert "Who wrote &quot;Hamlet&quot;?" in text
        buttons = _buttons(keyboard)
        assert [b.callback_data for b in buttons] == ["ans:0", "ans:1", "ans:2"]
        assert buttons[1].text == "B) O'Neill"

    def test_answer_feedback(self):
        view = QuizView(
            page=Page.ANSWER, score=0, start_enabled=True, question=QUESTION,
            feedback="Too bad! The correct answer was: O&#039;Neill", progress=(1, 3),
        )
        text, keyboard = render(view)

        assert "Too bad! The correct answer was: O&#x27;Neill" in text
        assert [b.callback_data for b in _buttons(keyboard)] == ["next"]

    def test_outro(self):
        view = QuizView(page=Page.OUTRO, score=7, start_enabled=True, progress=(10, 10))
        text, keyboard = render(view)

        assert "Score: 7 of 10" in text
        assert _buttons(keyboard)[0].callback_data == "start:5"

    def test_error(self):
        view = QuizView(page=Page.ERROR, score=0, start_enabled=True, error="Could not load questions: <boom>")
        text, keyboard = render(view)

        assert "Could not load questions: &lt;boom&gt;" in text
        assert [b.callback_data for b in _buttons(keyboard)] == ["retry"]

    def test_render_is_idempotent(self):
        view = QuizView(page=Page.QUESTION, score=0, start_enabled=True, question=QUESTION, progress=(1, 1))

        assert render(view)[0] == render(view)[0]


class TestClean:

    def test_decodes_then_escapes(self):
        assert clean("Tom &amp; Jerry &lt;3") == "Tom &amp; Jerry &lt;3"
        assert clean("&eacute;t&eacute;") == "été"
