"""Data models for Open Trivia DB responses."""
from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Question:
    """Single quiz question, immutable once created."""
    text: str
    answers: Tuple[str, ...]
    correct_answer: str


# ============================================================================
# CONVERTERS: raw API records → our dataclasses
# ============================================================================

def question_from_record(record: Dict[str, Any]) -> Question:
    """
    Decorates a raw result record into a Question.

    Incorrect answers keep the order they were received in, the correct
    answer is appended last. Strings are kept verbatim, HTML entities
    included.
    """
    correct = record["correct_answer"]
    return Question(
        text=record["question"],
        answers=tuple(record["incorrect_answers"]) + (correct,),
        correct_answer=correct,
    )
