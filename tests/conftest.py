from datetime import datetime, timedelta, timezone

import pytest

from quiz_engine.core.models import Question
from quiz_engine.core.quiz import Quiz


class FakeClock:
    """Deterministic stand-in for the quiz clock."""

    def __init__(self) -> None:
        self.now = datetime(2025, 12, 26, 3, 17, 8, tzinfo=timezone.utc)

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock(monkeypatch):
    """Freeze the quiz clock; tests move it forward with ``clock.advance``."""
    fake = FakeClock()
    monkeypatch.setattr("quiz_engine.core.quiz._utcnow", fake)
    return fake


@pytest.fixture
def two_question_quiz():
    """Two one-point questions whose correct answers are at indices 0 and 1."""
    quiz = Quiz("quiz-1", "Basics", "Two simple questions", key="correct-horse-key")
    quiz.add_question(Question(id="q1", text="Capital of France?", options=("Paris", "Rome"), correct_answer_index=0))
    quiz.add_question(Question(id="q2", text="2 + 2?", options=("5", "4", "3"), correct_answer_index=1))
    return quiz
