"""Loading question-bank records and turning them into quiz questions.

A question bank is a JSON list of records such as::

    {
      "id": 1,
      "category": "Fundamentals",
      "difficulty": "easy",
      "question": "What is the primary purpose of configuration files?",
      "options": ["...", "..."],
      "correctAnswer": 0,
      "explanation": "..."
    }

``points`` is optional and defaults to one point per question.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from quiz_engine.constants.quiz_constants import DEFAULT_QUESTION_POINTS, MAX_QUESTIONS_PER_QUIZ
from quiz_engine.core.errors import QuizEngineError
from quiz_engine.core.models import Question

logger = logging.getLogger(__name__)

DEFAULT_BANK_PATH = Path(__file__).resolve().parent.parent / "data" / "default_questions.json"


class QuestionBankError(QuizEngineError):
    """Raised when a question bank cannot be read or fails validation."""


class QuestionBankEntry(BaseModel):
    """One validated record of a question bank."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int | str
    text: str = Field(alias="question", min_length=1)
    options: list[str] = Field(min_length=1)
    correct_answer: int = Field(alias="correctAnswer", ge=0)
    category: str = ""
    difficulty: str = ""
    explanation: str = ""
    points: float = Field(default=DEFAULT_QUESTION_POINTS, gt=0)

    @model_validator(mode="after")
    def _check_correct_answer(self) -> "QuestionBankEntry":
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correctAnswer {self.correct_answer} is out of range for {len(self.options)} options"
            )
        return self

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            text=self.text,
            options=tuple(self.options),
            correct_answer_index=self.correct_answer,
            points=self.points,
            explanation=self.explanation,
        )


_ENTRIES_ADAPTER = TypeAdapter(list[QuestionBankEntry])


def parse_question_bank(raw: str | bytes) -> list[QuestionBankEntry]:
    try:
        return _ENTRIES_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise QuestionBankError(f"Invalid question bank: {exc}") from exc


def load_question_bank(path: Path | None = None) -> list[QuestionBankEntry]:
    """Read and validate a JSON question bank; defaults to the bundled sample bank."""
    bank_path = path or DEFAULT_BANK_PATH
    try:
        raw = bank_path.read_bytes()
    except OSError as exc:
        raise QuestionBankError(f"Cannot read question bank at {bank_path}") from exc
    entries = parse_question_bank(raw)
    logger.debug("Loaded %d question(s) from %s", len(entries), bank_path)
    return entries


def build_questions(
    entries: Iterable[QuestionBankEntry],
    category: str | None = None,
    difficulty: str | None = None,
    limit: int | None = MAX_QUESTIONS_PER_QUIZ,
) -> list[Question]:
    """Convert bank entries to questions, optionally filtered and capped at ``limit``."""
    selected = [
        entry
        for entry in entries
        if (category is None or entry.category.lower() == category.lower())
        and (difficulty is None or entry.difficulty.lower() == difficulty.lower())
    ]
    if limit is not None:
        selected = selected[:limit]
    return [entry.to_question() for entry in selected]
