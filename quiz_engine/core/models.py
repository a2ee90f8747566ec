"""Domain models for the quiz engine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum, auto

from quiz_engine.constants.quiz_constants import DEFAULT_QUESTION_POINTS
from quiz_engine.core.errors import InvalidArgumentError


class QuizState(Enum):
    """Lifecycle of a single quiz attempt."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with a single correct option.

    The raw constructor does not check ``correct_answer_index`` against
    ``options``; a bad index only surfaces when the correct answer is read.
    Use :meth:`create_validated` to reject malformed questions up front.
    """

    id: str | int
    text: str
    options: tuple[str, ...]
    correct_answer_index: int
    points: float = DEFAULT_QUESTION_POINTS
    explanation: str = ""

    def __post_init__(self) -> None:
        # Freeze whatever sequence the caller handed in.
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

    @classmethod
    def create_validated(
        cls,
        id: str | int,
        text: str,
        options: Sequence[str],
        correct_answer_index: int,
        points: float = DEFAULT_QUESTION_POINTS,
        explanation: str = "",
    ) -> "Question":
        if not isinstance(text, str) or not text.strip():
            raise InvalidArgumentError("Question text must not be empty.")
        if not options:
            raise InvalidArgumentError("Question must have at least one option.")
        if not isinstance(correct_answer_index, int) or not 0 <= correct_answer_index < len(options):
            raise InvalidArgumentError(
                f"Correct answer index must be between 0 and {len(options) - 1}."
            )
        if points <= 0:
            raise InvalidArgumentError("Question points must be positive.")
        return cls(
            id=id,
            text=text,
            options=tuple(options),
            correct_answer_index=correct_answer_index,
            points=points,
            explanation=explanation,
        )

    def is_correct(self, answer_index: int) -> bool:
        return answer_index == self.correct_answer_index

    def get_correct_answer(self) -> str:
        if self.correct_answer_index < 0:
            raise IndexError(f"Correct answer index {self.correct_answer_index} out of range")
        return self.options[self.correct_answer_index]


@dataclass(frozen=True, slots=True)
class AnswerRecord:
    """Outcome of one submitted answer."""

    question_id: str | int
    answer_index: int
    is_correct: bool
    points: float
    timestamp: datetime


@dataclass(frozen=True, slots=True)
class AnswerDetail:
    """Per-question line of a results snapshot."""

    question_index: int
    question_text: str
    selected_answer: str
    correct_answer: str
    is_correct: bool
    points_earned: float
    max_points: float
    explanation: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "questionIndex": self.question_index,
            "questionText": self.question_text,
            "selectedAnswer": self.selected_answer,
            "correctAnswer": self.correct_answer,
            "isCorrect": self.is_correct,
            "pointsEarned": self.points_earned,
            "maxPoints": self.max_points,
            "explanation": self.explanation,
        }


@dataclass(frozen=True, slots=True)
class QuizResults:
    """Aggregate scoring snapshot returned by ``Quiz.get_results``/``Quiz.finish``."""

    total_questions: int
    answered_questions: int
    correct_answers: int
    score: float
    max_score: float
    percentage: float
    duration: timedelta | None
    details: list[AnswerDetail] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        """Return the snapshot in the camelCase shape used by storage and API layers."""
        duration_ms = None
        if self.duration is not None:
            duration_ms = int(self.duration.total_seconds() * 1000)
        return {
            "totalQuestions": self.total_questions,
            "answeredQuestions": self.answered_questions,
            "correctAnswers": self.correct_answers,
            "score": self.score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "duration": duration_ms,
            "details": [detail.to_dict() for detail in self.details],
        }


@dataclass(frozen=True, slots=True)
class QuizProgress:
    """Live progress of the current attempt."""

    total_questions: int
    answered_questions: int
    percent_complete: float
    current_score: float
    max_possible_score: float
