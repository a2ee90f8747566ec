"""Quiz aggregate: an ordered question set plus the state of one attempt."""

from __future__ import annotations

from datetime import datetime, timezone
import hmac
import logging

from quiz_engine.core.access_keys import generate_quiz_key
from quiz_engine.core.errors import InvalidArgumentError, OutOfRangeError
from quiz_engine.core.models import (
    AnswerRecord,
    Question,
    QuizProgress,
    QuizResults,
    QuizState,
)
from quiz_engine.core.services import scoring

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Quiz:
    """Multiple-choice quiz that records answers and scores a single attempt.

    A quiz is not thread-safe: callers sharing one instance across threads
    must serialize calls to ``start``, ``submit_answer``, ``finish`` and
    ``reset`` themselves.
    """

    def __init__(
        self,
        quiz_id: str,
        title: str,
        description: str = "",
        key: str | None = None,
    ) -> None:
        self.id = quiz_id
        self.title = title
        self.description = description
        self.key: str = key or generate_quiz_key()
        self.questions: list[Question] = []
        self.user_answers: list[AnswerRecord | None] = []
        self.start_time: datetime | None = None
        self.end_time: datetime | None = None

    def __repr__(self) -> str:
        return f"Quiz(id={self.id!r}, title={self.title!r}, questions={len(self.questions)})"

    @property
    def state(self) -> QuizState:
        if self.end_time is not None:
            return QuizState.FINISHED
        if self.start_time is not None:
            return QuizState.IN_PROGRESS
        return QuizState.NOT_STARTED

    def add_question(self, question: Question) -> None:
        if not isinstance(question, Question):
            raise InvalidArgumentError("Invalid question object")
        self.questions.append(question)

    def start(self) -> None:
        """Begin a fresh attempt, discarding any previous answers."""
        self.start_time = _utcnow()
        self.end_time = None
        self.user_answers = []
        logger.debug("Quiz %s attempt started with %d question(s)", self.id, len(self.questions))

    def submit_answer(self, question_index: int, answer_index: int) -> bool:
        """Record (or overwrite) the answer for one question.

        Answers are accepted in any state, including before ``start`` and
        after ``finish``.
        """
        if not 0 <= question_index < len(self.questions):
            raise OutOfRangeError(f"Invalid question index {question_index}")

        question = self.questions[question_index]
        if not 0 <= answer_index < len(question.options):
            raise OutOfRangeError(f"Invalid answer index {answer_index}")

        is_correct = question.is_correct(answer_index)
        record = AnswerRecord(
            question_id=question.id,
            answer_index=answer_index,
            is_correct=is_correct,
            points=question.points if is_correct else 0,
            timestamp=_utcnow(),
        )

        if question_index >= len(self.user_answers):
            self.user_answers.extend([None] * (question_index + 1 - len(self.user_answers)))
        self.user_answers[question_index] = record
        return True

    def finish(self) -> QuizResults:
        """End the attempt and return its results.

        Each call moves ``end_time`` forward again.
        """
        self.end_time = _utcnow()
        results = self.get_results()
        logger.info(
            "Quiz %s finished: %s/%s points (%.2f%%)",
            self.id,
            results.score,
            results.max_score,
            results.percentage,
        )
        return results

    def get_results(self) -> QuizResults:
        return scoring.build_results(
            self.questions,
            self.user_answers,
            self.start_time,
            self.end_time,
            now=_utcnow(),
        )

    def get_total_points(self) -> float:
        return scoring.total_points(self.questions)

    def get_progress(self) -> QuizProgress:
        return scoring.build_progress(self.questions, self.user_answers)

    def reset(self) -> None:
        self.user_answers = []
        self.start_time = None
        self.end_time = None

    def validate_key(self, provided_key: str) -> bool:
        """Compare ``provided_key`` with the quiz key in constant time."""
        if not isinstance(provided_key, str):
            return False
        return hmac.compare_digest(self.key.encode("utf-8"), provided_key.encode("utf-8"))
