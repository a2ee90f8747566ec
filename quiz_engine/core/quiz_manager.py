"""Registry of quizzes keyed by identifier."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from threading import Lock

from quiz_engine.constants.quiz_constants import MAX_QUESTIONS_PER_QUIZ
from quiz_engine.core.errors import QuizAlreadyExistsError, QuizNotFoundError
from quiz_engine.core.question_bank import QuestionBankEntry, build_questions
from quiz_engine.core.quiz import Quiz

logger = logging.getLogger(__name__)


class QuizManager:
    """Owns the quizzes it creates and hands out shared references to them.

    The registry itself is guarded by a lock; the quizzes it returns are not.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._quizzes: dict[str, Quiz] = {}

    def create_quiz(
        self,
        quiz_id: str,
        title: str,
        description: str = "",
        key: str | None = None,
    ) -> Quiz:
        return self._register(Quiz(quiz_id, title, description, key=key))

    def create_quiz_from_bank(
        self,
        quiz_id: str,
        title: str,
        entries: Iterable[QuestionBankEntry],
        description: str = "",
        category: str | None = None,
        difficulty: str | None = None,
        limit: int | None = MAX_QUESTIONS_PER_QUIZ,
    ) -> Quiz:
        """Create a quiz filled with questions selected from a question bank.

        The quiz only becomes visible through the registry once all of its
        questions are in place.
        """
        quiz = Quiz(quiz_id, title, description)
        for question in build_questions(entries, category=category, difficulty=difficulty, limit=limit):
            quiz.add_question(question)
        return self._register(quiz)

    def get_quiz(self, quiz_id: str) -> Quiz:
        with self._lock:
            quiz = self._quizzes.get(quiz_id)
        if quiz is None:
            raise QuizNotFoundError(f"Quiz with ID '{quiz_id}' not found")
        return quiz

    def delete_quiz(self, quiz_id: str) -> bool:
        with self._lock:
            removed = self._quizzes.pop(quiz_id, None) is not None
        if removed:
            logger.info("Deleted quiz %s", quiz_id)
        return removed

    def list_quizzes(self) -> list[Quiz]:
        with self._lock:
            return list(self._quizzes.values())

    def get_quiz_count(self) -> int:
        with self._lock:
            return len(self._quizzes)

    def _register(self, quiz: Quiz) -> Quiz:
        with self._lock:
            if quiz.id in self._quizzes:
                raise QuizAlreadyExistsError(f"Quiz with ID '{quiz.id}' already exists")
            self._quizzes[quiz.id] = quiz
        logger.info("Created quiz %s (%s)", quiz.id, quiz.title)
        return quiz
