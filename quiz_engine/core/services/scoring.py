"""Service for turning recorded answers into results and progress snapshots."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
import math

from quiz_engine.constants.quiz_constants import PERCENTAGE_PRECISION
from quiz_engine.core.models import (
    AnswerDetail,
    AnswerRecord,
    Question,
    QuizProgress,
    QuizResults,
)


def total_points(questions: Sequence[Question]) -> float:
    return sum(question.points for question in questions)


def recorded_answers(answers: Sequence[AnswerRecord | None]) -> list[tuple[int, AnswerRecord]]:
    """Return ``(question_index, record)`` pairs for the filled slots only."""
    return [(index, answer) for index, answer in enumerate(answers) if answer is not None]


def percent_of(part: float, whole: float, ndigits: int | None = None) -> float:
    """Percentage of ``part`` in ``whole``; a zero denominator yields ``0.0``."""
    if not whole:
        return 0.0
    value = part / whole * 100
    if ndigits is None:
        return value
    # Ties round up: 0.125 -> 0.13.
    scale = 10**ndigits
    return math.floor(value * scale + 0.5) / scale


def build_results(
    questions: Sequence[Question],
    answers: Sequence[AnswerRecord | None],
    start_time: datetime | None,
    end_time: datetime | None,
    now: datetime,
) -> QuizResults:
    """Compute the results snapshot for the current attempt."""
    recorded = recorded_answers(answers)
    max_score = total_points(questions)

    if start_time is None or not recorded:
        return QuizResults(
            total_questions=len(questions),
            answered_questions=len(recorded),
            correct_answers=0,
            score=0,
            max_score=max_score,
            percentage=0.0,
            duration=None,
            details=[],
        )

    correct_answers = sum(1 for _, answer in recorded if answer.is_correct)
    score = sum(answer.points for _, answer in recorded)
    duration = (end_time if end_time is not None else now) - start_time

    details = [
        AnswerDetail(
            question_index=index,
            question_text=questions[index].text,
            selected_answer=questions[index].options[answer.answer_index],
            correct_answer=questions[index].get_correct_answer(),
            is_correct=answer.is_correct,
            points_earned=answer.points,
            max_points=questions[index].points,
            explanation=questions[index].explanation,
        )
        for index, answer in recorded
    ]

    return QuizResults(
        total_questions=len(questions),
        answered_questions=len(recorded),
        correct_answers=correct_answers,
        score=score,
        max_score=max_score,
        percentage=percent_of(score, max_score, PERCENTAGE_PRECISION),
        duration=duration,
        details=details,
    )


def build_progress(
    questions: Sequence[Question],
    answers: Sequence[AnswerRecord | None],
) -> QuizProgress:
    recorded = recorded_answers(answers)
    answered = len(recorded)
    return QuizProgress(
        total_questions=len(questions),
        answered_questions=answered,
        percent_complete=percent_of(answered, len(questions)),
        current_score=sum(answer.points for _, answer in recorded),
        max_possible_score=total_points(questions),
    )
