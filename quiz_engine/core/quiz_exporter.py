"""Utilities for exporting questions to the plain-text format used for imports."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from quiz_engine.constants.quiz_constants import DEFAULT_QUESTION_POINTS
from quiz_engine.core.models import Question
from quiz_engine.core.quiz_importer import (
    BLOCK_SEPARATOR,
    MIN_OPTIONS,
    OPTION_LETTERS,
    is_section_marker,
)


def save_quiz_to_file(file_path: Path, questions: Sequence[Question]) -> None:
    """Write the provided questions to disk in the text import format."""

    if not questions:
        raise ValueError("Cannot export an empty quiz.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(serialize_questions(questions), encoding="utf-8")


def serialize_questions(questions: Sequence[Question]) -> str:
    blocks = [_serialize_question(question) for question in questions]
    return "\n\n---\n\n".join(blocks) + "\n"


def _serialize_question(question: Question) -> str:
    if not MIN_OPTIONS <= len(question.options) <= len(OPTION_LETTERS):
        raise ValueError(
            f"Question {question.id!r} needs between {MIN_OPTIONS} and {len(OPTION_LETTERS)} options to be exported."
        )
    if not 0 <= question.correct_answer_index < len(question.options):
        raise ValueError(f"Question {question.id!r} has no valid correct answer to export.")
    if question.points != int(question.points):
        raise ValueError(f"Question {question.id!r} has fractional points, which the text format cannot hold.")

    lines: list[str] = []
    lines.extend(_section_lines(question, "Q", "question text", question.text))

    for letter, option_text in zip(OPTION_LETTERS, question.options):
        lines.extend(_section_lines(question, letter, f"option {letter}", option_text))

    lines.append(f"CORRECT: {OPTION_LETTERS[question.correct_answer_index]}")

    if question.points != DEFAULT_QUESTION_POINTS:
        lines.append(f"POINTS: {int(question.points)}")

    if question.explanation:
        lines.extend(_section_lines(question, "EXPLANATION", "explanation", question.explanation))

    return "\n".join(lines)


def _section_lines(question: Question, marker: str, label: str, text: str) -> list[str]:
    """Render one section, refusing text the importer would read back differently."""
    text_lines = text.splitlines() or [""]
    for position, line in enumerate(text_lines):
        stripped = line.strip()
        if not stripped:
            raise ValueError(f"Question {question.id!r} has a blank line in its {label}.")
        if position and (stripped == BLOCK_SEPARATOR or is_section_marker(stripped)):
            raise ValueError(
                f"Question {question.id!r} has a line in its {label} that would start a new section: {stripped!r}."
            )
    return [f"{marker}: {text_lines[0]}", *text_lines[1:]]
