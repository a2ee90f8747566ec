"""Utilities for importing quiz questions from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option text
    B: Second option text
    ...            (up to H; at least A and B, without gaps)
    CORRECT: letter of the correct option
    POINTS: positive integer (optional, defaults to 1)
    EXPLANATION: text shown with the results (optional)

Example:

    Q: Which of these is NOT a common configuration format?
    A: JSON
    B: YAML
    C: XML
    D: JPEG
    CORRECT: D
    POINTS: 2
    EXPLANATION: JPEG is an image format.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from quiz_engine.constants.quiz_constants import DEFAULT_QUESTION_POINTS
from quiz_engine.core.errors import QuizEngineError
from quiz_engine.core.models import Question


class QuizImportError(QuizEngineError):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    questions: list[Question]


OPTION_LETTERS = ("A", "B", "C", "D", "E", "F", "G", "H")
MIN_OPTIONS = 2
BLOCK_SEPARATOR = "---"
_SECTION_PREFIXES = ("Q:", "CORRECT:", "POINTS:", "EXPLANATION:")


def is_section_marker(line: str) -> bool:
    """Whether a stripped line would open a new section when parsed."""
    return line.upper().startswith(_SECTION_PREFIXES) or _is_option_marker(line)


def _is_option_marker(line: str) -> bool:
    return len(line) > 2 and line[0].upper() in OPTION_LETTERS and line[1] == ":"


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    return ImportedQuiz(source_path=file_path, questions=questions)


def parse_quiz_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == BLOCK_SEPARATOR:
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block, number) for number, block in enumerate(blocks, start=1) if block]


def _parse_block(block: str, number: int) -> Question:
    question_lines: list[str] = []
    explanation_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    points: int = DEFAULT_QUESTION_POINTS
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("POINTS:"):
            points = _parse_points(line.split(":", 1)[1].strip())
            current_section = None
            continue

        if upper.startswith("EXPLANATION:"):
            explanation_lines = [line.split(":", 1)[1].strip()]
            current_section = "EXPLANATION"
            continue

        if _is_option_marker(line):
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "EXPLANATION":
            explanation_lines.append(line)
        elif current_section in OPTION_LETTERS:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text missing (Q: ...)")

    expected_letters = OPTION_LETTERS[: len(options)]
    if len(options) < MIN_OPTIONS or set(options) != set(expected_letters):
        raise QuizImportError(
            f"Each question must define at least {MIN_OPTIONS} options lettered from A without gaps."
        )
    option_list = [options[letter].strip() for letter in expected_letters]
    if any(not option for option in option_list):
        raise QuizImportError("Option text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError("CORRECT is required for every question.")
    if correct_letter not in expected_letters:
        raise QuizImportError(f"CORRECT must be one of {', '.join(expected_letters)}.")

    return Question(
        id=number,
        text=question_text,
        options=tuple(option_list),
        correct_answer_index=expected_letters.index(correct_letter),
        points=points,
        explanation="\n".join(explanation_lines).strip(),
    )


def _parse_points(raw_value: str) -> int:
    if not raw_value:
        raise QuizImportError("POINTS must include an integer value.")
    try:
        parsed_value = int(raw_value)
    except ValueError as exc:
        raise QuizImportError("POINTS must be an integer.") from exc
    if parsed_value <= 0:
        raise QuizImportError("POINTS must be a positive integer.")
    return parsed_value
