from pathlib import Path

import pytest

from quiz_engine.core.models import Question
from quiz_engine.core.quiz_exporter import save_quiz_to_file, serialize_questions
from quiz_engine.core.quiz_importer import QuizImportError, load_quiz_from_file, parse_quiz_text

SAMPLE = """\
Q: Which of these is NOT a common configuration format?
A: JSON
B: YAML
C: XML
D: JPEG
CORRECT: D
POINTS: 2
EXPLANATION: JPEG is an image format.
It stores pictures.

---

Q: What is 2 + 2?
Think carefully.
A: 3
B: 4
CORRECT: b
"""


class TestParseQuizText:
    """Tests for the plain-text quiz format."""

    def test_parses_blocks(self):
        first, second = parse_quiz_text(SAMPLE)

        assert first.text == "Which of these is NOT a common configuration format?"
        assert first.options == ("JSON", "YAML", "XML", "JPEG")
        assert first.correct_answer_index == 3
        assert first.points == 2
        assert first.explanation == "JPEG is an image format.\nIt stores pictures."

        assert second.text == "What is 2 + 2?\nThink carefully."
        assert second.options == ("3", "4")
        assert second.get_correct_answer() == "4"
        assert second.points == 1
        assert second.explanation == ""

    def test_question_ids_follow_block_order(self):
        assert [question.id for question in parse_quiz_text(SAMPLE)] == [1, 2]

    def test_blank_lines_also_separate_blocks(self):
        text = "Q: One?\nA: x\nB: y\nCORRECT: A\n\nQ: Two?\nA: x\nB: y\nCORRECT: B\n"

        assert len(parse_quiz_text(text)) == 2

    @pytest.mark.parametrize(
        "block, message",
        [
            ("A: x\nB: y\nCORRECT: A", "Question text missing"),
            ("Q: ?\nA: x\nCORRECT: A", "at least 2 options"),
            ("Q: ?\nA: x\nC: y\nCORRECT: A", "without gaps"),
            ("Q: ?\nA: x\nB: y", "CORRECT is required"),
            ("Q: ?\nA: x\nB: y\nCORRECT: C", "CORRECT must be one of A, B"),
            ("Q: ?\nA: x\nB: y\nCORRECT: A\nPOINTS: zero", "POINTS must be an integer"),
            ("Q: ?\nA: x\nB: y\nCORRECT: A\nPOINTS: 0", "POINTS must be a positive integer"),
            ("Q: ?\nA: x\nB: y\nCORRECT: A\nPOINTS:", "POINTS must include"),
            ("CORRECT: A\nstray text", "outside of a known section"),
        ],
    )
    def test_rejects_malformed_blocks(self, block, message):
        with pytest.raises(QuizImportError, match=message):
            parse_quiz_text(block)

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "quiz.txt"
        path.write_text(SAMPLE, encoding="utf-8")

        imported = load_quiz_from_file(path)

        assert imported.source_path == path
        assert len(imported.questions) == 2

    def test_empty_file_is_rejected(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("\n\n---\n", encoding="utf-8")

        with pytest.raises(QuizImportError):
            load_quiz_from_file(path)


class TestExport:
    """Tests for writing the plain-text quiz format."""

    def test_exported_file_imports_back(self, tmp_path):
        questions = parse_quiz_text(SAMPLE)
        path = tmp_path / "nested" / "quiz.txt"

        save_quiz_to_file(path, questions)

        assert load_quiz_from_file(path).questions == questions

    def test_serialized_layout(self):
        question = Question(id=1, text="Pick B", options=("a", "b"), correct_answer_index=1)

        assert serialize_questions([question]) == "Q: Pick B\nA: a\nB: b\nCORRECT: B\n"

    def test_rejects_empty_quiz(self, tmp_path):
        with pytest.raises(ValueError):
            save_quiz_to_file(tmp_path / "quiz.txt", [])

    def test_rejects_question_without_valid_correct_answer(self):
        question = Question(id=1, text="?", options=("a", "b"), correct_answer_index=4)

        with pytest.raises(ValueError):
            serialize_questions([question])

    def test_rejects_fractional_points(self):
        question = Question(id=1, text="?", options=("a", "b"), correct_answer_index=0, points=1.5)

        with pytest.raises(ValueError):
            serialize_questions([question])

    def test_rejects_single_option_question(self):
        question = Question(id=1, text="?", options=("only",), correct_answer_index=0)

        with pytest.raises(ValueError, match="needs between 2 and 8 options"):
            serialize_questions([question])

    @pytest.mark.parametrize(
        "overrides",
        [
            {"text": "Read this:\n\nWhat now?"},
            {"options": ("a\n\nstill a", "b")},
            {"explanation": "First part.\n   \nSecond part."},
            {"text": ""},
        ],
    )
    def test_rejects_blank_lines(self, overrides):
        fields = {"id": 1, "text": "?", "options": ("a", "b"), "correct_answer_index": 0}
        fields.update(overrides)

        with pytest.raises(ValueError, match="blank line"):
            serialize_questions([Question(**fields)])

    @pytest.mark.parametrize(
        "overrides",
        [
            {"explanation": "Note:\nA: is the answer"},
            {"text": "Two parts\nq: second question?"},
            {"options": ("a\nCORRECT: B", "b")},
            {"options": ("a", "b\npoints: 3")},
            {"explanation": "See below\nexplanation: again"},
            {"text": "Before\n---\nAfter"},
        ],
    )
    def test_rejects_continuation_lines_that_look_like_markers(self, overrides):
        fields = {"id": 1, "text": "?", "options": ("a", "b"), "correct_answer_index": 0}
        fields.update(overrides)

        with pytest.raises(ValueError, match="would start a new section"):
            serialize_questions([Question(**fields)])

    def test_marker_text_on_the_first_line_survives(self):
        question = Question(
            id=1,
            text="CORRECT: is this a marker?",
            options=("B: no", "yes"),
            correct_answer_index=0,
            explanation="A: only looks like one",
        )

        assert parse_quiz_text(serialize_questions([question])) == [question]
