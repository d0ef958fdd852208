"""
Tests for importing.spreadsheet

Test Coverage:
- extract_questions_from_workbook(): first sheet, header skipped, paths and file objects
- read_question_rows(): answer letters, marks, negative marks, missing options
- Code in question cells is reindented on import
- Edge cases: incomplete rows, unknown answers, non-workbook files
"""
import io
import logging

import pytest
from openpyxl import Workbook

from quiz_toolkit.formatting import FormattingConfig
from quiz_toolkit.importing.spreadsheet import (
    extract_questions_from_workbook,
    read_question_rows,
)


HEADER = ("Question", "Option A", "Option B", "Option C", "Option D", "Answer", "Marks", "Negative Marks")

CODE_ROW = (
    "What does this print?\ndef double(x):\nreturn x * 2\nprint(double(3))",
    "3", "6", "9", "Error", "B", 2, 0.5,
)
PROSE_ROW = ("What is the capital of France?", "Paris", "Rome", "Madrid", "Berlin", "A", 1, 0)


def _workbook(*rows):
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(HEADER)
    for row in rows:
        sheet.append(row)
    return workbook


@pytest.fixture
def workbook_path(tmp_path):
    path = tmp_path / "quiz.xlsx"
    _workbook(CODE_ROW, PROSE_ROW).save(path)
    return path


class TestExtractQuestionsFromWorkbook:
    """Tests for extract_questions_from_workbook()."""

    def test_reads_rows_in_order(self, workbook_path):
        questions = extract_questions_from_workbook(workbook_path)

        assert len(questions) == 2
        first, second = questions
        assert first.options == ("3", "6", "9", "Error")
        assert first.correct_letter == "B"
        assert first.marks == 2
        assert first.negative_marks == 0.5
        assert second.correct_letter == "A"
        assert second.negative_marks == 0

    def test_code_cell_reindented(self, workbook_path):
        first = extract_questions_from_workbook(workbook_path)[0]

        assert first.question == (
            "What does this print?\n"
            "def double(x):\n"
            "    return x * 2\n"
            "print(double(3))"
        )
        assert first.is_code_question is True

    def test_prose_cell_untouched(self, workbook_path):
        second = extract_questions_from_workbook(workbook_path)[1]

        assert second.question == "What is the capital of France?"
        assert second.is_code_question is False

    def test_reads_file_object(self):
        buffer = io.BytesIO()
        _workbook(PROSE_ROW).save(buffer)
        buffer.seek(0)

        questions = extract_questions_from_workbook(buffer)

        assert [q.options[0] for q in questions] == ["Paris"]

    def test_uses_config(self, tmp_path):
        path = tmp_path / "narrow.xlsx"
        _workbook(CODE_ROW).save(path)

        question = extract_questions_from_workbook(path, FormattingConfig.with_indent_width(2))[0]

        assert "\n  return x * 2\n" in question.question

    def test_not_a_workbook_raises(self, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"not a zip archive")

        with pytest.raises(ValueError, match="xlsx"):
            extract_questions_from_workbook(path)


class TestReadQuestionRows:
    """Tests for read_question_rows()."""

    def test_lowercase_answer_and_numeric_options(self):
        questions = read_question_rows([("2 + 2 = ?", 3, 4, 5, None, "b")])

        assert questions[0].options == ("3", "4", "5")
        assert questions[0].correct_letter == "B"

    def test_defaults_for_short_row(self):
        question = read_question_rows([("Ready?", "yes", "no", None, None, "A")])[0]

        assert question.options == ("yes", "no")
        assert question.marks == 1
        assert question.negative_marks == 0

    def test_negative_marks_stored_as_deduction(self):
        question = read_question_rows([("Ready?", "yes", "no", None, None, "A", 2, -1)])[0]

        assert question.negative_marks == 1

    def test_answer_index_follows_dropped_options(self):
        question = read_question_rows([("Pick", "a", "b", None, "d", "D")])[0]

        assert question.options == ("a", "b", "d")
        assert question.correct_letter == "C"

    def test_rows_without_question_skipped_silently(self, caplog):
        with caplog.at_level(logging.WARNING):
            questions = read_question_rows([(None, "a", "b"), (), ("  ",)])

        assert questions == []
        assert caplog.text == ""

    @pytest.mark.parametrize("row, message", [
        (("Q?", "a", None, None, None, "A"), "are required"),
        (("Q?", "a", "b", None, None, None), "are required"),
        (("Q?", "a", "b", None, None, "E"), "unknown answer"),
        (("Q?", "a", "b", None, None, "C"), "no option text"),
        (("Q?", "a", "b", None, None, "A", "lots"), "could not convert"),
    ])
    def test_incomplete_rows_skipped_with_warning(self, row, message, caplog):
        with caplog.at_level(logging.WARNING):
            questions = read_question_rows([row])

        assert questions == []
        assert message in caplog.text
        assert "row 2" in caplog.text
