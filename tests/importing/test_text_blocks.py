"""
Tests for importing.text_blocks

Test Coverage:
- parse_question_blocks(): numbered questions, options, answers, marks
- Code in question text is reindented on import
- Edge cases: missing options, unnumbered text, wrapped options, non-text
"""
import logging

import pytest

from quiz_toolkit.core.models import NO_ANSWER
from quiz_toolkit.importing.text_blocks import parse_question_blocks


class TestParseQuestionBlocks:
    """Tests for parse_question_blocks()."""

    def test_parses_document(self, question_document):
        questions = parse_question_blocks(question_document)

        assert len(questions) == 2
        first, second = questions
        assert first.options == ("3", "6", "9", "Error")
        assert first.correct_letter == "B"
        assert first.marks == 2
        assert second.options == ("Paris", "Rome", "Madrid", "Berlin")
        assert second.correct_letter == "A"
        assert second.marks == 1

    def test_code_question_reindented(self, question_document):
        first = parse_question_blocks(question_document)[0]

        assert first.question == (
            "What is the output of this code?\n"
            "def double(x):\n"
            "    return x * 2\n"
            "print(double(3))"
        )
        assert first.is_code_question is True

    def test_prose_question_not_flagged(self, question_document):
        second = parse_question_blocks(question_document)[1]

        assert second.question == "What is the capital of France?"
        assert second.is_code_question is False

    def test_blank_lines_inside_code_kept(self):
        text = "Q1. Output?\n\ndef f():\n\nreturn 1\nA) 1*\nB) 2"

        question = parse_question_blocks(text)[0]

        assert question.question == "Output?\n\ndef f():\n\n    return 1"

    def test_question_without_options_skipped(self, caplog):
        text = "Q1. Orphan question\nQ2. Real?\nA) yes*\nB) no"

        with caplog.at_level(logging.WARNING):
            questions = parse_question_blocks(text)

        assert [q.question for q in questions] == ["Real?"]
        assert "no answer options" in caplog.text

    def test_unnumbered_block(self):
        questions = parse_question_blocks("Pick one\nA) x\nB) y*")

        assert len(questions) == 1
        assert questions[0].question == "Pick one"
        assert questions[0].correct_answer == 1

    def test_wrapped_option_text(self):
        question = parse_question_blocks("Q1. Which?\nA) first line\ncontinued\nB) two")[0]

        assert question.options == ("first line\ncontinued", "two")

    def test_answer_outside_options_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            question = parse_question_blocks("Q1. X?\nA) a\nB) b\nAnswer: D")[0]

        assert question.correct_answer == NO_ANSWER
        assert "answer outside options" in caplog.text

    def test_parenthesised_numbering(self):
        question = parse_question_blocks("3) Pick\nA. one\nB. two*")[0]

        assert question.question == "Pick"
        assert question.correct_letter == "B"

    @pytest.mark.parametrize("value", [None, "", "   \n  ", 7])
    def test_non_text_returns_empty(self, value):
        assert parse_question_blocks(value) == []

    def test_code_using_option_letters_stays_in_question(self):
        text = "Q1. What prints?\nA = [1]\nA.append(2)\nprint(A)\nA) [1]\nB) [1, 2]*"

        question = parse_question_blocks(text)[0]

        assert question.question == "What prints?\nA = [1]\nA.append(2)\nprint(A)"
        assert question.options == ("[1]", "[1, 2]")
        assert question.correct_letter == "B"
