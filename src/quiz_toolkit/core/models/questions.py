"""
Module: questions

Purpose:
    Provides the QuizQuestion dataclass - a multiple-choice question as
    produced by the importers and edited in authoring surfaces. Question
    text and options may embed source code.

Key Functions:
    - QuizQuestion.with_restored_indentation(): Reindent code-bearing text
    - QuizQuestion.to_dict() / QuizQuestion.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - quiz_toolkit.formatting

Used By:
    - importing.text_blocks: Built from parsed question blocks
    - importing.spreadsheet: Built from workbook rows
    - cli: Emitted as JSON with --questions
"""

from __future__ import annotations

import string
from dataclasses import dataclass, replace
from typing import Optional

from quiz_toolkit.formatting import FormattingConfig, format_if_needed, has_code_content

OPTION_LETTERS = string.ascii_uppercase
NO_ANSWER = -1


@dataclass(frozen=True)
class QuizQuestion:
    """
    Multiple-choice question (immutable).

    Attributes:
        question: Question text, possibly containing a code snippet.
        options: Answer option texts in display order (A, B, C...).
        correct_answer: 0-based index into options, or -1 when unknown.
        marks: Marks awarded for a correct answer.
        negative_marks: Marks deducted for a wrong answer (0 when no
            negative marking).
        is_code_question: True if the question text contains code.

    Invariants:
        - marks >= 0 and negative_marks >= 0
        - correct_answer is -1 or a valid index into options

    Example:
        >>> q = QuizQuestion("2 + 2 = ?", options=("3", "4"), correct_answer=1)
        >>> q.correct_letter
        'B'
    """

    question: str
    options: tuple[str, ...] = ()
    correct_answer: int = NO_ANSWER
    marks: float = 1
    negative_marks: float = 0
    is_code_question: bool = False

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if self.marks < 0:
            raise ValueError(f"marks must be >= 0: {self.marks}")
        if self.negative_marks < 0:
            raise ValueError(f"negative_marks must be >= 0: {self.negative_marks}")
        if len(self.options) > len(OPTION_LETTERS):
            raise ValueError(f"too many options: {len(self.options)}")
        if self.correct_answer != NO_ANSWER and not (0 <= self.correct_answer < len(self.options)):
            raise ValueError(
                f"correct_answer {self.correct_answer} out of range for {len(self.options)} options"
            )

    @property
    def correct_letter(self) -> Optional[str]:
        if self.correct_answer == NO_ANSWER:
            return None
        return OPTION_LETTERS[self.correct_answer]

    def with_restored_indentation(self, config: Optional[FormattingConfig] = None) -> QuizQuestion:
        """
        Return a copy with code indentation restored in question and options.

        Text that does not look like code is left untouched.
        """
        question = format_if_needed(self.question, config)
        return replace(
            self,
            question=question,
            options=tuple(format_if_needed(option, config) for option in self.options),
            is_code_question=has_code_content(question),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "options": list(self.options),
            "correct_answer": self.correct_answer,
            "marks": self.marks,
            "negative_marks": self.negative_marks,
            "is_code_question": self.is_code_question,
        }

    @classmethod
    def from_dict(cls, data: dict) -> QuizQuestion:
        """
        Deserialize from dictionary.

        Raises:
            ValueError: If "question" is missing or values fail validation.
        """
        if "question" not in data:
            raise ValueError("question data missing 'question' field")
        return cls(
            question=data["question"],
            options=tuple(data.get("options", [])),
            correct_answer=data.get("correct_answer", NO_ANSWER),
            marks=data.get("marks", 1),
            negative_marks=data.get("negative_marks", 0),
            is_code_question=data.get("is_code_question", False),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        preview = self.question.splitlines()[0][:40] if self.question else ""
        return (
            f"QuizQuestion({preview!r}, options={len(self.options)}, "
            f"answer={self.correct_letter}, marks={self.marks})"
        )
