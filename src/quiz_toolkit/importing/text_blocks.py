"""
Module: importing.text_blocks

Purpose:
    Parses plain question text, as produced by Word paragraph extraction,
    OCR or PDF text extraction, into QuizQuestion records. Code snippets
    inside question text get their indentation restored on the way in.

Key Functions:
    - parse_question_blocks(): Text -> list of QuizQuestion

Expected Layout:
    Q1. What does this print? (2 marks)
    def f(x):
    return x * 2
    print(f(3))
    A) 3
    B) 6*
    C) 9
    D) error

    Options may instead be followed by an "Answer: B" line.

Used By:
    - importing.pdf_text: After extracting page text
    - cli: --questions mode
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

from quiz_toolkit.core.models import NO_ANSWER, OPTION_LETTERS, QuizQuestion
from quiz_toolkit.formatting import FormattingConfig

logger = logging.getLogger(__name__)

QUESTION_START_PATTERN = re.compile(r"^Q?\d+[.)]\s*", re.IGNORECASE)
OPTION_PATTERN = re.compile(r"^([A-D])[.)](?:\s+(.*))?$")
ANSWER_PATTERN = re.compile(r"^Answer:\s*([A-D])\b", re.IGNORECASE)
MARKS_PATTERN = re.compile(r"\(\s*(\d+)\s*marks?\s*\)", re.IGNORECASE)
CORRECT_MARKER = "*"


@dataclass
class _PendingQuestion:
    """Question block being accumulated line by line."""
    number: int
    lines: List[str] = field(default_factory=list)
    options: List[str] = field(default_factory=list)
    correct_answer: int = NO_ANSWER
    marks: int = 1

    def add_option(self, letter: str, text: str) -> None:
        text = text.strip()
        if text.endswith(CORRECT_MARKER):
            text = text[: -len(CORRECT_MARKER)].rstrip()
            self.correct_answer = len(self.options)
        elif OPTION_LETTERS.index(letter) != len(self.options):
            logger.debug(f"Question {self.number}: option {letter} out of sequence")
        self.options.append(text)


def _question_text(lines: List[str]) -> str:
    # Keep interior blank lines (they may belong to a code snippet)
    while lines and not lines[0].strip():
        lines = lines[1:]
    while lines and not lines[-1].strip():
        lines = lines[:-1]
    return "\n".join(line.rstrip() for line in lines)


def _finish(pending: _PendingQuestion, config: Optional[FormattingConfig]) -> Optional[QuizQuestion]:
    if not pending.options:
        logger.warning(f"Skipping question {pending.number}: no answer options found")
        return None
    correct = pending.correct_answer
    if correct != NO_ANSWER and correct >= len(pending.options):
        logger.warning(f"Question {pending.number}: answer outside options, ignoring")
        correct = NO_ANSWER
    question = QuizQuestion(
        question=_question_text(pending.lines),
        options=tuple(pending.options),
        correct_answer=correct,
        marks=pending.marks,
    )
    return question.with_restored_indentation(config)


def parse_question_blocks(text: Any, config: Optional[FormattingConfig] = None) -> List[QuizQuestion]:
    """
    Parse numbered multiple-choice questions from plain text.

    Args:
        text: Extracted document text. Non-string or empty input yields [].
        config: Formatting settings for restoring code indentation.

    Returns:
        Questions in document order. Blocks without options are skipped.

    Example:
        >>> qs = parse_question_blocks("Q1. 2 + 2? (1 mark)\\nA) 3\\nB) 4*")
        >>> qs[0].options, qs[0].correct_letter
        (('3', '4'), 'B')
    """
    if not isinstance(text, str) or not text.strip():
        return []

    questions: List[QuizQuestion] = []
    pending: Optional[_PendingQuestion] = None
    count = 0

    def flush() -> None:
        if pending is not None:
            finished = _finish(pending, config)
            if finished is not None:
                questions.append(finished)

    for raw in text.split("\n"):
        stripped = raw.strip()

        header = QUESTION_START_PATTERN.match(stripped)
        if header:
            flush()
            count += 1
            pending = _PendingQuestion(number=count)
            first_line = stripped[header.end():]
            marks = MARKS_PATTERN.search(first_line)
            if marks:
                pending.marks = int(marks.group(1))
                first_line = MARKS_PATTERN.sub("", first_line).rstrip()
            pending.lines.append(first_line)
            continue

        if pending is None:
            if not stripped:
                continue
            # Text before any numbered header forms an unnumbered question
            count += 1
            pending = _PendingQuestion(number=count)

        answer = ANSWER_PATTERN.match(stripped)
        if answer and pending.options:
            index = OPTION_LETTERS.index(answer.group(1).upper())
            pending.correct_answer = index
            continue

        option = OPTION_PATTERN.match(stripped)
        if option:
            pending.add_option(option.group(1), option.group(2) or "")
            continue

        if pending.options:
            if stripped:
                # Wrapped option text
                pending.options[-1] = f"{pending.options[-1]}\n{stripped}"
            continue
        pending.lines.append(raw)

    flush()
    logger.debug(f"Parsed {len(questions)} question(s) from {count} block(s)")
    return questions
