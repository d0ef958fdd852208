"""
Module: importing.spreadsheet

Purpose:
    Reads multiple-choice questions from the first sheet of an .xlsx
    workbook, one question per row. Code typed into a spreadsheet cell
    loses its indentation, so every row is passed through
    QuizQuestion.with_restored_indentation().

Key Functions:
    - read_question_rows(): Row values -> list of QuizQuestion
    - extract_questions_from_workbook(): .xlsx file -> list of QuizQuestion

Expected Columns (row 1 is a header and is skipped):
    Question | Option A | Option B | Option C | Option D | Answer | Marks | Negative Marks

    Question, options A and B and the answer letter are required. Marks
    default to 1 and negative marks to 0.

Dependencies:
    - openpyxl: Workbook reading

Used By:
    - cli: --questions mode for .xlsx input
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any, BinaryIO, Iterable, List, Optional, Sequence, Union

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from quiz_toolkit.core.models import OPTION_LETTERS, QuizQuestion
from quiz_toolkit.formatting import FormattingConfig

logger = logging.getLogger(__name__)

QUESTION_COLUMN = 0
OPTION_COUNT = 4
ANSWER_COLUMN = 5
MARKS_COLUMN = 6
NEGATIVE_MARKS_COLUMN = 7
FIRST_DATA_ROW = 2


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _cell_number(value: Any, default: float) -> float:
    if value is None or _cell_text(value) == "":
        return default
    if isinstance(value, (int, float)):
        return value
    return float(_cell_text(value))


def _row_question(
    row: Sequence[Any],
    row_number: int,
    config: Optional[FormattingConfig],
) -> Optional[QuizQuestion]:
    cells = list(row) + [None] * (NEGATIVE_MARKS_COLUMN + 1 - len(row))

    text = _cell_text(cells[QUESTION_COLUMN])
    if not text:
        return None
    options = [_cell_text(value) for value in cells[1:1 + OPTION_COUNT]]
    answer = _cell_text(cells[ANSWER_COLUMN]).upper()
    if not (options[0] and options[1] and answer):
        logger.warning(f"Skipping row {row_number}: question, options A and B and an answer are required")
        return None
    if len(answer) != 1 or answer not in OPTION_LETTERS[:OPTION_COUNT]:
        logger.warning(f"Skipping row {row_number}: unknown answer {answer!r}")
        return None
    answer_index = OPTION_LETTERS.index(answer)
    if not options[answer_index]:
        logger.warning(f"Skipping row {row_number}: answer {answer} has no option text")
        return None

    # Empty option cells are dropped, so the answer index shifts with them
    correct = sum(1 for option in options[:answer_index] if option)
    try:
        question = QuizQuestion(
            question=text,
            options=tuple(option for option in options if option),
            correct_answer=correct,
            marks=_cell_number(cells[MARKS_COLUMN], 1),
            negative_marks=abs(_cell_number(cells[NEGATIVE_MARKS_COLUMN], 0)),
        )
    except ValueError as e:
        logger.warning(f"Skipping row {row_number}: {e}")
        return None
    return question.with_restored_indentation(config)


def read_question_rows(
    rows: Iterable[Sequence[Any]],
    config: Optional[FormattingConfig] = None,
    first_row: int = FIRST_DATA_ROW,
) -> List[QuizQuestion]:
    """
    Build questions from spreadsheet row values.

    Args:
        rows: Cell values per row, header already removed.
        config: Formatting settings for restoring code indentation.
        first_row: Sheet row number of the first item, used in warnings.

    Returns:
        One question per valid row. Rows without question text are skipped
        silently; incomplete rows are skipped with a warning.
    """
    questions: List[QuizQuestion] = []
    for row_number, row in enumerate(rows, start=first_row):
        if not row:
            continue
        question = _row_question(row, row_number, config)
        if question is not None:
            questions.append(question)
    logger.debug(f"Built {len(questions)} question(s) from spreadsheet rows")
    return questions


def extract_questions_from_workbook(
    source: Union[str, Path, BinaryIO],
    config: Optional[FormattingConfig] = None,
) -> List[QuizQuestion]:
    """
    Read questions from the first sheet of an .xlsx workbook.

    Args:
        source: Path to the workbook, or a binary file object.
        config: Formatting settings for restoring code indentation.

    Returns:
        Questions in row order.

    Raises:
        ValueError: If the file is not a readable .xlsx workbook.
        OSError: If the file cannot be opened.
    """
    if isinstance(source, Path):
        source = str(source)
    try:
        workbook = load_workbook(source, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile) as e:
        raise ValueError(f"Not a readable .xlsx workbook: {e}") from e

    try:
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(min_row=FIRST_DATA_ROW, values_only=True)
        questions = read_question_rows(rows, config)
    finally:
        workbook.close()

    logger.info(f"Read {len(questions)} question(s) from sheet '{sheet.title}'")
    return questions
