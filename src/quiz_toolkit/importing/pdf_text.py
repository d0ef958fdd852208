"""
Module: importing.pdf_text

Purpose:
    Text extraction from question-paper PDFs. PDF text layers drop leading
    whitespace, so code in extracted questions arrives flush-left and is
    reindented by the text block parser.

Key Functions:
    - extract_page_lines(): Text lines of one page, top to bottom
    - extract_document_text(): All pages joined into one text block
    - extract_questions_from_pdf(): PDF path -> list of QuizQuestion

Dependencies:
    - fitz (pymupdf): PDF text extraction

Used By:
    - cli: --questions mode for .pdf inputs
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import fitz

from quiz_toolkit.core.models import QuizQuestion
from quiz_toolkit.formatting import FormattingConfig

from .text_blocks import parse_question_blocks

logger = logging.getLogger(__name__)

# (y_top, x_left, text)
_PositionedLine = Tuple[float, float, str]


def extract_page_lines(page: fitz.Page, clip: Optional[fitz.Rect] = None) -> List[str]:
    """
    Extract text lines from a PDF page (or a clipped region of it).

    Spans on the same line are joined; lines are sorted top-to-bottom,
    then left-to-right.

    Args:
        page: PDF page to extract from.
        clip: Optional region to limit extraction to.

    Returns:
        List of line strings with surrounding whitespace removed. Empty if
        the page cannot be read.
    """
    try:
        data = page.get_text("dict", clip=clip)
    except (RuntimeError, ValueError) as e:
        logger.debug(f"Failed to extract text: {e}")
        return []

    positioned: List[_PositionedLine] = []
    for block in data.get("blocks", []):
        for line in block.get("lines", []):
            text = "".join(
                span.get("text", "") for span in line.get("spans", [])
            ).strip()
            if not text:
                continue
            bbox = line.get("bbox")
            if not bbox or len(bbox) != 4:
                continue
            positioned.append((round(bbox[1], 1), bbox[0], text))

    return [text for _, _, text in sorted(positioned, key=lambda item: (item[0], item[1]))]


def extract_document_text(doc: fitz.Document) -> str:
    """
    Join the text lines of every page into one newline-separated block.

    Raises:
        ValueError: If doc is closed or empty.
    """
    if doc.is_closed:
        raise ValueError("Document is closed")
    if doc.page_count == 0:
        raise ValueError("Document has no pages")

    lines: List[str] = []
    for page in doc:
        lines.extend(extract_page_lines(page))
    return "\n".join(lines)


def extract_questions_from_pdf(
    pdf_path: Path,
    config: Optional[FormattingConfig] = None,
) -> List[QuizQuestion]:
    """
    Extract multiple-choice questions from a PDF file.

    Args:
        pdf_path: Path to the PDF.
        config: Formatting settings for restoring code indentation.

    Returns:
        Parsed questions in document order.

    Raises:
        ValueError: If the document has no pages.
        fitz.FileDataError / FileNotFoundError: If the file cannot be opened.
    """
    with fitz.open(pdf_path) as doc:
        text = extract_document_text(doc)
    questions = parse_question_blocks(text, config)
    logger.info(f"Extracted {len(questions)} question(s) from {Path(pdf_path).name}")
    return questions
