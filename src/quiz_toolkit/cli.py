"""
Command line entry point: restore indentation of code in question text.

Usage:
    quiz-indent question.txt                # reindent, print to stdout
    quiz-indent question.txt -o fixed.txt   # write to a file
    quiz-indent --check question.txt        # exit 0 if text looks like code
    quiz-indent --questions paper.pdf       # parse questions, emit JSON
    quiz-indent --questions quiz.xlsx       # one question per spreadsheet row
    cat question.txt | quiz-indent          # read stdin
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from quiz_toolkit import __version__
from quiz_toolkit.formatting import FormattingConfig, needs_formatting, restore_indentation
from quiz_toolkit.formatting.config import INDENT_WIDTH
from quiz_toolkit.importing import parse_question_blocks

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_CODE = 1
EXIT_ERROR = 2

SPREADSHEET_SUFFIXES = (".xlsx", ".xlsm")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-indent",
        description="Reconstruct indentation of code embedded in quiz question text",
    )
    parser.add_argument("path", nargs="?", default="-", help="Input file (default: stdin)")
    parser.add_argument("--output", "-o", help="Write result to this file instead of stdout")
    parser.add_argument(
        "--indent-width", type=int, default=INDENT_WIDTH,
        help=f"Spaces per indentation level (default: {INDENT_WIDTH})",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check", action="store_true",
        help="Only report whether the text looks like code (exit 1 if not)",
    )
    mode.add_argument(
        "--questions", action="store_true",
        help="Parse questions (text, PDF or .xlsx rows) and emit JSON",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _questions_json(path: str, config: FormattingConfig) -> str:
    suffix = Path(path).suffix.lower() if path != "-" else ""
    # Document readers are deferred so plain-text use never loads them
    if suffix == ".pdf":
        from quiz_toolkit.importing.pdf_text import extract_questions_from_pdf
        questions = extract_questions_from_pdf(Path(path), config)
    elif suffix in SPREADSHEET_SUFFIXES:
        from quiz_toolkit.importing.spreadsheet import extract_questions_from_workbook
        questions = extract_questions_from_workbook(Path(path), config)
    else:
        questions = parse_question_blocks(_read_text(path), config)
    return json.dumps([q.to_dict() for q in questions], indent=2) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = FormattingConfig.with_indent_width(args.indent_width)
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.questions:
            result = _questions_json(args.path, config)
        else:
            text = _read_text(args.path)
            if args.check:
                detected = needs_formatting(text)
                print("code detected" if detected else "no code detected")
                return EXIT_OK if detected else EXIT_NO_CODE
            result = restore_indentation(text, config)
    except (OSError, UnicodeDecodeError, ValueError, RuntimeError) as e:
        logger.debug("Input failed", exc_info=True)
        print(f"quiz-indent: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.output:
        try:
            Path(args.output).write_text(result, encoding="utf-8")
        except OSError as e:
            print(f"quiz-indent: {e}", file=sys.stderr)
            return EXIT_ERROR
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(result)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
