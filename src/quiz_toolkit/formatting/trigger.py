"""
Module: formatting.trigger

Purpose:
    Cheap predicates deciding whether question text looks like source code.
    needs_formatting() drives the "code detected" affordance in authoring
    surfaces; it never blocks saving.

Key Functions:
    - needs_formatting(): Substring trigger for the "fix indentation" action
    - is_code_line(): Per-line code heuristic used on import
    - has_code_content(): True if any line is a code line

Used By:
    - formatting.format_if_needed
    - core.models.questions: is_code_question flag
    - gui.widgets.question_editor: indicator and button state
"""

from __future__ import annotations

import re
from typing import Any

TRIGGER_TOKENS = (
    "def ",
    "if ",
    "for ",
    "while ",
    "class ",
    "function ",
    "{",
    "}",
    "<",
    ">",
    "    ",
    "\t",
    "print(",
    "import ",
    "from ",
    "return ",
)

CODE_LINE_PATTERNS = (
    re.compile(r"^\s{2,}"),                # indented
    re.compile(r"def\s+\w+\s*\("),
    re.compile(r"function\s+\w+\s*\("),
    re.compile(r"class\s+\w+"),
    re.compile(r"if\s*\(.*\)\s*[:{]"),
    re.compile(r"for\s*\(.*\)\s*[:{]"),
    re.compile(r"while\s*\(.*\)\s*[:{]"),
    re.compile(r"else\s*[:{]"),
    re.compile(r"return\s+"),
    re.compile(r"print\s*\("),
    re.compile(r"console\.log\s*\("),
    re.compile(r"\w+\s*=\s*\w+"),
    re.compile(r"[{}();]"),
    re.compile(r"<\w+[^>]*>"),
    re.compile(r"^\s*#"),                  # comments, preprocessor directives
    re.compile(r"import\s+"),
    re.compile(r"from\s+\w+\s+import"),
)


def needs_formatting(text: Any) -> bool:
    """
    Return True if text contains any literal code trigger.

    Matching is plain substring containment, so ``"if "`` also fires inside
    prose such as "Decide if true". Non-string or empty input is False.

    Example:
        >>> needs_formatting("def f(x):\\nreturn x")
        True
        >>> needs_formatting("What is the capital of France?")
        False
    """
    if not isinstance(text, str) or not text:
        return False
    return any(token in text for token in TRIGGER_TOKENS)


def is_code_line(line: Any) -> bool:
    """Return True if a single line matches a common source-code pattern."""
    if not isinstance(line, str) or not line.strip():
        return False
    return any(pattern.search(line) for pattern in CODE_LINE_PATTERNS)


def has_code_content(text: Any) -> bool:
    if not isinstance(text, str) or not text:
        return False
    return any(is_code_line(line) for line in text.split("\n"))
