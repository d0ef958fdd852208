"""
Module: formatting

Purpose:
    Single shared home for code detection and indentation reconstruction
    of question and option text. Authoring surfaces and importers call
    these functions instead of carrying their own copies.

Key Functions:
    - needs_formatting(): Should the "fix indentation" action be offered
    - restore_indentation(): Reindent a text block
    - format_if_needed(): Reindent only when the text looks like code
"""

from __future__ import annotations

from typing import Any, Optional

from .config import DEFAULT_CONFIG, FormattingConfig
from .reconstructor import IndentState, restore_indentation
from .trigger import has_code_content, is_code_line, needs_formatting


def format_if_needed(text: Any, config: Optional[FormattingConfig] = None) -> Any:
    """Restore indentation only when needs_formatting() fires.

    Used by bulk import, where every cell passes through but only
    code-bearing text should be touched.
    """
    if not needs_formatting(text):
        return text
    return restore_indentation(text, config)


__all__ = [
    "DEFAULT_CONFIG",
    "FormattingConfig",
    "IndentState",
    "format_if_needed",
    "has_code_content",
    "is_code_line",
    "needs_formatting",
    "restore_indentation",
]
