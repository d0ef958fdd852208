"""
Module: formatting.reconstructor

Purpose:
    Reconstructs plausible indentation for code snippets whose leading
    whitespace was lost (spreadsheet cells, OCR, word processors). A single
    forward pass classifies each trimmed line against an ordered chain of
    pattern rules covering Python colon blocks, C-family brace blocks and
    markup tags. No parsing and no language identification.

Key Functions:
    - restore_indentation(): Reindent a text block

Key Classes:
    - IndentState: Per-call nesting counters (never negative)

Used By:
    - formatting.format_if_needed: Bulk import flow
    - gui.widgets.question_editor: "Fix indentation" action
    - cli: quiz-indent command

Rule Order:
    The first matching rule wins. Categories overlap (an assignment may
    contain a brace), so reordering RULES changes output for ambiguous
    lines.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, FormattingConfig
from .lines import LineRecord, join_lines, next_content, split_lines

logger = logging.getLogger(__name__)

DEFINITION_PATTERN = re.compile(r"^(def|class)\s+\w+")
CONTROL_PATTERN = re.compile(r"^(if|elif|else|for|while|try|except|finally|with)(?=[\s:])")
CONTINUATION_KEYWORDS = frozenset({"elif", "else", "except", "finally"})
JUMP_PATTERN = re.compile(r"^(return|break|continue|pass|raise)\b")
PRINT_PATTERN = re.compile(r"^print\s*\(")
IMPORT_PATTERN = re.compile(r"^(import|from)\s")
ASSIGNMENT_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*\s*[=+\-*/]")
CALL_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*\(")
C_TYPE_PATTERN = re.compile(
    r"^(public|private|protected|static|void|int|float|double|char|string|bool"
    r"|function|var|let|const)\s"
)
C_CONTROL_PATTERN = re.compile(
    r"^(if|else|for|while|do|switch|case|default|try|catch|finally)\s*\("
)
C_SIGNATURE_PATTERN = re.compile(r"^\w+\s+\w+\s*\(")
MARKUP_PATTERN = re.compile(r"^</?\w+")


@dataclass
class IndentState:
    """
    Running nesting counters for one restore_indentation() call.

    Attributes:
        indent_level: Logical depth for colon-style blocks.
        brace_depth: Depth of open ``{`` blocks.

    Invariants:
        - Both counters are >= 0; closing constructs with no opener clamp
          at 0 instead of going negative.
    """
    indent_level: int = 0
    brace_depth: int = 0

    @property
    def block_level(self) -> int:
        """Level for statements inside any block (at least 1 inside braces)."""
        return max(self.indent_level, 1 if self.brace_depth > 0 else 0)

    def reset(self, level: int = 0) -> None:
        self.indent_level = level

    def indent(self) -> None:
        self.indent_level += 1

    def open_brace(self) -> None:
        self.indent_level += 1
        self.brace_depth += 1

    def close_brace(self) -> None:
        self.indent_level = max(0, self.indent_level - 1)
        self.brace_depth = max(0, self.brace_depth - 1)


@dataclass(frozen=True)
class LineContext:
    content: str
    following: Optional[str]  # next non-blank line, trimmed
    config: FormattingConfig


# A rule returns the level to emit the line at, or None if it does not apply.
Rule = Callable[[LineContext, IndentState], Optional[int]]


def _definition(line: LineContext, state: IndentState) -> Optional[int]:
    if not DEFINITION_PATTERN.match(line.content):
        return None
    state.reset(1 if line.content.endswith(":") else 0)
    return 0


def _control(line: LineContext, state: IndentState) -> Optional[int]:
    match = CONTROL_PATTERN.match(line.content)
    if not match:
        return None
    opens_block = line.content.endswith(":")
    level = state.indent_level
    if opens_block:
        if match.group(1) in CONTINUATION_KEYWORDS:
            # Sibling of the block just closed; body stays at the current depth
            level = max(level - 1, 0)
            state.reset(level + 1)
        else:
            state.indent()
    return level


def _jump(line: LineContext, state: IndentState) -> Optional[int]:
    if not JUMP_PATTERN.match(line.content):
        return None
    return max(state.indent_level, 1)


def _print_call(line: LineContext, state: IndentState) -> Optional[int]:
    if not PRINT_PATTERN.match(line.content):
        return None
    following = line.following
    if following is None or line.config.option_marker.match(following):
        # Driver call after the definitions, e.g. print(f(3)) before the options
        state.reset()
        return 0
    return max(state.indent_level, 1)


def _import(line: LineContext, state: IndentState) -> Optional[int]:
    if not IMPORT_PATTERN.match(line.content):
        return None
    state.reset()
    return 0


def _statement(line: LineContext, state: IndentState) -> Optional[int]:
    if ASSIGNMENT_PATTERN.match(line.content) or CALL_PATTERN.match(line.content):
        return max(state.indent_level, 0)
    return None


def _c_header(line: LineContext, state: IndentState) -> Optional[int]:
    content = line.content
    if not (
        C_TYPE_PATTERN.match(content)
        or C_CONTROL_PATTERN.match(content)
        or C_SIGNATURE_PATTERN.match(content)
    ):
        return None
    level = state.indent_level
    if "{" in content:
        state.open_brace()
    return level


def _closing_brace(line: LineContext, state: IndentState) -> Optional[int]:
    if "}" not in line.content:
        return None
    state.close_brace()
    return state.indent_level


def _opening_brace(line: LineContext, state: IndentState) -> Optional[int]:
    if line.content != "{":
        return None
    level = state.indent_level
    state.open_brace()
    return level


def _terminated(line: LineContext, state: IndentState) -> Optional[int]:
    if line.content.endswith(";") or line.content.startswith("//"):
        return state.block_level
    return None


def _markup(line: LineContext, state: IndentState) -> Optional[int]:
    # Tag depth is not tracked
    if not MARKUP_PATTERN.match(line.content):
        return None
    return state.indent_level


def _default(line: LineContext, state: IndentState) -> Optional[int]:
    return state.block_level


RULES: Tuple[Tuple[str, Rule], ...] = (
    ("definition", _definition),
    ("control", _control),
    ("jump", _jump),
    ("print", _print_call),
    ("import", _import),
    ("statement", _statement),
    ("c_header", _c_header),
    ("closing_brace", _closing_brace),
    ("opening_brace", _opening_brace),
    ("terminated", _terminated),
    ("markup", _markup),
    ("default", _default),
)


def classify_line(
    line: LineContext,
    state: IndentState,
    rules: Sequence[Tuple[str, Rule]] = RULES,
) -> Tuple[str, int]:
    """Apply the first matching rule, returning its name and the emit level."""
    for name, rule in rules:
        level = rule(line, state)
        if level is not None:
            return name, level
    return "default", state.block_level


def _reindent(records: List[LineRecord], config: FormattingConfig) -> Tuple[List[str], IndentState]:
    state = IndentState()
    output: List[str] = []
    for record in records:
        if record.is_blank:
            output.append(record.raw)
            continue
        line = LineContext(
            content=record.content,
            following=next_content(records, record.index),
            config=config,
        )
        rule, level = classify_line(line, state)
        if rule == "default" and level == 0:
            # Outside every block, unrecognised lines are left exactly as typed
            output.append(record.raw)
        else:
            output.append(config.indent(level) + record.content)
    return output, state


def restore_indentation(text: Any, config: Optional[FormattingConfig] = None) -> Any:
    """
    Reconstruct consistent indentation for a code-bearing text block.

    Each non-blank line is trimmed and re-prefixed with ``config.indent_unit``
    repeated per its inferred nesting depth. Blank lines, and unrecognised
    lines outside any block, pass through verbatim. Classification only
    looks at trimmed content, so the result is stable when fed back in.

    Args:
        text: Question or option text. Non-string or empty input is returned
            unchanged.
        config: Indent unit and option marker. Defaults to 4 spaces and
            ``A)``..``D)`` options.

    Returns:
        Text with the same number of lines as the input.

    Example:
        >>> print(restore_indentation("int main() {\\nprintf(\\"hi\\");\\n}"))
        int main() {
            printf("hi");
        }
    """
    if not isinstance(text, str) or not text:
        return text
    config = config or DEFAULT_CONFIG

    records = split_lines(text)
    output, state = _reindent(records, config)
    logger.debug(
        f"Restored indentation for {len(records)} lines "
        f"(indent_level={state.indent_level}, brace_depth={state.brace_depth})"
    )
    return join_lines(output)
