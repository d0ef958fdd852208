"""
Module: formatting.config

Purpose:
    Configuration dataclass for the indentation reconstructor. Provides
    immutable settings for the indent unit and the answer-option marker
    used by the print lookahead.

Key Classes:
    - FormattingConfig: Settings for restore_indentation()

Used By:
    - formatting.reconstructor: Indent unit and option marker
    - importing.text_blocks: Passed through to the reconstructor
    - cli: Built from --indent-width
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

INDENT_WIDTH = 4
OPTION_MARKER_PATTERN = re.compile(r"^[A-D]\)")


@dataclass(frozen=True)
class FormattingConfig:
    """
    Configuration for indentation reconstruction.

    Attributes:
        indent_unit: String repeated once per nesting level (default 4 spaces).
        option_marker: Pattern matched against the line following a top-level
            ``print(`` call. A match (or no following line) means the call is
            the snippet's driver line and is emitted unindented. Defaults to
            quiz answer options ``A)`` .. ``D)``.

    Example:
        >>> config = FormattingConfig.with_indent_width(2)
        >>> config.indent(3)
        '      '
    """
    indent_unit: str = " " * INDENT_WIDTH
    option_marker: re.Pattern[str] = field(default=OPTION_MARKER_PATTERN)

    def __post_init__(self) -> None:
        if not self.indent_unit or self.indent_unit.strip():
            raise ValueError(f"indent_unit must be non-empty whitespace: {self.indent_unit!r}")

    @classmethod
    def with_indent_width(cls, width: int, **kwargs) -> "FormattingConfig":
        """Build a config indenting with ``width`` spaces per level."""
        if width < 1:
            raise ValueError(f"Indent width must be at least 1: {width}")
        return cls(indent_unit=" " * width, **kwargs)

    def indent(self, level: int) -> str:
        return self.indent_unit * max(level, 0)


DEFAULT_CONFIG = FormattingConfig()
