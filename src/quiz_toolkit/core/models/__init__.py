"""
Core Models Package

Immutable, validated data models shared by importers, the CLI and the
authoring widgets.
"""

from .questions import NO_ANSWER, OPTION_LETTERS, QuizQuestion

__all__ = [
    "NO_ANSWER",
    "OPTION_LETTERS",
    "QuizQuestion",
]
