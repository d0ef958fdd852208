"""Reusable authoring widgets."""

from .question_editor import QuestionEditor

__all__ = ["QuestionEditor"]
