"""Quiz Toolkit core package: shared data models."""

from .models import QuizQuestion

__all__ = [
    "QuizQuestion",
]
