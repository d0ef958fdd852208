import os
import pytest
import sys

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
from pathlib import Path

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def python_snippet():
    """Python function typed into a spreadsheet cell (indentation lost)."""
    return (
        'def greet(name):\n'
        'if name:\n'
        'return f"Hello, {name}!"\n'
        'else:\n'
        'return "Hello, World!"\n'
        'print(greet("Alice"))'
    )


@pytest.fixture
def brace_snippet():
    """C snippet pasted without a code editor."""
    return 'int main() {\nprintf("hi");\n}'


@pytest.fixture
def question_document():
    """Plain text as extracted from a Word document or PDF."""
    return (
        "Q1. What is the output of this code? (2 marks)\n"
        "def double(x):\n"
        "return x * 2\n"
        "print(double(3))\n"
        "A) 3\n"
        "B) 6*\n"
        "C) 9\n"
        "D) Error\n"
        "\n"
        "Q2. What is the capital of France?\n"
        "A) Paris\n"
        "B) Rome\n"
        "C) Madrid\n"
        "D) Berlin\n"
        "Answer: A\n"
    )
