"""
Entry point for the question editor GUI.
"""
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication, QMainWindow

from quiz_toolkit import __version__
from quiz_toolkit.gui.widgets import QuestionEditor

logger = logging.getLogger(__name__)


def create_window(text: str = "") -> QMainWindow:
    """Build the main window around a single QuestionEditor."""
    window = QMainWindow()
    window.setWindowTitle(f"Quiz Toolkit v{__version__}")
    editor = QuestionEditor(window)
    editor.set_text(text)
    window.setCentralWidget(editor)
    window.resize(720, 480)
    return window


def run(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication.instance() or QApplication(argv)
    window = create_window()
    window.show()
    logger.info("Question editor started")
    return app.exec()
