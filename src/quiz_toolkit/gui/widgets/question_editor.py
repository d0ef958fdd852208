"""
Question text editor with code detection and a "Fix indentation" action.
"""
from typing import Optional

from PySide6.QtCore import Signal, Slot
from PySide6.QtGui import QFontDatabase, QTextCursor
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget
)

from quiz_toolkit.formatting import FormattingConfig, needs_formatting, restore_indentation


class QuestionEditor(QWidget):
    """
    Editor for one question or option string.

    The "Code detected" indicator and the button follow needs_formatting()
    as the text changes. Reindenting only happens when the button is
    clicked (or fix_indentation() is called), never on typing.
    """

    codeDetectedChanged = Signal(bool)
    indentationRestored = Signal(str)

    def __init__(self, parent=None, config: Optional[FormattingConfig] = None):
        super().__init__(parent)
        self._config = config
        self._code_detected = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.text_edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.text_edit.setPlaceholderText("Question text")
        layout.addWidget(self.text_edit)

        toolbar = QHBoxLayout()
        self.code_indicator = QLabel("Code detected")
        self.code_indicator.setToolTip("This text looks like source code")
        self.code_indicator.setHidden(True)
        toolbar.addWidget(self.code_indicator)
        toolbar.addStretch(1)

        self.fix_button = QPushButton("Fix indentation")
        self.fix_button.setToolTip("Reconstruct indentation of the code in this text")
        self.fix_button.setEnabled(False)
        self.fix_button.clicked.connect(self.fix_indentation)
        toolbar.addWidget(self.fix_button)
        layout.addLayout(toolbar)

        self.text_edit.textChanged.connect(self._on_text_changed)

    def text(self) -> str:
        return self.text_edit.toPlainText()

    def set_text(self, text: str) -> None:
        self.text_edit.setPlainText(text)

    def _replace_text(self, text: str) -> None:
        # Kept on the undo stack as one step
        cursor = self.text_edit.textCursor()
        cursor.beginEditBlock()
        cursor.select(QTextCursor.SelectionType.Document)
        cursor.insertText(text)
        cursor.endEditBlock()

    def is_code_detected(self) -> bool:
        return self._code_detected

    @Slot()
    def _on_text_changed(self):
        detected = needs_formatting(self.text())
        self.code_indicator.setHidden(not detected)
        self.fix_button.setEnabled(detected)
        if detected != self._code_detected:
            self._code_detected = detected
            self.codeDetectedChanged.emit(detected)

    @Slot()
    def fix_indentation(self):
        current = self.text()
        restored = restore_indentation(current, self._config)
        if restored == current:
            return
        self._replace_text(restored)
        self.indentationRestored.emit(restored)
