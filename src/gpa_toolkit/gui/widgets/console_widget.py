"""
Activity log panel shown under the tabs.

Receives ``(level, message)`` pairs drained from the logging queue and shows
them color coded by level.
"""
from datetime import datetime
from pathlib import Path
from typing import Dict

from PySide6.QtCore import Slot
from PySide6.QtGui import QColor, QFont, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import (
    QApplication, QFileDialog, QGroupBox, QMenu, QPlainTextEdit, QSizePolicy, QVBoxLayout
)

from gpa_toolkit.gui.styles.theme import Fonts, get_colors

MAX_CONSOLE_LINES = 1000

# Log level name -> palette attribute
_LEVEL_COLORS: Dict[str, str] = {
    "CRITICAL": "ERROR",
    "ERROR": "ERROR",
    "WARNING": "WARNING",
    "INFO": "TEXT_PRIMARY",
}


class ConsoleWidget(QGroupBox):
    """Read-only, color-coded log view capped at MAX_CONSOLE_LINES lines."""

    def __init__(self, parent=None):
        super().__init__("Console Log", parent)
        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setMaximumBlockCount(MAX_CONSOLE_LINES)

        family = Fonts.MONO_FONT.split(",")[0].strip('" ')
        font = QFont(family)
        font.setPointSize(int(Fonts.CONSOLE.removesuffix("pt")))
        self.text_edit.setFont(font)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.text_edit)

        self._formats: Dict[str, QTextCharFormat] = {}
        self.update_theme()

    @Slot(str, str)
    def append_log(self, level: str, message: str):
        level = level.upper()
        fmt = self._formats.get(level, self._formats["INFO"])
        stamp = datetime.now().strftime("%H:%M:%S")

        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        cursor.insertText(f"[{stamp}] [{level}] {message}\n", fmt)
        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

    def contextMenuEvent(self, event):
        menu = QMenu(self)
        copy_action = menu.addAction("Copy All")
        save_action = menu.addAction("Save to File...")
        menu.addSeparator()
        clear_action = menu.addAction("Clear")

        chosen = menu.exec(event.globalPos())
        if chosen is copy_action:
            QApplication.clipboard().setText(self.text_edit.toPlainText())
        elif chosen is save_action:
            self._save_to_file()
        elif chosen is clear_action:
            self.clear()

    def _save_to_file(self):
        filename, _ = QFileDialog.getSaveFileName(
            self, "Save Log", "gpa_toolkit_log.txt", "Text Files (*.txt);;All Files (*)"
        )
        if not filename:
            return
        try:
            Path(filename).write_text(self.text_edit.toPlainText(), encoding="utf-8")
        except OSError as e:
            self.append_log("ERROR", f"Failed to save log: {e}")

    def clear(self):
        self.text_edit.clear()

    def update_theme(self):
        """Recolor future lines for the active palette."""
        colors = get_colors()
        for level, attr in _LEVEL_COLORS.items():
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(getattr(colors, attr)))
            self._formats[level] = fmt
