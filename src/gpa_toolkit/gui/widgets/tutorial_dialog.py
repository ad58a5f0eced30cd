"""
Tutorial dialog shown on first launch and from Help > Tutorial.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout


TUTORIAL_TEXT = (
    "Welcome to the Offline GPA & Pass/Fail Calculator!\n\n"
    "1. 'Saved Grades' Tab: Add courses (Course ID optional) and edit them by "
    "double-clicking a cell in the table.\n"
    "   The table is sortable by any column, and changes are saved automatically.\n\n"
    "2. 'Optimal Binary Pass' Tab: Enter current-semester courses. You can also "
    "edit these cells directly. Then compute the optimal pass/fail combination.\n\n"
    "Only courses with a grade of 55 or more can be converted to Pass."
)


class TutorialDialog(QDialog):
    """Modal help text with a single dismiss button."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Tutorial")
        self.setMinimumWidth(460)
        self.setModal(True)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(16)
        layout.setContentsMargins(24, 24, 24, 24)

        title = QLabel("Tutorial")
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self.message_label = QLabel(TUTORIAL_TEXT)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        self.ok_button = QPushButton("Got It!")
        self.ok_button.setDefault(True)
        self.ok_button.clicked.connect(self.accept)
        button_layout.addWidget(self.ok_button)
        layout.addLayout(button_layout)
