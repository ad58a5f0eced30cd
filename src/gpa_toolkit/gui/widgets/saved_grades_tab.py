"""
Saved Grades tab: the persisted list of completed courses.

Courses are added through the form, edited by double-clicking a cell and
saved after every change through the CourseStore.
"""
import logging
from typing import List

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QFormLayout, QGroupBox, QHBoxLayout, QLabel, QLineEdit, QMessageBox,
    QPushButton, QVBoxLayout, QWidget
)

from gpa_toolkit.calculator import SortColumn, single_record_improvement, weighted_average
from gpa_toolkit.common import FORM_DEFAULTS
from gpa_toolkit.core.models import GradeRecord
from gpa_toolkit.gui.utils.record_edits import (
    RecordInputError, apply_field_edit, record_from_form
)
from gpa_toolkit.gui.utils.storage import CourseStore
from gpa_toolkit.gui.widgets.record_table import RecordTable, prompt_for_value

logger = logging.getLogger(__name__)

SAVED_COLUMNS = [
    SortColumn.COURSE_CODE,
    SortColumn.NAME,
    SortColumn.TERM,
    SortColumn.GRADE,
    SortColumn.CREDITS,
    SortColumn.WEIGHT,
    SortColumn.IMPROVEMENT,
]


class SavedGradesTab(QWidget):
    """Editable, sortable list of saved courses."""

    coursesChanged = Signal(list)  # List[GradeRecord]

    def __init__(self, store: CourseStore, parent=None):
        super().__init__(parent)
        self.store = store
        self._records: List[GradeRecord] = []
        self._setup_ui()
        self.set_records(self.store.load(), persist=False)

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        form_box = QGroupBox("Add Course")
        form = QFormLayout(form_box)
        self.course_code_input = QLineEdit()
        self.course_code_input.setPlaceholderText("Optional")
        self.name_input = QLineEdit()
        self.term_input = QLineEdit()
        self.grade_input = QLineEdit(FORM_DEFAULTS.saved_grade)
        self.credits_input = QLineEdit(FORM_DEFAULTS.saved_credits)
        form.addRow("Course ID", self.course_code_input)
        form.addRow("Course Name", self.name_input)
        form.addRow("Semester", self.term_input)
        form.addRow("Grade (0-100)", self.grade_input)
        form.addRow("Credits", self.credits_input)

        buttons = QHBoxLayout()
        self.add_button = QPushButton("Add Course")
        self.add_button.setObjectName("primaryButton")
        self.add_button.clicked.connect(self.add_course_from_form)
        self.delete_button = QPushButton("Delete Selected")
        self.delete_button.clicked.connect(self.delete_selected)
        buttons.addWidget(self.add_button)
        buttons.addWidget(self.delete_button)
        buttons.addStretch()
        form.addRow(buttons)

        self.error_label = QLabel("")
        self.error_label.setObjectName("errorLabel")
        form.addRow(self.error_label)
        layout.addWidget(form_box)

        self.table = RecordTable(SAVED_COLUMNS, improvement=single_record_improvement)
        self.table.editRequested.connect(self._on_edit_requested)
        layout.addWidget(self.table, 1)

        self.average_label = QLabel()
        self.average_label.setObjectName("resultLabel")
        layout.addWidget(self.average_label)

    # ─────────────────────────────────────────────────────────────────────────
    # Data
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def records(self) -> List[GradeRecord]:
        return list(self._records)

    def set_records(self, records: List[GradeRecord], *, persist: bool = True) -> None:
        self._records = list(records)
        self.table.set_records(self._records)
        self.average_label.setText(f"Weighted Average: {weighted_average(self._records):.2f}")
        if persist:
            self.store.save(self._records)
        self.coursesChanged.emit(self.records)

    def add_course_from_form(self) -> bool:
        try:
            record = record_from_form(
                self.name_input.text(),
                self.grade_input.text(),
                self.credits_input.text(),
                term=self.term_input.text(),
                course_code=self.course_code_input.text(),
                require_term=True,
            )
        except RecordInputError as e:
            self.error_label.setText(str(e))
            return False

        self.error_label.setText("")
        logger.info(f"Added course {record}")
        self.set_records([*self._records, record])

        self.course_code_input.clear()
        self.name_input.clear()
        self.term_input.clear()
        self.grade_input.setText(FORM_DEFAULTS.saved_grade)
        self.credits_input.setText(FORM_DEFAULTS.saved_credits)
        return True

    def update_field(self, record_id: str, column: SortColumn, text: str) -> bool:
        """Apply an edit to the record with ``record_id``; returns True on change."""
        for index, record in enumerate(self._records):
            if record.id != record_id:
                continue
            try:
                updated = apply_field_edit(record, column, text)
            except RecordInputError as e:
                self.error_label.setText(str(e))
                return False
            if updated is None:
                return False
            records = list(self._records)
            records[index] = updated
            self.error_label.setText("")
            self.set_records(records)
            return True
        return False

    def delete_selected(self) -> None:
        ids = set(self.table.selected_record_ids())
        if not ids:
            return
        answer = QMessageBox.question(
            self,
            "Delete Courses",
            f"Delete {len(ids)} selected course(s)?",
        )
        if answer != QMessageBox.StandardButton.Yes:
            return
        self.remove_records(ids)

    def remove_records(self, record_ids) -> None:
        ids = set(record_ids)
        logger.info(f"Removed {len(ids)} course(s)")
        self.set_records([r for r in self._records if r.id not in ids])

    def _on_edit_requested(self, record_id: str, column: SortColumn) -> None:
        record = self.table.record_by_id(record_id)
        if record is None:
            return
        text = prompt_for_value(self, record, column)
        if text is not None:
            self.update_field(record_id, column, text)
