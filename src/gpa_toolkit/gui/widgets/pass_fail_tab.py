"""
Optimal Binary Pass tab.

Collects past grades (saved list, overall average, or per-semester
averages) and the current-term courses, then runs the pass/fail optimizer
and shows which courses to convert.
"""
import logging
from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox, QFormLayout, QGroupBox, QHBoxLayout, QLabel, QLineEdit, QMessageBox,
    QPushButton, QSpinBox, QStackedWidget, QVBoxLayout, QWidget
)

from gpa_toolkit.calculator import (
    PassFailOptimizer, PastGradeInput, PastGradeMode, SortColumn,
    build_past_records, format_result_html, format_result_text, weighted_average,
)
from gpa_toolkit.common import FORM_DEFAULTS, OPTIMIZER_THRESHOLDS, parse_float
from gpa_toolkit.core.models import GradeRecord, PassFailResult
from gpa_toolkit.gui.models.settings import SettingsStore
from gpa_toolkit.gui.utils.record_edits import (
    RecordInputError, apply_field_edit, record_from_form
)
from gpa_toolkit.gui.widgets.record_table import RecordTable, prompt_for_value

logger = logging.getLogger(__name__)

CURRENT_TERM = "Current"
CURRENT_COLUMNS = [SortColumn.NAME, SortColumn.GRADE, SortColumn.CREDITS]
MAX_PASS_LIMIT = 99


class _SemesterRow(QWidget):
    """Average and credits inputs for one past semester."""

    def __init__(self, index: int, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel(f"Semester {index + 1}"))
        self.average_input = QLineEdit(FORM_DEFAULTS.semester_average)
        self.average_input.setPlaceholderText("Average (0-100)")
        self.credits_input = QLineEdit(FORM_DEFAULTS.semester_credits)
        self.credits_input.setPlaceholderText("Credits")
        layout.addWidget(self.average_input)
        layout.addWidget(self.credits_input)

    def value(self) -> PastGradeInput:
        credits = max(parse_float(self.credits_input.text(), 0.0), 0.0)
        return PastGradeInput(parse_float(self.average_input.text(), 0.0), credits)


class PassFailTab(QWidget):
    """Inputs and result display for the pass/fail optimizer."""

    def __init__(self, settings: Optional[SettingsStore] = None, parent=None):
        super().__init__(parent)
        self.settings = settings
        self._saved_records: List[GradeRecord] = []
        self._current_records: List[GradeRecord] = []
        self._semester_rows: List[_SemesterRow] = []
        self.last_result: Optional[PassFailResult] = None
        self._setup_ui()

        if self.settings is not None:
            self.set_past_mode(self.settings.get_past_mode())
            self.pass_limit_spin.setValue(min(self.settings.get_pass_limit(), MAX_PASS_LIMIT))
        self.pass_limit_spin.valueChanged.connect(self._on_pass_limit_changed)
        self.mode_combo.currentIndexChanged.connect(self._on_mode_changed)

    def _setup_ui(self):
        layout = QVBoxLayout(self)

        # --- Past grades ---
        past_box = QGroupBox("Past Grades")
        past_layout = QVBoxLayout(past_box)
        self.mode_combo = QComboBox()
        for mode in PastGradeMode:
            self.mode_combo.addItem(mode.display_name, mode.value)
        past_layout.addWidget(self.mode_combo)

        self.past_stack = QStackedWidget()
        self.saved_summary_label = QLabel()
        self.past_stack.addWidget(self.saved_summary_label)

        overall_page = QWidget()
        overall_form = QFormLayout(overall_page)
        self.overall_average_input = QLineEdit(FORM_DEFAULTS.overall_average)
        self.overall_credits_input = QLineEdit(FORM_DEFAULTS.overall_credits)
        overall_form.addRow("Overall Past Average (0-100)", self.overall_average_input)
        overall_form.addRow("Total Past Credits", self.overall_credits_input)
        self.past_stack.addWidget(overall_page)

        semesters_page = QWidget()
        semesters_layout = QVBoxLayout(semesters_page)
        count_row = QHBoxLayout()
        count_row.addWidget(QLabel("How many past semesters?"))
        self.semester_count_spin = QSpinBox()
        self.semester_count_spin.setRange(1, FORM_DEFAULTS.max_past_semesters)
        self.semester_count_spin.valueChanged.connect(self._rebuild_semester_rows)
        count_row.addWidget(self.semester_count_spin)
        count_row.addStretch()
        semesters_layout.addLayout(count_row)
        self.semester_rows_layout = QVBoxLayout()
        semesters_layout.addLayout(self.semester_rows_layout)
        self.past_stack.addWidget(semesters_page)
        self._rebuild_semester_rows(self.semester_count_spin.value())

        past_layout.addWidget(self.past_stack)
        layout.addWidget(past_box)

        # --- Current term ---
        current_box = QGroupBox("Current Semester Courses")
        current_layout = QVBoxLayout(current_box)
        form_row = QHBoxLayout()
        self.current_name_input = QLineEdit()
        self.current_name_input.setPlaceholderText("Course Name")
        self.current_grade_input = QLineEdit(FORM_DEFAULTS.current_grade)
        self.current_grade_input.setPlaceholderText("Grade (0-100)")
        self.current_credits_input = QLineEdit(FORM_DEFAULTS.current_credits)
        self.current_credits_input.setPlaceholderText("Credits")
        self.add_current_button = QPushButton("Add")
        self.add_current_button.clicked.connect(self.add_current_from_form)
        self.delete_current_button = QPushButton("Delete Selected")
        self.delete_current_button.clicked.connect(self._delete_selected_current)
        for widget in (self.current_name_input, self.current_grade_input,
                       self.current_credits_input, self.add_current_button,
                       self.delete_current_button):
            form_row.addWidget(widget)
        current_layout.addLayout(form_row)

        self.current_table = RecordTable(CURRENT_COLUMNS)
        self.current_table.editRequested.connect(self._on_edit_requested)
        current_layout.addWidget(self.current_table, 1)
        layout.addWidget(current_box, 1)

        # --- Compute ---
        compute_row = QHBoxLayout()
        compute_row.addWidget(QLabel("Max courses to convert to Pass:"))
        self.pass_limit_spin = QSpinBox()
        self.pass_limit_spin.setRange(0, MAX_PASS_LIMIT)
        compute_row.addWidget(self.pass_limit_spin)
        compute_row.addStretch()
        self.compute_button = QPushButton("Compute Optimal Pass/Fail")
        self.compute_button.setObjectName("primaryButton")
        self.compute_button.clicked.connect(self.compute)
        compute_row.addWidget(self.compute_button)
        layout.addLayout(compute_row)

        self.error_label = QLabel("")
        self.error_label.setObjectName("errorLabel")
        layout.addWidget(self.error_label)

        self.result_label = QLabel("")
        self.result_label.setObjectName("resultLabel")
        self.result_label.setTextFormat(Qt.TextFormat.RichText)
        self.result_label.setWordWrap(True)
        layout.addWidget(self.result_label)

        self._update_saved_summary()

    # ─────────────────────────────────────────────────────────────────────────
    # Past grades
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def past_mode(self) -> PastGradeMode:
        return PastGradeMode(self.mode_combo.currentData())

    def set_past_mode(self, mode: PastGradeMode) -> None:
        index = self.mode_combo.findData(mode.value)
        if index >= 0:
            self.mode_combo.setCurrentIndex(index)
        self.past_stack.setCurrentIndex(list(PastGradeMode).index(mode))

    def set_saved_records(self, records: List[GradeRecord]) -> None:
        self._saved_records = list(records)
        self._update_saved_summary()

    def _update_saved_summary(self) -> None:
        self.saved_summary_label.setText(
            f"{len(self._saved_records)} saved course(s), "
            f"weighted average {weighted_average(self._saved_records):.2f}"
        )

    def _rebuild_semester_rows(self, count: int) -> None:
        for row in self._semester_rows:
            self.semester_rows_layout.removeWidget(row)
            row.deleteLater()
        self._semester_rows = [_SemesterRow(i) for i in range(count)]
        for row in self._semester_rows:
            self.semester_rows_layout.addWidget(row)

    def past_records(self) -> List[GradeRecord]:
        """
        Build the past collection for the selected mode.

        Raises:
            ValueError: Overall mode with non-positive total credits
        """
        mode = self.past_mode
        overall = None
        if mode is PastGradeMode.OVERALL:
            overall = PastGradeInput(
                parse_float(self.overall_average_input.text(), 0.0),
                max(parse_float(self.overall_credits_input.text(), 0.0), 0.0),
            )
        return build_past_records(
            mode,
            saved=self._saved_records,
            overall=overall,
            semesters=[row.value() for row in self._semester_rows],
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Current term
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def current_records(self) -> List[GradeRecord]:
        return list(self._current_records)

    def set_current_records(self, records: List[GradeRecord]) -> None:
        self._current_records = list(records)
        self.current_table.set_records(self._current_records)
        self._clear_result()

    def add_current_from_form(self) -> bool:
        try:
            record = record_from_form(
                self.current_name_input.text(),
                self.current_grade_input.text(),
                self.current_credits_input.text(),
                term=CURRENT_TERM,
            )
        except RecordInputError as e:
            self.error_label.setText(str(e))
            return False
        self.error_label.setText("")
        self.set_current_records([*self._current_records, record])
        self.current_name_input.clear()
        self.current_grade_input.setText(FORM_DEFAULTS.current_grade)
        self.current_credits_input.setText(FORM_DEFAULTS.current_credits)
        return True

    def update_current_field(self, record_id: str, column: SortColumn, text: str) -> bool:
        for index, record in enumerate(self._current_records):
            if record.id != record_id:
                continue
            try:
                updated = apply_field_edit(record, column, text)
            except RecordInputError as e:
                self.error_label.setText(str(e))
                return False
            if updated is None:
                return False
            records = list(self._current_records)
            records[index] = updated
            self.error_label.setText("")
            self.set_current_records(records)
            return True
        return False

    def _delete_selected_current(self) -> None:
        ids = set(self.current_table.selected_record_ids())
        if ids:
            self.set_current_records([r for r in self._current_records if r.id not in ids])

    def _on_edit_requested(self, record_id: str, column: SortColumn) -> None:
        record = self.current_table.record_by_id(record_id)
        if record is None:
            return
        text = prompt_for_value(self, record, column)
        if text is not None:
            self.update_current_field(record_id, column, text)

    # ─────────────────────────────────────────────────────────────────────────
    # Optimization
    # ─────────────────────────────────────────────────────────────────────────

    def _clear_result(self) -> None:
        """Drop a result computed for a different set of current courses."""
        self.last_result = None
        self.result_label.setText("")
        self.current_table.set_highlighted(())

    def _confirm_large_search(self, size: int) -> bool:
        answer = QMessageBox.question(
            self,
            "Large Search",
            f"This will evaluate {size:,} combinations and may take a while.\n"
            "Lower the pass limit to speed it up. Continue anyway?",
        )
        return answer == QMessageBox.StandardButton.Yes

    def compute(self) -> Optional[PassFailResult]:
        """Run the optimizer on the current inputs and display the result."""
        try:
            past = self.past_records()
        except ValueError as e:
            self.error_label.setText(str(e))
            self.result_label.setText("")
            return None
        self.error_label.setText("")

        optimizer = PassFailOptimizer(past, self._current_records, self.pass_limit_spin.value())
        size = optimizer.search_space_size()
        if size > OPTIMIZER_THRESHOLDS.large_search_warning and not self._confirm_large_search(size):
            logger.info(f"Pass/fail search of {size} combinations cancelled")
            return None

        result = optimizer.run()
        self.last_result = result
        self.result_label.setText(format_result_html(result))
        self.current_table.set_highlighted(result.converted_ids)
        logger.info(format_result_text(result))
        return result

    def _on_pass_limit_changed(self, value: int) -> None:
        if self.settings is not None:
            self.settings.set_pass_limit(value)

    def _on_mode_changed(self, index: int) -> None:
        self.past_stack.setCurrentIndex(index)
        if self.settings is not None:
            self.settings.set_past_mode(PastGradeMode(self.mode_combo.itemData(index)))
