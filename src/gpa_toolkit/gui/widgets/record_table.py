"""
Read-only course table with header sorting and double-click editing.
"""
from typing import Callable, Iterable, List, Optional, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QAbstractItemView, QHeaderView, QInputDialog, QTableWidget, QTableWidgetItem, QWidget
)

from gpa_toolkit.calculator.sorting import SortColumn, sort_records
from gpa_toolkit.core.models import GradeRecord
from gpa_toolkit.gui.styles.theme import get_colors
from gpa_toolkit.gui.utils.record_edits import current_value_text

RECORD_ID_ROLE = Qt.ItemDataRole.UserRole


class RecordTable(QTableWidget):
    """
    Table of GradeRecords.

    Rows are ordered by ``sort_records``, not Qt item sorting; calculated
    columns (weight, improvement) sort on their numeric values.
    Double-clicking an editable cell emits ``editRequested`` with the
    record id and column.
    """

    editRequested = Signal(str, object)  # record_id, SortColumn
    sortChanged = Signal(object, bool)  # SortColumn, ascending

    def __init__(
        self,
        columns: Sequence[SortColumn],
        *,
        improvement: Optional[Callable[[GradeRecord, Sequence[GradeRecord]], float]] = None,
        sort_column: SortColumn = SortColumn.NAME,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(0, len(columns), parent)
        self.columns: List[SortColumn] = list(columns)
        self._improvement = improvement
        self._records: List[GradeRecord] = []
        self._highlighted: set[str] = set()
        self.sort_column = sort_column
        self.sort_ascending = True

        self.setHorizontalHeaderLabels([c.header for c in self.columns])
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.verticalHeader().setVisible(False)

        header = self.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        header.setSectionsClickable(True)
        header.setSortIndicatorShown(True)
        header.sectionClicked.connect(self._on_header_clicked)

        self.cellDoubleClicked.connect(self._on_cell_double_clicked)

    # ─────────────────────────────────────────────────────────────────────────
    # Data
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def records(self) -> List[GradeRecord]:
        """Records in displayed (sorted) order."""
        return list(self._records)

    def set_records(self, records: Iterable[GradeRecord]) -> None:
        self._records = sort_records(list(records), self.sort_column, self.sort_ascending)
        self._refresh()

    def set_highlighted(self, record_ids: Iterable[str]) -> None:
        """Tint the rows whose ids are given (e.g. converted to pass)."""
        self._highlighted = set(record_ids)
        self._refresh()

    def selected_record_ids(self) -> List[str]:
        rows = sorted({index.row() for index in self.selectionModel().selectedRows()})
        return [self._records[row].id for row in rows if row < len(self._records)]

    def record_by_id(self, record_id: str) -> Optional[GradeRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def _cell_text(self, record: GradeRecord, column: SortColumn) -> str:
        if column is SortColumn.WEIGHT:
            return f"{record.weighted_points:.2f}"
        if column is SortColumn.IMPROVEMENT:
            if self._improvement is None:
                return ""
            return f"{self._improvement(record, self._records):.2f}"
        if column in (SortColumn.GRADE, SortColumn.CREDITS):
            value = record.grade if column is SortColumn.GRADE else record.credits
            return f"{value:.1f}"
        return current_value_text(record, column)

    def _refresh(self) -> None:
        highlight = QColor(get_colors().PASS_HIGHLIGHT)
        self.setRowCount(len(self._records))
        for row, record in enumerate(self._records):
            for col, column in enumerate(self.columns):
                item = QTableWidgetItem(self._cell_text(record, column))
                item.setData(RECORD_ID_ROLE, record.id)
                if column in (SortColumn.GRADE, SortColumn.CREDITS,
                              SortColumn.WEIGHT, SortColumn.IMPROVEMENT):
                    item.setTextAlignment(
                        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
                    )
                if not column.is_editable:
                    item.setToolTip("Calculated")
                if record.id in self._highlighted:
                    item.setBackground(highlight)
                self.setItem(row, col, item)

        if self.sort_column in self.columns:
            order = Qt.SortOrder.AscendingOrder if self.sort_ascending else Qt.SortOrder.DescendingOrder
            self.horizontalHeader().setSortIndicator(self.columns.index(self.sort_column), order)

    # ─────────────────────────────────────────────────────────────────────────
    # Interaction
    # ─────────────────────────────────────────────────────────────────────────

    def sort_by(self, column: SortColumn, ascending: bool = True) -> None:
        self.sort_column = column
        self.sort_ascending = ascending
        self.set_records(self._records)
        self.sortChanged.emit(column, ascending)

    def _on_header_clicked(self, index: int) -> None:
        column = self.columns[index]
        if column == self.sort_column:
            self.sort_by(column, not self.sort_ascending)
        else:
            self.sort_by(column, True)

    def _on_cell_double_clicked(self, row: int, col: int) -> None:
        column = self.columns[col]
        if not column.is_editable or row >= len(self._records):
            return
        self.editRequested.emit(self._records[row].id, column)


def prompt_for_value(parent: QWidget, record: GradeRecord, column: SortColumn) -> Optional[str]:
    """
    Ask the user for a new cell value.

    Returns:
        Entered text, or None if the dialog was cancelled.
    """
    text, accepted = QInputDialog.getText(
        parent,
        f"Edit {column.header}",
        column.header,
        text=current_value_text(record, column),
    )
    return text if accepted else None
