"""
Module: calculator.sorting

Purpose:
    Column sort order for the saved grades table, including the calculated
    weight and improvement columns.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, List, Sequence

from gpa_toolkit.core.models import GradeRecord

from .averages import single_record_improvement


class SortColumn(IntEnum):
    """Saved grades table columns, in display order."""

    COURSE_CODE = 0
    NAME = 1
    TERM = 2
    GRADE = 3
    CREDITS = 4
    WEIGHT = 5
    IMPROVEMENT = 6

    @property
    def header(self) -> str:
        return _HEADERS[self]

    @property
    def is_editable(self) -> bool:
        """Weight and improvement are calculated, never edited."""
        return self not in (SortColumn.WEIGHT, SortColumn.IMPROVEMENT)


_HEADERS = {
    SortColumn.COURSE_CODE: "Course ID",
    SortColumn.NAME: "Name",
    SortColumn.TERM: "Semester",
    SortColumn.GRADE: "Grade",
    SortColumn.CREDITS: "Credits",
    SortColumn.WEIGHT: "Weight",
    SortColumn.IMPROVEMENT: "Improvement",
}

DEFAULT_SORT_COLUMN = SortColumn.NAME


def sort_key(column: SortColumn, records: Sequence[GradeRecord]) -> Callable[[GradeRecord], Any]:
    """
    Key function for ``column``.

    The improvement key is computed against ``records`` (the whole table).
    Missing course codes sort as empty strings.
    """
    if column is SortColumn.COURSE_CODE:
        return lambda r: r.course_code or ""
    if column is SortColumn.TERM:
        return lambda r: r.term
    if column is SortColumn.GRADE:
        return lambda r: r.grade
    if column is SortColumn.CREDITS:
        return lambda r: r.credits
    if column is SortColumn.WEIGHT:
        return lambda r: r.weighted_points
    if column is SortColumn.IMPROVEMENT:
        return lambda r: single_record_improvement(r, records)
    return lambda r: r.label


def sort_records(
    records: Sequence[GradeRecord],
    column: SortColumn = DEFAULT_SORT_COLUMN,
    ascending: bool = True,
) -> List[GradeRecord]:
    """
    Return a new list of ``records`` sorted by ``column``.

    The sort is stable, so rows with equal keys keep their relative order.
    """
    return sorted(records, key=sort_key(column, records), reverse=not ascending)
