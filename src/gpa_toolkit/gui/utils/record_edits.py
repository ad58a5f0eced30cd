"""
Form and cell-edit parsing for grade records.

Qt-free. Numeric fields
parse leniently (unparseable text falls back to a default). Negative credits
raise RecordInputError.
"""
from __future__ import annotations

from typing import Optional

from gpa_toolkit.calculator.sorting import SortColumn
from gpa_toolkit.common import FORM_DEFAULTS, parse_float
from gpa_toolkit.core.models import GradeRecord


class RecordInputError(ValueError):
    """User input that cannot become a valid record."""


def _parse_credits(text: str) -> float:
    credits = parse_float(text, FORM_DEFAULTS.credits_fallback)
    if credits < 0:
        raise RecordInputError("Credits cannot be negative.")
    return credits


def record_from_form(
    name: str,
    grade_text: str,
    credits_text: str,
    *,
    term: str = "",
    course_code: str = "",
    require_term: bool = False,
) -> GradeRecord:
    """
    Build a new record from add-course form fields.

    Raises:
        RecordInputError: Missing name/term or negative credits
    """
    name = name.strip()
    term = term.strip()
    if not name:
        raise RecordInputError("Please enter a course name.")
    if require_term and not term:
        raise RecordInputError("Please enter Name and Semester.")
    return GradeRecord.create(
        label=name,
        grade=parse_float(grade_text, FORM_DEFAULTS.grade_fallback),
        credits=_parse_credits(credits_text),
        course_code=course_code.strip() or None,
        term=term,
    )


def current_value_text(record: GradeRecord, column: SortColumn) -> str:
    """Text to pre-fill the edit dialog with."""
    if column is SortColumn.COURSE_CODE:
        return record.course_code or ""
    if column is SortColumn.NAME:
        return record.label
    if column is SortColumn.TERM:
        return record.term
    if column is SortColumn.GRADE:
        return f"{record.grade:g}"
    if column is SortColumn.CREDITS:
        return f"{record.credits:g}"
    return ""


def apply_field_edit(record: GradeRecord, column: SortColumn, text: str) -> Optional[GradeRecord]:
    """
    Return ``record`` with ``column`` set from ``text``.

    Returns None for calculated columns, which are read-only.

    Raises:
        RecordInputError: Negative credits
    """
    if column is SortColumn.COURSE_CODE:
        return record.with_updates(course_code=text.strip() or None)
    if column is SortColumn.NAME:
        return record.with_updates(label=text)
    if column is SortColumn.TERM:
        return record.with_updates(term=text)
    if column is SortColumn.GRADE:
        return record.with_updates(grade=parse_float(text, FORM_DEFAULTS.grade_fallback))
    if column is SortColumn.CREDITS:
        return record.with_updates(credits=_parse_credits(text))
    return None
