"""
Module: calculator.averages

Purpose:
    Weighted-average arithmetic over grade records. Pure functions with no
    side effects; the leaf of the calculator package.

Key Functions:
    - weighted_average(): sum(grade * credits) / sum(credits)
    - single_record_improvement(): Gain if one record scored full marks

Dependencies:
    - gpa_toolkit.core.models: GradeRecord
    - gpa_toolkit.common.thresholds: GRADE_THRESHOLDS

Used By:
    - calculator.optimizer
    - calculator.sorting (improvement column)
    - gui widgets
"""

from __future__ import annotations

from typing import Iterable, Sequence

from gpa_toolkit.common.thresholds import GRADE_THRESHOLDS
from gpa_toolkit.core.models import GradeRecord


def _totals(records: Iterable[GradeRecord]) -> tuple[float, float]:
    """Return (sum of weighted points, sum of credits)."""
    total_weighted = 0.0
    total_credits = 0.0
    for record in records:
        total_weighted += record.grade * record.credits
        total_credits += record.credits
    return total_weighted, total_credits


def _ratio(total_weighted: float, total_credits: float) -> float:
    # Zero credits is a defined result, not an error
    if total_credits == 0:
        return 0.0
    return total_weighted / total_credits


def weighted_average(records: Iterable[GradeRecord]) -> float:
    """
    Credit-weighted average grade.

    Args:
        records: Any collection of records, possibly empty

    Returns:
        ``sum(grade * credits) / sum(credits)``, or ``0.0`` when the
        collection is empty or its total credits are zero

    Example:
        >>> weighted_average([
        ...     GradeRecord("a", "A", 90, 3),
        ...     GradeRecord("b", "B", 70, 4),
        ...     GradeRecord("c", "C", 100, 1),
        ... ])
        81.25
    """
    return _ratio(*_totals(records))


def single_record_improvement(target: GradeRecord, records: Sequence[GradeRecord]) -> float:
    """
    How much the average would rise if ``target`` had a full-marks grade.

    The record is located in ``records`` by ``id``. Its grade is replaced by
    the maximum grade while its credits (and every other record) stay the
    same. When no record with ``target.id`` is present the hypothetical
    average equals the current one and the result is ``0.0``.

    Args:
        target: Record to improve
        records: Collection the average is computed over

    Returns:
        ``hypothetical_average - current_average`` (``0.0`` for empty input)
    """
    if not records:
        return 0.0

    total_weighted, total_credits = _totals(records)
    current = _ratio(total_weighted, total_credits)

    hypothetical_weighted = total_weighted
    for record in records:
        if record.id == target.id:
            hypothetical_weighted += (GRADE_THRESHOLDS.max_grade - record.grade) * record.credits
            break

    return _ratio(hypothetical_weighted, total_credits) - current
