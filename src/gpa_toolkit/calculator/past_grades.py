"""
Module: calculator.past_grades

Purpose:
    Builds the "past" record collection for the pass/fail optimizer from one
    of three sources: the saved course list, a single overall average, or a
    list of per-semester averages.

Key Functions:
    - aggregate_past_record(): One synthetic record for an overall average
    - semester_past_records(): One synthetic record per past semester
    - build_past_records(): Dispatch on PastGradeMode
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from gpa_toolkit.core.models import GradeRecord


AGGREGATED_ID = "aggregated"


class PastGradeMode(Enum):
    """Where past grades come from."""

    SAVED = "saved"
    OVERALL = "overall"
    SEMESTERS = "semesters"

    @property
    def display_name(self) -> str:
        return {
            PastGradeMode.SAVED: "Use Saved Grades",
            PastGradeMode.OVERALL: "Enter Overall Average",
            PastGradeMode.SEMESTERS: "Enter Per-Semester Averages",
        }[self]


@dataclass(frozen=True)
class PastGradeInput:
    """
    A past average with its credit weight.

    Attributes:
        average: Weighted average for the period (0-100)
        credits: Credits the average covers

    Invariants:
        - credits >= 0
    """

    average: float
    credits: float

    def __post_init__(self) -> None:
        if self.credits < 0:
            raise ValueError(f"credits must be non-negative: {self.credits}")


def aggregate_past_record(average: float, credits: float) -> GradeRecord:
    """
    Represent all past courses as a single record.

    Args:
        average: Overall past average
        credits: Total past credits

    Returns:
        GradeRecord with id ``"aggregated"``

    Raises:
        ValueError: If credits is not positive
    """
    if credits <= 0:
        raise ValueError("Total Past Credits must be > 0.")
    return GradeRecord(
        id=AGGREGATED_ID,
        label="Aggregated Past",
        grade=float(average),
        credits=float(credits),
        term="Aggregated",
    )


def semester_past_records(semesters: Sequence[PastGradeInput]) -> List[GradeRecord]:
    """Return one record per past semester, with ids ``sem0``, ``sem1``, ..."""
    return [
        GradeRecord(
            id=f"sem{index}",
            label=f"Past Sem {index + 1}",
            grade=float(semester.average),
            credits=float(semester.credits),
            term=f"Sem {index + 1}",
        )
        for index, semester in enumerate(semesters)
    ]


def build_past_records(
    mode: PastGradeMode,
    *,
    saved: Sequence[GradeRecord] = (),
    overall: Optional[PastGradeInput] = None,
    semesters: Sequence[PastGradeInput] = (),
) -> List[GradeRecord]:
    """
    Build the past record collection for ``mode``.

    Args:
        mode: Selected past grade source
        saved: Saved course list (SAVED mode)
        overall: Overall average and credits (OVERALL mode)
        semesters: Per-semester averages (SEMESTERS mode)

    Returns:
        New list of past records

    Raises:
        ValueError: OVERALL mode without input or with non-positive credits
    """
    if mode is PastGradeMode.SAVED:
        return list(saved)
    if mode is PastGradeMode.OVERALL:
        if overall is None:
            raise ValueError("An overall average is required")
        return [aggregate_past_record(overall.average, overall.credits)]
    return semester_past_records(semesters)
