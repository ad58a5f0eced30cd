"""
Module: records

Purpose:
    Provides the GradeRecord dataclass - one graded course with its credit
    weight. This is the unit every average and optimization works on.

Key Functions:
    - GradeRecord.create(...): Build a record with a freshly generated id
    - GradeRecord.with_updates(...): Copy with changed fields, same id
    - GradeRecord.weighted_points: grade * credits (calculated)
    - GradeRecord.to_dict() / from_dict(): Persisted JSON shape

Dependencies:
    - dataclasses (std)
    - uuid (std)

Used By:
    - calculator.averages
    - calculator.optimizer
    - core.utils.serialization
    - gui widgets (table rows)
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class GradeRecord:
    """
    A single graded course.

    Records are immutable. Editing a cell in the GUI produces a new record
    that keeps the same ``id``, so membership tests stay stable for the
    record's lifetime.

    Attributes:
        id: Opaque unique identifier, used only for membership tests
        label: Course name (display only)
        grade: Numeric score, 0-100 by convention (not range-checked)
        credits: Credit weight, never negative
        course_code: Optional secondary label (e.g. "CS101")
        term: Semester / term name, display and sorting only

    Invariants:
        - credits >= 0 (validated at the input boundary, not here)
        - id equality means "same logical record"

    Example:
        >>> r = GradeRecord("a1", "Algebra", 90.0, 3.0)
        >>> r.weighted_points
        270.0
    """

    id: str
    label: str
    grade: float
    credits: float
    course_code: Optional[str] = None
    term: str = ""

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def weighted_points(self) -> float:
        """Grade multiplied by credits (the record's share of the numerator)."""
        return self.grade * self.credits

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def create(
        cls,
        label: str,
        grade: float,
        credits: float,
        *,
        course_code: Optional[str] = None,
        term: str = "",
    ) -> "GradeRecord":
        """
        Create a record with a new random id.

        Args:
            label: Course name
            grade: Numeric grade
            credits: Credit weight
            course_code: Optional course code, empty strings become None
            term: Semester / term name

        Returns:
            New GradeRecord
        """
        return cls(
            id=uuid.uuid4().hex,
            label=label,
            grade=float(grade),
            credits=float(credits),
            course_code=course_code or None,
            term=term,
        )

    def with_updates(self, **changes: Any) -> "GradeRecord":
        """Return a copy with ``changes`` applied; the id is never changed."""
        if "id" in changes:
            raise ValueError("GradeRecord id cannot be changed")
        return replace(self, **changes)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the persisted JSON shape.

        Keys match the saved courses file:
        ``uid``, ``course_id``, ``name``, ``semester``, ``grade``, ``credits``.
        """
        return {
            "uid": self.id,
            "course_id": self.course_code,
            "name": self.label,
            "semester": self.term,
            "grade": self.grade,
            "credits": self.credits,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GradeRecord":
        """
        Deserialize from the persisted JSON shape.

        Missing text fields default to ``""`` and missing numbers to ``0``.
        """
        course_code = data.get("course_id")
        return cls(
            id=str(data.get("uid") or ""),
            label=str(data.get("name") or ""),
            grade=float(data.get("grade") or 0),
            credits=float(data.get("credits") or 0),
            course_code=str(course_code) if course_code else None,
            term=str(data.get("semester") or ""),
        )

    def __str__(self) -> str:
        return f"{self.label} (grade={self.grade:g}, credits={self.credits:g})"
