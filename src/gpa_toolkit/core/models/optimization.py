"""
Module: optimization

Purpose:
    Provides the PassFailResult dataclass - the outcome of one pass/fail
    optimization run: the best achievable average and which current-term
    records were converted to "pass" to reach it.

Key Functions:
    - PassFailResult.gain: best_average - baseline_average
    - PassFailResult.converted_ids: Ids of converted records
    - PassFailResult.as_tuple(): (best_average, converted list)

Dependencies:
    - dataclasses (std)
    - .records.GradeRecord

Used By:
    - calculator.optimizer
    - calculator.report
    - gui.widgets.pass_fail_tab
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from .records import GradeRecord


@dataclass(frozen=True)
class PassFailResult:
    """
    Result of a pass/fail optimization.

    Attributes:
        best_average: Highest weighted average found
        converted: Records converted to pass, in eligible-candidate order
        baseline_average: Average with no conversions
        pass_limit: Cap that was applied
        candidates_evaluated: Number of subsets scored (including the empty one)

    Invariants:
        - best_average >= baseline_average
        - len(converted) <= max(pass_limit, 0)
        - converted is empty when best_average == baseline_average
    """

    best_average: float
    converted: tuple[GradeRecord, ...]
    baseline_average: float
    pass_limit: int
    candidates_evaluated: int = 0

    @property
    def gain(self) -> float:
        """Improvement of the best average over the no-conversion baseline."""
        return self.best_average - self.baseline_average

    @property
    def converted_ids(self) -> FrozenSet[str]:
        return frozenset(r.id for r in self.converted)

    @property
    def is_noop(self) -> bool:
        """True when no record was converted."""
        return not self.converted

    def as_tuple(self) -> tuple[float, list[GradeRecord]]:
        """Return ``(best_average, converted)`` with the subset as a list."""
        return self.best_average, list(self.converted)
