"""
Module: calculator.optimizer

Purpose:
    Pass/fail optimizer. Chooses which current-term courses to convert to a
    non-numeric "pass" (removing them from the average) so the final
    weighted average is as high as possible, converting at most
    ``pass_limit`` courses.

Key Functions:
    - find_optimal_pass_fail(): Main entry point, returns (average, subset)
    - eligible_candidates(): Current records that may be converted
    - search_space_size(): Number of subsets a run will score

Key Classes:
    - PassFailOptimizer: Orchestrates one optimization run

Algorithm:
    1. Universe = past records + current records
    2. Filter current records to pass-eligible candidates (grade >= 55)
    3. Enumerate subsets of the candidates by increasing size, each size in
       lexicographic order, up to min(pass_limit, #candidates)
    4. Score the universe minus each subset with weighted_average()
    5. Keep a subset only on strict improvement, so the first (smallest,
       earliest) subset reaching the maximum wins ties

Dependencies:
    - gpa_toolkit.core.models: GradeRecord, PassFailResult
    - calculator.averages: weighted_average
    - calculator.combinations: count_subsets_up_to

Used By:
    - gui.widgets.pass_fail_tab
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import List, Sequence

from gpa_toolkit.common.thresholds import GRADE_THRESHOLDS
from gpa_toolkit.core.models import GradeRecord, PassFailResult

from .averages import weighted_average
from .combinations import count_subsets_up_to

logger = logging.getLogger(__name__)


def eligible_candidates(records: Sequence[GradeRecord]) -> List[GradeRecord]:
    """
    Return the records that may be converted to pass, in input order.

    A record is eligible when its grade is at least the pass eligibility
    threshold (55). Failing grades are never converted.
    """
    threshold = GRADE_THRESHOLDS.pass_eligibility
    return [r for r in records if r.grade >= threshold]


def search_space_size(eligible_count: int, pass_limit: int) -> int:
    """
    Number of subsets an optimization run scores.

    ``sum(C(eligible_count, r) for r in 0..min(pass_limit, eligible_count))``.
    Callers use this to bound the exhaustive search before running it.
    """
    return count_subsets_up_to(eligible_count, pass_limit)


def find_optimal_pass_fail(
    past_records: Sequence[GradeRecord],
    current_records: Sequence[GradeRecord],
    pass_limit: int,
) -> tuple[float, List[GradeRecord]]:
    """
    Find the best set of current-term courses to convert to pass.

    Args:
        past_records: Locked-in records, always part of the average
        current_records: In-progress records, candidates for conversion
        pass_limit: Maximum number of conversions

    Returns:
        ``(best_average, converted_records)``; the subset is empty when no
        conversion strictly beats the unconverted average

    Invariants:
        - No converted record has grade < 55
        - len(converted_records) <= min(pass_limit, #eligible)
        - Identical inputs always give identical output

    Example:
        >>> avg, passed = find_optimal_pass_fail([], current, pass_limit=1)
    """
    return PassFailOptimizer(past_records, current_records, pass_limit).run().as_tuple()


@dataclass
class PassFailOptimizer:
    """
    Pass/fail optimization orchestrator.

    Holds the inputs of one run. Inputs are never mutated and nothing is
    retained between runs, so a single instance may be run repeatedly.

    Attributes:
        past_records: Locked-in records
        current_records: Current-term records
        pass_limit: Maximum number of conversions
    """

    past_records: Sequence[GradeRecord]
    current_records: Sequence[GradeRecord]
    pass_limit: int

    _universe: List[GradeRecord] = field(
        init=False, default_factory=list, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._universe = [*self.past_records, *self.current_records]

    @property
    def baseline_average(self) -> float:
        """Average with nothing converted."""
        return weighted_average(self._universe)

    @property
    def candidates(self) -> List[GradeRecord]:
        return eligible_candidates(self.current_records)

    @property
    def max_conversions(self) -> int:
        """Largest subset size the search will consider."""
        if self.pass_limit <= 0 or not self.current_records:
            return 0
        return min(self.pass_limit, len(self.candidates))

    def search_space_size(self) -> int:
        """Number of subsets run() will score."""
        if self.max_conversions == 0:
            return 1
        return search_space_size(len(self.candidates), self.pass_limit)

    def run(self) -> PassFailResult:
        """
        Execute the exhaustive search.

        Returns:
            PassFailResult with the best average and converted subset
        """
        baseline = self.baseline_average

        if self.pass_limit <= 0 or not self.current_records:
            logger.debug("Pass/fail search skipped: limit=%s, current=%d",
                         self.pass_limit, len(self.current_records))
            return self._result(baseline, (), baseline, evaluated=1)

        candidates = self.candidates
        if not candidates:
            logger.info("No current-term course is eligible for pass (grade >= %g)",
                        GRADE_THRESHOLDS.pass_eligibility)
            return self._result(baseline, (), baseline, evaluated=1)

        max_size = min(self.pass_limit, len(candidates))
        logger.debug(
            "Searching %d subsets of %d eligible courses (max size %d)",
            search_space_size(len(candidates), self.pass_limit),
            len(candidates),
            max_size,
        )

        best_average = baseline
        best_subset: tuple[GradeRecord, ...] = ()
        evaluated = 0

        for size in range(max_size + 1):
            for subset in combinations(candidates, size):
                evaluated += 1
                removed_ids = {r.id for r in subset}
                remaining = [r for r in self._universe if r.id not in removed_ids]
                average = weighted_average(remaining)
                # Strict comparison: ties keep the earlier subset
                if average > best_average:
                    best_average = average
                    best_subset = subset

        if best_subset:
            logger.info(
                "Converting %d course(s) to pass raises the average from %.2f to %.2f",
                len(best_subset), baseline, best_average,
            )
        else:
            logger.info("No pass/fail conversion improves the average (%.2f)", baseline)

        return self._result(best_average, best_subset, baseline, evaluated=evaluated)

    def _result(
        self,
        best_average: float,
        converted: tuple[GradeRecord, ...],
        baseline: float,
        *,
        evaluated: int,
    ) -> PassFailResult:
        return PassFailResult(
            best_average=best_average,
            converted=converted,
            baseline_average=baseline,
            pass_limit=self.pass_limit,
            candidates_evaluated=evaluated,
        )
