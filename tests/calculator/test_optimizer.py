"""
Unit Tests for the Pass/Fail Optimizer
"""

import logging

import pytest

from gpa_toolkit.calculator import (
    PassFailOptimizer,
    eligible_candidates,
    find_optimal_pass_fail,
    search_space_size,
    weighted_average,
)
from gpa_toolkit.core.models import GradeRecord


class TestEligibility:
    """Tests for eligible_candidates."""

    def test_filters_below_55(self, mixed_current):
        assert [r.id for r in eligible_candidates(mixed_current)] == ["x", "z"]

    def test_exactly_55_is_eligible(self):
        record = GradeRecord("e", "Edge", 55.0, 3.0)

        assert eligible_candidates([record]) == [record]

    def test_search_space_size(self):
        assert search_space_size(2, 1) == 3
        assert search_space_size(2, 5) == 4


class TestFindOptimalPassFail:
    """End-to-end tests for find_optimal_pass_fail."""

    def test_converts_the_course_that_drags_most(self, mixed_current):
        best, converted = find_optimal_pass_fail([], mixed_current, 1)

        # Removing Art leaves (270 + 120) / 6
        assert best == pytest.approx(65.0)
        assert [r.id for r in converted] == ["z"]

    def test_failing_grade_never_converted(self, mixed_current):
        best, converted = find_optimal_pass_fail([], mixed_current, 3)

        assert all(r.grade >= 55 for r in converted)
        assert "y" not in {r.id for r in converted}
        assert best == pytest.approx(65.0)

    def test_with_past_records(self, mixed_current):
        past = [GradeRecord("p", "Past", 80.0, 6.0)]

        best, converted = find_optimal_pass_fail(past, mixed_current, 2)

        assert best == pytest.approx(72.5)
        assert [r.id for r in converted] == ["z"]

    def test_zero_limit_returns_baseline(self, mixed_current):
        best, converted = find_optimal_pass_fail([], mixed_current, 0)

        assert best == pytest.approx(weighted_average(mixed_current))
        assert converted == []

    def test_negative_limit_returns_baseline(self, mixed_current):
        best, converted = find_optimal_pass_fail([], mixed_current, -2)

        assert best == pytest.approx(weighted_average(mixed_current))
        assert converted == []

    def test_no_current_records_returns_past_average(self, three_courses):
        best, converted = find_optimal_pass_fail(three_courses, [], 3)

        assert best == pytest.approx(81.25)
        assert converted == []

    def test_no_eligible_records_returns_baseline(self):
        past = [GradeRecord("p", "Past", 90.0, 3.0)]
        current = [GradeRecord("y", "History", 40.0, 3.0)]

        best, converted = find_optimal_pass_fail(past, current, 1)

        assert best == pytest.approx(65.0)
        assert converted == []

    def test_grade_55_can_be_converted(self):
        past = [GradeRecord("p", "Past", 90.0, 3.0)]
        current = [GradeRecord("e", "Edge", 55.0, 3.0)]

        best, converted = find_optimal_pass_fail(past, current, 1)

        assert best == pytest.approx(90.0)
        assert [r.id for r in converted] == ["e"]

    def test_removing_everything_is_not_an_improvement(self):
        current = [GradeRecord("x", "Only", 90.0, 3.0)]

        best, converted = find_optimal_pass_fail([], current, 1)

        assert best == pytest.approx(90.0)
        assert converted == []

    def test_subset_size_bounded_by_limit(self):
        past = [GradeRecord("p", "Past", 95.0, 3.0)]
        current = [GradeRecord(f"c{i}", f"Course {i}", 60.0 + i, 3.0) for i in range(5)]

        for limit in range(6):
            _, converted = find_optimal_pass_fail(past, current, limit)
            assert len(converted) <= limit

    def test_multiple_conversions(self):
        past = [GradeRecord("p", "Past", 90.0, 3.0)]
        current = [GradeRecord("a", "A", 60.0, 3.0), GradeRecord("b", "B", 60.0, 3.0)]

        best, converted = find_optimal_pass_fail(past, current, 2)

        assert best == pytest.approx(90.0)
        assert [r.id for r in converted] == ["a", "b"]

    def test_tie_prefers_earliest_subset(self):
        past = [GradeRecord("p", "Past", 90.0, 3.0)]
        current = [GradeRecord("a", "A", 60.0, 3.0), GradeRecord("b", "B", 60.0, 3.0)]

        best, converted = find_optimal_pass_fail(past, current, 1)

        assert best == pytest.approx(75.0)
        assert [r.id for r in converted] == ["a"]

    def test_tie_prefers_smaller_subset(self):
        past = [GradeRecord("p", "Past", 80.0, 3.0)]
        current = [GradeRecord("a", "A", 70.0, 3.0), GradeRecord("b", "B", 80.0, 3.0)]

        best, converted = find_optimal_pass_fail(past, current, 2)

        # {a} and {a, b} both reach 80.0
        assert best == pytest.approx(80.0)
        assert [r.id for r in converted] == ["a"]

    def test_zero_credit_candidate_not_converted(self):
        past = [GradeRecord("p", "Past", 80.0, 3.0)]
        current = [GradeRecord("s", "Seminar", 60.0, 0.0)]

        best, converted = find_optimal_pass_fail(past, current, 1)

        assert best == pytest.approx(80.0)
        assert converted == []

    def test_deterministic(self, mixed_current):
        past = [GradeRecord("p", "Past", 70.0, 10.0)]

        first = find_optimal_pass_fail(past, mixed_current, 2)
        second = find_optimal_pass_fail(past, mixed_current, 2)

        assert first == second

    def test_inputs_not_mutated(self, mixed_current):
        past = [GradeRecord("p", "Past", 70.0, 10.0)]
        past_before, current_before = list(past), list(mixed_current)

        find_optimal_pass_fail(past, mixed_current, 2)

        assert past == past_before
        assert mixed_current == current_before


class TestPassFailOptimizer:
    """Tests for the optimizer object and its result."""

    def test_result_carries_baseline_and_count(self, mixed_current):
        result = PassFailOptimizer([], mixed_current, 1).run()

        assert result.baseline_average == pytest.approx(570 / 9)
        assert result.gain == pytest.approx(65.0 - 570 / 9)
        assert result.candidates_evaluated == 3
        assert result.pass_limit == 1

    def test_search_space_size_matches_evaluated(self, mixed_current):
        optimizer = PassFailOptimizer([], mixed_current, 2)

        assert optimizer.search_space_size() == optimizer.run().candidates_evaluated == 4

    def test_search_space_size_when_nothing_to_search(self, mixed_current):
        assert PassFailOptimizer([], mixed_current, 0).search_space_size() == 1
        assert PassFailOptimizer([], [], 3).search_space_size() == 1

    def test_max_conversions(self, mixed_current):
        assert PassFailOptimizer([], mixed_current, 5).max_conversions == 2
        assert PassFailOptimizer([], mixed_current, 1).max_conversions == 1

    def test_run_is_repeatable(self, mixed_current):
        optimizer = PassFailOptimizer([], mixed_current, 2)

        assert optimizer.run() == optimizer.run()

    def test_repr_and_equality_use_inputs_only(self, mixed_current):
        optimizer = PassFailOptimizer([], mixed_current, 1)

        assert "_universe" not in repr(optimizer)
        assert optimizer == PassFailOptimizer([], mixed_current, 1)
        assert optimizer != PassFailOptimizer([], mixed_current, 2)

    def test_logs_outcome(self, mixed_current, caplog):
        with caplog.at_level(logging.INFO, logger="gpa_toolkit.calculator.optimizer"):
            PassFailOptimizer([], mixed_current, 1).run()

        assert "Converting 1 course(s) to pass" in caplog.text
