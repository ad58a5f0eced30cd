"""
Unit Tests for weighted_average and single_record_improvement
"""

import pytest

from gpa_toolkit.calculator import single_record_improvement, weighted_average
from gpa_toolkit.core.models import GradeRecord


class TestWeightedAverage:
    """Tests for the credit-weighted average."""

    def test_three_courses(self, three_courses):
        assert weighted_average(three_courses) == pytest.approx(81.25)

    def test_empty_collection_is_zero(self):
        assert weighted_average([]) == 0.0

    def test_zero_total_credits_is_zero(self):
        records = [GradeRecord("a", "Seminar", 95.0, 0.0), GradeRecord("b", "Lab", 40.0, 0.0)]

        assert weighted_average(records) == 0.0

    def test_accepts_generator(self, three_courses):
        assert weighted_average(r for r in three_courses) == pytest.approx(81.25)

    def test_zero_credit_record_does_not_move_average(self, three_courses):
        extra = GradeRecord("d", "Audit", 0.0, 0.0)

        assert weighted_average([*three_courses, extra]) == pytest.approx(81.25)

    def test_input_not_mutated(self, three_courses):
        before = list(three_courses)

        weighted_average(three_courses)

        assert three_courses == before


class TestSingleRecordImprovement:
    """Tests for the full-marks improvement of one record."""

    def test_lowest_heavy_course_gives_largest_gain(self, three_courses):
        biology = three_courses[1]

        # (100 - 70) * 4 / 8
        assert single_record_improvement(biology, three_courses) == pytest.approx(15.0)

    def test_partial_gain(self, three_courses):
        algebra = three_courses[0]

        assert single_record_improvement(algebra, three_courses) == pytest.approx(3.75)

    def test_full_marks_record_gains_nothing(self, three_courses):
        chemistry = three_courses[2]

        assert single_record_improvement(chemistry, three_courses) == pytest.approx(0.0)

    def test_empty_collection_is_zero(self):
        target = GradeRecord("a", "Algebra", 50.0, 3.0)

        assert single_record_improvement(target, []) == 0.0

    def test_absent_target_is_zero(self, three_courses):
        stranger = GradeRecord("zz", "Elsewhere", 10.0, 5.0)

        assert single_record_improvement(stranger, three_courses) == 0.0

    def test_target_matched_by_id(self, three_courses):
        # Same id with stale field values still resolves to the stored record
        stale = three_courses[1].with_updates(grade=0.0, credits=99.0)

        assert single_record_improvement(stale, three_courses) == pytest.approx(15.0)

    def test_zero_total_credits_is_zero(self):
        record = GradeRecord("a", "Seminar", 50.0, 0.0)

        assert single_record_improvement(record, [record]) == 0.0

    def test_never_negative_below_full_marks(self, three_courses):
        for record in three_courses:
            assert single_record_improvement(record, three_courses) >= 0.0
