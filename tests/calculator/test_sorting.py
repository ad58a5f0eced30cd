"""
Unit Tests for table column sorting
"""

from gpa_toolkit.calculator import SortColumn, sort_records
from gpa_toolkit.core.models import GradeRecord


class TestSortRecords:

    def test_default_sorts_by_name(self, three_courses):
        shuffled = [three_courses[2], three_courses[0], three_courses[1]]

        assert [r.label for r in sort_records(shuffled)] == ["Algebra", "Biology", "Chemistry"]

    def test_grade_descending(self, three_courses):
        result = sort_records(three_courses, SortColumn.GRADE, ascending=False)

        assert [r.id for r in result] == ["c", "a", "b"]

    def test_weight(self, three_courses):
        result = sort_records(three_courses, SortColumn.WEIGHT)

        assert [r.id for r in result] == ["c", "a", "b"]

    def test_improvement_uses_whole_table(self, three_courses):
        result = sort_records(three_courses, SortColumn.IMPROVEMENT)

        # Gains: c 0.0, a 3.75, b 15.0
        assert [r.id for r in result] == ["c", "a", "b"]

    def test_missing_course_code_sorts_first(self):
        records = [
            GradeRecord("a", "A", 80.0, 3.0, course_code="MA101"),
            GradeRecord("b", "B", 80.0, 3.0),
        ]

        assert [r.id for r in sort_records(records, SortColumn.COURSE_CODE)] == ["b", "a"]

    def test_stable_for_equal_keys(self):
        records = [GradeRecord(str(i), "Same", 80.0, 3.0, term="Fall") for i in range(4)]

        assert [r.id for r in sort_records(records, SortColumn.TERM)] == ["0", "1", "2", "3"]

    def test_input_not_mutated(self, three_courses):
        before = list(three_courses)

        sort_records(three_courses, SortColumn.GRADE, ascending=False)

        assert three_courses == before


class TestSortColumn:

    def test_calculated_columns_not_editable(self):
        assert not SortColumn.WEIGHT.is_editable
        assert not SortColumn.IMPROVEMENT.is_editable
        assert SortColumn.GRADE.is_editable

    def test_headers(self):
        assert [c.header for c in SortColumn] == [
            "Course ID", "Name", "Semester", "Grade", "Credits", "Weight", "Improvement",
        ]
