"""Tests for the Optimal Binary Pass tab."""
import pytest
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QMessageBox

from gpa_toolkit.calculator import PastGradeMode, SortColumn
from gpa_toolkit.core.models import GradeRecord
from gpa_toolkit.gui.models.settings import SettingsStore
from gpa_toolkit.gui.styles.theme import get_colors
from gpa_toolkit.gui.widgets.pass_fail_tab import PassFailTab


@pytest.fixture
def settings(settings_path):
    return SettingsStore(settings_path)


@pytest.fixture
def pass_fail_tab(qtbot, settings, mixed_current):
    tab = PassFailTab(settings)
    qtbot.addWidget(tab)
    tab.set_current_records(mixed_current)
    return tab


class TestCompute:

    def test_saved_mode_without_saved_grades(self, pass_fail_tab):
        pass_fail_tab.pass_limit_spin.setValue(1)

        result = pass_fail_tab.compute()

        assert result.best_average == pytest.approx(65.0)
        assert result.converted_ids == frozenset({"z"})
        assert "Art (grade=60)" in pass_fail_tab.result_label.text()

    def test_saved_mode_uses_saved_records(self, pass_fail_tab):
        pass_fail_tab.set_saved_records([GradeRecord("p", "Past", 80.0, 6.0)])
        pass_fail_tab.pass_limit_spin.setValue(2)

        result = pass_fail_tab.compute()

        assert result.best_average == pytest.approx(72.5)

    def test_zero_limit_converts_nothing(self, pass_fail_tab):
        result = pass_fail_tab.compute()

        assert result.is_noop
        assert "No courses were converted to Pass." in pass_fail_tab.result_label.text()

    def test_overall_mode(self, pass_fail_tab):
        pass_fail_tab.set_past_mode(PastGradeMode.OVERALL)
        pass_fail_tab.overall_average_input.setText("80")
        pass_fail_tab.overall_credits_input.setText("6")
        pass_fail_tab.pass_limit_spin.setValue(2)

        result = pass_fail_tab.compute()

        assert result.best_average == pytest.approx(72.5)

    def test_overall_mode_zero_credits_shows_error(self, pass_fail_tab):
        pass_fail_tab.set_past_mode(PastGradeMode.OVERALL)
        pass_fail_tab.overall_credits_input.setText("0")

        assert pass_fail_tab.compute() is None
        assert pass_fail_tab.error_label.text() == "Total Past Credits must be > 0."

    def test_semesters_mode(self, pass_fail_tab):
        pass_fail_tab.set_past_mode(PastGradeMode.SEMESTERS)
        pass_fail_tab.semester_count_spin.setValue(2)
        rows = pass_fail_tab._semester_rows
        rows[0].average_input.setText("80")
        rows[0].credits_input.setText("3")
        rows[1].average_input.setText("80")
        rows[1].credits_input.setText("3")
        pass_fail_tab.pass_limit_spin.setValue(1)

        result = pass_fail_tab.compute()

        assert len(rows) == 2
        assert result.best_average == pytest.approx(72.5)

    def test_large_search_can_be_cancelled(self, pass_fail_tab, monkeypatch):
        asked = []

        def decline(*args, **kwargs):
            asked.append(args)
            return QMessageBox.StandardButton.No

        monkeypatch.setattr(QMessageBox, "question", decline)
        pass_fail_tab.set_current_records(
            [GradeRecord(f"c{i}", f"Course {i}", 70.0, 3.0) for i in range(20)]
        )
        pass_fail_tab.pass_limit_spin.setValue(20)

        assert pass_fail_tab.compute() is None
        assert len(asked) == 1


class TestCurrentCourses:

    def test_add_current_course(self, pass_fail_tab):
        pass_fail_tab.current_name_input.setText("Music")
        pass_fail_tab.current_grade_input.setText("88")

        assert pass_fail_tab.add_current_from_form() is True
        added = pass_fail_tab.current_records[-1]
        assert added.label == "Music"
        assert added.term == "Current"

    def test_missing_name_shows_error(self, pass_fail_tab):
        assert pass_fail_tab.add_current_from_form() is False
        assert pass_fail_tab.error_label.text() == "Please enter a course name."

    def test_update_current_grade(self, pass_fail_tab):
        assert pass_fail_tab.update_current_field("y", SortColumn.GRADE, "58") is True
        assert {r.id: r.grade for r in pass_fail_tab.current_records}["y"] == 58.0

    @pytest.mark.parametrize("change", ["add", "edit", "delete"])
    def test_changing_courses_clears_previous_result(self, pass_fail_tab, change):
        pass_fail_tab.pass_limit_spin.setValue(1)
        pass_fail_tab.compute()

        if change == "add":
            pass_fail_tab.current_name_input.setText("Music")
            pass_fail_tab.add_current_from_form()
        elif change == "edit":
            pass_fail_tab.update_current_field("z", SortColumn.GRADE, "95")
        else:
            pass_fail_tab.set_current_records(pass_fail_tab.current_records[:2])

        table = pass_fail_tab.current_table
        highlight = QColor(get_colors().PASS_HIGHLIGHT)
        assert pass_fail_tab.last_result is None
        assert pass_fail_tab.result_label.text() == ""
        assert all(
            table.item(row, 0).background().color() != highlight
            for row in range(table.rowCount())
        )


class TestSettingsIntegration:

    def test_inputs_persisted(self, pass_fail_tab, settings):
        pass_fail_tab.pass_limit_spin.setValue(3)
        pass_fail_tab.mode_combo.setCurrentIndex(1)

        assert settings.get_pass_limit() == 3
        assert settings.get_past_mode() is PastGradeMode.OVERALL
        assert pass_fail_tab.past_stack.currentIndex() == 1

    def test_inputs_restored(self, qtbot, settings):
        settings.set_pass_limit(2)
        settings.set_past_mode(PastGradeMode.SEMESTERS)

        tab = PassFailTab(settings)
        qtbot.addWidget(tab)

        assert tab.pass_limit_spin.value() == 2
        assert tab.past_mode is PastGradeMode.SEMESTERS
        assert tab.past_stack.currentIndex() == 2
