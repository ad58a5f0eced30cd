"""Tests for the console log widget."""
from gpa_toolkit.gui.widgets.console_widget import ConsoleWidget


def test_append_and_clear(qtbot):
    console = ConsoleWidget()
    qtbot.addWidget(console)

    console.append_log("ERROR", "Could not save data")
    console.append_log("info", "Loaded 3 saved course(s)")

    text = console.text_edit.toPlainText()
    assert "[ERROR] Could not save data" in text
    assert "[INFO] Loaded 3 saved course(s)" in text

    console.clear()

    assert console.text_edit.toPlainText() == ""
