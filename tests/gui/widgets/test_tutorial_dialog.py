"""Tests for the tutorial dialog."""
from gpa_toolkit.gui.widgets.tutorial_dialog import TUTORIAL_TEXT, TutorialDialog


def test_tutorial_mentions_pass_threshold():
    assert "55" in TUTORIAL_TEXT


def test_ok_button_accepts(qtbot):
    dialog = TutorialDialog()
    qtbot.addWidget(dialog)

    assert dialog.message_label.text() == TUTORIAL_TEXT
    with qtbot.waitSignal(dialog.accepted, timeout=1000):
        dialog.ok_button.click()
