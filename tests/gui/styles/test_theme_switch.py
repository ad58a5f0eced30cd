"""Tests for light/dark theme switching."""
import pytest

from gpa_toolkit.gui.styles.theme import (
    GLOBAL_STYLESHEET,
    GLOBAL_STYLESHEET_DARK,
    Colors,
    ColorsDark,
    apply_theme,
    get_colors,
)


@pytest.fixture
def light_afterwards(qapp):
    yield qapp
    apply_theme(qapp, False)


def test_stylesheets_differ():
    assert GLOBAL_STYLESHEET != GLOBAL_STYLESHEET_DARK
    assert "#primaryButton" in GLOBAL_STYLESHEET


def test_apply_theme_switches_palette(light_afterwards):
    apply_theme(light_afterwards, True)

    assert get_colors() is ColorsDark
    assert light_afterwards.styleSheet() == GLOBAL_STYLESHEET_DARK

    apply_theme(light_afterwards, False)

    assert get_colors() is Colors
