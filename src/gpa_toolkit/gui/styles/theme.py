"""
Theme definitions for the GPA Toolkit GUI.
"""


class Fonts:
    UI_FONT = "'Segoe UI', 'Helvetica Neue', Arial, sans-serif"
    MONO_FONT = "Menlo, Consolas, 'DejaVu Sans Mono', monospace"
    BODY = "11pt"
    CONSOLE = "10pt"
    RESULT = "12pt"


class Colors:
    """Light palette."""

    ACCENT = "#2E7D5B"
    ACCENT_HOVER = "#1F5C42"

    BACKGROUND = "#F4F6F5"
    SURFACE = "#FFFFFF"
    HOVER = "#EAF1ED"

    TEXT_PRIMARY = "#1C2421"
    TEXT_SECONDARY = "#5F6B66"
    TEXT_ON_ACCENT = "#FFFFFF"

    BORDER = "#D5DDD9"
    BORDER_FOCUS = "#3FA37A"

    ERROR = "#C62828"
    WARNING = "#E07B00"

    SELECTION_BG = "#DCEFE5"
    SELECTION_TEXT = "#1C2421"

    # Current-term rows chosen for pass conversion
    PASS_HIGHLIGHT = "#FFF4C2"


class ColorsDark:
    """Dark palette."""

    ACCENT = "#4CB38A"
    ACCENT_HOVER = "#66C9A0"

    BACKGROUND = "#181C1B"
    SURFACE = "#212726"
    HOVER = "#2A3331"

    TEXT_PRIMARY = "#E3ECE8"
    TEXT_SECONDARY = "#93A29C"
    TEXT_ON_ACCENT = "#0E1312"

    BORDER = "#35403D"
    BORDER_FOCUS = "#4CB38A"

    ERROR = "#EF6B6B"
    WARNING = "#E0A84A"

    SELECTION_BG = "#2F5F4C"
    SELECTION_TEXT = "#FFFFFF"

    PASS_HIGHLIGHT = "#5A4E1C"


def _build_stylesheet(C) -> str:
    """Render the application QSS for palette ``C``."""
    rules = {
        "*": f"font-family: {Fonts.UI_FONT}; font-size: {Fonts.BODY}; color: {C.TEXT_PRIMARY};",
        "QMainWindow, QWidget, QMenuBar, QMenu": f"background-color: {C.BACKGROUND};",
        "QLabel": "background-color: transparent;",
        "QMenu::item:selected, QTabBar::tab:hover, QPushButton:hover": (
            f"background-color: {C.HOVER};"
        ),
        "QStatusBar": f"background-color: {C.SURFACE}; color: {C.TEXT_SECONDARY};",
        "QGroupBox": (
            f"background-color: {C.SURFACE}; border: 1px solid {C.BORDER};"
            " border-radius: 6px; margin-top: 14px; padding-top: 6px;"
        ),
        "QGroupBox::title": (
            "subcontrol-origin: margin; left: 10px; padding: 0 4px;"
            f" font-weight: bold; background-color: {C.BACKGROUND};"
        ),
        "QLineEdit, QSpinBox, QComboBox, QPushButton": (
            f"background-color: {C.SURFACE}; border: 1px solid {C.BORDER};"
            " border-radius: 4px; padding: 4px 8px;"
        ),
        "QLineEdit:focus, QSpinBox:focus, QComboBox:focus": f"border-color: {C.BORDER_FOCUS};",
        "QPushButton#primaryButton": (
            f"background-color: {C.ACCENT}; color: {C.TEXT_ON_ACCENT};"
            " border: none; font-weight: bold; padding: 6px 14px;"
        ),
        "QPushButton#primaryButton:hover": f"background-color: {C.ACCENT_HOVER};",
        "QTabWidget::pane": f"background: {C.SURFACE}; border: 1px solid {C.BORDER};",
        "QTabBar::tab": (
            f"background: {C.SURFACE}; border: 1px solid {C.BORDER};"
            " padding: 7px 14px; margin-right: 2px;"
        ),
        "QTabBar::tab:selected": f"color: {C.ACCENT}; border-bottom: 2px solid {C.ACCENT};",
        "QPlainTextEdit, QAbstractItemView": (
            f"background: {C.SURFACE}; border: 1px solid {C.BORDER};"
            f" selection-background-color: {C.SELECTION_BG}; selection-color: {C.SELECTION_TEXT};"
        ),
        "QHeaderView::section": (
            f"background-color: {C.BACKGROUND}; border: none;"
            f" border-bottom: 1px solid {C.BORDER}; padding: 4px 6px; font-weight: bold;"
        ),
        "#resultLabel": f"font-size: {Fonts.RESULT};",
        "#errorLabel": f"color: {C.ERROR};",
    }
    return "\n".join(f"{selector} {{ {body} }}" for selector, body in rules.items())


# Global application stylesheets
GLOBAL_STYLESHEET = _build_stylesheet(Colors)
GLOBAL_STYLESHEET_DARK = _build_stylesheet(ColorsDark)


def apply_theme(app, is_dark: bool = False) -> None:
    """
    Apply the appropriate stylesheet (light or dark) to the QApplication.
    """
    set_dark_mode(is_dark)
    app.setStyleSheet(GLOBAL_STYLESHEET_DARK if is_dark else GLOBAL_STYLESHEET)


# Module-level dark mode state (set explicitly when theme changes)
_is_dark_mode = False


def set_dark_mode(is_dark: bool):
    """Explicitly set the dark mode state. Called by apply_theme."""
    global _is_dark_mode
    _is_dark_mode = is_dark


def get_colors():
    """Get the appropriate color palette based on current theme."""
    return ColorsDark if _is_dark_mode else Colors
