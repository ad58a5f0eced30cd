"""
Entry point for the PySide6 GUI.
"""
import logging
import sys

APP_DISPLAY_NAME = "GPA Toolkit"


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from gpa_toolkit.gui.main_window import MainWindow
    from gpa_toolkit.gui.models.settings import SettingsStore
    from gpa_toolkit.gui.styles.theme import apply_theme
    from gpa_toolkit.gui.utils.paths import ensure_directories, get_courses_path, get_settings_path
    from gpa_toolkit.gui.utils.storage import CourseStore

    _configure_logging()

    app = QApplication(sys.argv)
    app.setApplicationName(APP_DISPLAY_NAME)
    app.setApplicationDisplayName(APP_DISPLAY_NAME)
    app.setOrganizationName(APP_DISPLAY_NAME)

    ensure_directories()

    settings = SettingsStore(get_settings_path())

    # Malformed settings: user declined the reset
    if not settings.check_load_error():
        sys.exit(1)

    apply_theme(app, settings.get_dark_mode())

    window = MainWindow(settings, CourseStore(get_courses_path()))
    window.show()

    sys.exit(app.exec())


def main() -> int:
    run()
    return 0


if __name__ == "__main__":
    run()
