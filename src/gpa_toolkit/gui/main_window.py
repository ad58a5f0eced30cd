"""
Main Window for the GPA Toolkit GUI.
"""
import logging
import queue
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QByteArray, Qt, QTimer
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QMessageBox, QSplitter, QTabWidget, QVBoxLayout, QWidget
)

from gpa_toolkit import __version__
from gpa_toolkit.gui.models.settings import SettingsStore
from gpa_toolkit.gui.styles.theme import apply_theme
from gpa_toolkit.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler
from gpa_toolkit.gui.utils.paths import get_courses_path, get_settings_path
from gpa_toolkit.gui.utils.storage import CourseStore
from gpa_toolkit.gui.widgets.console_widget import ConsoleWidget
from gpa_toolkit.gui.widgets.pass_fail_tab import PassFailTab
from gpa_toolkit.gui.widgets.saved_grades_tab import SavedGradesTab
from gpa_toolkit.gui.widgets.tutorial_dialog import TutorialDialog

LOGGER_NAME = "gpa_toolkit"

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        settings: Optional[SettingsStore] = None,
        course_store: Optional[CourseStore] = None,
        *,
        show_tutorial: bool = True,
    ):
        super().__init__()

        self.settings = settings or SettingsStore(get_settings_path())
        self.course_store = course_store or CourseStore(get_courses_path())

        self.setWindowTitle("GPA & Pass/Fail Calculator")
        self.resize(1100, 820)
        self.setMinimumSize(900, 640)

        # --- Menu Bar ---
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("File")
        exit_action = QAction("Quit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        settings_menu = menu_bar.addMenu("Settings")
        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.setChecked(self.settings.get_dark_mode())
        self.dark_mode_action.triggered.connect(self._toggle_theme)
        settings_menu.addAction(self.dark_mode_action)

        help_menu = menu_bar.addMenu("Help")
        tutorial_action = QAction("Tutorial", self)
        tutorial_action.triggered.connect(self.show_tutorial)
        help_menu.addAction(tutorial_action)
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # --- Logging ---
        self.log_queue: queue.Queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue, LOGGER_NAME)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        # --- Central Widget ---
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self.tabs = QTabWidget()
        self.saved_tab = SavedGradesTab(self.course_store)
        self.pass_fail_tab = PassFailTab(self.settings)
        self.tabs.addTab(self.saved_tab, "Saved Grades")
        self.tabs.addTab(self.pass_fail_tab, "Optimal Binary Pass")

        self.saved_tab.coursesChanged.connect(self.pass_fail_tab.set_saved_records)
        self.pass_fail_tab.set_saved_records(self.saved_tab.records)

        self.console = ConsoleWidget()

        splitter = QSplitter(Qt.Orientation.Vertical)
        splitter.addWidget(self.tabs)
        splitter.addWidget(self.console)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)
        layout.addWidget(splitter)

        self.tabs.setCurrentIndex(min(self.settings.get_main_tab(), self.tabs.count() - 1))
        self.tabs.currentChanged.connect(self.settings.set_main_tab)

        geometry = self.settings.get_window_geometry()
        if geometry:
            self.restoreGeometry(QByteArray.fromHex(geometry.encode("ascii")))

        if self.course_store.last_error:
            self.statusBar().showMessage(self.course_store.last_error, 8000)
        logger.info(f"Loaded {len(self.saved_tab.records)} saved course(s)")

        if show_tutorial and not self.settings.has_seen_tutorial():
            QTimer.singleShot(0, self.show_tutorial)

    def show_tutorial(self):
        dialog = TutorialDialog(self)
        dialog.exec()
        self.settings.set_tutorial_seen(True)

    def _show_about(self):
        QMessageBox.about(
            self,
            "About GPA Toolkit",
            f"GPA & Pass/Fail Calculator\nVersion {__version__}\n\n"
            f"Saved courses: {Path(self.course_store.path)}",
        )

    def _toggle_theme(self, checked: bool):
        self.settings.set_dark_mode(checked)
        app = QApplication.instance()
        if app is not None:
            apply_theme(app, checked)
        self.console.update_theme()
        self.saved_tab.table.set_records(self.saved_tab.records)
        self.pass_fail_tab.current_table.set_records(self.pass_fail_tab.current_records)

    def _drain_log_queue(self):
        while True:
            try:
                message, level = self.log_queue.get_nowait()
            except queue.Empty:
                break
            self.console.append_log(level, message)

    def closeEvent(self, event):
        self.settings.set_window_geometry(bytes(self.saveGeometry().toHex()).decode("ascii"))
        self.log_timer.stop()
        detach_queue_handler(self._log_handler, LOGGER_NAME)
        super().closeEvent(event)
