"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses system-standard paths (AppData, Application Support)
"""
from __future__ import annotations

import os
import platform
import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

APP_NAME = "GPA Toolkit"
COURSES_FILE_NAME = "courses_data.json"
SETTINGS_FILE_NAME = "gui_settings.json"


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def _fallback_app_data_dir() -> Path:
    """Platform app-data directory when Qt reports no writable location."""
    if platform.system() == "Windows":
        base = os.environ.get("LOCALAPPDATA", os.environ.get("APPDATA"))
        return Path(base) / APP_NAME if base else Path.home() / ".gpa_toolkit"
    elif platform.system() == "Darwin":
        return Path.home() / "Library/Application Support" / APP_NAME
    else:
        return Path.home() / ".local/share" / APP_NAME


def get_app_data_dir() -> Path:
    """
    Get the application data directory for saved courses and settings.

    Frozen: ~/Library/Application Support/GPA Toolkit (macOS)
            or %LOCALAPPDATA%/GPA Toolkit (Windows)
    Dev: workspace/
    """
    if is_frozen():
        location = QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppLocalDataLocation
        )
        app_data = Path(location) if location else _fallback_app_data_dir()
        app_data.mkdir(parents=True, exist_ok=True)
        return app_data
    # Dev mode: use local workspace
    return Path.cwd() / "workspace"


def get_courses_path() -> Path:
    """Get the path of the saved courses JSON file."""
    return get_app_data_dir() / COURSES_FILE_NAME


def get_settings_path() -> Path:
    """Get the path for storing GUI settings."""
    return get_app_data_dir() / SETTINGS_FILE_NAME


def ensure_directories() -> None:
    """Ensure the data directory exists. Called on app startup."""
    get_app_data_dir().mkdir(parents=True, exist_ok=True)
