"""
Persisted GUI preferences (theme, window layout, last optimizer inputs).

Stored as JSON next to the saved courses. Unreadable or malformed values
fall back to defaults instead of raising; a corrupted file is reported once
at startup so the user can reset it.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from PySide6.QtCore import QObject, Signal

from gpa_toolkit import __version__
from gpa_toolkit.calculator.past_grades import PastGradeMode

logger = logging.getLogger(__name__)


class SettingsStore(QObject):
    """JSON-backed GUI preference store.

    Sections:
        ui: main_tab, dark_mode
        optimizer: pass_limit, past_mode
        top level: version, app_version, window_geometry, tutorial_seen
    """

    darkModeChanged = Signal(bool)
    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.data: Dict[str, object] = {}
        self._load_error: Optional[str] = None
        self._load()
        state = self._get_dict()
        state.setdefault("version", self.CURRENT_VERSION)
        state.setdefault("app_version", __version__)

    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            self._load_error = f"Failed to read settings:\n{e}"
            return
        try:
            self.data = json.loads(raw)
        except json.JSONDecodeError as e:
            self._load_error = f"Settings file is corrupted:\n{e}"
            return
        self._migrate()

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def check_load_error(self) -> bool:
        """
        Offer to reset a settings file that failed to load.

        Must be called once a QApplication exists.

        Returns:
            False if the user declined the reset and the app should quit.
        """
        if self._load_error is None:
            return True

        from PySide6.QtWidgets import QMessageBox

        box = QMessageBox()
        box.setIcon(QMessageBox.Icon.Warning)
        box.setWindowTitle("Settings Error")
        box.setText("Your preferences could not be loaded.")
        box.setInformativeText(
            f"{self._load_error}\n\nReset preferences and continue? "
            "Saved courses are not affected."
        )
        box.setStandardButtons(QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No)
        box.setDefaultButton(QMessageBox.StandardButton.Yes)

        if box.exec() != QMessageBox.StandardButton.Yes:
            return False
        self.reset()
        return True

    def reset(self) -> None:
        """Discard all preferences and write a fresh settings file."""
        logger.info("Resetting GUI settings at %s", self.path)
        self.data = {"version": self.CURRENT_VERSION, "app_version": __version__}
        self._load_error = None
        self._save()

    def _migrate(self) -> None:
        """Stamp the running version; drop optimizer inputs from other releases.

        Only major.minor is compared.
        """
        state = self._get_dict()
        previous = str(state.get("app_version", "0.0.0")).split(".")[:2]
        if previous != __version__.split(".")[:2]:
            state.pop("optimizer", None)
        state["app_version"] = __version__
        self._save()

    # ─────────────────────────────────────────────────────────────────────────
    # UI state
    # ─────────────────────────────────────────────────────────────────────────

    def get_main_tab(self) -> int:
        index = self._ui().get("main_tab")
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            return 0
        return index

    def set_main_tab(self, tab_index: int) -> None:
        self._ui()["main_tab"] = int(tab_index)
        self._save()

    def get_dark_mode(self) -> bool:
        return self._ui().get("dark_mode") is True

    def set_dark_mode(self, enabled: bool) -> None:
        self._ui()["dark_mode"] = bool(enabled)
        self._save()
        self.darkModeChanged.emit(bool(enabled))

    def get_window_geometry(self) -> Optional[str]:
        """Hex-encoded QMainWindow geometry, or None if absent or not hex."""
        geometry = self._get_dict().get("window_geometry")
        if not isinstance(geometry, str):
            return None
        try:
            bytes.fromhex(geometry)
        except ValueError:
            logger.warning("Ignoring malformed window geometry in %s", self.path)
            return None
        return geometry

    def set_window_geometry(self, geometry: str) -> None:
        self._get_dict()["window_geometry"] = geometry
        self._save()

    def has_seen_tutorial(self) -> bool:
        return self._get_dict().get("tutorial_seen") is True

    def set_tutorial_seen(self, seen: bool = True) -> None:
        self._get_dict()["tutorial_seen"] = bool(seen)
        self._save()

    # ─────────────────────────────────────────────────────────────────────────
    # Optimizer inputs
    # ─────────────────────────────────────────────────────────────────────────

    def get_pass_limit(self) -> int:
        return max(self._safe_int(self._optimizer().get("pass_limit"), 0), 0)

    def set_pass_limit(self, value: int) -> None:
        self._optimizer()["pass_limit"] = int(value)
        self._save()

    def get_past_mode(self) -> PastGradeMode:
        try:
            return PastGradeMode(self._optimizer().get("past_mode"))
        except ValueError:
            return PastGradeMode.SAVED

    def set_past_mode(self, mode: PastGradeMode) -> None:
        self._optimizer()["past_mode"] = mode.value
        self._save()

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _safe_int(value: Any, default: int) -> int:
        if value is None or isinstance(value, bool):
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _section(self, name: str) -> Dict[str, Any]:
        state = self._get_dict()
        section = state.get(name)
        if not isinstance(section, dict):
            section = state[name] = {}
        return section

    def _ui(self) -> Dict[str, Any]:
        return self._section("ui")

    def _optimizer(self) -> Dict[str, Any]:
        return self._section("optimizer")

    def _get_dict(self) -> Dict[str, Any]:
        if not isinstance(self.data, dict):
            self.data = {}
        return self.data

    def _save(self) -> None:
        """Write through a sibling ``.tmp`` file and rename over the target."""
        temp_path = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning("Failed to save settings to %s: %s", self.path, e)
            if temp_path.exists():
                temp_path.unlink()
