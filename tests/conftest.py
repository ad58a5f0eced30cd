import os
import pytest
import sys

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
from pathlib import Path

# Add src to sys.path so we can import gpa_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from gpa_toolkit.core.models import GradeRecord


# Common test fixtures
@pytest.fixture
def three_courses():
    """Three courses whose weighted average is 81.25."""
    return [
        GradeRecord("a", "Algebra", 90.0, 3.0),
        GradeRecord("b", "Biology", 70.0, 4.0),
        GradeRecord("c", "Chemistry", 100.0, 1.0),
    ]


@pytest.fixture
def mixed_current():
    """Current-term courses with one pass-ineligible grade."""
    return [
        GradeRecord("x", "Physics", 90.0, 3.0),
        GradeRecord("y", "History", 40.0, 3.0),
        GradeRecord("z", "Art", 60.0, 3.0),
    ]


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "test_settings.json"
