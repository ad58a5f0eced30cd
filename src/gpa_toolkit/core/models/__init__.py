"""
Core Models Package

Immutable data models shared by the calculator and the GUI.

All models in this package are frozen dataclasses. Editing a course creates
a new record with the same id; nothing in the calculator mutates its input.
"""

from .records import GradeRecord
from .optimization import PassFailResult

__all__ = [
    "GradeRecord",
    "PassFailResult",
]
