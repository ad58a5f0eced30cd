"""
GPA Toolkit Core Package

Shared data models and persistence utilities. These models are the single
source of truth for course data across the calculator and the GUI.

1. **Immutable Data Models**
   - Frozen dataclasses, new instances created for any edit

2. **Calculated Values (Never Stored)**
   - Weighted points and averages are always recomputed from records

3. **Stable Identity**
   - Records are compared by their ``id`` field, never by object identity
"""

from .models import GradeRecord, PassFailResult

__all__ = [
    "GradeRecord",
    "PassFailResult",
]
