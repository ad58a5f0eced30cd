"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .numbers import parse_float
from .thresholds import (
    GradeThresholds,
    OptimizerThresholds,
    FormDefaults,
    GRADE_THRESHOLDS,
    OPTIMIZER_THRESHOLDS,
    FORM_DEFAULTS,
)

__all__ = [
    # numbers
    "parse_float",
    # thresholds
    "GradeThresholds",
    "OptimizerThresholds",
    "FormDefaults",
    "GRADE_THRESHOLDS",
    "OPTIMIZER_THRESHOLDS",
    "FORM_DEFAULTS",
]
