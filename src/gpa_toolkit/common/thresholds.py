"""Centralized threshold and magic number configuration.

This module contains the hardcoded grade thresholds, search limits and form
defaults used throughout the calculator and the GUI. Having these in one
place keeps the pass/fail policy and the UI defaults consistent.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GradeThresholds:
    """Grade scale and pass/fail policy constants."""

    pass_eligibility: float = 55.0  # Lowest grade that may be converted to pass
    max_grade: float = 100.0  # Grade used for "what if I scored full marks"
    min_grade: float = 0.0


@dataclass(frozen=True)
class OptimizerThresholds:
    """Limits for the exhaustive pass/fail search."""

    large_search_warning: int = 50_000  # Subsets scored before the GUI asks to confirm


@dataclass(frozen=True)
class FormDefaults:
    """Initial values shown in the GUI entry forms."""

    saved_grade: str = "80"
    saved_credits: str = "3.0"
    current_grade: str = "75.0"
    current_credits: str = "3.0"
    overall_average: str = "80.0"
    overall_credits: str = "30.0"
    semester_average: str = "80.0"
    semester_credits: str = "15.0"
    max_past_semesters: int = 20

    # Fallbacks when a numeric field cannot be parsed
    grade_fallback: float = 0.0
    credits_fallback: float = 1.0


# Global instances for easy import
GRADE_THRESHOLDS = GradeThresholds()
OPTIMIZER_THRESHOLDS = OptimizerThresholds()
FORM_DEFAULTS = FormDefaults()
