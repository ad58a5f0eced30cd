"""
Module: calculator

Purpose:
    Grade arithmetic and the pass/fail optimizer. Computes weighted
    averages, the gain from maxing out a single course, and the set of
    current-term courses whose conversion to "pass" maximizes the final
    average.

Key Functions:
    - weighted_average(): Credit-weighted average of records
    - single_record_improvement(): Gain if one record had a full-marks grade
    - find_optimal_pass_fail(): Best pass/fail conversion under a cap

Key Classes:
    - PassFailOptimizer: Main optimization orchestrator
    - PastGradeMode: Source of past grades for the optimizer

Dependencies:
    - gpa_toolkit.core.models: GradeRecord, PassFailResult

Used By:
    - gpa_toolkit.gui: GUI integration
"""

from .averages import weighted_average, single_record_improvement
from .optimizer import (
    find_optimal_pass_fail,
    PassFailOptimizer,
    eligible_candidates,
    search_space_size,
)
from .past_grades import (
    PastGradeMode,
    PastGradeInput,
    aggregate_past_record,
    semester_past_records,
    build_past_records,
)
from .report import format_result_html, format_result_text
from .sorting import SortColumn, sort_records

__all__ = [
    "weighted_average",
    "single_record_improvement",
    "find_optimal_pass_fail",
    "PassFailOptimizer",
    "eligible_candidates",
    "search_space_size",
    "PastGradeMode",
    "PastGradeInput",
    "aggregate_past_record",
    "semester_past_records",
    "build_past_records",
    "format_result_html",
    "format_result_text",
    "SortColumn",
    "sort_records",
]
