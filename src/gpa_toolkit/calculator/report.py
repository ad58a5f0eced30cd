"""Result summaries for the pass/fail optimizer."""

from __future__ import annotations

from html import escape

from gpa_toolkit.core.models import PassFailResult


def format_result_html(result: PassFailResult) -> str:
    """
    Render a PassFailResult as rich text for a QLabel.

    Averages are shown with two decimals. Converted courses are listed as
    ``- name (grade=g)`` in the order they were chosen.
    """
    lines = [
        f"<b>Average Before Any Pass/Fail:</b> {result.baseline_average:.2f}<br>",
        f"<b>Optimized Final Average:</b> {result.best_average:.2f}<br>",
    ]
    if result.converted:
        lines.append("<b>Courses Converted to Pass:</b><br>")
        for record in result.converted:
            lines.append(f"- {escape(record.label)} (grade={record.grade:g})<br>")
    else:
        lines.append("No courses were converted to Pass.")
    return "\n".join(lines)


def format_result_text(result: PassFailResult) -> str:
    """Plain-text variant of format_result_html, used for logging."""
    text = (
        f"Average before pass/fail: {result.baseline_average:.2f}; "
        f"optimized: {result.best_average:.2f}"
    )
    if result.converted:
        names = ", ".join(record.label for record in result.converted)
        return f"{text}; converted to pass: {names}"
    return f"{text}; no courses converted"
