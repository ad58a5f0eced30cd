"""
Schema Validation Utilities

Validates saved-course JSON before it becomes a GradeRecord.

Basic mode performs cheap structural checks (object shape, numeric grade and
credits, non-negative credits). Strict mode additionally validates against
``grade_record.schema.json`` with ``jsonschema``.

Negative credits are rejected here; the calculator does not re-check them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid grade
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_record(data: Any, *, strict: bool = False) -> None:
    """
    Validate one saved course entry.

    Args:
        data: Decoded JSON value for a single course
        strict: If True, also validate with jsonschema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Course entry must be an object, got {type(data).__name__}",
            path="",
        )

    errors: list[str] = []
    for field_name in ("grade", "credits"):
        value = data.get(field_name)
        if value is not None and not _is_number(value):
            errors.append(f"{field_name} must be a number, got {value!r}")

    credits = data.get("credits")
    if _is_number(credits) and credits < 0:
        errors.append(f"credits cannot be negative: {credits}")

    for field_name in ("uid", "name", "semester", "course_id"):
        value = data.get(field_name)
        if value is not None and not isinstance(value, str):
            errors.append(f"{field_name} must be a string, got {value!r}")

    if errors:
        raise ValidationError(
            f"Invalid course entry: {'; '.join(errors)}",
            path=data.get("uid", "") if isinstance(data.get("uid"), str) else "",
            errors=errors,
        )

    if strict:
        schema = _load_schema("grade_record")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            )
