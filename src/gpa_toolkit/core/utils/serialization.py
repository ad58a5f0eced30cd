"""
Serialization Utilities

Provides to/from JSON utilities for GradeRecord collections.

- Clean separation: ``serialize_*`` and ``deserialize_*`` functions
- Records own their JSON shape via ``to_dict()`` and ``from_dict()``
- Validation before deserialization
- Never store calculated values (weighted points, averages)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..models.records import GradeRecord
from ..schemas.validator import validate_record, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Record Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_record(record: GradeRecord) -> dict[str, Any]:
    """
    Serialize a GradeRecord to a dictionary.

    Args:
        record: Record to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return record.to_dict()


def deserialize_record(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> GradeRecord:
    """
    Deserialize a GradeRecord from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate before building the record
        strict: Use full jsonschema validation (implies validate)

    Returns:
        GradeRecord instance

    Raises:
        ValidationError: If validation is enabled and data is invalid
    """
    if validate or strict:
        validate_record(data, strict=strict)
    return GradeRecord.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# JSON File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_records_json(
    path: Path,
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[GradeRecord]:
    """
    Load records from a JSON array file.

    A missing file is not an error: it means nothing has been saved yet.

    Args:
        path: Path to the courses JSON file
        validate: Whether to validate each entry
        strict: Use full jsonschema validation

    Returns:
        List of GradeRecord instances in file order

    Raises:
        ValidationError: If the file is not a JSON array or an entry is invalid
    """
    if not path.exists():
        return []

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Courses file is not valid JSON: {e}",
            path=str(path),
            errors=[str(e)],
        )

    if not isinstance(payload, list):
        raise ValidationError(
            f"Courses file must contain a JSON array, got {type(payload).__name__}",
            path=str(path),
        )

    records = []
    for index, entry in enumerate(payload):
        try:
            records.append(deserialize_record(entry, validate=validate, strict=strict))
        except (ValidationError, ValueError, TypeError) as e:
            raise ValidationError(
                f"Error parsing course {index}: {e}",
                path=f"{path}[{index}]",
                errors=[str(e)],
            )
    return records


def save_records_json(records: Iterable[GradeRecord], path: Path) -> None:
    """
    Save records to a JSON array file.

    Args:
        records: Records to save, in display order
        path: Output path (parent directories are created)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [serialize_record(r) for r in records]
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
