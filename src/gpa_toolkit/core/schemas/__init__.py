"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_record,
    ValidationError,
)

__all__ = [
    "validate_record",
    "ValidationError",
]
