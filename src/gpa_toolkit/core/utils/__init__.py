"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_record,
    deserialize_record,
    load_records_json,
    save_records_json,
)

__all__ = [
    "serialize_record",
    "deserialize_record",
    "load_records_json",
    "save_records_json",
]
