"""Saved course storage for the GPA Toolkit GUI."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from gpa_toolkit.core.models import GradeRecord
from gpa_toolkit.core.schemas import ValidationError
from gpa_toolkit.core.utils import load_records_json, save_records_json

logger = logging.getLogger(__name__)


class CourseStore:
    """JSON-backed store for the saved course list.

    Load and save failures are logged and remembered in ``last_error``,
    never raised.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.last_error: Optional[str] = None

    def load(self) -> List[GradeRecord]:
        """Load saved courses, or an empty list if none can be read.

        Returns:
            Saved records in file order.
        """
        self.last_error = None
        try:
            records = load_records_json(self.path)
        except (ValidationError, OSError) as e:
            self.last_error = f"Could not load data: {e}"
            logger.warning(self.last_error)
            return []
        logger.debug("Loaded %d saved course(s) from %s", len(records), self.path)
        return records

    def save(self, records: Sequence[GradeRecord]) -> bool:
        """Persist ``records``.

        Returns:
            True on success, False if the file could not be written.
        """
        self.last_error = None
        try:
            save_records_json(records, self.path)
        except (OSError, TypeError, ValueError) as e:
            self.last_error = f"Could not save data: {e}"
            logger.warning(self.last_error)
            return False
        logger.debug("Saved %d course(s) to %s", len(records), self.path)
        return True
