"""
Forwarding of ``gpa_toolkit`` log records to the GUI console.

Records are put on a ``queue.Queue`` as ``(message, level)`` tuples and the
main window drains the queue on a timer, so nothing here touches widgets.
"""
from __future__ import annotations

import logging
from queue import Queue
from typing import Optional

# DEBUG lines (optimizer search sizes) are shown with the INFO color
_DISPLAY_LEVELS = {"DEBUG": "INFO"}


class QueueLogHandler(logging.Handler):
    """Handler that enqueues formatted messages for the console widget."""

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _DISPLAY_LEVELS.get(record.levelname, record.levelname)
            self.log_queue.put((self.format(record), level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = None) -> QueueLogHandler:
    """
    Route records from ``logger_name`` (root if None) into ``log_queue``.

    The logger is lowered to INFO when it would otherwise drop INFO records.

    Returns:
        The handler, for detach_queue_handler().
    """
    target = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue)
    target.addHandler(handler)
    if target.getEffectiveLevel() > logging.INFO:
        target.setLevel(logging.INFO)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = None) -> None:
    logging.getLogger(logger_name).removeHandler(handler)
