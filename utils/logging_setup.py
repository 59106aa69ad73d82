from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional

from config.settings import get_settings


LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "step=%(step)s status=%(status)s duration_ms=%(duration_ms)s "
    "provider=%(provider)s error=%(error)s run_id=%(run_id)s"
)


class CalloutFormatter(logging.Formatter):
    """Fills the structured callout fields for records logged without them.

    `run_id` falls back to the RUN_ID the CLI assigns for each fetch.
    """

    DEFAULTS: dict[str, Any] = {
        "step": "-",
        "status": "-",
        "duration_ms": "-",
        "provider": "-",
        "error": "-",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key, value in self.DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        if not hasattr(record, "run_id"):
            record.run_id = os.getenv("RUN_ID") or "-"
        return super().format(record)


class StderrHandler(logging.StreamHandler):
    """Writes to the current sys.stderr; stdout is reserved for fetched records."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def init_logging(level: Optional[str] = None) -> logging.Handler:
    """Attach the stderr handler to the root logger once and return it.

    Repeat calls only adjust the level.
    """
    log_level_str = (level or get_settings().log_level).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers:
        if isinstance(handler, StderrHandler):
            handler.setLevel(log_level)
            return handler

    handler = StderrHandler()
    handler.setLevel(log_level)
    handler.setFormatter(CalloutFormatter(fmt=LOG_FORMAT))
    root_logger.addHandler(handler)
    return handler
