"""JSON structured logging utilities."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

# Extra attributes copied into the JSON record when present.
EXTRA_FIELDS = ("epoch", "progress", "best_score", "population_size", "gene_count")


class JsonFormatter(logging.Formatter):
    """Formatter that outputs logs in JSON."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        log_record: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
            "time": self.formatTime(record, self.datefmt),
        }
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_record[key] = getattr(record, key)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def get_logger(name: str = __name__) -> logging.Logger:
    """Return a logger emitting JSON formatted records."""

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def set_level(level: str | int) -> None:
    """Apply ``level`` to every logger of this package."""

    for name, obj in logging.Logger.manager.loggerDict.items():
        if name.startswith("genetic_optimizer") and isinstance(obj, logging.Logger):
            obj.setLevel(level)
