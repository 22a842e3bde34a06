from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter


class RunIdFilter(logging.Filter):
    """Gives records logged outside a report run a placeholder ``run_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "run_id", None):
            record.run_id = "-"
        return True


def _build_logging_config(level: str = "INFO") -> Dict[str, Any]:
    formatter = {
        "format": "%(asctime)s %(levelname)s %(name)s %(message)s %(run_id)s",
        "datefmt": "%Y-%m-%dT%H:%M:%S%z",
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "run_id": {
                "()": RunIdFilter,
            }
        },
        "formatters": {
            "json": {
                "()": JsonFormatter,
                "fmt": formatter["format"],
                "datefmt": formatter["datefmt"],
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json",
                "filters": ["run_id"],
            }
        },
        "loggers": {
            "calc_report": {"handlers": ["default"], "level": level, "propagate": False},
        },
        "root": {"handlers": ["default"], "level": "WARNING"},
    }


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(_build_logging_config(level))
