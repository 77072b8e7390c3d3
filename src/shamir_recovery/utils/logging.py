"""Log setup for the recovery CLI; stdout is reserved for recovered secrets."""

import json
import logging
import os
import sys
from logging import Logger
from typing import List, Optional

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | %(message)s"


class JsonFormatter(logging.Formatter):
    """Renders each record as a single JSON line for log collectors."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%SZ"),
        }
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log)


def configure_logging(level: Optional[str] = None, json_output: bool = False, log_file: Optional[str] = None) -> None:
    """
    Route recovery diagnostics to stderr and, optionally, a log file.

    The level comes from ``level``, then ``LOG_LEVEL``, then INFO. Calling
    again replaces the handlers installed by an earlier call.
    """
    effective_level = level or os.getenv("LOG_LEVEL") or "INFO"
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    if json_output:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(
        level=getattr(logging, effective_level.upper(), logging.INFO),
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)
