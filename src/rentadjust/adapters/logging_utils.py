# src/rentadjust/adapters/logging_utils.py
import json
import logging
import sys
import time
from typing import Any

from .config import config


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line; `context` from `extra=` is merged in flat."""

    def format(self, record):
        payload = {
            "ts": time.time(),
            "env": config.ENV,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict):
            payload.update(ctx)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        # Persian currency labels stay readable in the log stream
        return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        # stdout carries CLI output (JSON results, CSV)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL)
        logger.propagate = False
    return logger


def log_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """logger.log(...) with keyword context, skipped cheaply when the level is off."""
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"context": context})
