"""Configuration of the package's log output."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime

LOGGER_NAME = "simpleoneapi"

_PROD_MODES = frozenset({"prod", "production", "prodj", "prodjson", "productionjson"})
_JSON_MODES = frozenset({"prodj", "prodjson", "productionjson"})
_DEV_MODES = frozenset({"dev", "development"})

_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}


def _iso_time(created: float) -> str:
    return datetime.fromtimestamp(created).astimezone().isoformat(timespec="milliseconds")


class _ConsoleFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("%(asctime)s\t%(levelname)s\t%(filename)s:%(lineno)d\t%(message)s")

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return _iso_time(record.created)


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": _LEVEL_NAMES.get(record.levelno, record.levelname.lower()),
            "timestamp": _iso_time(record.created),
            "caller": f"{record.filename}:{record.lineno}",
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["stacktrace"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def init_log(mode: str) -> logging.Logger:
    """Configure the package logger for ``mode`` and return it.

    Development modes log from DEBUG, every other mode from WARNING. The
    ``prodj``, ``prodjson`` and ``productionjson`` modes write JSON lines,
    the rest plain text. Output goes to standard output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if mode in _DEV_MODES:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JSONFormatter() if mode in _JSON_MODES else _ConsoleFormatter())

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    if mode not in _PROD_MODES and mode not in _DEV_MODES:
        logger.debug("level mode default prod")
    return logger