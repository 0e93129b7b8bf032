"""Logging for the server process.

Everything logs under the ``filevault`` tree: ``filevault.resolver`` and
``filevault.operations`` from the core, ``filevault.server`` from the HTTP
layer. ``configure_logging`` attaches handlers to that tree only, so uvicorn
keeps its own access log.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "filevault"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _is_console(handler: logging.Handler) -> bool:
    # FileHandler subclasses StreamHandler.
    return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)


def configure_logging(*, level: str = "INFO", log_path: Path | None = None) -> logging.Logger:
    """Attach a stdout handler and, when ``log_path`` is given, a UTF-8 file handler.

    Safe to call more than once: the level is updated on every call, but at
    most one console handler and one handler per log file are ever attached.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(_is_console(h) for h in logger.handlers):
        console = logging.StreamHandler(stream=sys.stdout)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if log_path:
        log_path = Path(log_path).resolve()
        open_files = {getattr(h, "baseFilename", None) for h in logger.handlers}
        if str(log_path) not in open_files:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
