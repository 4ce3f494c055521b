from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List

from .config import LOGGER_NAME

if TYPE_CHECKING:
    from .settings import Settings

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handlers added by configure_logging(), replaced on every call.
_installed: List[logging.Handler] = []


def configure_logging(settings: "Settings") -> logging.Logger:
    """Attach console (and optional rotating file) handlers to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(FORMAT)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    _installed.append(ch)
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(settings.log_file, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(fmt)
        _installed.append(fh)
    for handler in _installed:
        logger.addHandler(handler)
    return logger
