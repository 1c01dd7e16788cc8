"""Application logging helpers.

Every module asks for its logger through :func:`get_logger` so the handler,
format and level (``settings.LOG_LEVEL``) are configured in one place.
"""
from __future__ import annotations

import logging
import threading

from app.config import settings

_LOCK = threading.Lock()
_FORMAT = "[social] %(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str = "app") -> logging.Logger:
    with _LOCK:
        logger = logging.getLogger(name)
        level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
        logger.setLevel(level)
        if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(handler)
        logger.propagate = False
        return logger


__all__ = ["get_logger"]
