# niveau_lacs/log.py
from __future__ import annotations

import logging

from .config import LOG_FILE, LOG_FORMAT


def setup_logging(level=logging.INFO):
    """Setup basic logging configuration"""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if LOG_FILE:
        handlers.append(logging.FileHandler(LOG_FILE, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    return logging.getLogger("niveau_lacs")
