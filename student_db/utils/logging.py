# /student_db/utils/logging.py

"""Logging helpers for the student directory."""

from __future__ import annotations

import logging
from typing import Optional

from .. import config

_ROOT_NAME = "student_db"
_LOGGER: Optional[logging.Logger] = None


def _root_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger(_ROOT_NAME)
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            handler.setFormatter(formatter)
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(config.LOG_LEVEL)
    return _LOGGER


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a named child of it."""

    root = _root_logger()
    if not name:
        return root
    return root.getChild(name)
