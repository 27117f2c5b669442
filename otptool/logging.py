from __future__ import annotations

import logging
import os
import sys
from typing import Optional


PACKAGE = "otptool"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is when a record is emitted."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def get_logger(name: str, *, level: Optional[int] = None) -> logging.Logger:
    """Create or return a configured logger.

    Policy:
    - WARNING: problems with input that do not stop the run
    - DEBUG: parsed options, per-counter candidates, results (``-v``)
    - Quiet by default; controllable via OTPTOOL_LOG_LEVEL env.
    """

    logger = logging.getLogger(name)
    if logger.handlers:  # already configured
        return logger

    env_level = os.getenv("OTPTOOL_LOG_LEVEL", "WARNING").upper()
    resolved_level = level or getattr(logging, env_level, logging.WARNING)
    logger.setLevel(resolved_level)
    handler = _StderrHandler()
    handler.setLevel(resolved_level)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def set_level(level: int) -> None:
    """Change the level of every otptool logger created so far."""

    manager = logging.Logger.manager
    for name, logger in list(manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger):
            continue
        if name != PACKAGE and not name.startswith(PACKAGE + "."):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
