"""Log levels understood by Booster applications."""

from __future__ import annotations

import logging
import sys
from enum import Enum


class Level(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]


_LOGGING_LEVELS = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Level | str = Level.INFO) -> logging.Logger:
    """Attach a stderr handler to the `booster` logger and set its level.

    Calling it again only changes the level; no extra handlers are added.
    """
    level = Level(level)
    root = logging.getLogger("booster")
    root.setLevel(level.logging_level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    return root
