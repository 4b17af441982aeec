"""Leveled log writer that stamps every line with the local time."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import TextIO


class Level(IntEnum):
    """Severity of a log message, ordered from least to most important."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    WIN = 3
    ERROR = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Logger:
    """Writes messages at or above a minimum level to a text stream."""

    def __init__(self, out: TextIO, min_level: Level) -> None:
        self.out = out
        self.min_level = min_level

    def log(self, message: str, level: Level) -> None:
        """Write ``[Level][timestamp]message`` unless the level is filtered out."""
        if level < self.min_level:
            return
        self.out.write(f"[{level.label}][{time.ctime()}]{message}\n")
        self.out.flush()