# Log severity levels.

from __future__ import annotations
from enum import IntEnum


class Level(IntEnum):
    """Severity of an entry, ordered NONE < DEBUG < INFO < WARN < ERROR < FATAL."""

    NONE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    def __str__(self) -> str:
        return self.name

    def __format__(self, spec: str) -> str:
        return format(self.name, spec)

    @classmethod
    def parse(cls, name: str) -> "Level":
        """Look up a level by name, case-insensitively."""
        key = name.strip().upper()
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown level: {name!r}") from None

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """Map a stdlib logging level number onto a Level."""
        if levelno <= 0:
            return cls.NONE
        for bound, level in _LOGGING_BOUNDS:
            if levelno <= bound:
                return level
        return cls.FATAL


_ALIASES = {"WARNING": "WARN", "CRITICAL": "FATAL"}

# upper bounds taken from the stdlib logging constants
_LOGGING_BOUNDS = (
    (10, Level.DEBUG),
    (20, Level.INFO),
    (30, Level.WARN),
    (40, Level.ERROR),
)
