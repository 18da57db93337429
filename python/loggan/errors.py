# Exceptions raised by loggan. Sink write errors are not wrapped.

from __future__ import annotations
from typing import Optional


class LogganError(Exception):
    """Base class for loggan errors."""


class SerializationError(LogganError, ValueError):
    """A field value could not be encoded as JSON."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class UnknownFormatError(LogganError, ValueError):
    """No formatter is registered under the requested name."""
