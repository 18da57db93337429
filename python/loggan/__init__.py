__all__ = [
    "Level",
    "Fields",
    "Entry",
    "rfc3339_nano",
    "Formatter",
    "RawFormatter",
    "LTSVFormatter",
    "JSONFormatter",
    "FORMATTERS",
    "new_formatter",
    "render",
    "LogganError",
    "SerializationError",
    "UnknownFormatError",
    "EntryFormatter",
    "init",
    "shutdown",
    "get_logger",
]
__version__ = "0.1.0"

from .level import Level
from .fields import Fields
from .entry import Entry, rfc3339_nano
from .errors import LogganError, SerializationError, UnknownFormatError
from .formatter import (
    FORMATTERS,
    Formatter,
    JSONFormatter,
    LTSVFormatter,
    RawFormatter,
    new_formatter,
    render,
)
from .logging import EntryFormatter, get_logger
from .bootstrap import init, shutdown
