# Process-wide configuration of the logger returned by get_logger().

import sys
from typing import Any, Dict, Mapping, Optional, TextIO, Union

from . import logging as _logging
from .formatter import Formatter, new_formatter
from .logging import _NopLogger, _StreamLogger

_global_cfg: Dict[str, Any] = {}


def init(
    format: Union[str, Formatter] = "json",
    stream: Optional[TextIO] = None,
    fields: Optional[Mapping[str, Any]] = None,
    enable_logs: bool = True,
) -> None:
    """Configure the global logger.

    ``format`` is a registered name ("raw", "ltsv", "json") or a Formatter
    instance. ``fields`` are written before the per-call fields of every
    entry. With ``enable_logs=False`` logging calls do nothing.
    """
    global _global_cfg
    formatter = new_formatter(format) if isinstance(format, str) else format
    _global_cfg = {
        "format": format,
        "stream": stream,
        "fields": dict(fields or {}),
        "enable_logs": enable_logs,
    }
    if enable_logs:
        _logging._set_global_logger(_StreamLogger(formatter, stream, fields))
    else:
        _logging._set_global_logger(_NopLogger())


def shutdown() -> None:
    """Flush the configured stream and go back to the default stdout JSON logger."""
    global _global_cfg
    stream = _global_cfg.get("stream")
    (stream if stream is not None else sys.stdout).flush()
    _global_cfg = {}
    _logging._set_global_logger(_StreamLogger())
