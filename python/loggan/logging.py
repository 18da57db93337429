# Logger facade over the formatters, plus a bridge for the stdlib logging module.
# No level filtering, buffering or transport: every call is formatted and written.

from __future__ import annotations
import logging, sys, threading
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Protocol, TextIO

from .entry import Entry
from .fields import Fields
from .formatter import Formatter, JSONFormatter, render
from .level import Level


class _GlobalLogger(Protocol):
    def debug(self, msg: str, **kv: Any) -> None: ...
    def info(self, msg: str, **kv: Any) -> None: ...
    def warn(self, msg: str, **kv: Any) -> None: ...
    def error(self, msg: str, **kv: Any) -> None: ...
    def fatal(self, msg: str, **kv: Any) -> None: ...


class _NopLogger:
    def debug(self, msg: str, **kv: Any) -> None: pass
    def info(self, msg: str, **kv: Any) -> None: pass
    def warn(self, msg: str, **kv: Any) -> None: pass
    def error(self, msg: str, **kv: Any) -> None: pass
    def fatal(self, msg: str, **kv: Any) -> None: pass


class _StreamLogger:
    """Formats one entry per call and writes it, newline-terminated, to a stream.

    With no explicit stream, ``sys.stdout`` is looked up on every write.
    """

    def __init__(
        self,
        formatter: Optional[Formatter] = None,
        stream: Optional[TextIO] = None,
        fields: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.formatter = formatter if formatter is not None else JSONFormatter()
        self._stream = stream
        self.fields = Fields(fields or {})
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, level: Level, msg: str, kv: dict[str, Any]) -> None:
        entry = Entry(level, datetime.now(timezone.utc), msg, self.fields).with_fields(kv)
        # render first so a failing field leaves nothing half-written on the stream
        line = render(self.formatter, entry) + "\n"
        with self._lock:
            out = self.stream
            out.write(line)
            out.flush()

    def debug(self, msg: str, **kv: Any) -> None: self._emit(Level.DEBUG, msg, kv)
    def info(self, msg: str, **kv: Any) -> None: self._emit(Level.INFO, msg, kv)
    def warn(self, msg: str, **kv: Any) -> None: self._emit(Level.WARN, msg, kv)
    def error(self, msg: str, **kv: Any) -> None: self._emit(Level.ERROR, msg, kv)
    def fatal(self, msg: str, **kv: Any) -> None: self._emit(Level.FATAL, msg, kv)


_global_logger: _GlobalLogger = _StreamLogger()


def get_logger() -> _GlobalLogger:
    return _global_logger


def _set_global_logger(logger: _GlobalLogger) -> None:
    global _global_logger
    _global_logger = logger


# attributes every LogRecord has; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}


class EntryFormatter(logging.Formatter):
    """stdlib ``logging.Formatter`` that renders records through a loggan Formatter.

    Attributes passed with ``extra=`` become fields, in the order given;
    a formatted traceback is added as ``exception`` and a stack dump as
    ``stack`` when the record carries them.

        handler.setFormatter(EntryFormatter(LTSVFormatter()))
    """

    def __init__(self, formatter: Optional[Formatter] = None) -> None:
        super().__init__()
        self.formatter = formatter if formatter is not None else JSONFormatter()

    def to_entry(self, record: logging.LogRecord) -> Entry:
        fields = Fields(
            (k, v)
            for k, v in vars(record).items()
            if k not in _RECORD_ATTRS and not k.startswith("_")
        )
        if record.exc_info:
            fields["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            fields["stack"] = self.formatStack(record.stack_info)
        return Entry(
            level=Level.from_logging(record.levelno),
            time=datetime.fromtimestamp(record.created).astimezone(),
            message=record.getMessage(),
            fields=fields,
        )

    def format(self, record: logging.LogRecord) -> str:
        return render(self.formatter, self.to_entry(record))
