# Formatters render an Entry onto a text sink.
# Each format() call writes its output in several pieces and holds no state;
# callers sharing a sink between threads must serialize access themselves.

from __future__ import annotations
import io, json
from typing import Any, Callable, Optional, Protocol, TextIO

from .entry import Entry, rfc3339_nano
from .errors import SerializationError, UnknownFormatError


class Formatter(Protocol):
    def format(self, sink: TextIO, entry: Entry) -> None: ...


class RawFormatter:
    """Writes the message only; level, time and fields are ignored."""

    def format(self, sink: TextIO, entry: Entry) -> None:
        sink.write(entry.message)


class LTSVFormatter:
    """Labeled Tab-separated Values, see http://ltsv.org/.

    Values are written with ``str()`` and are not escaped, so a tab or
    newline inside a value will break the record.
    """

    def format(self, sink: TextIO, entry: Entry) -> None:
        sink.write(f"level:{entry.level}")
        if entry.time is not None:
            sink.write(f"\ttime:{rfc3339_nano(entry.time)}")
        if entry.message:
            sink.write(f"\tmessage:{entry.message}")
        for k in entry.fields.ordered_keys():
            sink.write(f"\t{k}:{entry.fields[k]}")


class JSONFormatter:
    """One JSON object per entry, members in level/time/message/fields order.

    ``default`` is passed through to :func:`json.dumps` for values it cannot
    encode on its own.
    """

    def __init__(self, default: Optional[Callable[[Any], Any]] = None) -> None:
        self.default = default

    def format(self, sink: TextIO, entry: Entry) -> None:
        sink.write('{"level":')
        sink.write(self._marshal(str(entry.level)))
        if entry.time is not None:
            sink.write(',"time":')
            sink.write(self._marshal(rfc3339_nano(entry.time)))
        if entry.message:
            sink.write(',"message":')
            sink.write(self._marshal(entry.message))
        for k in entry.fields.ordered_keys():
            sink.write("," + self._marshal(k) + ":")
            sink.write(self._marshal(entry.fields[k], key=k))
        sink.write("}")

    def _marshal(self, v: Any, key: Optional[str] = None) -> str:
        try:
            return json.dumps(
                v,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
                default=self.default,
            )
        except (TypeError, ValueError, RecursionError) as exc:
            where = f"field {key!r}" if key is not None else "value"
            raise SerializationError(f"cannot encode {where} as JSON: {exc}", key=key) from exc


FORMATTERS: dict[str, type] = {
    "raw": RawFormatter,
    "ltsv": LTSVFormatter,
    "json": JSONFormatter,
}


def new_formatter(name: str, **options: Any) -> Formatter:
    """Build a registered formatter by name ("raw", "ltsv" or "json")."""
    try:
        cls = FORMATTERS[name.lower()]
    except KeyError:
        raise UnknownFormatError(
            f"unknown format {name!r}; expected one of {', '.join(FORMATTERS)}"
        ) from None
    return cls(**options)


def render(formatter: Formatter, entry: Entry) -> str:
    """Format into memory and return the text, for callers that need one write."""
    buf = io.StringIO()
    formatter.format(buf, entry)
    return buf.getvalue()
