# Log entry model and timestamp rendering.

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .fields import Fields
from .level import Level


@dataclass
class Entry:
    """One log record handed to a Formatter.

    ``time=None`` means "no timestamp" and ``message=""`` means "no message";
    both are omitted by the structured formatters.
    """

    level: Level = Level.NONE
    time: Optional[datetime] = None
    message: str = ""
    fields: Fields = field(default_factory=Fields)

    def __post_init__(self) -> None:
        if isinstance(self.level, str):
            self.level = Level.parse(self.level)
        elif not isinstance(self.level, Level):
            self.level = Level(self.level)
        if self.fields is None:
            self.fields = Fields()
        elif not isinstance(self.fields, Fields):
            self.fields = Fields(self.fields)

    def with_fields(self, extra: Optional[Mapping[str, Any]] = None, **kv: Any) -> "Entry":
        """Return a copy of the entry with more fields appended."""
        fields = self.fields.copy()
        fields.update(extra or {}, **kv)
        return Entry(self.level, self.time, self.message, fields)


def rfc3339_nano(t: datetime) -> str:
    """Render ``t`` as RFC 3339 with up to nanosecond precision.

    The fraction drops trailing zeros (and the dot when it is zero), a zero
    offset is written ``Z`` and any other offset is kept as-is. Naive
    datetimes are taken as local time.
    """
    if t.tzinfo is None or t.utcoffset() is None:
        t = t.astimezone()
    out = (
        f"{t.year:04d}-{t.month:02d}-{t.day:02d}"
        f"T{t.hour:02d}:{t.minute:02d}:{t.second:02d}"
    )
    # pandas.Timestamp and friends carry sub-microsecond digits here
    nanos = t.microsecond * 1000 + getattr(t, "nanosecond", 0)
    if nanos:
        out += "." + f"{nanos:09d}".rstrip("0")
    offset = t.utcoffset()
    if not offset:
        return out + "Z"
    # seconds of the offset are dropped, the sign is kept
    minutes = int(offset.total_seconds() / 60)
    sign = "-" if offset.total_seconds() < 0 else "+"
    hh, mm = divmod(abs(minutes), 60)
    return f"{out}{sign}{hh:02d}:{mm:02d}"
