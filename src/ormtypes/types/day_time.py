# src/ormtypes/types/day_time.py
"""Wall-clock time-of-day values.

A :class:`DayTime` wraps a single integer count of nanoseconds since midnight.
Hours, minutes, seconds and nanoseconds are derived from that offset on demand
and are never stored separately. The canonical text form is ``HH:MM:SS`` with a
9-digit ``.NNNNNNNNN`` suffix when the nanosecond component is positive.

Two behaviours are kept for compatibility with existing stored data and
callers, and are covered by regression tests:

* :meth:`DayTime.is_zero` only looks at seconds and nanoseconds.
* :meth:`DayTime.ago` moves the clock *forward*.
"""

from __future__ import annotations

import json
import string
from datetime import datetime, time, timedelta
from functools import total_ordering
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ormtypes.exceptions import UnsupportedSourceTypeError
from ormtypes.types.dialects import column_type

MICROSECOND = 1_000
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

FRACTION_DIGITS = 9

_FIELD_WIDTHS = (2, 2, 2, FRACTION_DIGITS)
_FIELD_SPACE = " \t"
_SEPARATORS = (":", ":", ".")


def _truncated_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of ``value``."""
    quotient, remainder = divmod(abs(value), divisor)
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder


def _scan_int(text: str, pos: int, width: int) -> tuple[str, int]:
    while pos < len(text) and text[pos] in _FIELD_SPACE:
        pos += 1
    end = pos
    if end < len(text) and text[end] in "+-":
        end += 1
    while end < len(text) and end - pos < width and text[end] in string.digits:
        end += 1
    return text[pos:end], end


def parse_clock_text(text: str) -> tuple[int, int, int, int]:
    """Leniently scan ``HH:MM:SS[.NNNNNNNNN]`` into its four components.

    Fields are read left to right with fixed widths, skipping spaces before
    each number. The first field that is missing or malformed, and every field
    after it, resolves to 0; no error is ever raised. The fraction is read as
    up to nine digits counting nanoseconds, so ``.5`` is 5 ns.
    """
    values = [0, 0, 0, 0]
    text = text.strip()
    pos = 0
    for index, width in enumerate(_FIELD_WIDTHS):
        if index:
            if not text.startswith(_SEPARATORS[index - 1], pos):
                break
            pos += 1
        digits, pos = _scan_int(text, pos, width)
        if not digits.lstrip("+-"):
            break
        values[index] = int(digits)
    return values[0], values[1], values[2], values[3]


def _as_text(raw: bytes | bytearray | memoryview | str) -> str:
    if isinstance(raw, str):
        return raw
    return bytes(raw).decode("utf-8", errors="replace")


@total_ordering
class DayTime:
    """Immutable time of day with nanosecond resolution.

    Components passed to the constructor are summed as-is, so
    ``DayTime(0, 90)`` equals ``DayTime(1, 30)``. Offsets of a day or more are
    allowed and read back as hours beyond 23.
    """

    __slots__ = ("_offset",)

    def __init__(
        self,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanoseconds: int = 0,
    ) -> None:
        offset = hours * HOUR + minutes * MINUTE + seconds * SECOND + nanoseconds
        object.__setattr__(self, "_offset", offset)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, tuple[int]]:
        return (type(self).from_offset, (self._offset,))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_offset(cls, offset: int) -> DayTime:
        """Wrap a raw nanosecond offset since midnight."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_offset", int(offset))
        return instance

    @classmethod
    def now(cls) -> DayTime:
        """Return the current local wall-clock time of day."""
        return cls.from_datetime(datetime.now())

    @classmethod
    def from_datetime(cls, value: datetime | time) -> DayTime:
        """Extract the time-of-day components, discarding date and timezone."""
        return cls(value.hour, value.minute, value.second, value.microsecond * MICROSECOND)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> DayTime:
        offset = (value.days * 86_400 + value.seconds) * SECOND + value.microseconds * MICROSECOND
        return cls.from_offset(offset)

    @classmethod
    def parse(cls, text: str) -> DayTime:
        """Build a value from text using the lenient ``HH:MM:SS[.fraction]`` scanner."""
        return cls(*parse_clock_text(text))

    @classmethod
    def from_db_value(cls, raw: Any) -> DayTime:
        """Decode a driver value.

        Text and byte buffers go through the lenient parser, ``datetime`` and
        ``time`` values contribute their clock components and ``timedelta``
        values (returned by MySQL drivers for ``TIME``) are taken as the raw
        offset.

        Raises:
            UnsupportedSourceTypeError: for any other kind of value.
        """
        if isinstance(raw, DayTime):
            return raw
        if isinstance(raw, (str, bytes, bytearray, memoryview)):
            return cls.parse(_as_text(raw))
        if isinstance(raw, (datetime, time)):
            return cls.from_datetime(raw)
        if isinstance(raw, timedelta):
            return cls.from_timedelta(raw)
        raise UnsupportedSourceTypeError(raw)

    @classmethod
    def from_json(cls, data: str | bytes) -> DayTime | None:
        """Decode a JSON value; the literal ``null`` yields ``None``."""
        text = _as_text(data).strip()
        if text == "null":
            return None
        return cls.parse(text.strip('"'))

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------
    @property
    def offset(self) -> int:
        """Nanoseconds since midnight."""
        return self._offset

    @property
    def hours(self) -> int:
        return _truncated_divmod(self._offset, HOUR)[0]

    @property
    def minutes(self) -> int:
        return _truncated_divmod(_truncated_divmod(self._offset, HOUR)[1], MINUTE)[0]

    @property
    def seconds(self) -> int:
        return _truncated_divmod(_truncated_divmod(self._offset, MINUTE)[1], SECOND)[0]

    @property
    def nanoseconds(self) -> int:
        return _truncated_divmod(self._offset, SECOND)[1]

    @property
    def components(self) -> tuple[int, int, int, int]:
        """Return ``(hours, minutes, seconds, nanoseconds)``."""
        return self.hours, self.minutes, self.seconds, self.nanoseconds

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        hours, minutes, seconds, nanoseconds = self.components
        if nanoseconds > 0:
            return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{nanoseconds:09d}"
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    def to_db_value(self) -> str:
        """Return the canonical text form written to the column."""
        return str(self)

    def to_json(self) -> str:
        return json.dumps(str(self))

    def update_from_json(self, data: str | bytes) -> DayTime:
        """Return the value decoded from ``data``, or ``self`` when it is ``null``."""
        decoded = type(self).from_json(data)
        return self if decoded is None else decoded

    def to_time(self) -> time:
        """Convert to :class:`datetime.time`, truncating to microseconds.

        Raises:
            ValueError: if the offset falls outside a single day.
        """
        if not 0 <= self._offset < DAY:
            raise ValueError(f"{self!r} does not fit in a single day")
        hours, minutes, seconds, nanoseconds = self.components
        return time(hours, minutes, seconds, nanoseconds // MICROSECOND)

    @staticmethod
    def column_type(dialect_name: str) -> str:
        """Return the column type keyword for ``dialect_name`` (``""`` if unknown)."""
        return column_type(dialect_name)

    # ------------------------------------------------------------------
    # Comparison and arithmetic
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DayTime):
            return NotImplemented
        return self.components == other.components

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DayTime):
            return NotImplemented
        return self.components < other.components

    def __hash__(self) -> int:
        return hash(self.components)

    def after(self, other: DayTime) -> bool:
        return self.components > other.components

    def before(self, other: DayTime) -> bool:
        return self.components < other.components

    def equal(self, other: DayTime) -> bool:
        return self.components == other.components

    def is_zero(self) -> bool:
        """Return True when the seconds and nanoseconds components are zero.

        Hours and minutes are not inspected, so ``01:30:00`` reports True.
        Existing callers rely on this, so it stays until they are migrated.
        """
        return self.seconds == 0 and self.nanoseconds == 0

    def ago(self, minutes: int) -> DayTime:
        """Return the value shifted *forward* by ``minutes``.

        Despite the name the result is later than ``self``; existing callers
        depend on this direction.
        """
        hours, minutes = _truncated_divmod(minutes, 60)
        return DayTime(
            self.hours + hours,
            self.minutes + minutes,
            self.seconds,
            self.nanoseconds,
        )

    def sub_minutes(self, other: DayTime) -> int:
        """Return the signed minute difference, ignoring seconds and below."""
        return (self.hours - other.hours) * 60 + (self.minutes - other.minutes)

    def sub_minutes_text(self, text: str) -> int:
        """Like :meth:`sub_minutes` with ``text`` parsed by the lenient scanner."""
        return self.sub_minutes(DayTime.parse(text))

    # ------------------------------------------------------------------
    # Pydantic integration
    # ------------------------------------------------------------------
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_db_value,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "time", "example": "07:15:00"}
