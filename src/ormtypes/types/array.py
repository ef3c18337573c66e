# src/ormtypes/types/array.py
"""Typed arrays persisted as JSON array literals.

A :class:`TypedArray` is an ordinary ``list`` restricted to one scalar element
kind (a fixed-width integer or a string). The stored form is always a compact
JSON array literal; an absent sequence is written as ``"[]"`` while an absent
stored value reads back as an empty array.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ormtypes.exceptions import MalformedEncodingError

T = TypeVar("T", int, str)

EMPTY_ARRAY_LITERAL = "[]"


class ElementKind(str, Enum):
    """Closed set of scalar kinds a typed array may hold."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    INT = "int"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINT = "uint"
    STRING = "string"

    @property
    def is_integer(self) -> bool:
        """Return True for the signed and unsigned integer kinds."""
        return self is not ElementKind.STRING

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Return the inclusive ``(low, high)`` range of an integer kind."""
        return _INTEGER_BOUNDS.get(self)

    def accepts(self, value: Any) -> bool:
        """Return True when ``value`` is a valid element of this kind."""
        if self is ElementKind.STRING:
            return isinstance(value, str)
        # bool is an int subclass but JSON true/false are not numbers.
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        low, high = _INTEGER_BOUNDS[self]
        return low <= value <= high

    @classmethod
    def for_python_type(cls, item_type: Any) -> ElementKind:
        """Map a Python element type (``int`` or ``str``) to its default kind."""
        if item_type is str:
            return cls.STRING
        if item_type is int:
            return cls.INT64
        raise TypeError(f"TypedArray elements must be int or str, not {item_type!r}")


def _signed(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _unsigned(bits: int) -> tuple[int, int]:
    return 0, (1 << bits) - 1


_INTEGER_BOUNDS: dict[ElementKind, tuple[int, int]] = {
    ElementKind.INT8: _signed(8),
    ElementKind.INT16: _signed(16),
    ElementKind.INT32: _signed(32),
    ElementKind.INT64: _signed(64),
    ElementKind.INT: _signed(64),
    ElementKind.UINT8: _unsigned(8),
    ElementKind.UINT16: _unsigned(16),
    ElementKind.UINT32: _unsigned(32),
    ElementKind.UINT64: _unsigned(64),
    ElementKind.UINT: _unsigned(64),
}


class TypedArray(list[T], Generic[T]):
    """Ordered sequence of integers or strings with JSON column persistence.

    ``less``/``swap``/``len`` give external sort routines everything they need;
    the array never sorts itself.
    """

    def less(self, i: int, j: int) -> bool:
        """Return True if the element at ``i`` orders before the one at ``j``."""
        return self[i] < self[j]

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at positions ``i`` and ``j`` in place."""
        self[i], self[j] = self[j], self[i]

    def contains(self, value: T) -> bool:
        """Return True if some element equals ``value``."""
        for item in self:
            if item == value:
                return True
        return False

    def to_db_value(self) -> str:
        """Return the JSON array literal stored in the column."""
        return encode_array(self)

    def to_json(self) -> str:
        """Return the JSON array text, identical to the stored form."""
        return encode_array(self)

    @classmethod
    def from_db_value(cls, raw: Any, kind: ElementKind = ElementKind.INT64) -> TypedArray[Any]:
        """Decode a driver value; ``None`` and empty payloads give an empty array."""
        return decode_array(raw, kind)

    @classmethod
    def from_json(cls, data: str | bytes, kind: ElementKind = ElementKind.INT64) -> TypedArray[Any]:
        """Decode JSON array text, checking every element against ``kind``."""
        return decode_array(data, kind)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        args = get_args(source)
        kind = ElementKind.for_python_type(args[0]) if args else ElementKind.INT64
        return _array_schema(kind)


@dataclass(frozen=True)
class ArrayKind:
    """Pydantic field marker narrowing a typed array to one element kind.

    Example::

        weekdays: Annotated[TypedArray[int], ArrayKind(ElementKind.UINT8)]
    """

    kind: ElementKind

    def __get_pydantic_core_schema__(
        self,
        source: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return _array_schema(ElementKind(self.kind))


def _array_schema(kind: ElementKind) -> core_schema.CoreSchema:
    if kind.is_integer:
        low, high = _INTEGER_BOUNDS[kind]
        item_schema = core_schema.int_schema(ge=low, le=high, strict=True)
    else:
        item_schema = core_schema.str_schema(strict=True)
    return core_schema.no_info_after_validator_function(
        TypedArray,
        core_schema.list_schema(item_schema),
        serialization=core_schema.plain_serializer_function_ser_schema(list),
    )


def _check_elements(values: list[Any], kind: ElementKind, payload: str | None) -> None:
    for index, item in enumerate(values):
        if not kind.accepts(item):
            raise MalformedEncodingError(
                f"element {index} ({item!r}) is not a valid {kind.value}",
                payload=payload,
            )


def encode_array(values: Iterable[Any] | None, kind: ElementKind | None = None) -> str:
    """Encode ``values`` as a compact JSON array literal.

    ``None`` encodes to ``"[]"``; the stored value is never null. When ``kind``
    is given every element is checked against it first.

    Raises:
        MalformedEncodingError: if an element does not belong to ``kind``.
    """
    if values is None:
        return EMPTY_ARRAY_LITERAL
    items = list(values)
    if kind is not None:
        _check_elements(items, kind, None)
    return json.dumps(items, separators=(",", ":"), ensure_ascii=False)


def _payload_text(raw: Any) -> str:
    if isinstance(raw, (bytes, bytearray, memoryview)):
        try:
            return bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedEncodingError("array payload is not valid UTF-8") from exc
    if isinstance(raw, str):
        return raw
    return str(raw)


def decode_array(raw: Any, kind: ElementKind = ElementKind.INT64) -> TypedArray[Any]:
    """Decode a stored or JSON payload into a :class:`TypedArray` of ``kind``.

    Raises:
        MalformedEncodingError: if the payload is not a JSON array whose
            elements all belong to ``kind``.
    """
    if raw is None:
        return TypedArray()

    # Some drivers hand back JSON columns already decoded.
    if isinstance(raw, (list, tuple)):
        decoded: Any = list(raw)
        text = None
    else:
        text = _payload_text(raw)
        if not text:
            return TypedArray()
        try:
            decoded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedEncodingError(
                f"invalid JSON array payload: {exc.msg}",
                payload=text,
            ) from exc

    # JSON null decodes like an absent value.
    if decoded is None:
        return TypedArray()
    if not isinstance(decoded, list):
        raise MalformedEncodingError(
            f"expected a JSON array, got {type(decoded).__name__}",
            payload=text,
        )
    _check_elements(decoded, kind, text)
    return TypedArray(decoded)
