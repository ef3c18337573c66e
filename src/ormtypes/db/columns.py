# src/ormtypes/db/columns.py
"""SQLAlchemy column types for typed arrays and time-of-day values."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import String, Text
from sqlalchemy.engine import Dialect
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.types import TIME, TypeDecorator, TypeEngine

from ormtypes.core.settings import settings
from ormtypes.types.array import ElementKind, TypedArray, decode_array, encode_array
from ormtypes.types.day_time import DayTime
from ormtypes.types.dialects import TEXT_KEYWORD, TIME_KEYWORD, column_type

logger = logging.getLogger(__name__)

# Column type keyword -> SQLAlchemy type used to render and process it.
KEYWORD_TYPES: dict[str, type[TypeEngine[Any]]] = {
    TIME_KEYWORD: TIME,
    TEXT_KEYWORD: Text,
}


class MutableTypedArray(MutableList, TypedArray):
    """Typed array that flags its parent row dirty on in-place changes.

    Index assignment (and so ``swap``), appends and removals all mark the
    owning attribute as changed, so a sorted array is written on flush.
    """


class ArrayType(TypeDecorator[TypedArray[Any]]):
    """Store a :class:`TypedArray` as a JSON array literal in a text column.

    Writing ``None`` stores ``"[]"``; reading ``NULL`` yields an empty array.
    Elements are checked against ``kind`` in both directions.
    """

    impl = Text
    cache_ok = True

    def __init__(self, kind: ElementKind | str | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.kind = ElementKind(kind) if kind is not None else settings.default_array_kind

    @property
    def python_type(self) -> type[TypedArray[Any]]:
        return TypedArray

    def process_bind_param(self, value: Any, dialect: Dialect) -> str:
        return encode_array(value, self.kind)

    def process_result_value(self, value: Any, dialect: Dialect) -> TypedArray[Any]:
        return decode_array(value, self.kind)


# Every mapped ArrayType column tracks in-place changes.
MutableTypedArray.associate_with(ArrayType)


class DayTimeType(TypeDecorator[DayTime]):
    """Store a :class:`DayTime` in the dialect's ``TIME`` or text column."""

    impl = String(32)
    cache_ok = True

    @property
    def python_type(self) -> type[DayTime]:
        return DayTime

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        keyword = column_type(dialect.name)
        type_class = KEYWORD_TYPES.get(keyword)
        if type_class is None:
            logger.debug(
                "No time-of-day column type known for dialect %r; using %r",
                dialect.name,
                self.impl_instance,
            )
            return super().load_dialect_impl(dialect)
        return dialect.type_descriptor(type_class())

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        return DayTime.from_db_value(value).to_db_value()

    def process_result_value(self, value: Any, dialect: Dialect) -> DayTime | None:
        if value is None:
            return None
        return DayTime.from_db_value(value)
