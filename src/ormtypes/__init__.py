# src/ormtypes/__init__.py
"""Custom SQLAlchemy value types: JSON-backed typed arrays and time-of-day values."""

from .exceptions import MalformedEncodingError, OrmTypesError, UnsupportedSourceTypeError
from .types import DayTime, ElementKind, TypedArray, column_type

__all__ = [
    "DayTime",
    "ElementKind",
    "MalformedEncodingError",
    "OrmTypesError",
    "TypedArray",
    "UnsupportedSourceTypeError",
    "column_type",
]
