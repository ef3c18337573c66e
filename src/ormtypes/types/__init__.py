"""Value types with storage and JSON conversions."""

from .array import ArrayKind, ElementKind, TypedArray, decode_array, encode_array
from .day_time import DayTime, parse_clock_text
from .dialects import column_type

__all__ = [
    "ArrayKind",
    "DayTime",
    "ElementKind",
    "TypedArray",
    "column_type",
    "decode_array",
    "encode_array",
    "parse_clock_text",
]
