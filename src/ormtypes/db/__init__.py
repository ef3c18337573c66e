# src/ormtypes/db/__init__.py
"""Database column types and session helpers."""

from .columns import ArrayType, DayTimeType, MutableTypedArray
from .session import Base, create_db_engine, get_db, make_session_factory

__all__ = [
    "ArrayType",
    "Base",
    "DayTimeType",
    "MutableTypedArray",
    "create_db_engine",
    "get_db",
    "make_session_factory",
]
