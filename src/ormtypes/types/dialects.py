# src/ormtypes/types/dialects.py
"""Column type keywords for time-of-day values, keyed by database dialect."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

TIME_KEYWORD = "TIME"
TEXT_KEYWORD = "TEXT"

# Dialects without a native TIME type store the canonical text form.
DAY_TIME_COLUMN_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "mysql": TIME_KEYWORD,
        "postgres": TIME_KEYWORD,
        "sqlserver": TIME_KEYWORD,
        "sqlite": TEXT_KEYWORD,
    }
)

# SQLAlchemy dialect names that differ from the identifiers above.
DIALECT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "postgresql": "postgres",
        "mssql": "sqlserver",
        "mariadb": "mysql",
    }
)


def dialect_identifier(name: str) -> str:
    """Translate a SQLAlchemy dialect name into the identifier used for lookups."""
    return DIALECT_ALIASES.get(name, name)


def column_type(dialect_name: str) -> str:
    """Return the column type keyword for ``dialect_name``.

    Unrecognised dialects return an empty string so the persistence layer can
    fall back to its own default.
    """
    return DAY_TIME_COLUMN_TYPES.get(dialect_identifier(dialect_name), "")
