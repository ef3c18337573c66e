# tests/test_dialects.py
"""Tests for the dialect to column type lookup."""

import pytest

from ormtypes.types.dialects import (
    DAY_TIME_COLUMN_TYPES,
    column_type,
    dialect_identifier,
)


@pytest.mark.parametrize(
    ("dialect", "expected"),
    [
        ("mysql", "TIME"),
        ("postgres", "TIME"),
        ("sqlserver", "TIME"),
        ("sqlite", "TEXT"),
        ("unknown", ""),
        ("", ""),
    ],
)
def test_column_type(dialect: str, expected: str) -> None:
    """Known dialects map to their keyword, anything else to an empty string."""
    assert column_type(dialect) == expected


@pytest.mark.parametrize(
    ("name", "identifier"),
    [
        ("postgresql", "postgres"),
        ("mssql", "sqlserver"),
        ("mariadb", "mysql"),
        ("sqlite", "sqlite"),
        ("oracle", "oracle"),
    ],
)
def test_sqlalchemy_names_are_translated(name: str, identifier: str) -> None:
    assert dialect_identifier(name) == identifier


def test_sqlalchemy_names_resolve_to_keywords() -> None:
    assert column_type("postgresql") == "TIME"
    assert column_type("mssql") == "TIME"
    assert column_type("oracle") == ""


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        DAY_TIME_COLUMN_TYPES["oracle"] = "TIME"  # type: ignore[index]
