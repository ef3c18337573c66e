# tests/test_schemas.py
"""Tests for using the value types as Pydantic model fields."""

from __future__ import annotations

import json
from typing import Annotated

import pytest
from pydantic import BaseModel, Field, ValidationError

from ormtypes.types import ArrayKind, DayTime, ElementKind, TypedArray


class ShiftPayload(BaseModel):
    """Request body shape mirroring the Shift model."""

    starts_at: DayTime
    ends_at: DayTime | None = None
    weekdays: TypedArray[int]
    tags: TypedArray[str] = Field(default_factory=TypedArray)


def test_validate_json() -> None:
    """JSON strings and arrays are decoded into the value types."""
    payload = ShiftPayload.model_validate_json(
        '{"starts_at": "07:15", "weekdays": [1, 2], "tags": ["a"]}'
    )
    assert payload.starts_at == DayTime(7, 15)
    assert payload.ends_at is None
    assert isinstance(payload.weekdays, TypedArray)
    assert payload.weekdays == [1, 2]
    assert isinstance(payload.tags, TypedArray)


def test_dump_json() -> None:
    """Times serialise to their canonical text, arrays to plain JSON arrays."""
    payload = ShiftPayload(
        starts_at=DayTime(7, 15, 0, 1),
        weekdays=TypedArray([5]),
    )
    assert json.loads(payload.model_dump_json()) == {
        "starts_at": "07:15:00.000000001",
        "ends_at": None,
        "weekdays": [5],
        "tags": [],
    }


def test_python_mode_accepts_native_values() -> None:
    from datetime import time

    payload = ShiftPayload(starts_at=time(6, 0), weekdays=[1])
    assert payload.starts_at == DayTime(6)
    assert payload.weekdays.contains(1)


def test_round_trip() -> None:
    original = ShiftPayload(
        starts_at=DayTime(23, 59, 59, 999_999_999),
        ends_at=DayTime(1),
        weekdays=TypedArray([0, 6]),
        tags=TypedArray(["night"]),
    )
    restored = ShiftPayload.model_validate_json(original.model_dump_json())
    assert restored == original


@pytest.mark.parametrize(
    "body",
    [
        '{"starts_at": 7, "weekdays": []}',
        '{"starts_at": "07:00", "weekdays": ["1"]}',
        '{"starts_at": "07:00", "weekdays": [true]}',
        '{"starts_at": "07:00", "weekdays": [], "tags": [1]}',
    ],
)
def test_invalid_payloads(body: str) -> None:
    with pytest.raises(ValidationError):
        ShiftPayload.model_validate_json(body)


def test_json_schema() -> None:
    schema = ShiftPayload.model_json_schema()
    assert schema["properties"]["starts_at"]["type"] == "string"
    assert schema["properties"]["weekdays"]["type"] == "array"


class SensorPayload(BaseModel):
    """Payload whose array field is narrowed to unsigned bytes."""

    readings: Annotated[TypedArray[int], ArrayKind(ElementKind.UINT8)]


def test_array_kind_marker() -> None:
    """ArrayKind narrows the accepted range to the declared element kind."""
    payload = SensorPayload.model_validate_json('{"readings": [0, 255]}')
    assert isinstance(payload.readings, TypedArray)
    assert payload.readings == [0, 255]
    assert payload.model_dump_json() == '{"readings":[0,255]}'

    for body in ('{"readings": [256]}', '{"readings": [-1]}'):
        with pytest.raises(ValidationError):
            SensorPayload.model_validate_json(body)
