"""Error taxonomy for value conversion failures."""

from __future__ import annotations

from typing import Any


class OrmTypesError(ValueError):
    """Base exception raised when a stored or JSON value cannot be converted."""


class MalformedEncodingError(OrmTypesError):
    """Raised when an array payload is not a JSON array of the declared kind.

    The offending payload is kept on the exception so callers can report it.
    """

    def __init__(self, message: str, payload: str | None = None) -> None:
        super().__init__(message)
        self.payload = payload


class UnsupportedSourceTypeError(OrmTypesError, TypeError):
    """Raised when a time-of-day value is decoded from an unsupported source kind."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"failed to scan value: {value!r} ({type(value).__name__})")
        self.value = value
