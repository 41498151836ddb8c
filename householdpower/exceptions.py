from __future__ import annotations
from typing import Optional


class HPError(Exception): ...


class ParseError(HPError, ValueError):
    """A date or number in the data file could not be parsed."""

    def __init__(self, message: str, *, row: Optional[int] = None, value: object = None):
        super().__init__(message)
        self.row = row
        self.value = value


class SchemaError(HPError): ...


class RangeError(HPError): ...


def require(condition: bool, message: str, exc: type[HPError] = HPError):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
