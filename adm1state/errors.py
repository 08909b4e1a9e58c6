"""Custom exceptions for the :mod:`adm1state` package."""
from __future__ import annotations


class Adm1StateError(Exception):
    """Base exception for digester state record errors."""


class UnknownFieldError(Adm1StateError, KeyError):
    """A field name that is not part of the record's schema."""

    def __init__(self, name: str, kind: str) -> None:
        super().__init__(name)
        self.name = name
        self.kind = kind

    def __str__(self) -> str:
        return f"unknown field {self.name!r} for {self.kind} records"


class MalformedRecordError(Adm1StateError, ValueError):
    """A value array whose length matches no accepted record layout."""


class RecordParseError(Adm1StateError, ValueError):
    """A delimited token that is not a valid decimal number."""


class ConfigurationError(Adm1StateError, ValueError):
    """Invalid codec settings or settings file."""


__all__ = [
    "Adm1StateError",
    "UnknownFieldError",
    "MalformedRecordError",
    "RecordParseError",
    "ConfigurationError",
]
