"""Field schema of the digester state records.

The schema is static: each record kind maps to an ordered tuple of
:class:`Field` entries whose positions are the indices of the canonical
42-value array.  The tables are checked once at import time so that a broken
edit of :mod:`adm1state.constants` fails immediately instead of producing
misaligned files.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from . import constants
from .errors import UnknownFieldError


class RecordKind(str, Enum):
    """Record kinds sharing the canonical array layout."""

    INITIAL = "initial"
    INFLUENT = "influent"


@dataclass(frozen=True)
class Field:
    name: str
    index: int
    default: float
    unit: str = ""
    description: str = ""


def _build(trailing, defaults) -> Tuple[Field, ...]:
    rows = constants.COMMON_FIELDS + trailing
    return tuple(
        Field(name=name, index=i, default=float(default), unit=unit, description=desc)
        for i, ((name, unit, desc), default) in enumerate(zip(rows, defaults))
    )


def _check(kind: RecordKind, fields: Tuple[Field, ...], defaults: Tuple[float, ...]) -> None:
    width = constants.RECORD_WIDTH
    if len(fields) != width or len(defaults) != width:
        raise RuntimeError(
            f"{kind.value} schema must have {width} fields and defaults, "
            f"got {len(fields)} fields and {len(defaults)} defaults"
        )
    names = [f.name for f in fields]
    if len(set(names)) != len(names):
        raise RuntimeError(f"{kind.value} schema has duplicate field names")
    if [f.index for f in fields] != list(range(width)):
        raise RuntimeError(f"{kind.value} schema indices are not contiguous")
    clash = set(constants.FIELD_ALIASES).intersection(names)
    if clash:
        raise RuntimeError(f"{kind.value} schema field names shadow aliases: {sorted(clash)}")


_SCHEMAS: Dict[RecordKind, Tuple[Field, ...]] = {
    RecordKind.INITIAL: _build(constants.INITIAL_TRAILING_FIELDS, constants.INITIAL_DEFAULTS),
    RecordKind.INFLUENT: _build(constants.INFLUENT_TRAILING_FIELDS, constants.INFLUENT_DEFAULTS),
}
_DEFAULTS: Dict[RecordKind, Tuple[float, ...]] = {
    RecordKind.INITIAL: tuple(float(v) for v in constants.INITIAL_DEFAULTS),
    RecordKind.INFLUENT: tuple(float(v) for v in constants.INFLUENT_DEFAULTS),
}
for _kind, _fields in _SCHEMAS.items():
    _check(_kind, _fields, _DEFAULTS[_kind])

_INDEX: Dict[RecordKind, Dict[str, int]] = {
    kind: {f.name: f.index for f in fields} for kind, fields in _SCHEMAS.items()
}


def schema(kind: RecordKind) -> Tuple[Field, ...]:
    """Return the ordered fields of ``kind``."""

    return _SCHEMAS[RecordKind(kind)]


def field_names(kind: RecordKind) -> Tuple[str, ...]:
    """Return the canonical field names of ``kind`` in array order."""

    return tuple(f.name for f in schema(kind))


def defaults(kind: RecordKind) -> Tuple[float, ...]:
    """Return the default values of ``kind`` aligned with :func:`field_names`."""

    return _DEFAULTS[RecordKind(kind)]


def canonical_name(kind: RecordKind, name: str) -> str:
    """Resolve aliases such as ``temperature`` to the schema field name."""

    kind = RecordKind(kind)
    resolved = constants.FIELD_ALIASES.get(name, name)
    if resolved not in _INDEX[kind]:
        raise UnknownFieldError(name, kind.value)
    return resolved


def index_of(kind: RecordKind, name: str) -> int:
    """Return the array index of ``name`` (aliases accepted)."""

    kind = RecordKind(kind)
    return _INDEX[kind][canonical_name(kind, name)]


__all__ = [
    "RecordKind",
    "Field",
    "schema",
    "field_names",
    "defaults",
    "canonical_name",
    "index_of",
]
