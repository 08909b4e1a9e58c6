"""In-memory digester state records.

A record is one float64 vector in canonical order plus the schema of its
kind; named access is a schema lookup into that vector.  No range checks are
applied: concentrations, flows and temperatures are stored as given.

Example
-------
>>> rec = InfluentState()
>>> rec.set("Q_D", 150.0)
>>> rec.get("flow_rate")
150.0
"""
from __future__ import annotations

from typing import ClassVar, Dict, Iterator, Mapping, Sequence

import numpy as np

from . import constants
from .fields import RecordKind, canonical_name, defaults, field_names, index_of
from .layout import decode


class StateRecord:
    """Fixed-width state vector with named field access."""

    kind: ClassVar[RecordKind]

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values = np.array(defaults(self.kind), dtype=float)

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "StateRecord":
        record = cls()
        record.from_array(values)
        return record

    @classmethod
    def names(cls) -> tuple:
        return field_names(cls.kind)

    # -- named access -------------------------------------------------
    def get(self, name: str) -> float:
        return float(self._values[index_of(self.kind, name)])

    def set(self, name: str, value: float) -> None:
        self._values[index_of(self.kind, name)] = float(value)

    def __getitem__(self, name: str) -> float:
        return self.get(name)

    def __setitem__(self, name: str, value: float) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        try:
            canonical_name(self.kind, name)  # type: ignore[arg-type]
        except (KeyError, TypeError):
            return False
        return True

    def update(self, values: Mapping[str, float]) -> None:
        """Set several fields at once; nothing is written if any name is unknown."""

        resolved = [(index_of(self.kind, name), float(v)) for name, v in values.items()]
        for idx, v in resolved:
            self._values[idx] = v

    def as_dict(self) -> Dict[str, float]:
        return {name: float(v) for name, v in zip(field_names(self.kind), self._values)}

    @property
    def flow_rate(self) -> float:
        return self.get("Q_D")

    @flow_rate.setter
    def flow_rate(self, value: float) -> None:
        self.set("Q_D", value)

    @property
    def temperature(self) -> float:
        return self.get("T_D")

    @temperature.setter
    def temperature(self, value: float) -> None:
        self.set("T_D", value)

    # -- bulk access --------------------------------------------------
    def to_array(self) -> np.ndarray:
        """Return a copy of all values in canonical index order."""

        return self._values.copy()

    def from_array(self, values: Sequence[float]) -> None:
        """Overwrite every field from ``values``.

        The accepted lengths depend on the record kind (see
        :mod:`adm1state.layout`).  The record is left unchanged when the
        input is rejected.
        """

        self._values = decode(self.kind, values)

    def copy(self) -> "StateRecord":
        other = type(self)()
        other._values = self._values.copy()
        return other

    def __len__(self) -> int:
        return constants.RECORD_WIDTH

    def __iter__(self) -> Iterator[str]:
        return iter(field_names(self.kind))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateRecord):
            return NotImplemented
        return self.kind is other.kind and np.array_equal(self._values, other._values, equal_nan=True)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        changed = {
            name: float(v)
            for name, v, d in zip(field_names(self.kind), self._values, defaults(self.kind))
            if not (v == d)
        }
        return f"{type(self).__name__}({changed})" if changed else f"{type(self).__name__}()"


class InitialState(StateRecord):
    """Digester internal state snapshot, defaulting to sludge digester steady state."""

    kind = RecordKind.INITIAL
    __slots__ = ()


class InfluentState(StateRecord):
    """Feed stream record consumed by the digester each timestep.

    The temperature is overwritten by the digester and the ionic equilibrium
    fields are carried over from the digester state by the solver.
    """

    kind = RecordKind.INFLUENT
    __slots__ = ()

    @property
    def ph(self) -> float:
        return self.get("pH")

    @ph.setter
    def ph(self, value: float) -> None:
        self.set("pH", value)


RECORD_TYPES = {
    RecordKind.INITIAL: InitialState,
    RecordKind.INFLUENT: InfluentState,
}


def record_type(kind: RecordKind) -> type:
    """Return the record class for ``kind``."""

    return RECORD_TYPES[RecordKind(kind)]


__all__ = ["StateRecord", "InitialState", "InfluentState", "RECORD_TYPES", "record_type"]
