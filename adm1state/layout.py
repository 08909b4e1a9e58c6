"""Array layouts accepted when restoring a record.

Current files carry all 42 values.  Influent files exported by the older
Matlab BSM2 tooling hold exactly 27 values: the species and ion balance
followed by the flow rate at legacy index 26 instead of 35.  The temperature
is set by the digester, and every other trailing field is unknown for such a
feed, so they are zero-filled rather than defaulted.
"""
from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np

from . import constants
from .errors import MalformedRecordError
from .fields import RecordKind, index_of

# Number of leading fields stored identically in both layouts
LEGACY_SHARED_WIDTH: int = 26

# Legacy index -> canonical field name
LEGACY_TAIL: tuple = (
    (26, "Q_D"),
)


class RecordLayout(Enum):
    CURRENT = "current"
    LEGACY = "legacy"

    @property
    def widths(self) -> tuple:
        """Array lengths that select this layout."""

        if self is RecordLayout.CURRENT:
            return (constants.RECORD_WIDTH,)
        return (LEGACY_SHARED_WIDTH + len(LEGACY_TAIL),)


_ACCEPTED = {
    RecordKind.INITIAL: (RecordLayout.CURRENT,),
    RecordKind.INFLUENT: (RecordLayout.CURRENT, RecordLayout.LEGACY),
}


def accepted_lengths(kind: RecordKind) -> tuple:
    """Return every array length :func:`decode` accepts for ``kind``."""

    return tuple(n for layout in _ACCEPTED[RecordKind(kind)] for n in layout.widths)


def resolve_layout(kind: RecordKind, length: int) -> RecordLayout:
    """Select the layout of an array with ``length`` values.

    Raises
    ------
    MalformedRecordError
        If no layout accepted for ``kind`` has that width.
    """

    kind = RecordKind(kind)
    for layout in _ACCEPTED[kind]:
        if length in layout.widths:
            return layout
    expected = ", ".join(str(n) for n in accepted_lengths(kind))
    raise MalformedRecordError(
        f"{kind.value} record needs {expected} values, got {length}"
    )


def decode(kind: RecordKind, values: Sequence[float]) -> np.ndarray:
    """Map ``values`` onto a fresh canonical 42-value array."""

    kind = RecordKind(kind)
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise MalformedRecordError(f"record values must be one-dimensional, got shape {arr.shape}")
    layout = resolve_layout(kind, arr.shape[0])
    if layout is RecordLayout.CURRENT:
        return arr.copy()

    out = np.zeros(constants.RECORD_WIDTH, dtype=float)
    out[:LEGACY_SHARED_WIDTH] = arr[:LEGACY_SHARED_WIDTH]
    for legacy_idx, name in LEGACY_TAIL:
        out[index_of(kind, name)] = arr[legacy_idx]
    return out


__all__ = [
    "LEGACY_SHARED_WIDTH",
    "RecordLayout",
    "accepted_lengths",
    "resolve_layout",
    "decode",
]
