"""Tabular views of record series.

Influent is consumed once per simulation step, so a feed is usually kept as a
multi-line delimited file with one record per line.  The helpers here convert
such series to :class:`pandas.DataFrame` objects with one column per field
and back.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Type, Union

import numpy as np
import pandas as pd

from ..errors import MalformedRecordError, RecordParseError
from ..record import StateRecord
from ..schema import CodecSettings
from . import textio
from .delimited import DelimitedCodec

logger = logging.getLogger(__name__)


def records_to_frame(records: Sequence[StateRecord]) -> pd.DataFrame:
    """Stack ``records`` into a frame whose columns are the canonical field names."""

    if not records:
        raise ValueError("records_to_frame needs at least one record")
    kinds = {rec.kind for rec in records}
    if len(kinds) != 1:
        raise ValueError(f"records must share one kind, got {sorted(k.value for k in kinds)}")
    columns = list(records[0].names())
    data = np.vstack([rec.to_array() for rec in records])
    return pd.DataFrame(data, columns=columns)


def frame_to_records(df: pd.DataFrame, record_type: Type[StateRecord]) -> List[StateRecord]:
    """Build one record per row of ``df``.

    Frames carrying any canonical column name are matched by name and must
    contain all of them; other frames are read positionally, so legacy-width
    influent tables decode the same way as legacy lines.
    """

    names = list(record_type.names())
    if set(names).intersection(map(str, df.columns)):
        missing = [name for name in names if name not in df.columns]
        if missing:
            raise MalformedRecordError(f"frame is missing record columns: {', '.join(missing)}")
        work = df[names]
    else:
        work = df
    try:
        values = work.apply(pd.to_numeric, errors="raise").to_numpy(dtype=float)
    except (TypeError, ValueError) as exc:
        raise RecordParseError(f"frame holds a non-numeric value: {exc}") from exc
    return [record_type.from_values(row) for row in values]


def write_records(
    records: Sequence[StateRecord],
    path: Union[str, Path],
    settings: Optional[CodecSettings] = None,
) -> None:
    """Write ``records`` to ``path``, one delimited line each."""

    if not records:
        raise ValueError("write_records needs at least one record")
    codec = DelimitedCodec(type(records[0]), settings=settings, logger=logger)
    # format everything before the target is truncated
    lines = [codec.write_line(rec) for rec in records]
    textio.write_lines(path, lines, encoding=codec.settings.encoding)
    logger.debug("wrote %d records to %s", len(records), path)


def read_records(
    path: Union[str, Path],
    record_type: Type[StateRecord],
    settings: Optional[CodecSettings] = None,
) -> List[StateRecord]:
    """Read every data line of ``path`` into records of ``record_type``."""

    codec = DelimitedCodec(record_type, settings=settings, logger=logger)
    return codec.read_lines(textio.iter_lines(path, encoding=codec.settings.encoding))


def read_frame(
    path: Union[str, Path],
    record_type: Type[StateRecord],
    settings: Optional[CodecSettings] = None,
) -> pd.DataFrame:
    """Read a record series straight into a frame with canonical columns."""

    return records_to_frame(read_records(path, record_type, settings=settings))


__all__ = ["records_to_frame", "frame_to_records", "write_records", "read_records", "read_frame"]
