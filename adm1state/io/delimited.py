"""Delimited text codec for digester state records.

One record is one line of ``;``-separated decimal numbers in canonical field
order, without header or trailing separator.  Writing always emits the full
42 values; reading also accepts the legacy influent layout described in
:mod:`adm1state.layout`.

Values are written with :func:`repr`, which is locale independent and the
shortest text that parses back to the identical float64.
"""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Iterable, Optional, Sequence, Type, Union

import numpy as np

from ..errors import RecordParseError
from ..layout import RecordLayout, resolve_layout
from ..record import StateRecord
from ..schema import CodecSettings
from . import textio


def parse_token(token: str, position: int) -> float:
    """Parse one field, rejecting blanks and Python-only literal forms."""

    text = token.strip()
    if not text or "_" in text:
        raise RecordParseError(f"field {position} is not a decimal number: {token!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise RecordParseError(f"field {position} is not a decimal number: {token!r}") from exc


class DelimitedCodec:
    """Convert records of one type to and from delimited text lines.

    Parameters
    ----------
    record_type:
        Record class produced by :meth:`read_line`, e.g.
        :class:`~adm1state.record.InfluentState`.
    settings:
        Text format options; defaults to ``;`` and UTF-8.
    logger:
        Destination of diagnostic messages; the module logger when omitted.
    """

    def __init__(
        self,
        record_type: Type[StateRecord],
        settings: Optional[CodecSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if not (
            isinstance(record_type, type)
            and issubclass(record_type, StateRecord)
            and getattr(record_type, "kind", None) is not None
        ):
            raise TypeError(f"record_type must be a concrete StateRecord subclass, got {record_type!r}")
        self.record_type = record_type
        self.settings = settings if settings is not None else CodecSettings()
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def delimiter(self) -> str:
        return self.settings.delimiter

    def _check_type(self, record: StateRecord) -> None:
        if not isinstance(record, self.record_type):
            raise TypeError(
                f"{type(self).__name__} for {self.record_type.__name__} cannot write "
                f"{type(record).__name__}"
            )

    def parse_tokens(self, tokens: Sequence[str]) -> np.ndarray:
        return np.array([parse_token(tok, i) for i, tok in enumerate(tokens)], dtype=float)

    def decode_tokens(self, tokens: Sequence[str]) -> StateRecord:
        values = self.parse_tokens(tokens)
        layout = resolve_layout(self.record_type.kind, len(values))
        if layout is RecordLayout.LEGACY:
            self.logger.info(
                "decoding legacy %s record with %d values; equilibrium and gas phase fields set to 0.0",
                self.record_type.kind.value,
                len(values),
            )
        record = self.record_type()
        record.from_array(values)
        return record

    def write_line(self, record: StateRecord) -> str:
        """Format ``record`` as one delimited line without terminator."""

        self._check_type(record)
        values = record.to_array()
        if not np.all(np.isfinite(values)):
            bad = [name for name, v in zip(record.names(), values) if not math.isfinite(v)]
            self.logger.warning("writing non-finite values for %s", ", ".join(bad))
        return self.delimiter.join(textio.format_value(v) for v in values)

    def read_line(self, text: str) -> StateRecord:
        """Parse one delimited line into a new record."""

        return self.decode_tokens(text.rstrip("\r\n").split(self.delimiter))

    def write_file(self, record: StateRecord, path: Union[str, Path]) -> None:
        self._check_type(record)
        textio.write_array(path, record.to_array(), self.delimiter, encoding=self.settings.encoding)
        self.logger.debug("wrote %s record to %s", self.record_type.kind.value, path)

    def read_file(self, path: Union[str, Path]) -> StateRecord:
        tokens = textio.read_tokens(path, self.delimiter, encoding=self.settings.encoding)
        self.logger.debug("read %d fields from %s", len(tokens), path)
        return self.decode_tokens(tokens)

    def read_lines(self, lines: Iterable[str]) -> list:
        """Parse every non-blank line into a record, in order."""

        return [self.read_line(line) for line in lines if line.strip()]


__all__ = ["DelimitedCodec", "parse_token"]
