"""State records for ADM1 anaerobic digestion simulations."""
from . import constants, fields
from .errors import (
    Adm1StateError,
    ConfigurationError,
    MalformedRecordError,
    RecordParseError,
    UnknownFieldError,
)
from .fields import RecordKind, defaults, field_names
from .layout import RecordLayout
from .record import InfluentState, InitialState, StateRecord
from .schema import CodecSettings, load_settings
from .io.delimited import DelimitedCodec

__version__ = "0.1.0"

__all__ = [
    "constants",
    "fields",
    "Adm1StateError",
    "ConfigurationError",
    "MalformedRecordError",
    "RecordParseError",
    "UnknownFieldError",
    "RecordKind",
    "RecordLayout",
    "defaults",
    "field_names",
    "StateRecord",
    "InitialState",
    "InfluentState",
    "CodecSettings",
    "load_settings",
    "DelimitedCodec",
]
