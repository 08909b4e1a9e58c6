"""Settings schema for the delimited record codec.

Settings are plain Pydantic models so they can be built in code or read from
the ``codec`` section of a YAML file::

    codec:
      delimiter: ";"
      encoding: utf-8
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from . import constants
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Characters that may appear inside a decimal number and can never separate fields
_NUMERIC_CHARS = frozenset("0123456789.+-eEinfatyINFATY_")


class CodecSettings(BaseModel):
    """Text format options for :class:`adm1state.io.delimited.DelimitedCodec`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    delimiter: str = Field(constants.DEFAULT_DELIMITER, description="Field separator of a record line")
    encoding: str = Field("utf-8", description="Text encoding of record files")

    @field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        if value in _NUMERIC_CHARS or value in "\r\n":
            raise ValueError(f"delimiter {value!r} can occur inside a decimal number or line break")
        return value

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        import codecs

        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding {value!r}") from exc
        return value


def build_settings(data: Mapping[str, Any] | None = None) -> CodecSettings:
    """Validate ``data`` into :class:`CodecSettings`.

    Raises
    ------
    ConfigurationError
        If ``data`` is not a mapping or fails validation.
    """

    if data is None:
        return CodecSettings()
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"codec settings must be a mapping, got {type(data).__name__}")
    try:
        return CodecSettings(**data)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid codec settings: {exc}") from exc


def load_settings(path: Union[str, Path]) -> CodecSettings:
    """Load codec settings from a YAML file.

    The ``codec`` section is used when present, otherwise the whole document.
    An empty file yields the defaults.
    """

    from ruamel.yaml import YAML
    from ruamel.yaml.error import YAMLError

    yaml = YAML(typ="safe")
    source_path = Path(path).resolve()
    try:
        with source_path.open("r", encoding="utf-8") as fh:
            data = yaml.load(fh)
    except YAMLError as exc:
        raise ConfigurationError(f"cannot parse settings file {source_path}: {exc}") from exc
    if data is None:
        logger.debug("settings file %s is empty; using defaults", source_path)
        return CodecSettings()
    if not isinstance(data, dict):
        raise ConfigurationError("settings file root must be a mapping")
    section = data.get("codec", data)
    return build_settings(section)


__all__ = ["CodecSettings", "build_settings", "load_settings"]
