"""I/O helper subpackage."""
from . import delimited, tables, textio
from .delimited import DelimitedCodec

__all__ = ["delimited", "tables", "textio", "DelimitedCodec"]
