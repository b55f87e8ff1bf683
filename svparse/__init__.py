"""
Delimiter-separated file parser with separator inference.

The separator may be any sequence of non-alphanumeric characters and is
deduced from the data itself.
"""

from .errors import (
    AmbiguityError,
    DuplicateHeaderError,
    ErrorCode,
    FieldIndexError,
    HeadersNotConfiguredError,
    NoSeparatorError,
    SvParseError,
    UnknownHeaderError,
)
from .parser import parse_bytes, parse_file, parse_lines
from .separator import infer_separator
from .table import RecordTable, SvRecord

__all__ = [
    "AmbiguityError",
    "DuplicateHeaderError",
    "ErrorCode",
    "FieldIndexError",
    "HeadersNotConfiguredError",
    "NoSeparatorError",
    "RecordTable",
    "SvParseError",
    "SvRecord",
    "UnknownHeaderError",
    "infer_separator",
    "parse_bytes",
    "parse_file",
    "parse_lines",
]
