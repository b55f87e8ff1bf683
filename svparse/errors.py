"""Error codes and exceptions raised while inferring separators and reading records."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, Optional


class ErrorCode(str, Enum):
    AMBIGUOUS_SEPARATOR = "AMBIGUOUS_SEPARATOR"
    NO_SEPARATOR = "NO_SEPARATOR"
    DUPLICATE_HEADER = "DUPLICATE_HEADER"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    UNKNOWN_HEADER = "UNKNOWN_HEADER"
    NO_HEADERS = "NO_HEADERS"


class SvParseError(ValueError):
    """Exception carrying a structured error code for the API and CLI."""

    code: ErrorCode

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code.value, "message": self.message}


class AmbiguityError(SvParseError):
    code = ErrorCode.AMBIGUOUS_SEPARATOR

    def __init__(self, candidates: Iterable[str]) -> None:
        self.candidates = list(candidates)
        super().__init__(
            "Could not determine separator, candidates: %s" % ", ".join(repr(c) for c in self.candidates),
            context={"candidates": self.candidates},
        )


class NoSeparatorError(SvParseError):
    code = ErrorCode.NO_SEPARATOR


class DuplicateHeaderError(SvParseError):
    code = ErrorCode.DUPLICATE_HEADER

    def __init__(self, duplicates: Iterable[str]) -> None:
        self.duplicates = sorted(set(duplicates))
        super().__init__(
            "Header names must be distinct, repeated: %s" % ", ".join(repr(d) for d in self.duplicates),
            context={"duplicates": self.duplicates},
        )


class FieldIndexError(SvParseError, IndexError):
    code = ErrorCode.OUT_OF_RANGE


class UnknownHeaderError(SvParseError, KeyError):
    code = ErrorCode.UNKNOWN_HEADER


class HeadersNotConfiguredError(SvParseError, LookupError):
    code = ErrorCode.NO_HEADERS
