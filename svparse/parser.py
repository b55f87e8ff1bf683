"""
Entry points tying the line source to the record table.

Mirrors the two ways a table is usually obtained: from lines already in
memory, or from a file on disk (read, decoded, blank lines dropped).
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple, Union

from .reader import decode_lines, read_lines
from .rules import DEFAULT_HAS_HEADERS, DEFAULT_SUPPRESS_AMBIGUITY
from .table import RecordTable


def parse_lines(
    lines: Sequence[str],
    has_headers: bool = DEFAULT_HAS_HEADERS,
    suppress_ambiguity: bool = DEFAULT_SUPPRESS_AMBIGUITY,
) -> RecordTable:
    return RecordTable.build(lines, has_headers, suppress_ambiguity)


def parse_bytes(
    raw: bytes,
    has_headers: bool = DEFAULT_HAS_HEADERS,
    suppress_ambiguity: bool = DEFAULT_SUPPRESS_AMBIGUITY,
) -> Tuple[RecordTable, str]:
    """Decode `raw`, drop blank lines and parse. Returns the table and the encoding used."""
    lines, encoding = decode_lines(raw)
    return RecordTable.build(lines, has_headers, suppress_ambiguity), encoding


def parse_file(
    path: Union[str, Path],
    has_headers: bool = DEFAULT_HAS_HEADERS,
    suppress_ambiguity: bool = DEFAULT_SUPPRESS_AMBIGUITY,
) -> RecordTable:
    lines, _ = read_lines(path)
    return RecordTable.build(lines, has_headers, suppress_ambiguity)
