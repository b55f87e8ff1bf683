"""
Records split on an inferred separator, accessible by index, header name, or iteration.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import (
    DuplicateHeaderError,
    FieldIndexError,
    HeadersNotConfiguredError,
    UnknownHeaderError,
)
from .rules import (
    DEFAULT_HAS_HEADERS,
    DEFAULT_SUPPRESS_AMBIGUITY,
    TABLE_BORDER,
    TABLE_CELL_PADDING,
)
from .separator import infer_separator

logger = logging.getLogger(__name__)

Column = Union[int, str]


class SvRecord:
    """One parsed line; fields are accessible by position or header name."""

    __slots__ = ("_fields", "_headers")

    def __init__(self, fields: Sequence[str], headers: Optional[Mapping[str, int]] = None):
        self._fields: Tuple[str, ...] = tuple(fields)
        self._headers = headers

    @property
    def fields(self) -> Tuple[str, ...]:
        return self._fields

    def __getitem__(self, column: Column) -> str:
        if isinstance(column, str):
            return self._fields[self._position_of(column)]
        if not 0 <= column < len(self._fields):
            raise FieldIndexError(
                f"Field index {column} out of range for record with {len(self._fields)} fields"
            )
        return self._fields[column]

    def get(self, header: str, default: Optional[str] = None) -> Optional[str]:
        try:
            return self[header]
        except (UnknownHeaderError, FieldIndexError):
            return default

    def _position_of(self, header: str) -> int:
        if self._headers is None:
            raise HeadersNotConfiguredError(
                "Tried to access field through header name, but headers are not set up"
            )
        if header not in self._headers:
            raise UnknownHeaderError(f"Couldn't find header name {header!r}")
        position = self._headers[header]
        if position >= len(self._fields):
            raise FieldIndexError(f"Record has no field for header {header!r}")
        return position

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SvRecord):
            return self._fields == other._fields
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SvRecord({list(self._fields)!r})"

    def __str__(self) -> str:
        return "".join(field + "\t" for field in self._fields)


class RecordTable:
    """
    Parsed contents of a delimiter-separated file.

    Use `RecordTable.build` to infer the separator and split the lines.
    Instances are immutable.
    """

    def __init__(
        self,
        records: Sequence[SvRecord],
        separator: str,
        headers: Optional[Sequence[str]] = None,
    ):
        self._records: Tuple[SvRecord, ...] = tuple(records)
        self._separator = separator
        self._headers: Optional[Tuple[str, ...]] = tuple(headers) if headers is not None else None

    @classmethod
    def build(
        cls,
        lines: Sequence[str],
        has_headers: bool = DEFAULT_HAS_HEADERS,
        suppress_ambiguity: bool = DEFAULT_SUPPRESS_AMBIGUITY,
    ) -> "RecordTable":
        separator = infer_separator(lines, has_headers, suppress_ambiguity)

        split_lines = [line.split(separator) for line in lines]

        headers: Optional[List[str]] = None
        header_index: Optional[Dict[str, int]] = None
        if has_headers:
            headers = split_lines.pop(0)
            header_index = _index_headers(headers)

        records = [SvRecord(fields, header_index) for fields in split_lines]
        logger.debug("built table: separator=%r records=%d headers=%s", separator, len(records), headers)
        return cls(records, separator, headers)

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def headers(self) -> Optional[Tuple[str, ...]]:
        return self._headers

    @property
    def records(self) -> Tuple[SvRecord, ...]:
        return self._records

    def field(self, row: int, column: Column) -> str:
        return self[row][column]

    def as_dicts(self) -> List[Dict[str, str]]:
        if self._headers is None:
            raise HeadersNotConfiguredError("Records can only be mapped by name when headers are set up")
        return [dict(zip(self._headers, record.fields)) for record in self._records]

    def __getitem__(self, row: int) -> SvRecord:
        if not 0 <= row < len(self._records):
            raise FieldIndexError(f"Row {row} out of range for table with {len(self._records)} records")
        return self._records[row]

    def __iter__(self) -> Iterator[SvRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordTable(separator={self._separator!r}, headers={self._headers!r}, records={len(self._records)})"

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        """
        Format the records as a fixed-width table bordered with asterisks.

        Returns an empty string when there are no records.
        """
        if not self._records:
            return ""

        rows = [record.fields for record in self._records]
        sized = rows + [self._headers] if self._headers is not None else rows
        column_count = max(len(r) for r in sized)

        widths = [
            max(len(r[i]) for r in sized if i < len(r)) + TABLE_CELL_PADDING
            for i in range(column_count)
        ]
        border = TABLE_BORDER * (sum(widths) + 2 * column_count + 1)

        out = []
        if self._headers is not None:
            out.append(border)
            out.append(_render_row(self._headers, widths))
        out.append(border)
        out.extend(_render_row(r, widths) for r in rows)
        out.append(border)
        return "\n".join(out) + "\n"


def _render_row(fields: Sequence[str], widths: Sequence[int]) -> str:
    cells = []
    for i, width in enumerate(widths):
        value = fields[i] if i < len(fields) else ""
        cells.append(f"{TABLE_BORDER} {value.ljust(width)}")
    return "".join(cells) + TABLE_BORDER


def _index_headers(headers: Sequence[str]) -> Dict[str, int]:
    duplicates = [name for name, n in Counter(headers).items() if n > 1]
    if duplicates:
        raise DuplicateHeaderError(duplicates)
    return {name: i for i, name in enumerate(headers)}
