"""
Deterministic parsing rules.

This file exists to make defaults explicit and enforceable.
"""

DEFAULT_HAS_HEADERS = True
DEFAULT_SUPPRESS_AMBIGUITY = False

DEFAULT_ENCODING = "utf-8"

TABLE_BORDER = "*"
TABLE_CELL_PADDING = 2  # extra spaces added to the widest field of a column

SUPPORTED_SUFFIXES = (".csv", ".tsv", ".txt", ".dsv", ".sv")
