"""
Line source for the parser.

Responsibilities:
- encoding detection + decoding
- newline normalization
- blank line filtering
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple, Union

from charset_normalizer import from_bytes

from .rules import DEFAULT_ENCODING

logger = logging.getLogger(__name__)


def decode_text(raw: bytes) -> Tuple[str, str]:
    """
    Decode input bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is stripped (decoded as utf-8-sig).
    - If decode fails, fall back to UTF-8, then to replacement characters.
    Returns the text and the encoding actually used.
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or DEFAULT_ENCODING
    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    try:
        return raw.decode(decode_used), decode_used
    except (UnicodeDecodeError, LookupError):
        logger.warning("decoding as %s failed, falling back to %s", decode_used, DEFAULT_ENCODING)

    try:
        return raw.decode(DEFAULT_ENCODING), DEFAULT_ENCODING
    except UnicodeDecodeError:
        # Last resort: decode with replacement so parsing can continue deterministically
        return raw.decode(DEFAULT_ENCODING, errors="replace"), DEFAULT_ENCODING


def split_lines(text: str) -> List[str]:
    """Split on CRLF/CR/LF and drop lines that are empty after trimming."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return [line for line in text.split("\n") if line.strip()]


def decode_lines(raw: bytes) -> Tuple[List[str], str]:
    text, encoding = decode_text(raw)
    lines = split_lines(text)
    logger.debug("decoded %d bytes as %s into %d lines", len(raw), encoding, len(lines))
    return lines, encoding


def read_lines(path: Union[str, Path]) -> Tuple[List[str], str]:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File {path} not found")
    return decode_lines(path.read_bytes())
