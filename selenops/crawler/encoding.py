"""
Character-encoding detection for fetched pages.

The Content-Type ``charset=`` parameter wins; otherwise the raw body is
scanned for an in-document ``charset=`` marker; UTF-8 is the fallback.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Optional

__all__ = ("Encoding", "detect_encoding")


class Encoding(str, Enum):
    """Supported text encodings; values are Python codec names."""

    UTF8 = "utf-8"
    SHIFT_JIS = "shift_jis"
    EUC_JP = "euc_jp"
    ISO_2022_JP = "iso2022_jp"


_CHARSETS: Dict[str, Encoding] = {
    "shift_jis": Encoding.SHIFT_JIS,
    "shift-jis": Encoding.SHIFT_JIS,
    "shiftjis": Encoding.SHIFT_JIS,
    "euc-jp": Encoding.EUC_JP,
    "iso-2022-jp": Encoding.ISO_2022_JP,
    "utf-8": Encoding.UTF8,
}

_HEADER_CHARSET_RE = re.compile(r"charset=", re.IGNORECASE)
# one opening quote is skipped so quoted <meta charset="..."> values are read
_BODY_CHARSET_RE = re.compile(r"charset=[\"']?([A-Za-z0-9_-]*)", re.IGNORECASE)


def _lookup(name: str) -> Optional[Encoding]:
    return _CHARSETS.get(name.lower())


def _from_header(content_type: Optional[str]) -> Optional[Encoding]:
    if not content_type:
        return None
    parts = _HEADER_CHARSET_RE.split(content_type)
    if len(parts) < 2:
        return None
    charset = parts[-1].split(";", 1)[0].strip().strip("\"'")
    return _lookup(charset)


def _from_body(data: bytes) -> Optional[Encoding]:
    # latin-1 maps every byte to a code point, so decoding cannot fail
    text = data.decode("latin-1")
    match = _BODY_CHARSET_RE.search(text)
    if match is None:
        return None
    return _lookup(match.group(1))


def detect_encoding(content_type: Optional[str], data: bytes) -> Encoding:
    """Pick the encoding to decode *data* with.

    Never raises: unknown or missing charsets fall through to UTF-8.
    """
    return _from_header(content_type) or _from_body(data or b"") or Encoding.UTF8
