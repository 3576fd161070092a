"""Textual form of mesh addresses."""

from __future__ import annotations
import string
from typing import Optional

from .range_checker import is_well_formed

_HEX_PREFIX = "0x"
_MAX_DIGITS = 4


def format_address(address: int, add_0x: bool = True) -> str:
    """
    Render an address as 4 uppercase hex digits.

    Args:
        address: 16-bit address.
        add_0x: Prefix the result with "0x".

    Returns:
        Formatted address, e.g. "0xC001" or "C001".
    """
    text = f"{address:04X}"
    return _HEX_PREFIX + text if add_0x else text


def parse_address(text: str) -> Optional[int]:
    """Parse "0x1234" or "1234" into an address, None if invalid."""
    text = text.strip()
    if text[:2].lower() == _HEX_PREFIX:
        text = text[2:]
    # int(..., 16) also takes signs, underscores and a second prefix
    if not text or len(text) > _MAX_DIGITS or not all(c in string.hexdigits for c in text):
        return None
    value = int(text, 16)
    return value if is_well_formed(value) else None
