"""
Structural checks for raw 16-bit mesh addresses.

An address reaches us either as an integer or as a big-endian byte pair.
Both checks answer the same question: is this a valid 16-bit address
representation?
"""

from __future__ import annotations
import numbers
from typing import Optional, Union

from .constants import ADDRESS_BYTES, ADDRESS_MASK

RawAddress = Union[int, bytes, bytearray]


def is_well_formed(address: RawAddress) -> bool:
    """
    Check that an address is a valid 16-bit representation.

    Args:
        address: Integer address or big-endian byte pair.

    Returns:
        True for a 2-byte sequence or an integral value that fits in
        16 bits (numpy integer scalars included).
    """
    if isinstance(address, (bytes, bytearray)):
        return len(address) == ADDRESS_BYTES
    # bool is an int subclass but never an address
    if isinstance(address, numbers.Integral) and not isinstance(address, bool):
        value = int(address)
        return value == (value & ADDRESS_MASK)
    return False


def address_from_bytes(address: Union[bytes, bytearray]) -> Optional[int]:
    """Convert a big-endian byte pair to an int, None if malformed."""
    if not isinstance(address, (bytes, bytearray)) or not is_well_formed(address):
        return None
    return int.from_bytes(address, "big")


def address_to_bytes(address: int) -> Optional[bytes]:
    """Convert an int address to its big-endian byte pair, None if out of range."""
    if isinstance(address, (bytes, bytearray)) or not is_well_formed(address):
        return None
    return int(address).to_bytes(ADDRESS_BYTES, "big")


def normalize(address: RawAddress) -> Optional[int]:
    """
    Reduce either representation to an int address.

    Returns:
        The integer address, or None when the input is not well formed.
    """
    if isinstance(address, (bytes, bytearray)):
        return address_from_bytes(address)
    if is_well_formed(address):
        return int(address)
    return None
