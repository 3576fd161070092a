"""
Address type classification.

Classification is an ordered decision list, first match wins:
    1. UNASSIGNED  address == 0x0000
    2. UNICAST     0x0001 <= address <= 0x7FFF
    3. GROUP       high byte in [0xC0, 0xFF], excluding RFU (0xFF00-0xFFFB)
                   and all-nodes (0xFFFF)
    4. VIRTUAL     everything else

Rule 4 also absorbs the RFU span and the all-nodes address, which rule 3
explicitly excludes from GROUP. Whether those deserve their own category is
an open question; the fallback behavior is kept as-is.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional

from .constants import (
    ALL_FRIENDS_ADDRESS,
    ALL_NODES_ADDRESS,
    ALL_PROXIES_ADDRESS,
    ALL_RELAYS_ADDRESS,
    END_UNICAST_ADDRESS,
    END_VIRTUAL_ADDRESS,
    GROUP_HIGH_BYTE_MAX,
    GROUP_HIGH_BYTE_MIN,
    RFU_HIGH_BYTE,
    RFU_LOW_BYTE_MAX,
    RFU_LOW_BYTE_MIN,
    START_UNICAST_ADDRESS,
    START_VIRTUAL_ADDRESS,
    UNASSIGNED_ADDRESS,
)
from .range_checker import RawAddress, normalize


class AddressType(Enum):
    """Mesh address category."""
    UNASSIGNED = 0
    UNICAST = 1
    GROUP = 2
    VIRTUAL = 3

    @property
    def code(self) -> int:
        """Integer code used by array classification."""
        return self.value


FIXED_GROUP_ADDRESSES = (
    ALL_PROXIES_ADDRESS,
    ALL_FRIENDS_ADDRESS,
    ALL_RELAYS_ADDRESS,
    ALL_NODES_ADDRESS,
)


def _split(address: int) -> tuple[int, int]:
    return (address >> 8) & 0xFF, address & 0xFF


def _unassigned(address: int) -> bool:
    return address == UNASSIGNED_ADDRESS


def _unicast(address: int) -> bool:
    return START_UNICAST_ADDRESS <= address <= END_UNICAST_ADDRESS


def _group(address: int) -> bool:
    high, low = _split(address)
    group_range = GROUP_HIGH_BYTE_MIN <= high <= GROUP_HIGH_BYTE_MAX
    rfu = high == RFU_HIGH_BYTE and RFU_LOW_BYTE_MIN <= low <= RFU_LOW_BYTE_MAX
    all_nodes = address == ALL_NODES_ADDRESS
    return group_range and not rfu and not all_nodes


def classify(address: RawAddress) -> Optional[AddressType]:
    """
    Classify a mesh address.

    Args:
        address: Integer address or big-endian byte pair.

    Returns:
        AddressType, or None if the address is not well formed.
    """
    value = normalize(address)
    if value is None:
        return None

    if _unassigned(value):
        return AddressType.UNASSIGNED
    if _unicast(value):
        return AddressType.UNICAST
    if _group(value):
        return AddressType.GROUP
    # Fallback: true virtual range plus RFU and all-nodes (see module docstring)
    return AddressType.VIRTUAL


def is_unassigned_address(address: RawAddress) -> bool:
    """Check for the unassigned address 0x0000."""
    value = normalize(address)
    return value is not None and _unassigned(value)


def is_unicast_address(address: RawAddress) -> bool:
    """Check for a unicast address (0x0001-0x7FFF)."""
    value = normalize(address)
    return value is not None and _unicast(value)


def is_group_address(address: RawAddress) -> bool:
    """Check for a group address, excluding RFU and all-nodes."""
    value = normalize(address)
    return value is not None and _group(value)


def is_virtual_address(address: RawAddress) -> bool:
    """
    Check for an address inside the virtual range (0x8000-0xBFFF).

    Stricter than classify(): RFU and all-nodes addresses are rejected here
    even though classify() reports them as VIRTUAL.
    """
    value = normalize(address)
    return value is not None and START_VIRTUAL_ADDRESS <= value <= END_VIRTUAL_ADDRESS


def is_fixed_group_address(address: RawAddress) -> bool:
    """Check for one of all-proxies, all-friends, all-relays or all-nodes."""
    return normalize(address) in FIXED_GROUP_ADDRESSES
