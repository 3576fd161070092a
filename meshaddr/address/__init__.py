"""Mesh address classification and virtual address resolution."""

from .constants import (
    UNASSIGNED_ADDRESS,
    START_UNICAST_ADDRESS,
    END_UNICAST_ADDRESS,
    START_VIRTUAL_ADDRESS,
    END_VIRTUAL_ADDRESS,
    START_GROUP_ADDRESS,
    END_GROUP_ADDRESS,
    ALL_PROXIES_ADDRESS,
    ALL_FRIENDS_ADDRESS,
    ALL_RELAYS_ADDRESS,
    ALL_NODES_ADDRESS,
    VTAD,
    VIRTUAL_HASH_OFFSET,
    VIRTUAL_HASH_MASK,
)
from .range_checker import (
    is_well_formed,
    address_from_bytes,
    address_to_bytes,
)
from .classifier import (
    AddressType,
    FIXED_GROUP_ADDRESSES,
    classify,
    is_unassigned_address,
    is_unicast_address,
    is_group_address,
    is_virtual_address,
    is_fixed_group_address,
)
from .virtual import (
    VirtualAddressResolver,
    get_hash,
    generate_label_uuid,
    label_uuid_hash,
    virtual_address_for,
    resolve_label_uuid,
)
from .formatting import (
    format_address,
    parse_address,
)
from .batch import (
    classify_array,
    count_by_type,
)

__all__ = [
    "UNASSIGNED_ADDRESS",
    "START_UNICAST_ADDRESS",
    "END_UNICAST_ADDRESS",
    "START_VIRTUAL_ADDRESS",
    "END_VIRTUAL_ADDRESS",
    "START_GROUP_ADDRESS",
    "END_GROUP_ADDRESS",
    "ALL_PROXIES_ADDRESS",
    "ALL_FRIENDS_ADDRESS",
    "ALL_RELAYS_ADDRESS",
    "ALL_NODES_ADDRESS",
    "VTAD",
    "VIRTUAL_HASH_OFFSET",
    "VIRTUAL_HASH_MASK",
    "is_well_formed",
    "address_from_bytes",
    "address_to_bytes",
    "AddressType",
    "FIXED_GROUP_ADDRESSES",
    "classify",
    "is_unassigned_address",
    "is_unicast_address",
    "is_group_address",
    "is_virtual_address",
    "is_fixed_group_address",
    "VirtualAddressResolver",
    "get_hash",
    "generate_label_uuid",
    "label_uuid_hash",
    "virtual_address_for",
    "resolve_label_uuid",
    "format_address",
    "parse_address",
    "classify_array",
    "count_by_type",
]
