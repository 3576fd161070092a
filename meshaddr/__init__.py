"""Mesh network address classification and virtual address resolution."""

from .address import (
    AddressType,
    classify,
    is_well_formed,
    is_unassigned_address,
    is_unicast_address,
    is_group_address,
    is_virtual_address,
    is_fixed_group_address,
    VirtualAddressResolver,
    get_hash,
    generate_label_uuid,
    label_uuid_hash,
    virtual_address_for,
    resolve_label_uuid,
    format_address,
    parse_address,
    classify_array,
    count_by_type,
)
from .crypto import MeshCrypto, AesCmacCrypto
from .config import (
    MeshAddressConfig,
    load_mesh_address_config,
    get_default_config,
)

__version__ = "0.1.0"

__all__ = [
    "AddressType",
    "classify",
    "is_well_formed",
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
    "MeshCrypto",
    "AesCmacCrypto",
    "MeshAddressConfig",
    "load_mesh_address_config",
    "get_default_config",
]
