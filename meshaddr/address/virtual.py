"""
Virtual address hashing and Label UUID resolution.

A virtual address carries a 14-bit hash of a 128-bit Label UUID:

    [15:14] 0b10
    [13:0]  hash = AES-CMAC_salt(label_uuid)[12:16] & 0x3FFF
            salt = s1("vtad")

Resolution goes the other way: given a pool of known Label UUIDs, return
the first one whose hash matches the address. The hash space is only 14
bits, so collisions are possible and pool order decides the winner.
"""

from __future__ import annotations
import logging
import uuid
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..crypto import AesCmacCrypto, MeshCrypto
from .classifier import AddressType, classify
from .constants import (
    START_VIRTUAL_ADDRESS,
    VIRTUAL_HASH_MASK,
    VIRTUAL_HASH_OFFSET,
    VTAD,
)
from .range_checker import RawAddress, normalize

logger = logging.getLogger(__name__)

_HASH_WORD_SIZE = 4


def get_hash(address: RawAddress) -> int:
    """
    Extract the 14-bit hash field of a virtual address.

    Args:
        address: Integer address or big-endian byte pair.

    Returns:
        Low 14 bits if classify() reports VIRTUAL, otherwise 0. A result of 0
        is ambiguous; check classify() first when it matters.
    """
    if classify(address) is not AddressType.VIRTUAL:
        return 0
    return normalize(address) & VIRTUAL_HASH_MASK


def generate_label_uuid() -> uuid.UUID:
    """Generate a random Label UUID."""
    return uuid.uuid4()


@dataclass
class VirtualAddressResolver:
    """
    Label UUID hashing bound to a crypto collaborator.

    The "vtad" salt is derived once at construction; instances hold no
    other state and can be shared between threads.
    """
    crypto: MeshCrypto = field(default_factory=AesCmacCrypto)
    _salt: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._salt = self.crypto.derive_salt(VTAD)

    @property
    def salt(self) -> bytes:
        """Salt used as the CMAC key, s1("vtad")."""
        return self._salt

    def label_hash(self, label_uuid: uuid.UUID) -> int:
        """
        Compute the 14-bit virtual address hash of a Label UUID.

        Args:
            label_uuid: Label UUID.

        Returns:
            Hash in the range 0x0000-0x3FFF.

        Raises:
            TypeError: If label_uuid is not a UUID.
        """
        if not isinstance(label_uuid, uuid.UUID):
            raise TypeError(f"Expected UUID, got {type(label_uuid).__name__}")

        mac = self.crypto.compute_mac(label_uuid.bytes, self._salt)
        word = mac[VIRTUAL_HASH_OFFSET:VIRTUAL_HASH_OFFSET + _HASH_WORD_SIZE]
        return int.from_bytes(word, "big") & VIRTUAL_HASH_MASK

    def virtual_address(self, label_uuid: uuid.UUID) -> int:
        """Build the virtual address for a Label UUID."""
        return START_VIRTUAL_ADDRESS | self.label_hash(label_uuid)

    def resolve(
        self,
        label_uuids: Iterable[uuid.UUID],
        address: RawAddress,
    ) -> Optional[uuid.UUID]:
        """
        Find the Label UUID a virtual address was derived from.

        Args:
            label_uuids: Candidate Label UUIDs, searched in order.
            address: Virtual address.

        Returns:
            First matching Label UUID, or None if the address is not
            virtual or nothing in the pool matches.
        """
        if classify(address) is not AddressType.VIRTUAL:
            return None

        target = get_hash(address)
        for label_uuid in label_uuids:
            if self.label_hash(label_uuid) == target:
                logger.debug("Address 0x%04X resolved to %s", normalize(address), label_uuid)
                return label_uuid

        logger.debug("No Label UUID matches virtual hash 0x%04X", target)
        return None


_default_resolver: Optional[VirtualAddressResolver] = None


def get_default_resolver() -> VirtualAddressResolver:
    """Shared resolver using AES-CMAC crypto."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = VirtualAddressResolver()
    return _default_resolver


def _resolver_for(crypto: Optional[MeshCrypto]) -> VirtualAddressResolver:
    if crypto is None:
        return get_default_resolver()
    return VirtualAddressResolver(crypto=crypto)


# =============================================================================
# Convenience functions
# =============================================================================

def label_uuid_hash(
    label_uuid: uuid.UUID,
    crypto: Optional[MeshCrypto] = None,
) -> int:
    """Compute the 14-bit virtual address hash of a Label UUID."""
    return _resolver_for(crypto).label_hash(label_uuid)


def virtual_address_for(
    label_uuid: uuid.UUID,
    crypto: Optional[MeshCrypto] = None,
) -> int:
    """Build the virtual address (0b10 + 14-bit hash) for a Label UUID."""
    return _resolver_for(crypto).virtual_address(label_uuid)


def resolve_label_uuid(
    label_uuids: Iterable[uuid.UUID],
    address: RawAddress,
    crypto: Optional[MeshCrypto] = None,
) -> Optional[uuid.UUID]:
    """Return the first Label UUID in the pool matching a virtual address."""
    return _resolver_for(crypto).resolve(label_uuids, address)
