"""
Shared pytest fixtures for mesh address tests.

Provides Label UUIDs with known virtual addresses and a transparent crypto
collaborator whose "MAC" is the message itself, so the hash of a UUID is
simply its low 14 bits.
"""

import uuid

import pytest

from meshaddr.crypto import MeshCrypto, AesCmacCrypto
from meshaddr.address.virtual import VirtualAddressResolver


# ==============================================================================
# Crypto Fixtures
# ==============================================================================

class TransparentCrypto(MeshCrypto):
    """Crypto stand-in: salt is zeros, MAC echoes the message."""

    def __init__(self):
        self.salt_inputs = []
        self.mac_calls = 0

    def derive_salt(self, data: bytes) -> bytes:
        self.salt_inputs.append(bytes(data))
        return bytes(16)

    def compute_mac(self, message: bytes, key: bytes) -> bytes:
        self.mac_calls += 1
        return bytes(message)


@pytest.fixture
def transparent_crypto() -> TransparentCrypto:
    """Crypto collaborator whose label hash is uuid.int & 0x3FFF."""
    return TransparentCrypto()


@pytest.fixture
def transparent_resolver(transparent_crypto) -> VirtualAddressResolver:
    """Resolver bound to the transparent crypto collaborator."""
    return VirtualAddressResolver(crypto=transparent_crypto)


@pytest.fixture
def aes_cmac_resolver() -> VirtualAddressResolver:
    """Resolver bound to real AES-CMAC crypto."""
    return VirtualAddressResolver(crypto=AesCmacCrypto())


# ==============================================================================
# Label UUID Fixtures
# ==============================================================================

# Label UUID / virtual address pairs from the mesh profile sample data
SAMPLE_LABELS = [
    (uuid.UUID("0073e7e4-d8b9-440f-af84-15df4c56c0e1"), 0xB529),
    (uuid.UUID("f4a002c7-fb1e-4ca0-a469-a021de0db875"), 0x9736),
]


@pytest.fixture
def sample_labels():
    """Known (Label UUID, virtual address) pairs."""
    return list(SAMPLE_LABELS)


@pytest.fixture
def label_factory():
    """Factory for Label UUIDs with a chosen transparent hash."""
    def _create(label_hash: int, tag: int = 0) -> uuid.UUID:
        # tag lands above bit 32 so it never changes the hash
        return uuid.UUID(int=(tag << 64) | (label_hash & 0x3FFF))
    return _create
