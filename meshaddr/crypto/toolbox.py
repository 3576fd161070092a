"""
Mesh security toolbox primitives used for virtual address hashing.

    aes_cmac(m, k) = AES-CMAC_k(m)          (RFC 4493, 128-bit key)
    s1(m)          = AES-CMAC_ZERO(m)       (salt generation)
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from cryptography.hazmat.primitives.ciphers import algorithms
from cryptography.hazmat.primitives.cmac import CMAC

KEY_SIZE = 16
ZERO_KEY = bytes(KEY_SIZE)


def aes_cmac(message: bytes, key: bytes) -> bytes:
    """
    Compute AES-CMAC over a message.

    Args:
        message: Data to authenticate.
        key: 128-bit key.

    Returns:
        16-byte MAC.

    Raises:
        ValueError: If key is not 16 bytes.
    """
    if len(key) != KEY_SIZE:
        raise ValueError(f"AES-CMAC key must be {KEY_SIZE} bytes, got {len(key)}")
    mac = CMAC(algorithms.AES(bytes(key)))
    mac.update(bytes(message))
    return mac.finalize()


def s1(data: bytes) -> bytes:
    """Salt generation function: AES-CMAC with an all-zero key."""
    return aes_cmac(data, ZERO_KEY)


class MeshCrypto(ABC):
    """
    Crypto collaborator for label hashing.

    Implementations must be stateless and deterministic so they can be
    shared across threads.
    """

    @abstractmethod
    def derive_salt(self, data: bytes) -> bytes:
        """Derive a 16-byte salt from data."""
        pass

    @abstractmethod
    def compute_mac(self, message: bytes, key: bytes) -> bytes:
        """Compute a 16-byte MAC over message keyed by key."""
        pass


class AesCmacCrypto(MeshCrypto):
    """Mesh profile crypto: s1 salts and AES-CMAC."""

    def derive_salt(self, data: bytes) -> bytes:
        return s1(data)

    def compute_mac(self, message: bytes, key: bytes) -> bytes:
        return aes_cmac(message, key)

    def __repr__(self) -> str:
        return "AesCmacCrypto()"
