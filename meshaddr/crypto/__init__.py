"""Crypto collaborator for virtual address hashing."""

from .toolbox import (
    KEY_SIZE,
    ZERO_KEY,
    MeshCrypto,
    AesCmacCrypto,
    aes_cmac,
    s1,
)

__all__ = [
    "KEY_SIZE",
    "ZERO_KEY",
    "MeshCrypto",
    "AesCmacCrypto",
    "aes_cmac",
    "s1",
]
