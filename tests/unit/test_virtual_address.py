"""
Tests for virtual address hashing and Label UUID resolution.

Tests cover:
1. Hash field extraction
2. Label UUID hashing (transparent and AES-CMAC crypto)
3. Resolution: first match, empty pool, non-virtual addresses
"""

import uuid

import numpy as np
import pytest

from meshaddr.address.constants import VTAD
from meshaddr.address.virtual import (
    VirtualAddressResolver,
    get_hash,
    generate_label_uuid,
    label_uuid_hash,
    virtual_address_for,
    resolve_label_uuid,
)


class TestGetHash:
    """Test hash field extraction."""

    def test_virtual_address(self):
        assert get_hash(0x91FF) == 0x11FF

    def test_virtual_address_bytes(self):
        assert get_hash(b"\x91\xff") == 0x11FF

    @pytest.mark.parametrize("address", [0x0000, 0x1234, 0xC000, 0xFFFC])
    def test_non_virtual_returns_zero(self, address):
        assert get_hash(address) == 0

    def test_malformed_returns_zero(self):
        assert get_hash(b"\x91") == 0
        assert get_hash(0x191FF) == 0

    def test_all_nodes_follows_classifier_fallback(self):
        """0xFFFF classifies as VIRTUAL, so its low bits are returned."""
        assert get_hash(0xFFFF) == 0x3FFF


class TestLabelHash:
    """Test Label UUID hashing."""

    def test_salt_derived_from_vtad(self, transparent_crypto):
        resolver = VirtualAddressResolver(crypto=transparent_crypto)
        assert transparent_crypto.salt_inputs == [VTAD]
        assert resolver.salt == bytes(16)

    def test_hash_uses_bytes_12_to_16(self, transparent_resolver):
        label = uuid.UUID("00000000-0000-0000-0000-0000deadbeef")
        assert transparent_resolver.label_hash(label) == 0xBEEF & 0x3FFF

    def test_hash_ignores_high_bytes(self, transparent_resolver, label_factory):
        assert transparent_resolver.label_hash(label_factory(0x11FF, tag=7)) == 0x11FF

    def test_rejects_non_uuid(self, transparent_resolver):
        with pytest.raises(TypeError):
            transparent_resolver.label_hash("0073e7e4-d8b9-440f-af84-15df4c56c0e1")

    def test_sample_virtual_addresses(self, aes_cmac_resolver, sample_labels):
        for label, address in sample_labels:
            assert aes_cmac_resolver.virtual_address(label) == address

    def test_hash_is_14_bits(self, aes_cmac_resolver):
        for _ in range(32):
            assert 0 <= aes_cmac_resolver.label_hash(uuid.uuid4()) <= 0x3FFF

    def test_virtual_address_has_10_prefix(self, aes_cmac_resolver):
        address = aes_cmac_resolver.virtual_address(uuid.uuid4())
        assert address >> 14 == 0b10


class TestResolve:
    """Test Label UUID resolution."""

    def test_resolves_matching_label(self, transparent_resolver, label_factory):
        match = label_factory(0x11FF)
        pool = [label_factory(0x0001), match, label_factory(0x2222)]
        assert transparent_resolver.resolve(pool, 0x91FF) == match

    def test_non_virtual_address_returns_none(self, transparent_resolver, label_factory):
        pool = [label_factory(0x1234)]
        assert transparent_resolver.resolve(pool, 0x1234) is None

    def test_non_virtual_address_skips_hashing(self, transparent_crypto, label_factory):
        resolver = VirtualAddressResolver(crypto=transparent_crypto)
        resolver.resolve([label_factory(0x1234)], 0xC000)
        assert transparent_crypto.mac_calls == 0

    def test_empty_pool(self, transparent_resolver):
        for address in (0x8000, 0x91FF, 0xBFFF):
            assert transparent_resolver.resolve([], address) is None

    def test_no_match(self, transparent_resolver, label_factory):
        pool = [label_factory(0x0001), label_factory(0x0002)]
        assert transparent_resolver.resolve(pool, 0x91FF) is None

    def test_first_match_wins_on_collision(self, transparent_crypto, label_factory):
        """Labels colliding on the 14-bit hash: pool order decides."""
        resolver = VirtualAddressResolver(crypto=transparent_crypto)
        first = label_factory(0x11FF, tag=1)
        second = label_factory(0x11FF, tag=2)

        assert resolver.resolve([first, second], 0x91FF) == first
        assert resolver.resolve([second, first], 0x91FF) == second

    def test_stops_after_first_match(self, transparent_crypto, label_factory):
        resolver = VirtualAddressResolver(crypto=transparent_crypto)
        pool = [label_factory(0x11FF), label_factory(0x0001), label_factory(0x0002)]
        resolver.resolve(pool, 0x91FF)
        assert transparent_crypto.mac_calls == 1

    def test_accepts_byte_pair_address(self, transparent_resolver, label_factory):
        match = label_factory(0x11FF)
        assert transparent_resolver.resolve([match], b"\x91\xff") == match

    def test_accepts_generator_pool(self, transparent_resolver, label_factory):
        match = label_factory(0x11FF)
        assert transparent_resolver.resolve((u for u in [match]), 0x91FF) == match

    def test_pool_not_mutated(self, transparent_resolver, label_factory):
        pool = [label_factory(0x0001), label_factory(0x11FF)]
        snapshot = list(pool)
        transparent_resolver.resolve(pool, 0x91FF)
        assert pool == snapshot

    def test_accepts_numpy_scalar_address(self, transparent_resolver, label_factory):
        match = label_factory(0x11FF)
        address = np.arange(0x91FF, 0x9200)[0]
        assert get_hash(address) == 0x11FF
        assert transparent_resolver.resolve([match], address) == match


class TestResolveFallbackAddresses:
    """RFU and all-nodes addresses classify as VIRTUAL, so they resolve too."""

    def test_rfu_address_resolves(self, transparent_resolver, label_factory):
        label = label_factory(0x3F05)
        assert transparent_resolver.resolve([label], 0xFF05) == label

    def test_all_nodes_resolves(self, transparent_resolver, label_factory):
        label = label_factory(0x3FFF)
        assert transparent_resolver.resolve([label], 0xFFFF) == label

    def test_fixed_group_address_does_not_resolve(self, transparent_resolver, label_factory):
        """0xFFFC is a GROUP address, so matching low bits are ignored."""
        label = label_factory(0x3FFC)
        assert transparent_resolver.resolve([label], 0xFFFC) is None


class TestConvenienceFunctions:
    """Module-level helpers use AES-CMAC unless given a collaborator."""

    def test_sample_labels(self, sample_labels):
        labels = [label for label, _ in sample_labels]
        for label, address in sample_labels:
            assert virtual_address_for(label) == address
            assert label_uuid_hash(label) == address & 0x3FFF
            assert resolve_label_uuid(labels, address) == label

    def test_custom_crypto(self, transparent_crypto, label_factory):
        label = label_factory(0x11FF)
        assert label_uuid_hash(label, crypto=transparent_crypto) == 0x11FF
        assert virtual_address_for(label, crypto=transparent_crypto) == 0x91FF
        assert resolve_label_uuid([label], 0x91FF, crypto=transparent_crypto) == label

    def test_non_virtual(self, sample_labels):
        labels = [label for label, _ in sample_labels]
        assert resolve_label_uuid(labels, 0x1234) is None

    def test_generate_label_uuid(self):
        a, b = generate_label_uuid(), generate_label_uuid()
        assert isinstance(a, uuid.UUID)
        assert a != b
