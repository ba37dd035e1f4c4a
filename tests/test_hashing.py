# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import hashlib

import pytest

from sigverify.bn254 import curve_order
from sigverify.hashing import digest_hex, hash_public_values


def test_empty_bytes_digest():
    # sha256("") = e3b0c442..., top three bits cleared
    h = hash_public_values(b"")
    assert h.hex() == "03b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_pinned_vectors(vectors):
    for vec in vectors:
        h = hash_public_values(bytes.fromhex(vec["encoded"]))
        assert h.hex() == vec["digest"], f"Vector '{vec['name']}' digest mismatch"


def test_top_three_bits_are_clear():
    for i in range(256):
        h = hash_public_values(bytes([i]) * (i + 1))
        assert len(h) == 32
        assert h[0] & 0xE0 == 0
        assert int.from_bytes(h, "big") < 2**253


def test_mask_is_not_a_modular_reduction():
    data = b"test"
    raw = int.from_bytes(hashlib.sha256(data).digest(), "big")
    masked = int.from_bytes(hash_public_values(data), "big")
    assert masked == raw & ((1 << 253) - 1)
    assert masked < curve_order


def test_only_first_byte_changes():
    data = b"peace"
    raw = hashlib.sha256(data).digest()
    assert hash_public_values(data)[1:] == raw[1:]


def test_digest_hex_accepts_prefix():
    assert digest_hex("0x") == digest_hex("") == hash_public_values(b"").hex()


if __name__ == "__main__":
    pytest.main()
