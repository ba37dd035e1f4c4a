# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

import hashlib

from eth_typing import Hash32

from sigverify.constants import DIGEST_MASK


def hash_public_values(public_values: bytes) -> Hash32:
    """
    Calculate the public values digest committed to by the proof.

    Mirrors `hashPublicValues` of the on-chain verifier:

        sha256(publicValues) & bytes32(uint256((1 << 253) - 1))

    Only the top three bits of the most significant byte are cleared. This is
    a mask, not a reduction modulo the scalar field; the result is always
    below 2^253 and therefore below the BN254 scalar field order.

    Args:
        public_values (bytes): The encoded public values blob.

    Returns:
        Hash32: The masked 32-byte digest.
    """
    digest = bytearray(hashlib.sha256(public_values).digest())
    digest[0] &= DIGEST_MASK
    return Hash32(bytes(digest))


def digest_hex(public_values_hex: str) -> str:
    """
    Hex in, hex out variant of `hash_public_values`.

    Args:
        public_values_hex (str): Encoded public values, with or without 0x.

    Returns:
        str: The masked digest as lowercase hex (no prefix).
    """
    h = public_values_hex.strip().lower()
    if h.startswith("0x"):
        h = h[2:]
    return hash_public_values(bytes.fromhex(h)).hex()
