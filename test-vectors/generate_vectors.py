#!/usr/bin/env python3

# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

"""
Generate public-values-vectors.json for the ABI encoding and digest tests.

Run from the repository root:
    python test-vectors/generate_vectors.py
"""

import json
from pathlib import Path

from sigverify.codec import encode_public_values
from sigverify.constants import PUBLIC_VALUES_ENCODING
from sigverify.hashing import hash_public_values


def make_vector(name: str, pub_key_hex: str, message_hex: str, signature_hex: str) -> dict:
    encoded = encode_public_values(
        bytes.fromhex(pub_key_hex),
        bytes.fromhex(message_hex),
        bytes.fromhex(signature_hex),
    )
    return {
        "name": name,
        "encoding": PUBLIC_VALUES_ENCODING,
        "pubKey": pub_key_hex,
        "message": message_hex,
        "signature": signature_hex,
        "encoded": encoded.hex(),
        "digest": hash_public_values(encoded).hex(),
    }


vectors = [
    make_vector(
        "secp256k1-shaped-test-message",
        "02" + bytes(range(1, 33)).hex(),
        b"test".hex(),
        bytes(range(64)).hex(),
    ),
    make_vector(
        "ed25519-shaped-hello",
        "aa" * 32,
        b"Hello, SP1 Secp256k1!".hex(),
        "bb" * 64,
    ),
    make_vector("all-empty", "", "", ""),
]

out_path = Path(__file__).resolve().parent / "public-values-vectors.json"
out_path.write_text(json.dumps(vectors, indent=2) + "\n")
print(f"Wrote {len(vectors)} vectors to {out_path}")
