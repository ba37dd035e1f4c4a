# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# signatures.py

"""
Local signing and verification used to build demo inputs.

The guest program reads (pub_key, signature, message), verifies the signature
and commits `encode_public_values(pub_key, message, signature)`.
`commit_public_values` performs the same steps on the host so the committed
blob can be produced and checked without a prover.

Wire formats follow the guest:
  - secp256k1: 33-byte SEC1 compressed key, 64-byte r || s signature over
    SHA-256(message), s normalized to the lower half of the group order.
  - ed25519: 32-byte raw key, 64-byte signature.
"""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from sigverify.codec import encode_public_values

SECP256K1 = "secp256k1"
ED25519 = "ed25519"

# secp256k1 group order
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def generate_secp256k1_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256K1())


def generate_ed25519_key() -> Ed25519PrivateKey:
    return Ed25519PrivateKey.generate()


def sign_secp256k1(
    private_key: ec.EllipticCurvePrivateKey, message: bytes
) -> tuple[bytes, bytes]:
    """
    Sign a message with ECDSA over secp256k1.

    Args:
        private_key: A secp256k1 private key.
        message: The message; it is hashed with SHA-256 before signing.

    Returns:
        A tuple `(pub_key, signature)` where pub_key is the 33-byte compressed
        point and signature is the 64-byte low-S r || s encoding.
    """
    der = private_key.sign(message, ec.ECDSA(hashes.SHA256()))
    r, s = decode_dss_signature(der)
    if s > SECP256K1_N // 2:
        s = SECP256K1_N - s

    pub_key = private_key.public_key().public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
    )
    return pub_key, r.to_bytes(32, "big") + s.to_bytes(32, "big")


def verify_secp256k1(pub_key: bytes, message: bytes, signature: bytes) -> bool:
    """
    Verify a 64-byte r || s secp256k1 signature.

    High-S signatures are rejected, as the guest's verifier does.
    """
    if len(signature) != 64:
        return False
    r = int.from_bytes(signature[:32], "big")
    s = int.from_bytes(signature[32:], "big")
    if not (0 < r < SECP256K1_N and 0 < s <= SECP256K1_N // 2):
        return False

    try:
        public_key = ec.EllipticCurvePublicKey.from_encoded_point(
            ec.SECP256K1(), bytes(pub_key)
        )
        public_key.verify(
            encode_dss_signature(r, s), bytes(message), ec.ECDSA(hashes.SHA256())
        )
    except (InvalidSignature, ValueError):
        return False
    return True


def sign_ed25519(private_key: Ed25519PrivateKey, message: bytes) -> tuple[bytes, bytes]:
    """
    Sign a message with ed25519.

    Returns:
        A tuple `(pub_key, signature)` of 32 and 64 bytes.
    """
    pub_key = private_key.public_key().public_bytes(
        serialization.Encoding.Raw, serialization.PublicFormat.Raw
    )
    return pub_key, private_key.sign(message)


def verify_ed25519(pub_key: bytes, message: bytes, signature: bytes) -> bool:
    try:
        Ed25519PublicKey.from_public_bytes(bytes(pub_key)).verify(
            bytes(signature), bytes(message)
        )
    except (InvalidSignature, ValueError):
        return False
    return True


VERIFIERS = {
    SECP256K1: verify_secp256k1,
    ED25519: verify_ed25519,
}


def commit_public_values(
    scheme: str, pub_key: bytes, message: bytes, signature: bytes
) -> bytes:
    """
    Host-side equivalent of the guest program: verify, then commit.

    Args:
        scheme: "secp256k1" or "ed25519".
        pub_key: Public key bytes in the scheme's wire format.
        message: Signed message.
        signature: Signature in the scheme's wire format.

    Returns:
        The public values blob the guest would commit.

    Raises:
        ValueError: If the scheme is unknown or the signature does not verify.
    """
    if scheme not in VERIFIERS:
        raise ValueError(f"unknown signature scheme: {scheme}")
    if not VERIFIERS[scheme](pub_key, message, signature):
        raise ValueError(f"{scheme} signature verification failed")
    return encode_public_values(pub_key, message, signature)
