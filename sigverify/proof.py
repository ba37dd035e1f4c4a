# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# proof.py

"""
Fixed-layout Groth16 proof blob.

    [0,   4)  selector
    [4,  36)  A.x
    [36, 68)  A.y
    [68, 100) B.x1
    [100,132) B.x0
    [132,164) B.y1
    [164,196) B.y0
    [196,228) C.x
    [228,260) C.y

Every word is a 32-byte big-endian unsigned integer. G2 coordinates put the
imaginary part first, matching the packing of the reference contract.
Anything after byte 260 is ignored.
"""

from dataclasses import dataclass

from sigverify.bn254 import (
    field_modulus,
    g1_affine,
    g1_point,
    g2_affine,
    g2_point,
    is_on_g1,
    is_on_g2,
)
from sigverify.constants import MIN_PROOF_LENGTH, SELECTOR_LENGTH, WORD_LENGTH
from sigverify.errors import MalformedFieldElement, ProofTooShort

# word index of each coordinate after the selector
A_X, A_Y, B_X1, B_X0, B_Y1, B_Y0, C_X, C_Y = range(8)


@dataclass(frozen=True)
class Proof:
    a: tuple
    b: tuple
    c: tuple


def _words(data: bytes) -> list[int]:
    words = []
    for i in range(8):
        start = SELECTOR_LENGTH + i * WORD_LENGTH
        word = int.from_bytes(data[start : start + WORD_LENGTH], "big")
        if word >= field_modulus:
            raise MalformedFieldElement(
                f"proof word {i} at offset {start} is not a field element"
            )
        words.append(word)
    return words


def decode_proof(data: bytes) -> Proof:
    """
    Parse a proof blob into its three points.

    Args:
        data: Selector followed by the eight 32-byte coordinates.

    Returns:
        Proof: The decoded A (G1), B (G2) and C (G1) points.

    Raises:
        ProofTooShort: If fewer than 260 bytes are present.
        MalformedFieldElement: If a coordinate is not below the field modulus
            or a point is not in its group.
    """
    if len(data) < MIN_PROOF_LENGTH:
        raise ProofTooShort(len(data), MIN_PROOF_LENGTH)

    w = _words(data)
    a = g1_point(w[A_X], w[A_Y])
    b = g2_point(w[B_X0], w[B_X1], w[B_Y0], w[B_Y1])
    c = g1_point(w[C_X], w[C_Y])

    if not is_on_g1(a):
        raise MalformedFieldElement("proof point A is not on G1")
    if not is_on_g2(b):
        raise MalformedFieldElement("proof point B is not on G2")
    if not is_on_g1(c):
        raise MalformedFieldElement("proof point C is not on G1")

    return Proof(a=a, b=b, c=c)


def encode_proof(selector: bytes, proof: Proof) -> bytes:
    """
    Serialize a proof into the fixed layout, the inverse of `decode_proof`.

    Args:
        selector: 4-byte verifier selector.
        proof: The points to write.

    Returns:
        bytes: The 260-byte proof blob.
    """
    if len(selector) != SELECTOR_LENGTH:
        raise ValueError(f"selector must be 4 bytes, got {len(selector)}")

    ax, ay = g1_affine(proof.a)
    bx0, bx1, by0, by1 = g2_affine(proof.b)
    cx, cy = g1_affine(proof.c)

    words = [ax, ay, bx1, bx0, by1, by0, cx, cy]
    return bytes(selector) + b"".join(v.to_bytes(WORD_LENGTH, "big") for v in words)
