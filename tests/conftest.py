# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# tests/conftest.py

"""
A verifying key with a known trapdoor.

Knowing the discrete logs of alpha, beta, gamma, delta and the public basis
lets the tests produce proofs that satisfy

    x*y == a*b + l*g + c*d   (mod r)

i.e. e(A, B) == e(alpha, beta) e(L, gamma) e(C, delta), without a prover.
"""

import json
from pathlib import Path

import pytest

from sigverify.bn254 import curve_order, g1_generator, g2_generator, invert, scale
from sigverify.codec import encode_public_values
from sigverify.constants import GROTH16_SELECTOR
from sigverify.hashing import hash_public_values
from sigverify.proof import Proof, encode_proof
from sigverify.public_inputs import public_inputs
from sigverify.verifying_key import VerifyingKey

VECTORS_PATH = (
    Path(__file__).resolve().parent.parent / "test-vectors" / "public-values-vectors.json"
)

TRAPDOOR = {
    "alpha": 11,
    "beta": 13,
    "gamma": 17,
    "delta": 19,
    "constant": 23,
    "basis": (29, 31),
}

VKEY = bytes.fromhex("00a61ad8347fe889261a355403eaef5795d3d6adf039126d55da3fe9aa9f2a54")
PUB_KEY = bytes.fromhex("02" + bytes(range(1, 33)).hex())
MESSAGE = b"test"
SIGNATURE = bytes(range(64))


def make_synthetic_vk(selector: bytes = GROTH16_SELECTOR) -> VerifyingKey:
    t = TRAPDOOR
    return VerifyingKey(
        selector=selector,
        alpha=scale(g1_generator, t["alpha"]),
        beta_neg=invert(scale(g2_generator, t["beta"])),
        gamma_neg=invert(scale(g2_generator, t["gamma"])),
        delta_neg=invert(scale(g2_generator, t["delta"])),
        constant=scale(g1_generator, t["constant"]),
        public_basis=tuple(scale(g1_generator, k) for k in t["basis"]),
    )


def make_proof(inputs: list[int], x: int = 5, y: int = 7) -> Proof:
    t = TRAPDOOR
    k1, k2 = t["basis"]
    l = (t["constant"] + inputs[0] * k1 + inputs[1] * k2) % curve_order
    c = (x * y - t["alpha"] * t["beta"] - l * t["gamma"]) * pow(t["delta"], -1, curve_order)
    return Proof(
        a=scale(g1_generator, x),
        b=scale(g2_generator, y),
        c=scale(g1_generator, c % curve_order),
    )


def make_proof_bytes(vkey: bytes, public_values: bytes) -> bytes:
    inputs = public_inputs(vkey, hash_public_values(public_values))
    return encode_proof(GROTH16_SELECTOR, make_proof(inputs))


@pytest.fixture(scope="session")
def synthetic_vk() -> VerifyingKey:
    return make_synthetic_vk()


@pytest.fixture(scope="session")
def public_values() -> bytes:
    return encode_public_values(PUB_KEY, MESSAGE, SIGNATURE)


@pytest.fixture(scope="session")
def honest_proof(public_values) -> bytes:
    return make_proof_bytes(VKEY, public_values)


@pytest.fixture()
def vectors() -> list[dict]:
    return json.loads(VECTORS_PATH.read_text())
