# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# verifier.py

"""
Standalone re-implementation of the on-chain signature proof verifier.

The checks run in the same order as the contracts do, cheapest first:

  1. SignatureVerifier.sol   re-encode the public values and compare
  2. SP1VerifierGroth16.sol  selector check, public values digest
  3. Groth16Verifier.sol     decode the proof, public input MSM, pairing

    e(A, B) * e(C, -delta) * e(alpha, -beta) * e(L_pub, -gamma) == 1

The beta, gamma and delta points of the key are stored negated, so the
equation is a single multi-pairing against the identity.
"""

from sigverify.bn254 import multi_pairing
from sigverify.codec import encode_public_values
from sigverify.constants import SELECTOR_LENGTH, WORD_LENGTH
from sigverify.errors import (
    PairingCheckFailed,
    PublicValuesMismatch,
    VerificationError,
    WrongSelector,
)
from sigverify.hashing import hash_public_values
from sigverify.proof import Proof, decode_proof
from sigverify.public_inputs import public_input_msm, public_inputs
from sigverify.verifying_key import VerifyingKey, default_verifying_key


def verify_groth16(proof: Proof, inputs: list[int], vk: VerifyingKey | None = None) -> None:
    """
    Run the Groth16 pairing check for already decoded proof points.

    Args:
        proof: Decoded A, B, C points.
        inputs: The two public input scalars [vkey, digest].
        vk: Verifying key; defaults to the signature circuit key.

    Raises:
        PairingCheckFailed: If the pairing product is not the identity.
        ValueError: If the input count does not match the key.
    """
    vk = vk if vk is not None else default_verifying_key()

    l_pub = public_input_msm(inputs, vk)

    is_valid = multi_pairing(
        [
            (proof.a, proof.b),
            (proof.c, vk.delta_neg),
            (vk.alpha, vk.beta_neg),
            (l_pub, vk.gamma_neg),
        ]
    )
    if not is_valid:
        raise PairingCheckFailed()


def verify_signature_flow(
    pub_key: bytes,
    message: bytes,
    signature: bytes,
    vkey: bytes,
    public_values: bytes,
    proof_bytes: bytes,
    vk: VerifyingKey | None = None,
) -> None:
    """
    Verify that a proof attests to (pub_key, message, signature).

    Args:
        pub_key: Public key the signature was checked against.
        message: Signed message.
        signature: Signature bytes.
        vkey: 32-byte verifying key identifier of the guest program.
        public_values: Public values blob committed by the guest.
        proof_bytes: Selector-prefixed Groth16 proof.
        vk: Verifying key; defaults to the signature circuit key.

    Returns:
        None when the proof is accepted.

    Raises:
        PublicValuesMismatch: The blob is not the encoding of the triple.
        WrongSelector: The proof is for a different verifier.
        ProofTooShort: The proof is truncated.
        PairingCheckFailed: The proof is invalid (including the
            MalformedFieldElement subclass for invalid points).
        ValueError: If `vkey` is not 32 bytes.
    """
    if len(vkey) != WORD_LENGTH:
        raise ValueError(f"vkey must be {WORD_LENGTH} bytes, got {len(vkey)}")
    vk = vk if vk is not None else default_verifying_key()

    # 1. consistency
    encoded_expected = encode_public_values(pub_key, message, signature)
    if bytes(public_values) != encoded_expected:
        raise PublicValuesMismatch()

    # 2. selector
    received = bytes(proof_bytes[:SELECTOR_LENGTH])
    if received != vk.selector:
        raise WrongSelector(received, vk.selector)

    # 3. digest
    pv_digest = hash_public_values(encoded_expected)

    # 4. pairing
    proof = decode_proof(proof_bytes)
    verify_groth16(proof, public_inputs(vkey, pv_digest), vk)


def is_valid(
    pub_key: bytes,
    message: bytes,
    signature: bytes,
    vkey: bytes,
    public_values: bytes,
    proof_bytes: bytes,
    vk: VerifyingKey | None = None,
) -> bool:
    """
    Boolean form of `verify_signature_flow`: any rejection is False.
    """
    try:
        verify_signature_flow(
            pub_key, message, signature, vkey, public_values, proof_bytes, vk
        )
    except VerificationError:
        return False
    return True
