# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from sigverify.bn254 import combine, scale, to_scalar
from sigverify.verifying_key import PUBLIC_INPUT_COUNT, VerifyingKey


def public_inputs(vkey: bytes, digest: bytes) -> list[int]:
    """
    Build the two public input weights in the order the circuit expects.

    Args:
        vkey: 32-byte verifying key identifier of the guest program.
        digest: Masked public values digest.

    Returns:
        [vkey mod r, digest mod r]
    """
    return [to_scalar(vkey), to_scalar(digest)]


def public_input_msm(inputs: list[int], vk: VerifyingKey) -> tuple:
    """
    Compute the public input point of the Groth16 equation.

        L = constant + inputs[0] * basis[0] + inputs[1] * basis[1]

    Accumulation stays in projective coordinates; callers normalize when they
    need affine values.

    Args:
        inputs: Exactly two scalar weights.
        vk: The verifying key supplying the constant and the basis.

    Returns:
        tuple: The projective G1 point L.

    Raises:
        ValueError: If the number of inputs does not match the basis.
    """
    if len(inputs) != PUBLIC_INPUT_COUNT:
        raise ValueError(
            f"public input count mismatch: len(inputs)={len(inputs)} "
            f"vs {PUBLIC_INPUT_COUNT}"
        )

    acc = vk.constant
    for weight, base in zip(inputs, vk.public_basis):
        acc = combine(acc, scale(base, weight))
    return acc
