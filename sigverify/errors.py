# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

"""
Rejection reasons raised by the verifier.

Every rejection is a `ValueError`, so callers that only care about
"accepted or not" can catch that, while callers that want to report a
reason can catch the specific subclass.
"""


class VerificationError(ValueError):
    """Base class for every way a proof can be rejected."""


class PublicValuesMismatch(VerificationError):
    """The re-encoded (pub_key, message, signature) differs from the blob."""

    def __init__(self, message: str = "Public values mismatch.") -> None:
        super().__init__(message)


class WrongSelector(VerificationError):
    """The proof does not start with the expected verifier selector."""

    def __init__(self, received: bytes, expected: bytes) -> None:
        self.received = bytes(received)
        self.expected = bytes(expected)
        super().__init__(
            f"Wrong verifier selector: got 0x{self.received.hex()}, "
            f"expected 0x{self.expected.hex()}."
        )


class ProofTooShort(VerificationError):
    """The proof buffer is smaller than the fixed Groth16 layout."""

    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Proof bytes too short for Groth16 elements: "
            f"{length} < {minimum} bytes."
        )


class PairingCheckFailed(VerificationError):
    """The Groth16 pairing product is not the identity."""

    def __init__(self, message: str = "Groth16 pairing check failed.") -> None:
        super().__init__(message)


class MalformedFieldElement(PairingCheckFailed):
    """
    A proof coordinate is not a canonical field element, or a point is not
    in its group.

    The reference contract rejects invalid points through the same path as a
    failed pairing, hence the subclass.
    """
