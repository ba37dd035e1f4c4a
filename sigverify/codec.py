# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# codec.py

"""
Public values codec.

The guest program commits the Solidity ABI encoding of

    struct PublicValues {
        bytes pub_key;
        bytes message;
        bytes signature;
    }

exactly as `abi.encode(publicValues)` produces it. Because the struct is
dynamic, the blob is laid out as:

    word 0       : 0x20 (offset of the struct)
    words 1..3   : offsets of pub_key, message, signature (from word 1)
    tail         : for each field, a length word followed by the data,
                   right-padded with zeros to a multiple of 32 bytes

The layout is versioned by `PUBLIC_VALUES_ENCODING`; any change to it breaks
compatibility with the on-chain verifier.
"""

from dataclasses import dataclass

from sigverify.constants import WORD_LENGTH

FIELD_COUNT = 3


@dataclass(frozen=True)
class PublicValues:
    pub_key: bytes
    message: bytes
    signature: bytes

    def encode(self) -> bytes:
        return encode_public_values(self.pub_key, self.message, self.signature)


def _word(value: int) -> bytes:
    return value.to_bytes(WORD_LENGTH, "big")


def _padded_length(length: int) -> int:
    return -(-length // WORD_LENGTH) * WORD_LENGTH


def _tail(data: bytes) -> bytes:
    return _word(len(data)) + data.ljust(_padded_length(len(data)), b"\x00")


def encode_public_values(pub_key: bytes, message: bytes, signature: bytes) -> bytes:
    """
    ABI-encode the (pub_key, message, signature) struct.

    Args:
        pub_key: Public key bytes (33-byte SEC1 for secp256k1, 32 for ed25519).
        message: The signed message.
        signature: The signature bytes.

    Returns:
        The canonical encoding committed by the guest program.
    """
    fields = [bytes(pub_key), bytes(message), bytes(signature)]

    head = b""
    tail = b""
    offset = FIELD_COUNT * WORD_LENGTH
    for field in fields:
        head += _word(offset)
        encoded = _tail(field)
        tail += encoded
        offset += len(encoded)

    return _word(WORD_LENGTH) + head + tail


def _read_word(data: bytes, position: int) -> int:
    end = position + WORD_LENGTH
    if position < 0 or end > len(data):
        raise ValueError(
            f"public values truncated: need {end} bytes, got {len(data)}"
        )
    return int.from_bytes(data[position:end], "big")


def decode_public_values(data: bytes) -> PublicValues:
    """
    Decode an ABI-encoded PublicValues blob.

    The decoder is strict: the blob must be exactly what
    `encode_public_values` would produce for the decoded fields (canonical
    offsets, zero padding, no trailing bytes).

    Args:
        data: Raw public values bytes.

    Returns:
        The decoded `PublicValues`.

    Raises:
        ValueError: If the blob is truncated or not in canonical form.
    """
    data = bytes(data)
    base = _read_word(data, 0)
    if base != WORD_LENGTH:
        raise ValueError(f"Expected struct offset 0x20, got {hex(base)}")

    fields = []
    for i in range(FIELD_COUNT):
        offset = _read_word(data, base + i * WORD_LENGTH)
        length = _read_word(data, base + offset)
        start = base + offset + WORD_LENGTH
        end = start + length
        if end > len(data):
            raise ValueError(
                f"public values field {i} truncated: need {end} bytes, got {len(data)}"
            )
        fields.append(data[start:end])

    decoded = PublicValues(*fields)
    if decoded.encode() != data:
        raise ValueError("public values are not canonically encoded")
    return decoded
