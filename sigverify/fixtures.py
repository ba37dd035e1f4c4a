# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import json

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from eth_typing import HexStr

from sigverify.codec import decode_public_values
from sigverify.verifier import verify_signature_flow
from sigverify.verifying_key import VerifyingKey


def hex_to_bytes(h: str) -> bytes:
    """
    Decode a hex string, accepting an optional 0x prefix.
    """
    h = h.strip().lower()
    if h.startswith("0x"):
        h = h[2:]
    return bytes.fromhex(h)


def bytes_to_hex(data: bytes) -> HexStr:
    return HexStr("0x" + bytes(data).hex())


@dataclass(frozen=True)
class ProofFixture:
    """
    A proof together with everything needed to verify it.

    Serialized with the camelCase keys written by the proving script:
    pubKey, message, vkey, publicValues, proof (all 0x-prefixed hex).
    """

    pub_key: bytes
    message: bytes
    vkey: bytes
    public_values: bytes
    proof: bytes

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProofFixture":
        return cls(
            pub_key=hex_to_bytes(data["pubKey"]),
            message=hex_to_bytes(data["message"]),
            vkey=hex_to_bytes(data["vkey"]),
            public_values=hex_to_bytes(data["publicValues"]),
            proof=hex_to_bytes(data["proof"]),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "pubKey": bytes_to_hex(self.pub_key),
            "message": bytes_to_hex(self.message),
            "vkey": bytes_to_hex(self.vkey),
            "publicValues": bytes_to_hex(self.public_values),
            "proof": bytes_to_hex(self.proof),
        }


def save_fixture(path: str | Path, fixture: ProofFixture) -> None:
    """
    Serialize a fixture as pretty-printed JSON and write it to a file.

    Args:
        path: Destination file path (string or `Path`).
        fixture: The fixture to write.

    Side effects:
        - Creates `path.parent` directories if they do not exist.
        - Overwrites the file if it already exists.

    Raises:
        OSError: If the file cannot be created or written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(fixture.to_dict(), f, indent=2)
        f.write("\n")


def load_fixture(path: str | Path) -> ProofFixture:
    """
    Load a proof fixture JSON file.

    Args:
        path: Path to the JSON file (string or `Path`).

    Returns:
        The parsed `ProofFixture`.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        KeyError: If a required field is missing.
        ValueError: If a field is not valid hex.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return ProofFixture.from_dict(json.load(f))


def verify_fixture(fixture: ProofFixture, vk: VerifyingKey | None = None) -> None:
    """
    Verify a fixture end to end.

    The fixture does not carry the signature separately; it is recovered by
    decoding the public values. The pub_key and message are taken from the
    fixture itself, so a fixture whose fields disagree with its public values
    fails the consistency check.

    Raises:
        ValueError: If the public values cannot be decoded.
        VerificationError: Any rejection from `verify_signature_flow`.
    """
    decoded = decode_public_values(fixture.public_values)
    verify_signature_flow(
        fixture.pub_key,
        fixture.message,
        decoded.signature,
        fixture.vkey,
        fixture.public_values,
        fixture.proof,
        vk,
    )
