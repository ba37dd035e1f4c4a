# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# cli.py

"""
Command line entry point.

    sigverify verify <fixture.json> [vk.json]
    sigverify digest <public-values-hex>
"""

import sys

from sigverify.fixtures import load_fixture, verify_fixture
from sigverify.hashing import digest_hex
from sigverify.verifying_key import VerifyingKey

USAGE = (
    "Usage:\n"
    "  sigverify verify <fixture.json> [vk.json]\n"
    "  sigverify digest <public-values-hex>"
)


def main(argv: list[str] | None = None) -> int:
    """CLI: verify a proof fixture or print a public values digest."""
    args = sys.argv[1:] if argv is None else argv

    if len(args) < 2 or args[0] not in ("verify", "digest"):
        print(USAGE, file=sys.stderr)
        return 1

    if args[0] == "digest":
        try:
            print(digest_hex(args[1]))
        except ValueError as e:
            print(f"Invalid public values hex: {e}", file=sys.stderr)
            return 1
        return 0

    fixture = load_fixture(args[1])
    vk = VerifyingKey.from_json(args[2]) if len(args) >= 3 else None

    try:
        verify_fixture(fixture, vk)
    except ValueError as e:
        print(f"Proof rejected ({type(e).__name__}): {e}")
        return 2

    print("Proof verified.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
