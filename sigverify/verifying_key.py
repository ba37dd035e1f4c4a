# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# verifying_key.py

"""
Groth16 verifying key of one compiled circuit.

The key is plain data: decimal coordinate strings in the same shape as the
constants of the reference `Groth16Verifier.sol`:

    {
      "selector":    "a4594c59",
      "alpha":       [x, y],
      "betaNeg":     [[x0, x1], [y0, y1]],
      "gammaNeg":    [[x0, x1], [y0, y1]],
      "deltaNeg":    [[x0, x1], [y0, y1]],
      "constant":    [x, y],
      "publicBasis": [[x, y], [x, y]]
    }

G2 coordinates are written as (c0, c1), real part first. The beta, gamma and
delta points are stored already negated, as the contract does.

Swapping circuits means swapping the whole record, selector included.
"""

import json
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sigverify.bn254 import g1_affine, g1_point, g2_affine, g2_point, is_on_g1, is_on_g2
from sigverify.constants import SP1_GROTH16_VK

PUBLIC_INPUT_COUNT = 2


def _g1_from_decimal(coords: list[str]) -> tuple:
    x, y = coords
    return g1_point(int(x, 10), int(y, 10))


def _g2_from_decimal(coords: list[list[str]]) -> tuple:
    (x0, x1), (y0, y1) = coords
    return g2_point(int(x0, 10), int(x1, 10), int(y0, 10), int(y1, 10))


def _g1_to_decimal(point: tuple) -> list[str]:
    return [str(c) for c in g1_affine(point)]


def _g2_to_decimal(point: tuple) -> list[list[str]]:
    x0, x1, y0, y1 = g2_affine(point)
    return [[str(x0), str(x1)], [str(y0), str(y1)]]


@dataclass(frozen=True)
class VerifyingKey:
    selector: bytes
    alpha: tuple
    beta_neg: tuple
    gamma_neg: tuple
    delta_neg: tuple
    constant: tuple
    public_basis: tuple[tuple, ...]

    def __post_init__(self):
        if len(self.selector) != 4:
            raise ValueError(f"selector must be 4 bytes, got {len(self.selector)}")
        if len(self.public_basis) != PUBLIC_INPUT_COUNT:
            raise ValueError(
                f"public basis must hold {PUBLIC_INPUT_COUNT} points, "
                f"got {len(self.public_basis)}"
            )

    @classmethod
    def from_decimal(cls, data: dict[str, Any]) -> "VerifyingKey":
        """
        Build a key from the decimal-string record described in the module
        docstring.

        Args:
            data: The verifying key record.

        Returns:
            VerifyingKey: The parsed key. Curve membership is not checked here;
            call `validate()` for that.

        Raises:
            KeyError: If a field is missing.
            ValueError: If a coordinate is not a decimal integer or the
                selector / basis sizes are wrong.
        """
        return cls(
            selector=bytes.fromhex(data["selector"]),
            alpha=_g1_from_decimal(data["alpha"]),
            beta_neg=_g2_from_decimal(data["betaNeg"]),
            gamma_neg=_g2_from_decimal(data["gammaNeg"]),
            delta_neg=_g2_from_decimal(data["deltaNeg"]),
            constant=_g1_from_decimal(data["constant"]),
            public_basis=tuple(_g1_from_decimal(p) for p in data["publicBasis"]),
        )

    def to_decimal(self) -> dict[str, Any]:
        return {
            "selector": self.selector.hex(),
            "alpha": _g1_to_decimal(self.alpha),
            "betaNeg": _g2_to_decimal(self.beta_neg),
            "gammaNeg": _g2_to_decimal(self.gamma_neg),
            "deltaNeg": _g2_to_decimal(self.delta_neg),
            "constant": _g1_to_decimal(self.constant),
            "publicBasis": [_g1_to_decimal(p) for p in self.public_basis],
        }

    @classmethod
    def from_json(cls, path: str | Path) -> "VerifyingKey":
        """
        Load and validate a key from a JSON file.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            vk = cls.from_decimal(json.load(f))
        vk.validate()
        return vk

    def to_json(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_decimal(), f, indent=2)
            f.write("\n")

    def validate(self) -> None:
        """
        Check that every point of the key lies in its group.

        Raises:
            ValueError: Naming the first point that is not on its curve.
        """
        for name in ("alpha", "constant"):
            if not is_on_g1(getattr(self, name)):
                raise ValueError(f"verifying key point {name} is not on G1")
        for i, point in enumerate(self.public_basis):
            if not is_on_g1(point):
                raise ValueError(f"verifying key point publicBasis[{i}] is not on G1")
        for name in ("beta_neg", "gamma_neg", "delta_neg"):
            if not is_on_g2(getattr(self, name)):
                raise ValueError(f"verifying key point {name} is not on G2")


_default_vk: VerifyingKey | None = None
_default_vk_lock = threading.Lock()


def default_verifying_key() -> VerifyingKey:
    """
    Return the verifying key of the signature circuit.

    The key is parsed and validated once, on first use, and shared read-only
    afterwards.
    """
    global _default_vk
    if _default_vk is None:
        with _default_vk_lock:
            if _default_vk is None:
                vk = VerifyingKey.from_decimal(SP1_GROTH16_VK)
                vk.validate()
                _default_vk = vk
    return _default_vk
