# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from py_ecc.fields import optimized_bn128_FQ as FQ
from py_ecc.fields import optimized_bn128_FQ2 as FQ2
from py_ecc.fields import optimized_bn128_FQ12 as FQ12
from py_ecc.optimized_bn128 import (
    G1,
    G2,
    Z1,
    Z2,
    add,
    b,
    b2,
    curve_order,
    eq,
    field_modulus,
    final_exponentiate,
    is_inf,
    is_on_curve,
    multiply,
    neg,
    normalize,
    pairing,
)


def fq(value: int) -> FQ:
    """
    Build a base field element, reducing the value modulo the field prime.

    Args:
        value (int): Any non-negative integer.

    Returns:
        FQ: The reduced field element.
    """
    return FQ(value)


def fq2(c0: int, c1: int) -> FQ2:
    """
    Build the quadratic extension element c0 + c1*u.

    Args:
        c0 (int): The real coefficient.
        c1 (int): The imaginary coefficient.

    Returns:
        FQ2: The extension field element.
    """
    return FQ2([c0, c1])


def to_scalar(data: bytes) -> int:
    """
    Interpret big-endian bytes as a scalar reduced modulo the curve order.

    This is how a 32-byte verifying key identifier or a public values digest
    becomes a public input weight:

        w = int.from_bytes(data, "big") mod curve_order

    Args:
        data: Big-endian encoded integer of any length.

    Returns:
        An integer scalar in the range [0, curve_order - 1].
    """
    return int.from_bytes(data, "big") % curve_order


def g1_point(x: int, y: int) -> tuple:
    """
    Lift affine G1 coordinates into the projective form used by py_ecc.

    The pair (0, 0) is the EVM encoding of the point at infinity.

    Args:
        x (int): The x coordinate.
        y (int): The y coordinate.

    Returns:
        tuple: The projective point.
    """
    if x == 0 and y == 0:
        return Z1
    return (fq(x), fq(y), FQ.one())


def g2_point(x0: int, x1: int, y0: int, y1: int) -> tuple:
    """
    Lift affine G2 coordinates into the projective form used by py_ecc.

    All four coordinates equal to zero encode the point at infinity.

    Args:
        x0 (int): Real part of x.
        x1 (int): Imaginary part of x.
        y0 (int): Real part of y.
        y1 (int): Imaginary part of y.

    Returns:
        tuple: The projective point.
    """
    if x0 == 0 and x1 == 0 and y0 == 0 and y1 == 0:
        return Z2
    return (fq2(x0, x1), fq2(y0, y1), FQ2.one())


def g1_affine(point: tuple) -> tuple[int, int]:
    """
    Convert a G1 point back to integer affine coordinates.

    Args:
        point (tuple): A projective G1 point.

    Returns:
        tuple[int, int]: (x, y), or (0, 0) for the point at infinity.
    """
    if is_inf(point):
        return (0, 0)
    x, y = normalize(point)
    return (int(x), int(y))


def g2_affine(point: tuple) -> tuple[int, int, int, int]:
    """
    Convert a G2 point back to integer affine coordinates.

    Args:
        point (tuple): A projective G2 point.

    Returns:
        tuple[int, int, int, int]: (x0, x1, y0, y1), all zero at infinity.
    """
    if is_inf(point):
        return (0, 0, 0, 0)
    x, y = normalize(point)
    return (int(x.coeffs[0]), int(x.coeffs[1]), int(y.coeffs[0]), int(y.coeffs[1]))


def combine(left: tuple, right: tuple) -> tuple:
    """
    Add two points of the same group.
    """
    return add(left, right)


def scale(point: tuple, scalar: int) -> tuple:
    """
    Multiply a point by a scalar, reducing the scalar modulo the curve order.

    Args:
        point (tuple): A projective G1 or G2 point.
        scalar (int): The scalar weight.

    Returns:
        tuple: The scaled point.
    """
    return multiply(point, scalar % curve_order)


def invert(point: tuple) -> tuple:
    """
    Negate a point.
    """
    return neg(point)


def same_point(left: tuple, right: tuple) -> bool:
    return eq(left, right)


def is_on_g1(point: tuple) -> bool:
    """
    Check G1 membership. G1 has cofactor one, so the curve equation suffices.
    """
    return is_on_curve(point, b)


def is_on_g2(point: tuple) -> bool:
    """
    Check G2 membership: on the twisted curve and inside the r-torsion subgroup.
    """
    if not is_on_curve(point, b2):
        return False
    return is_inf(multiply(point, curve_order))


def multi_pairing(pairs: list[tuple[tuple, tuple]]) -> bool:
    """
    Check that the product of pairings over (G1, G2) pairs is the identity.

    Each Miller loop is evaluated without the final exponentiation; the
    product is exponentiated once at the end:

        final_exponentiate(prod e'(P_i, Q_i)) == 1

    Pairs containing a point at infinity contribute the identity.

    Args:
        pairs: Sequence of (g1_point, g2_point) tuples.

    Returns:
        bool: True when the pairing product equals the Fq12 identity.
    """
    product = FQ12.one()
    for p, q in pairs:
        product *= pairing(q, p, final_exponentiate=False)
    return final_exponentiate(product) == FQ12.one()


# generators and identity elements
g1_generator = G1
g2_generator = G2
g1_identity = Z1
g2_identity = Z2

# field and curve orders
field_modulus = field_modulus
curve_order = curve_order
