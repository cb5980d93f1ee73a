#!/usr/bin/env python3

# Copyright (C) 2024 The ecmath developers
#
# This file is part of ecmath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve explorer functions.

These functions are meant to explore low-cardinality curves
over a prime field, for didactical (and fun) reason only.
"""

from typing import List

from ecmath.exceptions import ECMathTypeError, ECMathValueError
from ecmath.field_element import FieldElement
from ecmath.number_theory import mod
from ecmath.point import Domain, FieldPoint, InfinityPoint, Point

MAX_EXPLORER_PRIME = 10000


def curve_check(x: int, y: int, a: int, b: int, p: int) -> bool:
    """Return True if y^2 = a*x^3 + b (mod p).

    Quick sanity check on plain integers, with no Point construction.
    Note that here a multiplies x^3: with a = 1 this is the
    membership test for the curve y^2 = x^3 + b.
    """

    return mod(y * y, p) == mod(a * x * x * x + b, p)


def find_all_points(a: int, b: int, p: int) -> List[Point]:
    """Attempt to find all points of y^2 = x^3 + a*x + b over Fp.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    The point at infinity comes first.
    """

    if p > MAX_EXPLORER_PRIME:
        err_msg = f"p is too big to count all group points: {p}"
        raise ECMathValueError(err_msg)

    fa = FieldElement(mod(a, p), p)
    fb = FieldElement(mod(b, p), p)
    points: List[Point] = [InfinityPoint(fa, fb)]
    for x in range(p):
        fx = FieldElement(x, p)
        rhs = fx**3 + fa * fx + fb
        if not rhs.is_square():
            continue

        fy = rhs.sqrt()
        points.append(FieldPoint(fx, fy, fa, fb))
        if not fy.is_zero():
            points.append(FieldPoint(fx, -fy, fa, fb))

    return points


def find_subgroup_points(G: Point) -> List[Point]:
    """Attempt to list all G-generated subgroup points, if p is low.

    The multiples of G are obtained by repeated addition,
    up to the point at infinity, which is the last one returned.
    """

    if G.domain is not Domain.FINITE_FIELD:
        raise ECMathTypeError(f"not a finite field point: {G}")
    p = G.a.prime
    if p > MAX_EXPLORER_PRIME:
        err_msg = f"p is too big to count all subgroup points: {p}"
        raise ECMathValueError(err_msg)

    points: List[Point] = [G]
    while not points[-1].is_infinity:
        points.append(points[-1].add(G))

    return points
