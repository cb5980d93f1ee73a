#!/usr/bin/env python3

# Copyright (C) 2024 The ecmath developers
#
# This file is part of ecmath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Points of an elliptic curve and the point addition group law.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
together with a point at infinity, the group identity.

A point is one of three variants, discriminated by PointKind:

* InfinityPoint: the identity element of the curve (a, b)
* RealPoint: coordinates are real numbers
* FieldPoint: coordinates are FieldElement over the same prime

The curve is not a registry entry: each point carries its own
coefficients a and b, and binary operations require them to match.
Real and finite-field coordinates are never mixed within a point.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Any, Optional, Union, cast

from ecmath.alias import Real
from ecmath.exceptions import (
    CurveMismatchError,
    ECMathRuntimeError,
    ECMathTypeError,
    ECMathValueError,
    FieldMismatchError,
    PointNotOnCurveError,
)
from ecmath.field_element import FieldElement
from ecmath.utils import int_repr

_LOGGER = logging.getLogger(__name__)

Coordinate = Union[Real, FieldElement]


class PointKind(Enum):
    INFINITY = "infinity"
    REAL = "real"
    FINITE_FIELD = "finite field"


class Domain(Enum):
    REAL = "real"
    FINITE_FIELD = "finite field"


def _domain(a: Coordinate, b: Coordinate) -> Domain:
    "Return the coefficient domain, failing on mixed or invalid values."

    if isinstance(a, FieldElement) and isinstance(b, FieldElement):
        if a.prime != b.prime:
            err_msg = "curve coefficients from different fields: "
            err_msg += f"{int_repr(a.prime)}, {int_repr(b.prime)}"
            raise FieldMismatchError(err_msg)
        return Domain.FINITE_FIELD
    if _is_real(a) and _is_real(b):
        return Domain.REAL
    raise ECMathTypeError(f"invalid curve coefficients: {a!r}, {b!r}")


def _is_real(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, Fraction, float))


def _real(value: Real) -> Real:
    "Return an int if value is an integral Fraction."

    if isinstance(value, Fraction) and value.denominator == 1:
        return value.numerator
    return value


def _real_div(num: Real, den: Real) -> Real:
    if isinstance(num, float) or isinstance(den, float):
        return num / den
    return _real(Fraction(num) / Fraction(den))


def _str_coordinate(value: Coordinate) -> str:
    if isinstance(value, FieldElement):
        return int_repr(value.num)
    return f"{value}"


class Point:
    """Base class of the curve point variants.

    Subclasses are frozen dataclasses providing the a and b
    curve coefficients; RealPoint and FieldPoint also provide
    the x and y coordinates.
    """

    kind: PointKind
    a: Any
    b: Any

    @property
    def domain(self) -> Domain:
        return _domain(self.a, self.b)

    @property
    def is_infinity(self) -> bool:
        return self.kind is PointKind.INFINITY

    def _curve_str(self) -> str:
        return f"_{_str_coordinate(self.a)}_{_str_coordinate(self.b)}"

    def on_same_curve(self, other: "Point") -> bool:
        "Return True if other is a point of the same curve instance."

        if not isinstance(other, Point):
            return False
        if self.domain is not other.domain:
            return False
        return self.a == other.a and self.b == other.b

    def equals(self, other: Any) -> bool:
        "Return True if other is the same variant with equal x, y, a, b."

        return self == other

    def infinity(self) -> "InfinityPoint":
        "Return the point at infinity of this point's curve."

        return InfinityPoint(self.a, self.b)

    def negate(self) -> "Point":
        "Return the opposite point: the reflection over the x-axis."

        raise NotImplementedError

    def add(self, other: "Point") -> "Point":
        """Return the sum of two points of the same curve.

        The rules are evaluated in order:
        identity, opposite points, secant line, tangent line.
        """

        if not isinstance(other, Point):
            raise ECMathTypeError(f"not a point: {other!r}")
        if not self.on_same_curve(other):
            raise CurveMismatchError(f"points {self}, {other} are not on the same curve")

        if self.kind is PointKind.INFINITY:
            return other
        if other.kind is PointKind.INFINITY:
            return self
        if self.kind is other.kind:
            return cast(AffinePoint, self)._add_affine(cast(AffinePoint, other))

        raise ECMathRuntimeError(f"unhandled point variants: {self}, {other}")

    def __add__(self, other: "Point") -> "Point":
        return self.add(other)

    def __neg__(self) -> "Point":
        return self.negate()


@dataclass(frozen=True)
class InfinityPoint(Point):
    "The point at infinity of the curve y^2 = x^3 + a*x + b."

    a: Coordinate
    b: Coordinate

    kind = PointKind.INFINITY

    def __post_init__(self) -> None:
        # validate the coefficient domain
        _domain(self.a, self.b)

    def __str__(self) -> str:
        return "Point(infinity)" + self._curve_str()

    def negate(self) -> "Point":
        return self


class AffinePoint(Point):
    "Point with x, y coordinates, validated against the curve equation."

    x: Any
    y: Any

    def __str__(self) -> str:
        x = _str_coordinate(self.x)
        y = _str_coordinate(self.y)
        return f"Point({x}, {y})" + self._curve_str()

    def _require_on_curve(self) -> None:
        if not self._is_on_curve():
            err_msg = f"({_str_coordinate(self.x)}, {_str_coordinate(self.y)})"
            err_msg += " is not on the curve"
            raise PointNotOnCurveError(err_msg)

    def _is_on_curve(self) -> bool:
        raise NotImplementedError

    def _div(self, num: Any, den: Any) -> Any:
        raise NotImplementedError

    def _is_zero(self, value: Any) -> bool:
        raise NotImplementedError

    def _new(self, x: Any, y: Any) -> "AffinePoint":
        raise NotImplementedError

    def _add_affine(self, other: "AffinePoint") -> Point:
        x1, y1 = self.x, self.y
        x2, y2 = other.x, other.y

        # opposite points: vertical line
        if x1 == x2 and y1 != y2:
            return self.infinity()

        # secant line
        if x1 != x2:
            s = self._div(y2 - y1, x2 - x1)
            x3 = s**2 - x1 - x2
            y3 = s * (x1 - x3) - y1
            return self._new(x3, y3)

        # tangent line
        if self == other:
            if self._is_zero(y1):
                return self.infinity()
            s = self._div(3 * x1**2 + self.a, 2 * y1)
            x3 = s**2 - 2 * x1
            y3 = s * (x1 - x3) - y1
            _LOGGER.debug("doubling %s: slope %s", self, _str_coordinate(s))
            result = self._new(x3, y3)
            _LOGGER.debug("doubling %s: result %s", self, result)
            return result

        raise ECMathRuntimeError(f"unhandled point addition: {self}, {other}")


@dataclass(frozen=True)
class RealPoint(AffinePoint):
    """Point of an elliptic curve over the real numbers.

    int and Fraction coordinates keep the group law exact:
    divisions are carried out as Fraction,
    and integral results are returned as int.
    float coordinates use float arithmetic,
    and the curve equation is then checked with math.isclose.
    """

    x: Real
    y: Real
    a: Real
    b: Real

    kind = PointKind.REAL

    def __post_init__(self) -> None:
        for value in (self.x, self.y, self.a, self.b):
            if not _is_real(value):
                raise ECMathTypeError(f"not a real coordinate: {value!r}")
        self._require_on_curve()

    def _is_on_curve(self) -> bool:
        lhs = self.y**2
        rhs = self.x**3 + self.a * self.x + self.b
        values = (self.x, self.y, self.a, self.b)
        if any(isinstance(v, float) for v in values):
            return math.isclose(lhs, rhs, rel_tol=1e-09, abs_tol=1e-09)
        return lhs == rhs

    def _div(self, num: Real, den: Real) -> Real:
        return _real_div(num, den)

    def _is_zero(self, value: Real) -> bool:
        return value == 0

    def _new(self, x: Real, y: Real) -> "RealPoint":
        return RealPoint(_real(x), _real(y), self.a, self.b)

    def negate(self) -> "RealPoint":
        return RealPoint(self.x, -self.y, self.a, self.b)


@dataclass(frozen=True)
class FieldPoint(AffinePoint):
    "Point of an elliptic curve over the prime finite field Fp."

    x: FieldElement
    y: FieldElement
    a: FieldElement
    b: FieldElement

    kind = PointKind.FINITE_FIELD

    def __post_init__(self) -> None:
        values = (self.x, self.y, self.a, self.b)
        for value in values:
            if not isinstance(value, FieldElement):
                raise ECMathTypeError(f"not a field element coordinate: {value!r}")
        primes = {value.prime for value in values}
        if len(primes) != 1:
            err_msg = "coordinates from different fields: "
            err_msg += ", ".join(int_repr(p) for p in sorted(primes))
            raise FieldMismatchError(err_msg)
        self._require_on_curve()

    def _is_on_curve(self) -> bool:
        return self.y**2 == self.x**3 + self.a * self.x + self.b

    def _div(self, num: FieldElement, den: FieldElement) -> FieldElement:
        return num.divide_by(den)

    def _is_zero(self, value: FieldElement) -> bool:
        return value.is_zero()

    def _new(self, x: FieldElement, y: FieldElement) -> "FieldPoint":
        return FieldPoint(x, y, self.a, self.b)

    def negate(self) -> "FieldPoint":
        return FieldPoint(self.x, self.y.negate(), self.a, self.b)


def point_from_coordinates(
    x: Optional[Coordinate],
    y: Optional[Coordinate],
    a: Coordinate,
    b: Coordinate,
) -> Point:
    """Return the point (x, y) of the curve y^2 = x^3 + a*x + b.

    x = y = None denotes the point at infinity;
    FieldElement coordinates give a FieldPoint,
    real coordinates a RealPoint.
    """

    if x is None and y is None:
        return InfinityPoint(a, b)
    if x is None or y is None:
        raise ECMathValueError(f"only one coordinate is None: ({x}, {y})")
    if isinstance(x, FieldElement):
        return FieldPoint(x, y, a, b)  # type: ignore
    return RealPoint(x, y, a, b)  # type: ignore
