#!/usr/bin/env python3

# Copyright (C) 2024 The ecmath developers
#
# This file is part of ecmath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elements of a prime finite field Fp.

A FieldElement is an immutable value: every operation returns
a new FieldElement over the same prime.
Python int is arbitrary-precision, so num and prime can be as big
as needed; exponentiation always uses the three-argument pow,
i.e. square-and-multiply modulo the prime.

Division and negative exponents rely on Fermat's little theorem:
a^(p-1) = 1 for a != 0, hence a^(p-2) is the inverse of a
and a^(-n) = a^(p-1-n).
"""

from dataclasses import InitVar, dataclass
from typing import Any

from dataclasses_json import DataClassJsonMixin

from ecmath.alias import Integer
from ecmath.exceptions import (
    DivisionByZeroError,
    ECMathTypeError,
    ECMathValueError,
    FieldMismatchError,
    OutOfRangeValueError,
)
from ecmath.number_theory import mod
from ecmath.utils import int_from_integer, int_repr


@dataclass(frozen=True)
class FieldElement(DataClassJsonMixin):
    num: int
    prime: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        # accept the Integer input convention, store plain int
        object.__setattr__(self, "num", int_from_integer(self.num))
        object.__setattr__(self, "prime", int_from_integer(self.prime))
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if self.prime < 2:
            raise ECMathValueError(f"invalid field order: {self.prime}")
        if not 0 <= self.num < self.prime:
            err_msg = f"num {int_repr(self.num)} not in field range"
            err_msg += f" 0 to {int_repr(self.prime - 1)}"
            raise OutOfRangeValueError(err_msg)

    def __str__(self) -> str:
        return f"FieldElement_{int_repr(self.num)}({int_repr(self.prime)})"

    def _require_same_field(self, other: "FieldElement", operation: str) -> None:
        if not isinstance(other, FieldElement):
            raise ECMathTypeError(f"not a field element: {other!r}")
        if self.prime != other.prime:
            err_msg = f"cannot {operation} two elements from different fields: "
            err_msg += f"{int_repr(self.prime)}, {int_repr(other.prime)}"
            raise FieldMismatchError(err_msg)

    def _new(self, num: int) -> "FieldElement":
        return FieldElement(mod(num, self.prime), self.prime)

    def equals(self, other: Any) -> bool:
        "Return True if other is the same element of the same field."

        if not isinstance(other, FieldElement):
            return False
        return self.num == other.num and self.prime == other.prime

    def is_zero(self) -> bool:
        return self.num == 0

    def add(self, other: "FieldElement") -> "FieldElement":
        self._require_same_field(other, "add")
        return self._new(self.num + other.num)

    def subtract(self, other: "FieldElement") -> "FieldElement":
        self._require_same_field(other, "subtract")
        return self._new(self.num - other.num)

    def multiply_by(self, other: "FieldElement") -> "FieldElement":
        self._require_same_field(other, "multiply")
        return self._new(self.num * other.num)

    def divide_by(self, other: "FieldElement") -> "FieldElement":
        """Return self / other, i.e. self * other^(p-2).

        Division by the zero element raises DivisionByZeroError.
        """

        self._require_same_field(other, "divide")
        if other.num == 0:
            raise DivisionByZeroError(f"cannot divide {self} by zero")
        return self._new(self.num * pow(other.num, self.prime - 2, self.prime))

    def power_of(self, exponent: int) -> "FieldElement":
        """Return self raised to exponent, which may be negative.

        The exponent is reduced modulo p-1 before exponentiation,
        which is not valid for the zero element:
        0^n is zero for positive n, one for n = 0,
        and undefined for negative n.
        """

        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise ECMathTypeError(f"not an integer exponent: {exponent!r}")

        if self.num == 0:
            if exponent < 0:
                err_msg = f"cannot raise {self} to negative power {exponent}"
                raise DivisionByZeroError(err_msg)
            return self._new(1 if exponent == 0 else 0)

        n = mod(exponent, self.prime - 1)
        return self._new(pow(self.num, n, self.prime))

    def negate(self) -> "FieldElement":
        return self._new(-self.num)

    def inverse(self) -> "FieldElement":
        if self.num == 0:
            raise DivisionByZeroError(f"no inverse for {self}")
        return self._new(pow(self.num, self.prime - 2, self.prime))

    def is_square(self) -> bool:
        "Return True if self has a square root (Euler's criterion)."

        if self.num == 0 or self.prime == 2:
            return True
        return self.power_of((self.prime - 1) // 2).num == 1

    def sqrt(self) -> "FieldElement":
        """Return a square root of self; its negation is the other one.

        p = 3 (mod 4) and p = 5 (mod 8) have closed-form roots,
        any other odd prime goes through Tonelli-Shanks.
        """

        p = self.prime
        if self.num == 0 or p == 2:
            return self
        if not self.is_square():
            raise ECMathValueError(f"{self} is not a square")

        if p % 4 == 3:
            return self.power_of((p + 1) // 4)
        if p % 8 == 5:
            root = self.power_of((p + 3) // 8)
            if root * root == self:
                return root
            # 2 is not a square here, so 2^((p-1)/4) is a root of -1
            return root * FieldElement(2, p).power_of((p - 1) // 4)
        return self._tonelli_shanks()

    def _tonelli_shanks(self) -> "FieldElement":
        p = self.prime
        one = FieldElement(1, p)

        # p - 1 = q * 2^s, q odd
        q, s = p - 1, 0
        while q % 2 == 0:
            q //= 2
            s += 1

        z = FieldElement(2, p)
        while z.is_square():
            z += one

        c = z.power_of(q)
        t = self.power_of(q)
        root = self.power_of((q + 1) // 2)
        while t != one:
            # least i such that t^(2^i) = 1
            i, t2i = 1, t * t
            while t2i != one:
                t2i = t2i * t2i
                i += 1
            b = c.power_of(2 ** (s - i - 1))
            s, c = i, b * b
            t, root = t * c, root * b
        return root

    # operators

    def __add__(self, other: "FieldElement") -> "FieldElement":
        return self.add(other)

    def __sub__(self, other: "FieldElement") -> "FieldElement":
        return self.subtract(other)

    def __mul__(self, other: "FieldElement") -> "FieldElement":
        return self.multiply_by(other)

    def __rmul__(self, coefficient: int) -> "FieldElement":
        "Return coefficient * self, i.e. self added coefficient times."

        if isinstance(coefficient, bool) or not isinstance(coefficient, int):
            return NotImplemented
        return self._new(coefficient * self.num)

    def __truediv__(self, other: "FieldElement") -> "FieldElement":
        return self.divide_by(other)

    def __pow__(self, exponent: int) -> "FieldElement":
        return self.power_of(exponent)

    def __neg__(self) -> "FieldElement":
        return self.negate()
