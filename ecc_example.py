#!/usr/bin/env python3

# Copyright (C) 2024 The ecmath developers
#
# This file is part of ecmath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

import logging

from ecmath.curve_explorer import curve_check, find_subgroup_points
from ecmath.field_element import FieldElement
from ecmath.point import point_from_coordinates

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

print("\n*** Points on y^2 = x^3 + 7 over F223")
for x, y in ((192, 105), (17, 56), (200, 119), (1, 193), (42, 99)):
    print(f"({x}, {y}) on curve: {curve_check(x, y, 1, 7, 223)}")

prime = 223
a = FieldElement(0, prime)
b = FieldElement(7, prime)

print("\n*** Point addition")
p1 = point_from_coordinates(FieldElement(192, prime), FieldElement(105, prime), a, b)
p2 = point_from_coordinates(FieldElement(17, prime), FieldElement(56, prime), a, b)
print(f"p1: {p1}")
print(f"p2: {p2}")
print(f"p1 + p2 = {p1.add(p2)}")

print("\n*** Point doubling")
print(f"p1 + p1 = {p1.add(p1)}")

print("\n*** Subgroup generated by (47, 71)")
G = point_from_coordinates(FieldElement(47, prime), FieldElement(71, prime), a, b)
for i, Q in enumerate(find_subgroup_points(G), 1):
    print(f"{i:2} * G = {Q}")

print("\n*** Points on y^2 = x^3 + 5x + 7 over the reals")
P = point_from_coordinates(-1, -1, 5, 7)
Q = point_from_coordinates(2, 5, 5, 7)
print(f"P + Q = {P.add(Q)}")
print(f"P + P = {P.add(P)}")
print(f"P + (-P) = {P.add(P.negate())}")
