#!/usr/bin/env python3

# Copyright (C) 2024 The ecmath developers
#
# This file is part of ecmath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from fractions import Fraction
from typing import Union

# hex-string or bytes representation of an int
#
# hex-strings are accepted with or without the "0x" prefix, e.g.:
# "0xdf"
# "-0xdf"
# "df"
# and bytes are read as big-endian unsigned integers
#
# use ecmath.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# Coordinate of a point on an elliptic curve over the real numbers.
#
# int and Fraction values keep the group law exact,
# float values are accepted for plotting-style explorations
Real = Union[int, Fraction, float]
