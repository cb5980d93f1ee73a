#!/usr/bin/env python3

# Copyright (C) 2024 The ecmath developers
#
# This file is part of ecmath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecmath.number_theory` module."

from ecmath.number_theory import mod

moduli = [2, 7, 13, 223, 2**255 - 19, 2**256 - 2**32 - 977]


def test_mod_small() -> None:
    assert mod(0, 7) == 0
    assert mod(7, 7) == 0
    assert mod(8, 7) == 1
    assert mod(-1, 7) == 6
    assert mod(-7, 7) == 0
    assert mod(-15, 7) == 6
    # a truncating remainder would give -56
    assert mod(-56, 223) == 167


def test_mod_range() -> None:
    for m in moduli:
        for value in (-(m**3), -m - 1, -m, -1, 0, 1, m - 1, m, m + 1, m**3 + 5):
            r = mod(value, m)
            assert 0 <= r < m
            assert (value - r) % m == 0


def test_mod_big_operands() -> None:
    p = 2**256 - 2**32 - 977
    assert mod(-(2**1024), p) == (p - pow(2, 1024, p)) % p
