#!/usr/bin/env python3

# Copyright (C) 2024 The ecmath developers
#
# This file is part of ecmath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Modular arithmetic on plain integers."


def mod(value: int, modulus: int) -> int:
    """Return the representative of value in [0, modulus).

    Unlike a truncating remainder, the result is never negative,
    whatever the sign of value; modulus must be positive.
    """

    return (value % modulus + modulus) % modulus
