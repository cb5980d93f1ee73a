#!/usr/bin/env python3

# Copyright (C) 2024 The ecmath developers
#
# This file is part of ecmath. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecmath including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecmath from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecmath versions are derived.
"""


class ECMathValueError(ValueError):
    pass


class ECMathTypeError(TypeError):
    pass


class ECMathRuntimeError(RuntimeError):
    pass


class OutOfRangeValueError(ECMathValueError):
    "Field element value not in [0, prime)."


class FieldMismatchError(ECMathValueError):
    "Binary operation on elements from different fields."


class DivisionByZeroError(ECMathValueError, ZeroDivisionError):
    "Zero has no multiplicative inverse."


class PointNotOnCurveError(ECMathValueError):
    "Point coordinates do not satisfy the curve equation."


class CurveMismatchError(ECMathValueError):
    "Binary operation on points from different curves."
