r"""@package symcalc.tower.trig

Trigonometric functions of the numeric tower.

These are evaluated in double precision (`math` module) and returned as
`mpf` values. Operands that do not fit into a double are rejected instead of
silently losing all significant digits.
"""

import math

import numpy as np
from mpmath import mp

from ..errors import PrecisionLimitExceeded, TangentOfVertical
from .domains import Domain, up_cast


__all__ = [
    "FLOAT_LIMIT",
    "sin",
    "cos",
    "tan",
]


## Largest magnitude accepted by the trigonometric functions.
FLOAT_LIMIT = mp.mpf(float(np.finfo(np.float64).max))

# Cosine magnitude below which the tangent is considered vertical.
_VERTICAL_EPS = float(np.finfo(np.float64).eps)


def _to_float(value):
    value = up_cast(value, Domain.R)
    if not mp.isfinite(value) or abs(value) > FLOAT_LIMIT:
        raise PrecisionLimitExceeded(
            "%s exceeds the double precision range" % value
        )
    return float(value)


def sin(value):
    return mp.mpf(math.sin(_to_float(value)))


def cos(value):
    return mp.mpf(math.cos(_to_float(value)))


def tan(value):
    r"""Tangent of `value`.

    @raise TangentOfVertical if the cosine of `value` vanishes numerically.
    """
    x = _to_float(value)
    c = math.cos(x)
    if abs(c) < _VERTICAL_EPS:
        raise TangentOfVertical("tangent of %s is vertical" % x)
    return mp.mpf(math.sin(x) / c)
