r"""@package symcalc.tower.rounding

Rounding, fractional parts and the factorial.

The rounding functions always produce exact `int` results, regardless of
whether the rounded value is a `Fraction` or an `mpf`. The fractional part
frac() keeps the representation of its argument.
"""

from enum import Enum

from ..errors import InfiniteCannotBeRounded, InvalidFactorialArgument
from .domains import wrap, is_finite, is_integral
from .arith import sub


__all__ = [
    "RoundMode",
    "MAX_FACTORIAL_ARGUMENT",
    "round_number",
    "frac",
    "split",
    "factorial",
]


## Largest argument whose factorial fits a signed 32 bit integer.
MAX_FACTORIAL_ARGUMENT = 12


class RoundMode(Enum):
    r"""Direction in which non-integral values are rounded."""
    ## Towards positive infinity.
    CEIL = "ceil"
    ## Towards negative infinity.
    FLOOR = "floor"
    ## Towards zero.
    INWARD = "inward"
    ## Away from zero.
    OUTWARD = "outward"


def round_number(value, mode):
    r"""Round a number to an `int` in the given direction.

    @param value
        Number to round. Integers are returned unchanged.
    @param mode
        RoundMode or its string value (e.g. ``"floor"``).

    @raise InfiniteCannotBeRounded if `value` is infinite or NaN.
    """
    mode = RoundMode(mode)
    value = wrap(value)
    if isinstance(value, int):
        return value
    if not is_finite(value):
        raise InfiniteCannotBeRounded("cannot round %s" % value)
    truncated = int(value)
    if is_integral(value):
        return truncated
    positive = value > 0
    if mode is RoundMode.CEIL:
        return truncated + 1 if positive else truncated
    if mode is RoundMode.FLOOR:
        return truncated if positive else truncated - 1
    if mode is RoundMode.OUTWARD:
        return truncated + 1 if positive else truncated - 1
    return truncated


def frac(value):
    r"""Fractional part, i.e. the value minus its integral part.

    The result carries the sign of `value`, e.g. ``frac(-1.25) == -0.25``.
    """
    return split(value)[1]


def split(value):
    r"""Split a number into its integral and fractional parts.

    @return A pair ``(integral, fractional)`` with
        ``integral + fractional == value``.
    """
    integral = round_number(value, RoundMode.INWARD)
    return integral, sub(value, integral)


def factorial(value):
    r"""Exact factorial of a natural number (including zero).

    @raise InvalidFactorialArgument for non-integer values, negative ones
        and values larger than #MAX_FACTORIAL_ARGUMENT.
    """
    value = wrap(value)
    if not isinstance(value, int):
        raise InvalidFactorialArgument("factorial of non-integer %s" % value)
    if value < 0 or value > MAX_FACTORIAL_ARGUMENT:
        raise InvalidFactorialArgument(
            "factorial argument %d outside [0, %d]"
            % (value, MAX_FACTORIAL_ARGUMENT)
        )
    result = 1
    for k in range(2, value + 1):
        result *= k
    return result
