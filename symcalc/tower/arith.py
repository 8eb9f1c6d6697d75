r"""@package symcalc.tower.arith

Arithmetic, power and logarithm operations of the numeric tower.

Every operation broadens the domains of its operands first and then computes
in the representation of the resulting domain. Integer and rational results
are exact. The logarithm and exponential functions always compute in the
reals.

@b Examples

```
    >>> add(1, 2, 3)
    6
    >>> div(1, 3)
    Fraction(1, 3)
    >>> power(2, -3)
    Fraction(1, 8)
    >>> add(Fraction(1, 2), 0.5)
    mpf('1.0')
```
"""

from fractions import Fraction

from mpmath import mp

from ..errors import DivisionByZero, LogarithmOfNegative
from ..errors import InvalidPowerOperation
from .domains import Domain, wrap, up_cast, up_cast_all, zero, one


__all__ = [
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "inv",
    "power",
    "root",
    "ln",
    "log",
    "exp",
    "absolute",
    "cmp",
    "is_zero",
    "is_one",
    "is_negative",
    "is_positive",
    "opposite_signs",
    "near_by",
]


# Guard digits for the exp/ln identity used for real powers.
_POWER_EXTRA_DPS = 10


def add(*terms):
    r"""Sum of all terms (`0` if there are none)."""
    domain, terms = up_cast_all(*terms)
    if not terms:
        return 0
    if domain == Domain.R:
        return mp.fsum(terms)
    return sum(terms, zero(domain))


def sub(minuend, *subtrahends):
    r"""Subtract the sum of all `subtrahends` from `minuend`."""
    if not subtrahends:
        return wrap(minuend)
    _, (a, b) = up_cast_all(minuend, add(*subtrahends))
    return a - b


def mul(*factors):
    r"""Product of all factors (`1` if there are none).

    As soon as a zero factor is found, the zero of the common domain is
    returned without multiplying the remaining factors.
    """
    domain, factors = up_cast_all(*factors)
    if not factors:
        return 1
    result = one(domain)
    for factor in factors:
        if factor == 0:
            return zero(domain)
        result = result * factor
    return result


def div(dividend, *divisors):
    r"""Divide `dividend` by the product of all `divisors`.

    Dividing two integers results in an exact `Fraction`.

    @raise DivisionByZero if the product of the divisors is zero.
    """
    if not divisors:
        return wrap(dividend)
    domain, (a, b) = up_cast_all(dividend, mul(*divisors))
    if b == 0:
        raise DivisionByZero("division by zero")
    if domain <= Domain.Z:
        return Fraction(a, b)
    return a / b


def neg(value):
    r"""Additive inverse in the value's own representation."""
    return -wrap(value)


def inv(value):
    r"""Multiplicative inverse (the inverse of an integer is a `Fraction`)."""
    value = wrap(value)
    if value == 0:
        raise DivisionByZero("zero has no inverse")
    if isinstance(value, int):
        return Fraction(1, value)
    return 1 / value


def _int_pow(base, exponent):
    r"""Exact power of integers for a non-negative `exponent`."""
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def _exp_ln(base, exponent):
    r"""Compute `base**exponent` for a positive real base as `exp(e ln(b))`."""
    with mp.extradps(_POWER_EXTRA_DPS):
        result = mp.exp(exponent * mp.ln(base))
    return +result


def _real_pow(base, exponent):
    if base == 0:
        if exponent > 0:
            return mp.mpf(0)
        if exponent == 0:
            raise InvalidPowerOperation("0^0 is undefined")
        raise DivisionByZero("zero cannot be raised to a negative power")
    if base < 0:
        if not mp.isint(exponent):
            raise InvalidPowerOperation(
                "negative base %s with non-integer exponent %s" % (base, exponent)
            )
        magnitude = _exp_ln(-base, exponent)
        return -magnitude if int(exponent) % 2 else magnitude
    return _exp_ln(base, exponent)


def power(base, exponent):
    r"""Raise `base` to the power `exponent`.

    For integer operands the result is exact: an `int` for non-negative
    exponents and a `Fraction` for negative ones. As soon as one of the
    operands is rational or real, the power is computed in the reals.

    @raise InvalidPowerOperation for `0^0` and for negative bases with
        non-integer exponents.
    @raise DivisionByZero for zero raised to a negative power.
    """
    domain, (b, e) = up_cast_all(base, exponent)
    if domain <= Domain.Z:
        if e >= 0:
            if b == 0 and e == 0:
                raise InvalidPowerOperation("0^0 is undefined")
            return _int_pow(b, e)
        if b == 0:
            raise DivisionByZero("zero cannot be raised to a negative power")
        return Fraction(1, _int_pow(b, -e))
    return _real_pow(up_cast(b, Domain.R), up_cast(e, Domain.R))


def root(base, index):
    r"""The `index`-th root of `base`, i.e. `base**(1/index)`."""
    return power(base, inv(index))


def ln(value):
    r"""Natural logarithm (computed in the reals).

    @raise LogarithmOfNegative for non-positive values.
    """
    value = up_cast(value, Domain.R)
    if not value > 0:
        raise LogarithmOfNegative("logarithm of non-positive value %s" % value)
    return mp.ln(value)


def log(base, value):
    r"""Logarithm of `value` to the given `base`.

    @raise LogarithmOfNegative if the base or the value is non-positive.
    @raise DivisionByZero for a base of one.
    """
    ln_base = ln(base)
    if ln_base == 0:
        raise DivisionByZero("logarithm to base 1")
    return ln(value) / ln_base


def exp(value):
    r"""Exponential function (computed in the reals)."""
    return mp.exp(up_cast(value, Domain.R))


def absolute(value):
    r"""Absolute value in the value's own representation."""
    return abs(wrap(value))


def cmp(a, b):
    r"""Three-way comparison returning `-1`, `0` or `1`."""
    _, (a, b) = up_cast_all(a, b)
    return (a > b) - (a < b)


def is_zero(value):
    return wrap(value) == 0


def is_one(value):
    return wrap(value) == 1


def is_negative(value):
    return wrap(value) < 0


def is_positive(value):
    return wrap(value) > 0


def _sign(value):
    return (value > 0) - (value < 0)


def opposite_signs(a, b):
    r"""Return whether one value is positive and the other negative."""
    _, (a, b) = up_cast_all(a, b)
    return _sign(a) * _sign(b) < 0


def near_by(a, b, epsilon):
    r"""Return whether the distance of `a` and `b` is at most `epsilon`."""
    return cmp(absolute(sub(a, b)), epsilon) <= 0
