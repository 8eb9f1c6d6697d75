r"""@package symcalc.tower.domains

Numeric domains and the representation of numbers in each of them.

Numbers are represented by three Python types:
    * `int` for the integers (and the naturals), \f$ N, N_0, Z \f$
    * `fractions.Fraction` for the rationals \f$ Q \f$
    * `mpmath.mpf` for the reals \f$ R \f$, using the precision of the
      currently active `mpmath` context

Each value is classified by the narrowest domain it inhabits (see closest()).
Operations on several values first broaden() the domains of all operands and
then up_cast() each operand to the representation of the common domain.
Values are never narrowed: once a computation falls back to the reals, the
result stays real.

@b Examples

```
    >>> closest(3), closest(0), closest(-3)
    (<Domain.N: 0>, <Domain.N0: 1>, <Domain.Z: 2>)
    >>> up_cast_all(2, Fraction(1, 3))
    (<Domain.Q: 3>, [Fraction(2, 1), Fraction(1, 3)])
```
"""

from contextlib import contextmanager
from enum import IntEnum
from fractions import Fraction
from functools import reduce
import numbers

from mpmath import mp


__all__ = [
    "Domain",
    "wrap",
    "closest",
    "closest_all",
    "broaden",
    "broaden_all",
    "belongs_to",
    "up_cast",
    "up_cast_all",
    "zero",
    "one",
    "is_finite",
    "is_integral",
    "precision",
]


class Domain(IntEnum):
    r"""Nested numeric domains, ordered from narrowest to broadest."""
    ## Natural numbers (positive integers).
    N = 0
    ## Natural numbers and zero.
    N0 = 1
    ## Integers.
    Z = 2
    ## Rationals.
    Q = 3
    ## Reals.
    R = 4


def wrap(value):
    r"""Convert a Python number to its numeric tower representation.

    Integers and rationals (including e.g. numpy integer scalars) keep their
    exact value, everything else that is a real number becomes an `mpf`.
    Booleans are rejected even though they are integers in Python.

    @raise TypeError for values that are not real numbers.
    """
    if isinstance(value, bool):
        raise TypeError("booleans are not numbers: %r" % (value,))
    if isinstance(value, (int, Fraction, mp.mpf)):
        return value
    if hasattr(value, '_mpf_'):
        # mpmath constants like `mp.pi`
        return mp.mpf(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Rational):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, numbers.Real):
        return mp.mpf(float(value))
    raise TypeError("unsupported number type: %s" % type(value).__name__)


def closest(value):
    r"""Return the narrowest domain the (wrapped) value belongs to."""
    value = wrap(value)
    if isinstance(value, int):
        if value > 0:
            return Domain.N
        if value == 0:
            return Domain.N0
        return Domain.Z
    if isinstance(value, Fraction):
        return Domain.Q
    return Domain.R


def closest_all(*values):
    r"""Return the list of closest() domains of all given values."""
    return [closest(v) for v in values]


def broaden(a, b):
    r"""Return the narrowest domain containing both given domains."""
    return Domain(max(a, b))


def broaden_all(*domains):
    r"""Fold broaden() over one or more domains."""
    if not domains:
        raise ValueError("at least one domain is required")
    return reduce(broaden, domains)


def belongs_to(value, domain):
    r"""Return whether a number is a member of the given domain.

    Membership is decided by representation and sign, i.e. an `mpf` is
    only a member of \f$ R \f$ even if its value is integral.
    """
    value = wrap(value)
    if isinstance(value, int):
        if domain == Domain.N:
            return value > 0
        if domain == Domain.N0:
            return value >= 0
        return True
    if isinstance(value, Fraction):
        return domain >= Domain.Q
    return domain == Domain.R


def up_cast(value, domain):
    r"""Convert a number to the representation of the given domain.

    Values already represented in a broader domain are returned unchanged.
    """
    value = wrap(value)
    if domain == Domain.R and not isinstance(value, mp.mpf):
        if isinstance(value, Fraction):
            return mp.mpf(value.numerator) / value.denominator
        return mp.mpf(value)
    if domain == Domain.Q and isinstance(value, int):
        return Fraction(value)
    return value


def up_cast_all(*values):
    r"""Cast all values to the representation of their common domain.

    @return A pair ``(domain, values)``. For an empty argument list, the
        domain is `None`.
    """
    values = [wrap(v) for v in values]
    if not values:
        return None, values
    domain = broaden_all(*closest_all(*values))
    return domain, [up_cast(v, domain) for v in values]


def zero(domain):
    r"""Additive identity in the representation of the given domain."""
    if domain == Domain.R:
        return mp.mpf(0)
    if domain == Domain.Q:
        return Fraction(0)
    return 0


def one(domain):
    r"""Multiplicative identity in the representation of the given domain."""
    if domain == Domain.R:
        return mp.mpf(1)
    if domain == Domain.Q:
        return Fraction(1)
    return 1


def is_finite(value):
    r"""Return whether the value is neither infinite nor NaN."""
    value = wrap(value)
    if isinstance(value, mp.mpf):
        return mp.isfinite(value)
    return True


def is_integral(value):
    r"""Return whether the value is an exact integer, whatever its representation."""
    value = wrap(value)
    if isinstance(value, int):
        return True
    if isinstance(value, Fraction):
        return value.denominator == 1
    return bool(mp.isint(value))


@contextmanager
def precision(dps):
    r"""Context manager to compute reals with `dps` decimal places.

    This is a thin wrapper around `mpmath.mp.workdps()`. Real values
    created inside the context keep their precision afterwards.
    """
    with mp.workdps(dps):
        yield
