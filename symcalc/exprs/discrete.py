r"""@package symcalc.exprs.discrete

Factorial, rounding and fractional parts.

Rounding and fractional parts are piecewise smooth: their derivative exists
everywhere except where the argument is an integer. This is represented by
the DefectiveOnInteger node, which evaluates to a fixed value but refuses to
be evaluated where its (bypassed) argument is integral.
"""

from .. import tower
from ..errors import NotDerivableExpression, UndefinedOnInteger
from ..tower import RoundMode
from .base import Expression, Constant, ensure_expr
from .arith import mul
from .powers import _Function


__all__ = [
    "RoundMode",
    "Factorial",
    "Round",
    "Frac",
    "DefectiveOnInteger",
    "factorial",
    "rounded",
    "frac",
    "defective_on_integer",
]


class Factorial(_Function):
    r"""Factorial \f$ n! \f$ of a natural number (including zero)."""

    __slots__ = ()
    self_contained = False

    def _evaluate(self, arguments):
        return tower.factorial(self._inner._evaluate(arguments))

    def derivative(self, wrt):
        if self._inner.is_constant(wrt):
            return Constant(0)
        raise NotDerivableExpression(
            "%s has no derivative w.r.t. %s" % (self.str(), wrt.str())
        )

    def _expr_str(self):
        return "%s!" % self._paren(self._inner)


class Round(_Function):
    r"""Round the inner expression to an integer.

    The direction is one of the RoundMode values.
    """

    __slots__ = ("_mode",)

    def __init__(self, inner, mode=RoundMode.INWARD):
        super().__init__(inner)
        self._mode = RoundMode(mode)

    @property
    def mode(self):
        return self._mode

    def _rebuild(self, children):
        return Round(children[0], self._mode)

    def _key(self):
        return (self._inner, self._mode)

    def _evaluate(self, arguments):
        return tower.round_number(self._inner._evaluate(arguments), self._mode)

    def derivative(self, wrt):
        if self._inner.is_constant(wrt):
            return Constant(0)
        return DefectiveOnInteger(self._inner, 0).simplify()

    def _expr_str(self):
        return "round(%s, %s)" % (self._inner.str(), self._mode.value)


class Frac(_Function):
    r"""Fractional part, keeping the sign of the inner expression."""

    __slots__ = ()
    _name = "frac"

    def _evaluate(self, arguments):
        return tower.frac(self._inner._evaluate(arguments))

    def derivative(self, wrt):
        if self._inner.is_constant(wrt):
            return Constant(0)
        return mul(self._inner.derivative(wrt),
                   DefectiveOnInteger(self._inner, 1)).simplify()


class DefectiveOnInteger(Expression):
    r"""Fixed value that is undefined where another expression is integral.

    This is the derivative form of Round and Frac. The `bypassed` expression
    is evaluated only to check that it is not an exact integer (be it an
    `int`, an integral `Fraction` or an integral `mpf`).
    """

    __slots__ = ("_bypassed", "_value")

    def __init__(self, bypassed, value):
        self._bypassed = ensure_expr(bypassed)
        self._value = tower.wrap(value)

    @property
    def bypassed(self):
        return self._bypassed

    @property
    def value(self):
        return self._value

    @property
    def children(self):
        return (self._bypassed,)

    def _rebuild(self, children):
        return DefectiveOnInteger(children[0], self._value)

    def _key(self):
        return (self._bypassed, type(self._value).__name__, self._value)

    def _evaluate(self, arguments):
        x = self._bypassed._evaluate(arguments)
        if tower.is_integral(x):
            raise UndefinedOnInteger(
                "%s is undefined for integral %s" % (self.str(), x)
            )
        return self._value

    def derivative(self, wrt):
        if self._bypassed.is_constant(wrt):
            return Constant(0)
        return DefectiveOnInteger(self._bypassed, 0).simplify()

    def _expr_str(self):
        return "defective(%s, %s)" % (self._bypassed.str(),
                                      Constant(self._value).str())


def factorial(expr):
    return Factorial(expr)


def rounded(expr, mode=RoundMode.INWARD):
    r"""Create the rounded `expr` (see RoundMode for the directions)."""
    return Round(expr, mode)


def frac(expr):
    return Frac(expr)


def defective_on_integer(bypassed, value):
    return DefectiveOnInteger(bypassed, value)
