r"""@package symcalc.exprs.trig

Trigonometric functions.

Like their numeric counterparts in symcalc.tower.trig, these always evaluate
to reals computed in double precision.
"""

from .. import tower
from .base import Constant
from .arith import mul, neg
from .powers import _Function, power


__all__ = [
    "Sin",
    "Cos",
    "Tan",
    "sin",
    "cos",
    "tan",
]


class Sin(_Function):
    __slots__ = ()
    _name = "sin"

    def _evaluate(self, arguments):
        return tower.sin(self._inner._evaluate(arguments))

    def derivative(self, wrt):
        if self._inner.is_constant(wrt):
            return Constant(0)
        return mul(self._inner.derivative(wrt), Cos(self._inner)).simplify()


class Cos(_Function):
    __slots__ = ()
    _name = "cos"

    def _evaluate(self, arguments):
        return tower.cos(self._inner._evaluate(arguments))

    def derivative(self, wrt):
        if self._inner.is_constant(wrt):
            return Constant(0)
        return neg(mul(self._inner.derivative(wrt), Sin(self._inner))).simplify()


class Tan(_Function):
    r"""Tangent, whose derivative is \f$ f' / \cos^2(f) \f$."""

    __slots__ = ()
    _name = "tan"

    def _evaluate(self, arguments):
        return tower.tan(self._inner._evaluate(arguments))

    def derivative(self, wrt):
        if self._inner.is_constant(wrt):
            return Constant(0)
        return mul(self._inner.derivative(wrt),
                   power(Cos(self._inner), -2)).simplify()


def sin(expr):
    return Sin(expr)


def cos(expr):
    return Cos(expr)


def tan(expr):
    return Tan(expr)
