r"""@package symcalc.exprs.powers

Powers, roots, logarithms and the exponential function.

The derivative of a power distinguishes whether base and exponent depend on
the variable of differentiation. These checks are done on the simplified
power, so that e.g. \f$ x^{y \cdot 0} \f$ is treated as having a constant
exponent.
"""

from .. import tower
from .base import Expression, Constant, ensure_expr
from .arith import add, sub, mul, div, inv


__all__ = [
    "Power",
    "NaturalLog",
    "Log",
    "Exp",
    "power",
    "root",
    "ln",
    "log",
    "exp",
]


class Power(Expression):
    r"""Represent \f$ b^e \f$ for arbitrary expressions `b` and `e`."""

    __slots__ = ("_base", "_exponent")

    def __init__(self, base, exponent):
        self._base = ensure_expr(base)
        self._exponent = ensure_expr(exponent)

    @property
    def base(self):
        return self._base

    @property
    def exponent(self):
        return self._exponent

    @property
    def children(self):
        return (self._base, self._exponent)

    def _rebuild(self, children):
        return Power(*children)

    def _evaluate(self, arguments):
        return tower.power(self._base._evaluate(arguments),
                           self._exponent._evaluate(arguments))

    def simplify(self):
        base = self._base.simplify()
        exponent = self._exponent.simplify()
        if isinstance(base, Constant) and isinstance(exponent, Constant):
            return Constant(tower.power(base.value, exponent.value))
        if isinstance(exponent, Constant) and tower.is_one(exponent.value):
            return base
        return Power(base, exponent)

    def derivative(self, wrt):
        if self.is_constant(wrt):
            return Constant(0)
        node = self.simplify()
        if not isinstance(node, Power):
            return node.derivative(wrt)
        b, e = node.base, node.exponent
        b_const, e_const = b.is_constant(wrt), e.is_constant(wrt)
        if b_const and e_const:
            return Constant(0)
        if b_const:
            # d/dx b^e = b^e ln(b) e'
            return mul(node, ln(b), e.derivative(wrt)).simplify()
        if e_const:
            # d/dx b^e = e b^(e-1) b'
            return mul(e, power(b, sub(e, 1)), b.derivative(wrt)).simplify()
        # d/dx b^e = b^(e-1) (e b' + b ln(b) e')
        return mul(
            power(b, sub(e, 1)),
            add(mul(e, b.derivative(wrt)),
                mul(b, ln(b), e.derivative(wrt))),
        ).simplify()

    def _expr_str(self):
        base = self._paren(self._base)
        if isinstance(self._base, Power):
            base = "(%s)" % self._base.str()
        return "%s^%s" % (base, self._paren(self._exponent))


class _Function(Expression):
    r"""Base for functions of a single argument rendered as ``name(arg)``."""

    __slots__ = ("_inner",)

    ## Name used for rendering.
    _name = None

    def __init__(self, inner):
        self._inner = ensure_expr(inner)

    @property
    def inner(self):
        return self._inner

    @property
    def children(self):
        return (self._inner,)

    def _rebuild(self, children):
        return type(self)(*children)

    def _expr_str(self):
        return "%s(%s)" % (self._name, self._inner.str())


class NaturalLog(_Function):
    r"""Natural logarithm \f$ \ln(f) \f$."""

    __slots__ = ()
    _name = "ln"

    def _evaluate(self, arguments):
        return tower.ln(self._inner._evaluate(arguments))

    def derivative(self, wrt):
        return div(self._inner.derivative(wrt), self._inner).simplify()


class Exp(_Function):
    r"""Exponential function \f$ e^f \f$."""

    __slots__ = ()
    _name = "exp"

    def _evaluate(self, arguments):
        return tower.exp(self._inner._evaluate(arguments))

    def derivative(self, wrt):
        return mul(self._inner.derivative(wrt), self).simplify()


class Log(Expression):
    r"""Logarithm of `power` to the base `base`."""

    __slots__ = ("_base", "_power")

    def __init__(self, base, power):
        self._base = ensure_expr(base)
        self._power = ensure_expr(power)

    @property
    def base(self):
        return self._base

    @property
    def power(self):
        return self._power

    @property
    def children(self):
        return (self._base, self._power)

    def _rebuild(self, children):
        return Log(*children)

    def _evaluate(self, arguments):
        return tower.log(self._base._evaluate(arguments),
                         self._power._evaluate(arguments))

    def derivative(self, wrt):
        if self.is_constant(wrt):
            return Constant(0)
        return div(ln(self._power), ln(self._base)).derivative(wrt)

    def _expr_str(self):
        return "log(%s, %s)" % (self._base.str(), self._power.str())


def power(base, exponent):
    r"""Create \f$ base^{exponent} \f$."""
    return Power(base, exponent)


def root(base, index):
    r"""Create the `index`-th root of `base`, i.e. \f$ base^{1/index} \f$."""
    return Power(base, inv(index))


def ln(expr):
    r"""Create the natural logarithm of `expr`."""
    return NaturalLog(expr)


def log(base, power):
    r"""Create the logarithm of `power` to the base `base`."""
    return Log(base, power)


def exp(expr):
    r"""Create the exponential of `expr`."""
    return Exp(expr)
