r"""@package symcalc.exprs.arith

Sums, products, negations and inversions.

Subtraction and division have no node kinds of their own: ``a - b`` is
represented as ``a + (-b)`` and ``a / b`` as ``a * b^-1``. The smart
constructors add(), sub(), mul(), div(), neg() and inv() normalize the trees
they create:
    * nested sums (products) are flattened into one Add (Mul) node
    * double negation and double inversion cancel
    * negated constants are folded into one constant
    * the inverse of a negation becomes the negation of the inverse
"""

from .. import tower
from .base import Expression, Constant, ensure_expr


__all__ = [
    "Add",
    "Mul",
    "Negate",
    "Invert",
    "add",
    "sub",
    "mul",
    "div",
    "neg",
    "inv",
]


class _NAry(Expression):
    r"""Base for the associative operators taking any number of operands."""

    __slots__ = ("_operands",)

    def __init__(self, *operands):
        self._operands = tuple(ensure_expr(e) for e in operands)

    @property
    def children(self):
        return self._operands

    def _rebuild(self, children):
        return type(self)(*children)

    def _flattened_simplified(self):
        r"""Simplified operands with same-kind children merged into this level."""
        result = []
        for e in self._operands:
            e = e.simplify()
            if type(e) is type(self):
                result.extend(e.children)
            else:
                result.append(e)
        return result


class Add(_NAry):
    r"""Sum of any number of terms."""

    __slots__ = ()
    self_contained = False

    @property
    def terms(self):
        return self._operands

    def _evaluate(self, arguments):
        return tower.add(*[t._evaluate(arguments) for t in self._operands])

    def derivative(self, wrt):
        return add(*[t.derivative(wrt) for t in self._operands]).simplify()

    def simplify(self):
        terms = self._flattened_simplified()
        constants = [t.value for t in terms if isinstance(t, Constant)]
        others = [t for t in terms if not isinstance(t, Constant)]
        total = tower.add(*constants)
        if not others:
            return Constant(total)
        if not tower.is_zero(total):
            others.append(Constant(total))
        if len(others) == 1:
            return others[0]
        return Add(*others)

    def _expr_str(self):
        if not self._operands:
            return "0"
        parts = [self._operands[0].str()]
        for t in self._operands[1:]:
            if isinstance(t, Negate):
                parts.append("- %s" % self._paren(t.inner))
            elif isinstance(t, Constant) and tower.is_negative(t.value):
                parts.append("- %s" % Constant(tower.neg(t.value)).str())
            else:
                parts.append("+ %s" % t.str())
        return " ".join(parts)


class Mul(_NAry):
    r"""Product of any number of factors."""

    __slots__ = ()
    self_contained = False

    @property
    def factors(self):
        return self._operands

    def _evaluate(self, arguments):
        return tower.mul(*[f._evaluate(arguments) for f in self._operands])

    def derivative(self, wrt):
        factors = list(self._operands)
        terms = []
        for i, f in enumerate(factors):
            if f.is_constant(wrt):
                continue
            terms.append(mul(*(factors[:i] + [f.derivative(wrt)] + factors[i+1:])))
        return add(*terms).simplify()

    def simplify(self):
        if any(_is_zero_constant(f) for f in self._operands):
            return Constant(0)
        factors = []
        for f in self._operands:
            f = f.simplify()
            if _is_zero_constant(f):
                return Constant(0)
            if isinstance(f, Mul):
                factors.extend(f.factors)
            else:
                factors.append(f)
        constants = [f.value for f in factors if isinstance(f, Constant)]
        others = [f for f in factors if not isinstance(f, Constant)]
        product = tower.mul(*constants)
        if not others:
            return Constant(product)
        if not tower.is_one(product):
            others.insert(0, Constant(product))
        if len(others) == 1:
            return others[0]
        return Mul(*others)

    def _expr_str(self):
        if not self._operands:
            return "1"
        parts = []
        for i, f in enumerate(self._operands):
            if isinstance(f, Invert):
                op = "1 / " if i == 0 else "/ "
                parts.append(op + self._paren(f.inner))
            else:
                s = f.str() if isinstance(f, Mul) else self._paren(f)
                parts.append(s if i == 0 else "* " + s)
        return " ".join(parts)


def _is_zero_constant(expr):
    return isinstance(expr, Constant) and tower.is_zero(expr.value)


class _Unary(Expression):
    r"""Base for nodes with exactly one sub expression."""

    __slots__ = ("_inner",)

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


class Negate(_Unary):
    r"""Additive inverse of an expression."""

    __slots__ = ()
    self_contained = False

    def _evaluate(self, arguments):
        return tower.neg(self._inner._evaluate(arguments))

    def derivative(self, wrt):
        return neg(self._inner.derivative(wrt)).simplify()

    def simplify(self):
        return neg(self._inner.simplify())

    def _expr_str(self):
        return "-%s" % self._paren(self._inner)


class Invert(_Unary):
    r"""Multiplicative inverse of an expression."""

    __slots__ = ()
    self_contained = False

    def _evaluate(self, arguments):
        return tower.inv(self._inner._evaluate(arguments))

    def derivative(self, wrt):
        from .powers import power
        if self._inner.is_constant(wrt):
            return Constant(0)
        d = self._inner.derivative(wrt)
        return neg(mul(d, power(self._inner, -2))).simplify()

    def simplify(self):
        inner = self._inner.simplify()
        if isinstance(inner, Constant):
            return Constant(tower.inv(inner.value))
        return inv(inner)

    def _expr_str(self):
        return "1 / %s" % self._paren(self._inner)


def add(*terms):
    r"""Create the sum of all terms, flattening nested sums.

    Without terms, the result is the constant zero. A single term is returned
    as is.
    """
    flat = []
    for t in terms:
        t = ensure_expr(t)
        if isinstance(t, Add):
            flat.extend(t.terms)
        else:
            flat.append(t)
    if not flat:
        return Constant(0)
    if len(flat) == 1:
        return flat[0]
    return Add(*flat)


def sub(minuend, *subtrahends):
    r"""Create ``minuend - s1 - s2 - ...``."""
    return add(minuend, *[neg(s) for s in subtrahends])


def mul(*factors):
    r"""Create the product of all factors, flattening nested products."""
    flat = []
    for f in factors:
        f = ensure_expr(f)
        if isinstance(f, Mul):
            flat.extend(f.factors)
        else:
            flat.append(f)
    if not flat:
        return Constant(1)
    if len(flat) == 1:
        return flat[0]
    return Mul(*flat)


def div(dividend, *divisors):
    r"""Create ``dividend / d1 / d2 / ...``."""
    return mul(dividend, *[inv(d) for d in divisors])


def neg(expr):
    r"""Create the negation of `expr`.

    Negating a negation returns the original expression and constants are
    negated directly.
    """
    expr = ensure_expr(expr)
    if isinstance(expr, Negate):
        return expr.inner
    if isinstance(expr, Constant):
        return Constant(tower.neg(expr.value))
    return Negate(expr)


def inv(expr):
    r"""Create the inverse of `expr`.

    Inverting an inversion returns the original expression, and the inverse
    of a negation is turned into the negation of the inverse.
    """
    expr = ensure_expr(expr)
    if isinstance(expr, Invert):
        return expr.inner
    if isinstance(expr, Negate):
        return neg(inv(expr.inner))
    return Invert(expr)

