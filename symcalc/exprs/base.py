r"""@package symcalc.exprs.base

Base of the expression system and its leaf nodes.

Expressions are immutable trees. Every node kind derives from Expression and
implements evaluation, differentiation, simplification and partial
evaluation (currying). Child classes usually only have to provide:
    * `children` and _rebuild() to take part in the generic tree operations
    * _evaluate() computing the value from already evaluated children
    * derivative() implementing the respective rule of differentiation
    * _expr_str() returning the infix representation

The leaves of the trees are Variable and Constant objects. Raw Python
numbers are converted to Constant nodes wherever an expression is expected,
so that e.g. ``X * 2 + 1`` builds a proper tree.

@b Examples

```
    >>> e = X * Y + 1
    >>> e.evaluate({X: 2, Y: 3})
    7
    >>> e.curry({Y: 3})
    <Add(3 * X + 1)>
```
"""

from abc import ABCMeta, abstractmethod
from fractions import Fraction

from mpmath import mp

from .. import tower
from ..errors import UndefinedValue


__all__ = [
    "Expression",
    "Variable",
    "Constant",
    "ensure_expr",
    "var",
    "num",
    "arguments",
    "W",
    "X",
    "Y",
    "Z",
]


class Expression(metaclass=ABCMeta):
    r"""Parent class of all expression nodes.

    Nodes compare and hash structurally, i.e. two separately built trees of
    the same shape and values are equal.
    """

    __slots__ = ()

    ## Whether the rendered form can be embedded in other operators without
    ## parentheses.
    self_contained = True

    @property
    def children(self):
        r"""Tuple of the direct sub expressions of this node."""
        return ()

    def _rebuild(self, children):
        r"""Create a node of the same kind with replaced children."""
        return self

    def evaluate(self, arguments=None):
        r"""Compute the value of the expression.

        @param arguments
            Mapping of Variable objects (or variable names) to numbers. All
            free variables of the expression need to be given a value.

        @raise UndefinedValue if a free variable has no value.
        @raise symcalc.errors.NumericalError (or subclasses) if any of the
            operations is not defined for the computed operand values.
        """
        return self._evaluate({} if arguments is None else arguments)

    @abstractmethod
    def _evaluate(self, arguments):
        pass

    @abstractmethod
    def derivative(self, wrt):
        r"""Return the simplified derivative w.r.t. the Variable `wrt`."""
        pass

    def simplify(self):
        r"""Return a simplified, equivalent tree.

        By default, the children are simplified and, if all of them turn out
        to be constants, the node is folded into a Constant.
        """
        children = [c.simplify() for c in self.children]
        node = self._rebuild(children)
        if children and all(isinstance(c, Constant) for c in children):
            return Constant(node._evaluate({}))
        return node

    def curry(self, arguments):
        r"""Replace the variables bound in `arguments` and simplify.

        Binding all free variables results in a Constant.
        """
        curried = [c.curry(arguments) for c in self.children]
        return self._rebuild(curried).simplify()

    def collect_variables(self, variables):
        r"""Add all free variables to the set `variables` and return it."""
        for c in self.children:
            c.collect_variables(variables)
        return variables

    def variables(self):
        r"""Return the free variables as a `frozenset`."""
        return frozenset(self.collect_variables(set()))

    def is_constant(self, wrt):
        r"""Return whether the Variable `wrt` does not occur freely."""
        return wrt not in self.collect_variables(set())

    def _key(self):
        r"""Tuple identifying the structure of the node (used for equality)."""
        return self.children

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self._key()))

    def str(self):
        r"""Return the infix representation of the expression."""
        return self._expr_str()

    def __str__(self):
        return self.str()

    def __repr__(self):
        return "<%s(%s)>" % (type(self).__name__, self.str())

    @abstractmethod
    def _expr_str(self):
        pass

    def _paren(self, expr):
        r"""String of a sub expression, parenthesized if necessary."""
        if expr.self_contained:
            return expr.str()
        return "(%s)" % expr.str()

    def __add__(self, other):
        from .arith import add
        return _binary(add, self, other)

    def __radd__(self, other):
        from .arith import add
        return _binary(add, other, self)

    def __sub__(self, other):
        from .arith import sub
        return _binary(sub, self, other)

    def __rsub__(self, other):
        from .arith import sub
        return _binary(sub, other, self)

    def __mul__(self, other):
        from .arith import mul
        return _binary(mul, self, other)

    def __rmul__(self, other):
        from .arith import mul
        return _binary(mul, other, self)

    def __truediv__(self, other):
        from .arith import div
        return _binary(div, self, other)

    def __rtruediv__(self, other):
        from .arith import div
        return _binary(div, other, self)

    def __pow__(self, other):
        from .powers import power
        return _binary(power, self, other)

    def __rpow__(self, other):
        from .powers import power
        return _binary(power, other, self)

    def __neg__(self):
        from .arith import neg
        return neg(self)

    def __pos__(self):
        return self


def _binary(constructor, a, b):
    try:
        a, b = ensure_expr(a), ensure_expr(b)
    except TypeError:
        return NotImplemented
    return constructor(a, b)


class Variable(Expression):
    r"""Free variable identified by its name."""

    __slots__ = ("_name",)

    def __init__(self, name):
        if not isinstance(name, str) or not name:
            raise TypeError("variable names must be non-empty strings")
        self._name = name

    @property
    def name(self):
        r"""Name of the variable (read-only)."""
        return self._name

    def _evaluate(self, arguments):
        if self in arguments:
            value = arguments[self]
        elif self.name in arguments:
            value = arguments[self.name]
        else:
            raise UndefinedValue("no value for variable %s" % self.name)
        return tower.wrap(value)

    def derivative(self, wrt):
        return Constant(1 if self == wrt else 0)

    def simplify(self):
        return self

    def curry(self, arguments):
        if self in arguments or self.name in arguments:
            return Constant(self._evaluate(arguments))
        return self

    def collect_variables(self, variables):
        variables.add(self)
        return variables

    def _key(self):
        return (self.name,)

    def __lt__(self, other):
        if not isinstance(other, Variable):
            return NotImplemented
        return self.name < other.name

    def _expr_str(self):
        return self.name


class Constant(Expression):
    r"""A number of the numeric tower.

    The value is converted to its tower representation on construction,
    i.e. a `float` becomes an `mpf`.
    """

    __slots__ = ("value",)

    def __init__(self, value):
        ## The represented number.
        self.value = tower.wrap(value)

    @property
    def self_contained(self):
        if isinstance(self.value, Fraction):
            return False
        return self.value >= 0

    def _evaluate(self, arguments):
        return self.value

    def derivative(self, wrt):
        return Constant(0)

    def simplify(self):
        return self

    def curry(self, arguments):
        return self

    def collect_variables(self, variables):
        return variables

    def _key(self):
        return (type(self.value).__name__, self.value)

    def _expr_str(self):
        value = self.value
        if isinstance(value, Fraction):
            return "%s/%s" % (value.numerator, value.denominator)
        if isinstance(value, mp.mpf):
            return mp.nstr(value, mp.dps)
        return str(value)


def ensure_expr(value):
    r"""Return `value` if it is an expression, otherwise a Constant of it."""
    if isinstance(value, Expression):
        return value
    return Constant(value)


def var(name):
    r"""Create a Variable of the given name."""
    return Variable(name)


def num(value):
    r"""Create a Constant for the given number."""
    return Constant(value)


def arguments(mapping=None, **kwargs):
    r"""Create a binding of variables to tower numbers.

    Keys may be Variable objects or variable names; values are wrapped into
    their numeric tower representation.

    @b Examples

    ```
        >>> args = arguments({X: 0.5}, Y=2)
        >>> (X * Y).evaluate(args)
        mpf('1.0')
    ```
    """
    result = dict()
    items = list(dict(mapping or {}).items()) + list(kwargs.items())
    for key, value in items:
        if not isinstance(key, Variable):
            key = Variable(key)
        result[key] = tower.wrap(value)
    return result


## Standard variables.
W = Variable("W")
X = Variable("X")
Y = Variable("Y")
Z = Variable("Z")
