r"""@package symcalc.exprs.helpers

Convenience constructors for commonly needed expressions.
"""

from .base import ensure_expr
from .arith import add, mul, sub
from .powers import power


__all__ = [
    "polynomial",
    "goal_based",
]


def polynomial(variable, *coefficients):
    r"""Create a polynomial in `variable` from its coefficients.

    The coefficients are given from the leading term down to the constant
    term and the result is simplified, i.e. zero terms are dropped.

    @b Examples

    ```
        >>> str(polynomial(X, 2, 3, 5))
        '2 * X^2 + 3 * X + 5'
    ```

    @raise ValueError if no coefficients are given.
    """
    if not coefficients:
        raise ValueError("a polynomial needs at least one coefficient")
    degree = len(coefficients) - 1
    terms = []
    for i, c in enumerate(coefficients):
        n = degree - i
        terms.append(mul(c, power(variable, n)) if n else ensure_expr(c))
    return add(*terms).simplify()


def goal_based(expression, goal):
    r"""Create ``expression - goal``, which vanishes where the goal is met."""
    return sub(ensure_expr(expression), goal)
