r"""@package symcalc.solvers.support

Small helpers shared by the root finders.
"""

from mpmath import mp

from ..errors import MultipleVariables


__all__ = [
    "MultipleVariables",
    "epsilon",
    "the_only_variable",
]


def epsilon(precision):
    r"""Return the tolerance \f$ 10^{-|p|} \f$ for `p` significant decimals.

    A precision of zero is treated as one, so the result is at most `0.1`.

    @b Examples

    ```
        >>> epsilon(3), epsilon(-3), epsilon(0)
        (mpf('0.001'), mpf('0.001'), mpf('0.1'))
    ```
    """
    digits = abs(int(precision)) or 1
    return mp.mpf(10) ** (-digits)


def the_only_variable(expression):
    r"""Return the single free variable of `expression`.

    @raise MultipleVariables if the expression has none or more than one.
    """
    variables = expression.variables()
    if len(variables) != 1:
        raise MultipleVariables(
            "expected exactly one variable in %s, found %d"
            % (expression.str(), len(variables))
        )
    return next(iter(variables))
