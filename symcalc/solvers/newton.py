r"""@package symcalc.solvers.newton

Newton-Raphson root finder for expressions of one variable.

The solver differentiates the expression once symbolically and then performs
the classical Newton steps \f$ x_{n+1} = x_n - f(x_n)/f'(x_n) \f$ until
\f$ |f(x_n)| \le \epsilon \f$.

Whenever the derivative vanishes at the current point, the argument is
perturbed randomly by at most \f$ \epsilon/2 \f$ and the step is retried. The
number of such corrections per step is limited by `max_corrections`. The
random numbers are taken from a `numpy.random.Generator` owned by the solver,
so that results are reproducible for a given seed.

@b Examples

```
    >>> from symcalc.exprs import X, polynomial
    >>> root = newton_raphson(polynomial(X, 1, 0, -2), 1.0, 1e-10)
    >>> mp.nstr(root, 10)
    '1.414213562'
    >>> root = newton_raphson(polynomial(X, 1, 0, 0, -8), 0, 1e-10,
    ...                       max_iterations=500, seed=42, verbose=True)
    01: f = -8.0 at x = 0.0
    01: zero derivative, correction 1 to x = ...
```
"""

import numpy as np
from mpmath import mp

from .. import tower
from ..errors import CalculusError, MultipleVariables
from ..tower import Domain
from .support import the_only_variable


__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "NoConvergence",
    "IterationsExhausted",
    "MaxArgCorrectionsExceeded",
    "NewtonRaphson",
    "newton_raphson",
]


## Number of iterations used when `max_iterations` is zero.
DEFAULT_MAX_ITERATIONS = 100


class NoConvergence(CalculusError):
    r"""Base for exceptions indicating failed convergence of Newton steps."""
    pass


class IterationsExhausted(NoConvergence):
    r"""Raised when convergence is not achieved within the iteration limit."""
    pass


class MaxArgCorrectionsExceeded(NoConvergence):
    r"""Raised when no point with non-zero derivative could be found.

    This happens if the derivative stays zero for more than `max_corrections`
    random perturbations of the argument in one step.
    """
    pass


def newton_raphson(expression, initial_guess, epsilon, max_iterations=0,
                   max_corrections=10, rng=None, seed=None, verbose=False):
    r"""Find a root of an expression using Newton-Raphson steps.

    @param expression
        Expression with exactly one free variable.
    @param initial_guess
        Starting point of the iteration.
    @param epsilon
        Positive tolerance. The search stops as soon as the absolute value of
        the expression is at most `epsilon`. Also used to scale the random
        perturbations in case of a vanishing derivative.
    @param max_iterations
        Maximum number of Newton steps. Zero (the default) means
        #DEFAULT_MAX_ITERATIONS.
    @param max_corrections
        Maximum number of random perturbations in each step in which the
        derivative vanishes. Default is `10`.
    @param rng
        `numpy.random.Generator` used for the perturbations. By default, a
        new generator is created using `seed`.
    @param seed
        Seed for the default random generator. Ignored if `rng` is given.
    @param verbose
        Whether to print status information for each step. Default is
        `False`.

    @return The root as `mpf` value.

    @raise MultipleVariables if the expression does not have exactly one
        free variable.
    @raise IterationsExhausted if no root was found within `max_iterations`
        steps.
    @raise MaxArgCorrectionsExceeded if a zero derivative could not be
        escaped by perturbing the argument.
    """
    solver = NewtonRaphson(epsilon=epsilon, max_iterations=max_iterations,
                           max_corrections=max_corrections, verbose=verbose)
    solver.rng = rng if rng is not None else np.random.default_rng(seed)
    return solver.solve(expression, initial_guess)


class NewtonRaphson(object):
    r"""Class implementing the Newton-Raphson steps.

    After constructing a NewtonRaphson object, configure it using its public
    instance attributes. Then, call solve() to perform the search. The
    docstring of newton_raphson() explains the parameters.
    """

    __slots__ = ("epsilon", "max_iterations", "max_corrections", "rng",
                 "verbose")

    def __init__(self, epsilon=1e-10, max_iterations=0, max_corrections=10,
                 verbose=False):
        r"""Create a Newton-Raphson solver object.

        Since the class uses ``__slots__``, there is no chance that typos in
        the configuration attributes go by undetected.
        """
        ## Tolerance for the absolute value of the expression at the root.
        self.epsilon = epsilon
        ## Maximum number of steps (zero means #DEFAULT_MAX_ITERATIONS).
        self.max_iterations = max_iterations
        ## Maximum number of perturbations per step at zero derivatives.
        self.max_corrections = max_corrections
        ## Random generator for the perturbations.
        self.rng = np.random.default_rng()
        ## Whether to print status information during the search.
        self.verbose = verbose

    def solve(self, expression, initial_guess, variable=None):
        r"""Perform the Newton steps starting at `initial_guess`.

        @param expression
            Expression to find a root of.
        @param initial_guess
            Starting point.
        @param variable
            Variable to solve for. By default, this is the only free variable
            of the expression. If given, the expression must not contain any
            other free variable.
        """
        if variable is None:
            variable = the_only_variable(expression)
        elif expression.variables() - {variable}:
            raise MultipleVariables(
                "%s contains variables other than %s"
                % (expression.str(), variable.str())
            )
        eps = tower.up_cast(self.epsilon, Domain.R)
        if not eps > 0:
            raise ValueError("epsilon must be positive, got %s" % self.epsilon)
        if self.max_iterations < 0 or self.max_corrections < 0:
            raise ValueError("iteration and correction limits must not be negative")
        max_iterations = self.max_iterations or DEFAULT_MAX_ITERATIONS
        derivative = expression.derivative(variable)
        x = tower.up_cast(initial_guess, Domain.R)
        for i in range(max_iterations):
            f = self._eval(expression, variable, x)
            if self.verbose:
                print("%02d: f = %s at x = %s" % (i+1, mp.nstr(f), mp.nstr(x)))
            if abs(f) <= eps:
                return x
            x = self._step(expression, derivative, variable, x, f, eps, i)
        raise IterationsExhausted(
            "Newton-Raphson search did not converge in %d steps "
            "(last value %s at x = %s)" % (max_iterations, f, x)
        )

    def _step(self, expression, derivative, variable, x, f, eps, i):
        r"""Take one Newton step, escaping zero derivatives if needed."""
        corrections = 0
        while True:
            df = self._eval(derivative, variable, x)
            if df != 0:
                return x - f / df
            if corrections >= self.max_corrections:
                raise MaxArgCorrectionsExceeded(
                    "derivative vanished at x = %s after %d corrections"
                    % (x, corrections)
                )
            corrections += 1
            x = x + eps * mp.mpf(self.rng.uniform(-0.5, 0.5))
            if self.verbose:
                print("%02d: zero derivative, correction %d to x = %s"
                      % (i+1, corrections, mp.nstr(x)))
            f = self._eval(expression, variable, x)

    @staticmethod
    def _eval(expression, variable, x):
        return tower.up_cast(expression.evaluate({variable: x}), Domain.R)
