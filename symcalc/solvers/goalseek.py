r"""@package symcalc.solvers.goalseek

Goal-seeking using the Newton-Raphson solver.

nr_goal_seek() creates a symcalc.exprs.goalseek.GoalSeek expression whose
algorithm factory asks a user supplied callable for the solver parameters
and creates an NRGoalSeekingAlgorithm from them.
"""

import numpy as np

from ..errors import CalculusError
from ..exprs.goalseek import GoalSeek, GoalSeekingAlgorithm
from .newton import NewtonRaphson


__all__ = [
    "BadSolverParameters",
    "NRGoalSeekingAlgorithm",
    "nr_goal_seek",
]


class BadSolverParameters(CalculusError, ValueError):
    r"""Raised for non-positive tolerances or iteration/correction limits."""
    pass


class NRGoalSeekingAlgorithm(GoalSeekingAlgorithm):
    r"""Goal-seeking algorithm performing Newton-Raphson steps."""

    def __init__(self, initial_guess, epsilon, max_iterations,
                 max_corrections, rng=None, seed=None, verbose=False):
        r"""Create and validate the solver configuration.

        @raise BadSolverParameters if `epsilon`, `max_iterations` or
            `max_corrections` is not positive.
        """
        if not epsilon > 0:
            raise BadSolverParameters("epsilon must be positive, got %s" % epsilon)
        if not max_iterations > 0:
            raise BadSolverParameters(
                "max_iterations must be positive, got %s" % max_iterations
            )
        if not max_corrections > 0:
            raise BadSolverParameters(
                "max_corrections must be positive, got %s" % max_corrections
            )
        self.initial_guess = initial_guess
        self.solver = NewtonRaphson(epsilon=epsilon,
                                    max_iterations=max_iterations,
                                    max_corrections=max_corrections,
                                    verbose=verbose)
        self.solver.rng = rng if rng is not None else np.random.default_rng(seed)

    def find_root(self, expression, variable):
        return self.solver.solve(expression, self.initial_guess,
                                 variable=variable)


class _NRFactory(object):
    r"""Algorithm factory of the goal-seek nodes created by nr_goal_seek()."""

    __slots__ = ("params", "seed", "verbose")

    def __init__(self, params, seed, verbose):
        self.params = params
        self.seed = seed
        self.verbose = verbose

    def __call__(self, arguments, inverted, domain):
        params = self.params
        if callable(params):
            params = params(arguments)
        initial_guess, epsilon, max_iterations, max_corrections = params
        return NRGoalSeekingAlgorithm(
            initial_guess, epsilon, max_iterations, max_corrections,
            seed=self.seed, verbose=self.verbose,
        )

    def _key(self):
        return (self.params, self.seed, self.verbose)

    def __eq__(self, other):
        if not isinstance(other, _NRFactory):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())


def nr_goal_seek(goal, target, inverted, params, seed=None, verbose=False):
    r"""Create an expression solving ``target == goal`` for `inverted`.

    @param goal
        Expression (or number) the target should reach.
    @param target
        Expression containing `inverted`.
    @param inverted
        Variable to solve for.
    @param params
        Either a tuple ``(initial_guess, epsilon, max_iterations,
        max_corrections)`` or a callable taking the evaluation arguments and
        returning such a tuple.
    @param seed
        Seed for the random perturbations of each solver run.
    @param verbose
        Whether the solver should print status information.
    """
    return GoalSeek(goal, target, inverted, _NRFactory(params, seed, verbose))
