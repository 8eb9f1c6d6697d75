r"""@package symcalc.solvers

Root finding for expressions.

The Newton-Raphson solver is found in symcalc.solvers.newton. The goal-seek
expressions (see symcalc.exprs.goalseek) can use it through nr_goal_seek().
"""

from .support import MultipleVariables, epsilon, the_only_variable
from .newton import DEFAULT_MAX_ITERATIONS, NoConvergence
from .newton import IterationsExhausted, MaxArgCorrectionsExceeded
from .newton import NewtonRaphson, newton_raphson
from .goalseek import BadSolverParameters, NRGoalSeekingAlgorithm
from .goalseek import nr_goal_seek
