r"""@package symcalc.exprs.goalseek

Expressions defined implicitly by a goal a target expression should reach.

A GoalSeek node represents the value \f$ v \f$ of an (inverted) variable for
which \f$ target(v) = goal \f$, where all other variables of `target` and
`goal` take the values given at evaluation time. The actual root finding is
delegated to a GoalSeekingAlgorithm created by a factory on each evaluation,
which allows e.g. choosing initial guesses depending on the arguments.

@b Examples

```
    >>> from symcalc.solvers import nr_goal_seek
    >>> params = lambda args: (1.0, 1e-12, 100, 10)
    >>> sqrt_y = nr_goal_seek(Y, power(X, 2), X, params)
    >>> mp.nstr(sqrt_y.evaluate({Y: 2}), 8)
    '1.4142136'
```
"""

from abc import ABCMeta, abstractmethod

from ..errors import InvertedVariableNotInDomain, MultipleVariables
from ..errors import NotDerivableExpression
from .base import Expression, Constant, ensure_expr
from .arith import sub


__all__ = [
    "GoalSeekingAlgorithm",
    "GoalSeek",
    "goal_seek",
]


class GoalSeekingAlgorithm(metaclass=ABCMeta):
    r"""Root finder used to evaluate GoalSeek nodes."""

    @abstractmethod
    def find_root(self, expression, variable):
        r"""Return a value of `variable` for which `expression` vanishes.

        @param expression
            Expression with `variable` as its only free variable.
        @param variable
            The Variable to solve for.
        """
        pass


class GoalSeek(Expression):
    r"""Value of `inverted` for which `target` evaluates to `goal`.

    The `inverted` variable is bound by this node, i.e. it is not one of its
    free variables.
    """

    __slots__ = ("_goal", "_target", "_inverted", "_factory", "_domain")

    def __init__(self, goal, target, inverted, factory, domain=None):
        r"""Create a goal-seek node.

        @param goal
            Expression for the value `target` should reach. Fully evaluated
            on each evaluation of this node.
        @param target
            Expression that should reach the `goal`.
        @param inverted
            Variable of `target` to solve for.
        @param factory
            Callable ``factory(arguments, inverted, domain)`` returning a
            GoalSeekingAlgorithm. The `domain` is the set of all variables of
            `target` (including `inverted`).
        @param domain
            Variables of the original target. Defaults to the variables of
            `target`. Curried and simplified copies of the node keep the
            domain of the node they were derived from.
        """
        self._goal = ensure_expr(goal)
        self._target = ensure_expr(target)
        self._inverted = inverted
        self._factory = factory
        if domain is None:
            domain = self._target.variables()
        self._domain = frozenset(domain)

    @property
    def goal(self):
        return self._goal

    @property
    def target(self):
        return self._target

    @property
    def inverted(self):
        return self._inverted

    @property
    def factory(self):
        return self._factory

    @property
    def domain(self):
        r"""Variables of the target expression at construction (a `frozenset`)."""
        return self._domain

    @property
    def children(self):
        return (self._goal, self._target)

    def _rebuild(self, children):
        return GoalSeek(children[0], children[1], self._inverted, self._factory,
                        self._domain)

    def _key(self):
        return (self._goal, self._target, self._inverted, self._factory,
                self._domain)

    def _reduced(self, arguments):
        r"""Arguments without a value for the inverted variable."""
        inverted = self._inverted
        return dict((k, v) for k, v in arguments.items()
                    if k != inverted and k != inverted.name)

    def _evaluate(self, arguments):
        if self._inverted not in self._domain:
            raise InvertedVariableNotInDomain(
                "%s does not occur in %s" % (self._inverted.str(),
                                             self._target.str())
            )
        goal = self._goal._evaluate(arguments)
        algorithm = self._factory(arguments, self._inverted, self._domain)
        target = self._target.curry(self._reduced(arguments))
        free = target.variables()
        if len(free) > 1:
            raise MultipleVariables(
                "cannot solve %s for %s, remaining variables: %s"
                % (target.str(), self._inverted.str(),
                   ", ".join(sorted(v.name for v in free)))
            )
        return algorithm.find_root(sub(target, Constant(goal)), self._inverted)

    def curry(self, arguments):
        reduced = self._reduced(arguments)
        return GoalSeek(self._goal.curry(reduced), self._target.curry(reduced),
                        self._inverted, self._factory, self._domain).simplify()

    def simplify(self):
        node = GoalSeek(self._goal.simplify(), self._target.simplify(),
                        self._inverted, self._factory, self._domain)
        if not node.variables():
            return Constant(node._evaluate({}))
        return node

    def collect_variables(self, variables):
        found = set()
        self._goal.collect_variables(found)
        self._target.collect_variables(found)
        found.discard(self._inverted)
        variables.update(found)
        return variables

    def derivative(self, wrt):
        if self.is_constant(wrt):
            return Constant(0)
        raise NotDerivableExpression(
            "%s has no derivative w.r.t. %s" % (self.str(), wrt.str())
        )

    def _expr_str(self):
        return "goal_seek(%s = %s, %s)" % (self._target.str(),
                                           self._goal.str(),
                                           self._inverted.str())


def goal_seek(goal, target, inverted, factory):
    r"""Create a GoalSeek node (see GoalSeek.__init__() for the parameters)."""
    return GoalSeek(goal, target, inverted, factory)
