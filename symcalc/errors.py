r"""@package symcalc.errors

Exceptions raised by the numeric tower and the expression system.

All exceptions derive from CalculusError. Failures of the numeric tower
operations derive from NumericalError, which is what a caller catches to
handle any arithmetic domain violation. Convergence failures of the solvers
are defined in symcalc.solvers.newton.
"""

__all__ = [
    "CalculusError",
    "NumericalError",
    "DivisionByZero",
    "LogarithmOfNegative",
    "InvalidPowerOperation",
    "TangentOfVertical",
    "PrecisionLimitExceeded",
    "InvalidFactorialArgument",
    "InfiniteCannotBeRounded",
    "EvaluationError",
    "UndefinedValue",
    "UndefinedOnInteger",
    "InvertedVariableNotInDomain",
    "MultipleVariables",
    "NotDerivableExpression",
]


class CalculusError(Exception):
    r"""Base class of all errors raised by this package."""
    pass


class NumericalError(CalculusError, ArithmeticError):
    r"""Raised when a numeric tower operation is not defined for its operands."""
    pass


class DivisionByZero(NumericalError, ZeroDivisionError):
    r"""Division or inversion by the additive identity."""
    pass


class LogarithmOfNegative(NumericalError):
    r"""Logarithm of a non-positive value."""
    pass


class InvalidPowerOperation(NumericalError):
    r"""Power that is not defined, e.g. `0^0` or `(-2)^(1/2)`."""
    pass


class TangentOfVertical(NumericalError):
    r"""Tangent of an angle whose cosine is numerically zero."""
    pass


class PrecisionLimitExceeded(NumericalError):
    r"""Operand cannot be represented in double precision.

    The trigonometric functions are computed in double precision. Operands
    outside that range (or not finite) cannot be used with them.
    """
    pass


class InvalidFactorialArgument(NumericalError):
    r"""Factorial of a negative, non-integer or too large value."""
    pass


class InfiniteCannotBeRounded(NumericalError):
    r"""Rounding of an infinite or NaN value."""
    pass


class EvaluationError(CalculusError):
    r"""Base for errors that are not arithmetic in nature but occur on evaluation."""
    pass


class UndefinedValue(EvaluationError, KeyError):
    r"""A free variable has no value in the supplied arguments."""
    def __str__(self):
        return Exception.__str__(self)


class UndefinedOnInteger(EvaluationError):
    r"""Derivative of a rounding operation evaluated on an exact integer."""
    pass


class InvertedVariableNotInDomain(EvaluationError):
    r"""The inverted variable of a goal-seek does not occur in its target."""
    pass


class MultipleVariables(EvaluationError):
    r"""An expression does not have exactly one free variable.

    Root finding needs a single unknown. This is raised when an expression
    handed to a solver has more than one (or no) free variable.
    """
    pass


class NotDerivableExpression(CalculusError):
    r"""Derivative of an expression that has none w.r.t. the variable."""
    pass
