r"""@package symcalc.exprs

Expression trees over the numeric tower.

The node classes live in the submodules of this package. Expressions are
best created using the smart constructors (add(), mul(), power(), ...) or the
Python operators on expressions, which normalize trees on creation:

```
    >>> from symcalc.exprs import X, Y, sin
    >>> e = sin(X) * Y - 1
    >>> str(e.derivative(X))
    'cos(X) * Y'
```
"""

from .base import Expression, Variable, Constant, ensure_expr
from .base import var, num, arguments, W, X, Y, Z
from .arith import Add, Mul, Negate, Invert, add, sub, mul, div, neg, inv
from .powers import Power, NaturalLog, Log, Exp, power, root, ln, log, exp
from .trig import Sin, Cos, Tan, sin, cos, tan
from .discrete import RoundMode, Factorial, Round, Frac, DefectiveOnInteger
from .discrete import factorial, rounded, frac, defective_on_integer
from .goalseek import GoalSeekingAlgorithm, GoalSeek, goal_seek
from .helpers import polynomial, goal_based
