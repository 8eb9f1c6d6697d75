r"""@package symcalc.tower

Numeric tower of nested domains \f$ N \subset N_0 \subset Z \subset Q \subset R \f$.

All functions accept raw Python numbers and wrap them first (see
symcalc.tower.domains.wrap()). The most important functions are
re-exported here:

```
    >>> from symcalc import tower
    >>> tower.mul(2, tower.div(1, 3))
    Fraction(2, 3)
```
"""

from .domains import Domain, wrap, closest, closest_all, broaden, broaden_all
from .domains import belongs_to, up_cast, up_cast_all, zero, one
from .domains import is_finite, is_integral, precision
from .arith import add, sub, mul, div, neg, inv, power, root, ln, log, exp
from .arith import absolute, cmp, is_zero, is_one, is_negative, is_positive
from .arith import opposite_signs, near_by
from .rounding import RoundMode, MAX_FACTORIAL_ARGUMENT
from .rounding import round_number, frac, split, factorial
from .trig import FLOAT_LIMIT, sin, cos, tan
