r"""@package symcalc

Symbolic-numeric calculus engine.

Expressions are immutable trees built over a numeric tower of nested domains
\f$ N \subset N_0 \subset Z \subset Q \subset R \f$. They can be evaluated,
differentiated, simplified and partially evaluated (curried), keeping results
exact (integers and rationals) as long as the operations involved allow it.

The pieces are:
    * symcalc.tower: the numeric values and their arithmetic, promoting
      operands to the narrowest common domain
    * symcalc.exprs: the expression nodes and their smart constructors
    * symcalc.solvers: a Newton-Raphson root finder and the goal-seek
      algorithm built on it

@b Examples

```
    >>> from symcalc.exprs import X, power, add
    >>> f = add(power(X, 2), -2)
    >>> f.evaluate({X: 3})
    7
    >>> str(f.derivative(X))
    '2 * X'
```
"""
