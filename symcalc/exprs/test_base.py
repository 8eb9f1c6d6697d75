#!/usr/bin/env python3

import unittest
import sys
from fractions import Fraction

import numpy as np
from mpmath import mp

from testutils import CalcTestCase
from ..errors import UndefinedValue
from .base import Variable, Constant, var, num, arguments, W, X, Y, Z
from .arith import Add, Mul, Negate, Invert
from .powers import Power


class TestLeaves(CalcTestCase):
    def test_variable(self):
        self.assertEqual(X.evaluate({X: 3}), 3)
        self.assertEqual(X.evaluate({"X": Fraction(1, 2)}), Fraction(1, 2))
        self.assertIsType(X.evaluate({X: 0.5}), mp.mpf)
        self.assertEqual(var("X"), X)
        self.assertNotEqual(var("x"), X)
        self.assertEqual(X.derivative(X), Constant(1))
        self.assertEqual(X.derivative(Y), Constant(0))
        self.assertEqual(X.variables(), frozenset([X]))
        self.assertTrue(X.is_constant(Y))
        self.assertFalse(X.is_constant(X))
        self.assertEqual(sorted([Z, W, Y, X]), [W, X, Y, Z])

    def test_undefined(self):
        with self.assertRaises(UndefinedValue) as cm:
            X.evaluate({Y: 1})
        self.assertIn("X", str(cm.exception))
        with self.assertRaises(KeyError):
            (X + Y).evaluate({X: 1})

    def test_invalid_name(self):
        with self.assertRaises(TypeError):
            Variable("")
        with self.assertRaises(TypeError):
            Variable(1)

    def test_name_is_read_only(self):
        h = hash(X)
        with self.assertRaises(AttributeError):
            X.name = "Q"
        with self.assertRaises(AttributeError):
            X.extra = 1
        self.assertEqual(X.name, "X")
        self.assertEqual(hash(X), h)

    def test_constant(self):
        c = num(Fraction(3, 4))
        self.assertEqual(c.evaluate(), Fraction(3, 4))
        self.assertEqual(c.derivative(X), Constant(0))
        self.assertEqual(c.variables(), frozenset())
        self.assertIs(c.simplify(), c)
        self.assertIs(c.curry({X: 1}), c)
        self.assertIsType(num(np.float64(0.5)).value, mp.mpf)

    def test_curry_variable(self):
        self.assertEqual(X.curry({X: 2}), Constant(2))
        self.assertIs(X.curry({Y: 2}), X)

    def test_arguments(self):
        args = arguments({X: 0.5}, Y=2)
        self.assertEqual(set(args), set([X, Y]))
        self.assertIsType(args[X], mp.mpf)
        self.assertIsType(args[Y], int)
        self.assertEqual((X * Y).evaluate(args), 1)
        with self.assertRaises(TypeError):
            arguments({X: "1"})


class TestStructure(CalcTestCase):
    def test_equality(self):
        self.assertEqual(X + 1, X + 1)
        self.assertEqual(hash(X * Y + 1), hash(X * Y + 1))
        self.assertNotEqual(X + 1, 1 + X)
        self.assertNotEqual(num(1), num(1.0))
        self.assertNotEqual(num(2), num(Fraction(2)))
        self.assertNotEqual(X, "X")
        self.assertEqual(len(set([X + 1, X + 1, X + 2])), 2)

    def test_operators(self):
        self.assertIsType(X + Y, Add)
        self.assertIsType(X * 2, Mul)
        self.assertIsType(-X, Negate)
        self.assertIsType(1 / X, Mul)
        self.assertIsType(X ** 2, Power)
        self.assertIsType(2 ** X, Power)
        self.assertIs(+X, X)
        self.assertEqual((X - Y).terms, (X, Negate(Y)))
        self.assertEqual((X / Y).factors, (X, Invert(Y)))
        self.assertEqual((2 - X).evaluate({X: 5}), -3)
        self.assertEqual((1 / X).evaluate({X: 4}), Fraction(1, 4))
        with self.assertRaises(TypeError):
            X + "a"


class TestRendering(CalcTestCase):
    def test_str(self):
        self.assertEqual(str(X + Y - Z), "X + Y - Z")
        self.assertEqual(str(X * Y / Z), "X * Y / Z")
        self.assertEqual(str(X ** 2), "X^2")
        self.assertEqual(str(X - 2), "X - 2")
        self.assertEqual(str(2 - X), "2 - X")
        self.assertEqual(str(-X), "-X")
        self.assertEqual(str(1 / X), "1 / X")
        self.assertEqual(str(X * (Y + 1)), "X * (Y + 1)")
        self.assertEqual(str(-(X + Y)), "-(X + Y)")
        self.assertEqual(str(X / (Y * Z)), "X / (Y * Z)")
        self.assertEqual(str((X + 1) ** 2), "(X + 1)^2")
        self.assertEqual(str(X ** -2), "X^(-2)")
        self.assertEqual(str(num(Fraction(1, 3)) * X), "(1/3) * X")
        self.assertEqual(str(num(1.5)), "1.5")

    def test_repr(self):
        self.assertEqual(repr(X + 1), "<Add(X + 1)>")
        self.assertEqual(repr(X), "<Variable(X)>")
        self.assertEqual(repr(num(2)), "<Constant(2)>")


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
