#!/usr/bin/env python3

import unittest
import sys
import math
from fractions import Fraction

import numpy as np
from mpmath import mp

from testutils import CalcTestCase
from ..errors import InfiniteCannotBeRounded, InvalidFactorialArgument
from .rounding import RoundMode, round_number, frac, split, factorial
from .rounding import MAX_FACTORIAL_ARGUMENT


class TestRounding(CalcTestCase):
    def test_integers_unchanged(self):
        for mode in RoundMode:
            self.assertNumEqual(round_number(-7, mode), -7, int)

    def test_modes(self):
        cases = [
            # value, ceil, floor, inward, outward
            (Fraction(7, 2), 4, 3, 3, 4),
            (Fraction(-7, 2), -3, -4, -3, -4),
            (1.25, 2, 1, 1, 2),
            (-1.25, -1, -2, -1, -2),
            (0.5, 1, 0, 0, 1),
            (-0.5, 0, -1, 0, -1),
        ]
        modes = [RoundMode.CEIL, RoundMode.FLOOR, RoundMode.INWARD,
                 RoundMode.OUTWARD]
        for value, *expected in cases:
            for mode, result in zip(modes, expected):
                self.assertNumEqual(round_number(value, mode), result, int)

    def test_against_numpy(self):
        for x in np.linspace(-5, 5, 41):
            self.assertEqual(round_number(x, RoundMode.CEIL), int(np.ceil(x)))
            self.assertEqual(round_number(x, RoundMode.FLOOR), int(np.floor(x)))
            self.assertEqual(round_number(x, RoundMode.INWARD), int(np.trunc(x)))

    def test_integral_non_int(self):
        self.assertNumEqual(round_number(Fraction(6, 3), RoundMode.CEIL), 2, int)
        self.assertNumEqual(round_number(-3.0, RoundMode.OUTWARD), -3, int)

    def test_mode_string(self):
        self.assertEqual(round_number(2.5, "floor"), 2)
        with self.assertRaises(ValueError):
            round_number(2.5, "nearest")

    def test_infinite(self):
        with self.assertRaises(InfiniteCannotBeRounded):
            round_number(mp.inf, RoundMode.FLOOR)
        with self.assertRaises(InfiniteCannotBeRounded):
            frac(mp.nan)


class TestFrac(CalcTestCase):
    def test_frac(self):
        self.assertNumEqual(frac(5), 0, int)
        self.assertNumEqual(frac(Fraction(7, 2)), Fraction(1, 2), Fraction)
        self.assertNumEqual(frac(Fraction(-7, 2)), Fraction(-1, 2), Fraction)
        self.assertIsType(frac(1.25), mp.mpf)
        self.assertEqual(frac(-1.25), mp.mpf('-0.25'))

    def test_split(self):
        whole, part = split(Fraction(11, 4))
        self.assertNumEqual(whole, 2, int)
        self.assertNumEqual(part, Fraction(3, 4), Fraction)
        whole, part = split(-2.5)
        self.assertEqual(whole + part, -2.5)


class TestFactorial(CalcTestCase):
    def test_values(self):
        self.assertNumEqual(factorial(0), 1, int)
        self.assertNumEqual(factorial(1), 1, int)
        self.assertNumEqual(factorial(5), 120, int)
        self.assertEqual(factorial(MAX_FACTORIAL_ARGUMENT),
                         math.factorial(MAX_FACTORIAL_ARGUMENT))

    def test_boundary(self):
        for n in (-1, 13, 100):
            with self.assertRaises(InvalidFactorialArgument):
                factorial(n)
        with self.assertRaises(InvalidFactorialArgument):
            factorial(Fraction(4, 1))
        with self.assertRaises(InvalidFactorialArgument):
            factorial(3.0)


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
