#!/usr/bin/env python3

import unittest
import sys
from fractions import Fraction

from mpmath import mp

from testutils import CalcTestCase
from ..errors import DivisionByZero, LogarithmOfNegative, InvalidPowerOperation
from ..errors import NumericalError
from .arith import add, sub, mul, div, neg, inv, power, root, ln, log, exp
from .arith import absolute, cmp, is_zero, is_one, is_negative, is_positive
from .arith import opposite_signs, near_by


class TestArithmetic(CalcTestCase):
    def test_exact_integers(self):
        self.assertNumEqual(add(1, 2, 3), 6, int)
        self.assertNumEqual(add(10**30, 1), 10**30 + 1, int)
        self.assertNumEqual(mul(-2, 3, 4), -24, int)
        self.assertNumEqual(sub(10, 1, 2), 7, int)
        self.assertNumEqual(div(6, 3), 2, Fraction)
        self.assertNumEqual(div(1, 3), Fraction(1, 3), Fraction)

    def test_empty(self):
        self.assertNumEqual(add(), 0, int)
        self.assertNumEqual(mul(), 1, int)
        self.assertNumEqual(sub(4), 4, int)
        self.assertNumEqual(div(4), 4, int)

    def test_promotion(self):
        self.assertNumEqual(add(1, Fraction(1, 2)), Fraction(3, 2), Fraction)
        self.assertNumEqual(add(Fraction(1, 2), 0.5), mp.mpf(1), mp.mpf)
        self.assertNumEqual(mul(Fraction(2, 3), 3), 2, Fraction)
        self.assertNumEqual(sub(Fraction(1, 2), 0.25), mp.mpf('0.25'), mp.mpf)

    def test_mul_zero(self):
        self.assertNumEqual(mul(0, 5), 0, int)
        self.assertNumEqual(mul(Fraction(1, 2), 0), 0, Fraction)
        self.assertNumEqual(mul(0.0, mp.inf), 0, mp.mpf)

    def test_div(self):
        # divides by the product of all divisors
        self.assertNumEqual(div(24, 2, 3), 4, Fraction)
        self.assertNumEqual(div(1.0, 4), mp.mpf('0.25'), mp.mpf)
        with self.assertRaises(DivisionByZero):
            div(1, 0)
        with self.assertRaises(DivisionByZero):
            div(1, 2, 0)
        with self.assertRaises(ZeroDivisionError):
            div(1.5, 0.0)

    def test_neg_inv(self):
        self.assertNumEqual(neg(3), -3, int)
        self.assertNumEqual(neg(Fraction(-1, 2)), Fraction(1, 2), Fraction)
        self.assertNumEqual(inv(4), Fraction(1, 4), Fraction)
        self.assertNumEqual(inv(Fraction(2, 3)), Fraction(3, 2), Fraction)
        self.assertNumEqual(inv(0.5), mp.mpf(2), mp.mpf)
        with self.assertRaises(DivisionByZero):
            inv(0)

    def test_errors_are_numerical(self):
        with self.assertRaises(NumericalError):
            inv(Fraction(0))
        with self.assertRaises(ArithmeticError):
            ln(-1)


class TestPower(CalcTestCase):
    def test_integer(self):
        self.assertNumEqual(power(2, 10), 1024, int)
        self.assertNumEqual(power(-3, 3), -27, int)
        self.assertNumEqual(power(0, 5), 0, int)
        self.assertNumEqual(power(7, 0), 1, int)
        self.assertNumEqual(power(2, -3), Fraction(1, 8), Fraction)
        self.assertNumEqual(power(-2, -3), Fraction(-1, 8), Fraction)
        self.assertEqual(power(3, 100), 3**100)

    def test_integer_errors(self):
        with self.assertRaises(InvalidPowerOperation):
            power(0, 0)
        with self.assertRaises(DivisionByZero):
            power(0, -1)

    def test_real(self):
        self.assertIsType(power(Fraction(1, 4), Fraction(1, 2)), mp.mpf)
        self.assertAlmostEqual(float(power(Fraction(1, 4), Fraction(1, 2))), 0.5)
        self.assertAlmostEqual(float(power(2.0, 0.5)), 2**0.5)
        self.assertAlmostEqual(float(power(-2.0, 3)), -8.0)
        self.assertAlmostEqual(float(power(-2.0, 2)), 4.0)
        self.assertAlmostEqual(float(power(-2.0, -1)), -0.5)
        self.assertNumEqual(power(0.0, 2.5), 0, mp.mpf)

    def test_real_errors(self):
        with self.assertRaises(InvalidPowerOperation):
            power(-2.0, 0.5)
        with self.assertRaises(InvalidPowerOperation):
            power(0.0, 0)
        with self.assertRaises(DivisionByZero):
            power(Fraction(0), -0.5)

    def test_root(self):
        self.assertAlmostEqual(float(root(27, 3)), 3.0)
        self.assertAlmostEqual(float(root(2, 2)), 2**0.5)
        with self.assertRaises(DivisionByZero):
            root(2, 0)


class TestLogarithms(CalcTestCase):
    def test_ln_exp(self):
        self.assertIsType(ln(1), mp.mpf)
        self.assertEqual(ln(1), 0)
        self.assertAlmostEqual(float(ln(exp(1))), 1.0)
        self.assertIsType(exp(0), mp.mpf)
        self.assertEqual(exp(0), 1)
        self.assertAlmostEqual(float(ln(exp(Fraction(3, 2)))), 1.5)

    def test_ln_errors(self):
        with self.assertRaises(LogarithmOfNegative):
            ln(0)
        with self.assertRaises(LogarithmOfNegative):
            ln(Fraction(-1, 2))

    def test_log(self):
        self.assertAlmostEqual(float(log(2, 8)), 3.0)
        self.assertAlmostEqual(float(log(10, Fraction(1, 100))), -2.0)
        with self.assertRaises(DivisionByZero):
            log(1, 5)
        with self.assertRaises(LogarithmOfNegative):
            log(-2, 5)
        with self.assertRaises(LogarithmOfNegative):
            log(2, 0)


class TestPredicates(CalcTestCase):
    def test_absolute_cmp(self):
        self.assertNumEqual(absolute(-3), 3, int)
        self.assertNumEqual(absolute(Fraction(-1, 3)), Fraction(1, 3), Fraction)
        self.assertEqual(cmp(1, Fraction(1, 2)), 1)
        self.assertEqual(cmp(Fraction(1, 2), 0.5), 0)
        self.assertEqual(cmp(-1, 0), -1)

    def test_signs(self):
        self.assertTrue(is_zero(0.0))
        self.assertTrue(is_zero(Fraction(0)))
        self.assertTrue(is_one(Fraction(2, 2)))
        self.assertFalse(is_one(2))
        self.assertTrue(is_negative(-0.5))
        self.assertFalse(is_negative(0))
        self.assertTrue(is_positive(Fraction(1, 10**20)))
        self.assertTrue(opposite_signs(-1, Fraction(1, 2)))
        self.assertFalse(opposite_signs(1, 2))
        self.assertFalse(opposite_signs(0, -1))

    def test_near_by(self):
        self.assertTrue(near_by(1, Fraction(11, 10), Fraction(1, 10)))
        self.assertFalse(near_by(1, Fraction(12, 10), Fraction(1, 10)))
        self.assertTrue(near_by(2**0.5, 1.4142, 1e-4))


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
