r"""@package testutils

Utilities to add more features to `unittest` classes.

This module provides a custom subclass of `unittest.TestCase`, namely
CalcTestCase, which obeys the global configuration settings in TestSettings.
The latter can be configured by the script invoking the test run (see
`tests.py`).

This module also introduces a new decorator slowtest, which, when applied,
leads to the test being skipped on normal runs. The script starting the test
must set `TestSettings.skipslow` to `False` for the slow tests to be run.
"""

import sys
import functools
import unittest
import time

from mpmath import mp


__all__ = [
    "CalcTestCase",
    "TestSettings",
    "slowtest",
]


def slowtest(func):
    """Decorator for skipping a test if TestSettings.skipslow is true."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if TestSettings.skipslow:
            raise unittest.SkipTest("skipping slow tests")
        return func(*args, **kwargs)
    return wrapper


class CalcTestCase(unittest.TestCase):
    """Tweaked baseclass for unit tests.

    By deriving from this class, you:
        * Get timed individual tests (needs `verbosity=2`) if
          TestSettings.timing is true.
        * Run each test with the default `mpmath` precision, even if a
          previous test forgot to restore it.
        * Get assertions for exact result types and approximate equality of
          lists of (possibly `mpmath`) numbers.

    The timing output relies on the result object of the `unittest` runner
    and is silently omitted if the tests are run by another framework.
    """
    ## Decimal places of the mpmath context during each test.
    dps = 15

    def run(self, result=None):
        self.__result = result
        self.__prevProblems = self.__countProblems()
        return unittest.TestCase.run(self, result)

    def __countProblems(self):
        r"""Number of errors and failures recorded so far (if available)."""
        result = getattr(self, '_CalcTestCase__result', None)
        errors = getattr(result, 'errors', None)
        failures = getattr(result, 'failures', None)
        if errors is None or failures is None:
            return None
        return len(errors) + len(failures)

    def __shouldPrintTiming(self):
        r"""Return whether timing information should be printed."""
        if not TestSettings.timing:
            return False
        prev = getattr(self, '_CalcTestCase__prevProblems', None)
        if prev is None or self.__countProblems() != prev:
            return False
        return getattr(self.__result, 'showAll', False)

    def setUp(self):
        self.startTime = time.time()
        self.__prevDps = mp.dps
        mp.dps = self.dps
        self.addCleanup(self.__restoreAndReport)

    def __restoreAndReport(self):
        mp.dps = self.__prevDps
        if self.__shouldPrintTiming():
            duration = time.time() - self.startTime
            print("(%.4f seconds) ... " % (duration), file=sys.stderr, end='')

    def assertIsType(self, obj, cls):
        r"""Assert that an object is exactly of a certain type."""
        self.assertIs(type(obj), cls)

    def assertNumEqual(self, a, b, cls=None):
        r"""Assert equal values, and optionally the exact type of `a`."""
        self.assertEqual(a, b)
        if cls is not None:
            self.assertIsType(a, cls)

    def assertListAlmostEqual(self, a, b, places=None, delta=None):
        r"""Assert that two iterables contain (almost) the same values."""
        if places is not None and delta is not None:
            raise TypeError("Cannot use delta and places at the same time")
        if places is None and delta is None:
            places = 7
        a, b = list(a), list(b)
        if len(a) != len(b):
            raise self.failureException("Lists have different lengths (%d != %d)" % (len(a), len(b)))
        fails = []
        for i in range(len(a)):
            if a[i] == b[i]:
                continue
            if delta is not None:
                if abs(a[i]-b[i]) > delta:
                    fails.append(i)
            else:
                if round(float(abs(a[i]-b[i])), places) != 0:
                    fails.append(i)
        if fails:
            msg = "%d elements differ.\n" % len(fails)
            maxN = 9
            if len(fails) <= maxN:
                msg += "Differing elements:\n"
            else:
                msg += "First few differing elements:\n"
            msg += "\n".join(["  [{i}] {a} != {b}    (difference: {d})".format(i=i, a=a[i], b=b[i], d=(b[i]-a[i]))
                              for i in fails[:maxN]])
            raise self.failureException(msg)


class TestSettings(object):
    """Global settings for tests."""
    ## Stop test run on first fail/error.
    failfast = False
    ## Whether output is buffered.\ Just information, cannot be used to toggle output buffering.
    buffering = False
    ## Whether the timing for each test case should be printed.
    timing = False
    ## Control whether tests marked as slowtest should be skipped.
    skipslow = True
