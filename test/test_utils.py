from fractions import Fraction
from unittest import TestCase

import numpy as np
from ddt import ddt, data, unpack

from numinterval.utils import fmtendpoint, parseendpoint, parsenumber, tonumber


@ddt
class UtilsTest(TestCase):

    @data(
        ('0', 0, int),
        ('-12', -12, int),
        ('1.5', 1.5, float),
        ('.25', .25, float),
        ('3.', 3., float),
        ('-1e-3', -.001, float),
        ('2E+2', 200., float),
    )
    @unpack
    def test_parsenumber(self, token, value, type_):
        result = parsenumber(token)
        self.assertEqual(value, result)
        self.assertIs(type_, type(result))

    @data('', '-', '.', '+1', '1.2.3', 'INF', 'inf', 'nan', ' 1', '1e', '١', '-٢.5')
    def test_parsenumber_invalid(self, token):
        self.assertRaises(ValueError, parsenumber, token)

    def test_parseendpoint(self):
        self.assertEqual(np.inf, parseendpoint('INF'))
        self.assertEqual(-np.inf, parseendpoint('-INF'))
        self.assertEqual(7, parseendpoint('7'))
        self.assertRaises(ValueError, parseendpoint, '+INF')

    @data(
        (1, 1, int),
        (1.5, 1.5, float),
        (np.float64(-2.), -2., float),
        (np.uint8(3), 3, int),
        (Fraction(1, 4), .25, float),
        ('42', 42, int),
        (-np.inf, -np.inf, float),
    )
    @unpack
    def test_tonumber(self, value, expected, type_):
        result = tonumber(value)
        self.assertEqual(expected, result)
        self.assertIs(type_, type(result))

    def test_tonumber_invalid(self):
        self.assertRaises(TypeError, tonumber, None)
        self.assertRaises(TypeError, tonumber, True)
        self.assertRaises(TypeError, tonumber, np.bool_(False))
        self.assertRaises(TypeError, tonumber, 1j)
        self.assertRaises(ValueError, tonumber, float('nan'))
        self.assertRaises(ValueError, tonumber, 'foo')

    @data(
        (None, ''),
        (0, '0'),
        (-1.5, '-1.5'),
        (1e20, '1e+20'),
        (np.inf, 'INF'),
        (-np.inf, '-INF'),
        (np.float64(.5), '0.5'),
    )
    @unpack
    def test_fmtendpoint(self, value, s):
        self.assertEqual(s, fmtendpoint(value))


class VersionTest(TestCase):

    def test_version(self):
        import numinterval
        self.assertRegex(numinterval.__version__, r'\d\.\d\.\d')
