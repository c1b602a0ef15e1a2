from itertools import islice

import sympy as sp
from sympy import Poly, Rational, sqrt
from sympy.abc import x

from ..binomials import binomial_rows, add_padded, shifted_coeffs

def test_binomial_rows():
    rows = list(islice(binomial_rows(), 6))
    assert rows == [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1], [1, 4, 6, 4, 1], [1, 5, 10, 10, 5, 1]]

    from math import comb
    row = next(islice(binomial_rows(), 12, None))
    assert row == [comb(12, k) for k in range(13)]

def test_add_padded():
    assert add_padded([1, 2, 3], [4]) == [5, 2, 3]
    assert add_padded([], [1, 1]) == [1, 1]
    assert add_padded([1.5], [0, 0, 2]) == [1.5, 0, 2]

def test_shifted_coeffs():
    assert shifted_coeffs(1, [0, 0, 1]) == [1, 2, 1]
    assert shifted_coeffs(-2, [3, 1]) == [1, 1]
    assert shifted_coeffs(5, [7]) == [7]
    assert shifted_coeffs(3, []) == []

    # compare with sympy composition p(x + s)
    coeffs_list = [
        [1, -2, 3, -4, 5],
        [Rational(1, 3), 0, 0, 2],
        [0, 0, 0, 0, 1],
        [sqrt(2), 1, -1],
    ]
    for coeffs in coeffs_list:
        for s in [Rational(-5, 2), 0, 3, sqrt(3)]:
            p = Poly(coeffs[::-1], x)
            target = p.compose(Poly(x + s, x)).all_coeffs()[::-1]
            target = target + [0] * (len(coeffs) - len(target))
            result = shifted_coeffs(s, coeffs)
            assert len(result) == len(coeffs)
            assert all(sp.expand(a - b) == 0 for a, b in zip(result, target))

def test_shifted_coeffs_roundtrip():
    coeffs_list = [
        [1, -2, 3, -4, 5],
        [Rational(-7, 4), Rational(2, 3), 11, 1],
        [9, 0, -3],
    ]
    for coeffs in coeffs_list:
        for s in [Rational(1, 7), -3, Rational(-10, 3), 17]:
            assert shifted_coeffs(-s, shifted_coeffs(s, coeffs)) == coeffs

    # integers stay exact
    assert shifted_coeffs(-4, shifted_coeffs(4, [2, -1, 0, 3, 1])) == [2, -1, 0, 3, 1]

    # floats round trip up to rounding errors
    coeffs = [0.25, -1.5, 2.0, 1.0]
    result = shifted_coeffs(-0.3, shifted_coeffs(0.3, coeffs))
    assert all(abs(a - b) < 1e-12 for a, b in zip(result, coeffs))
