from sympy import Poly, Rational, sqrt, Symbol
from sympy.abc import x, t
from sympy.testing.pytest import raises

from ..text_process import preprocess_text, pl, poly_coeffs

def test_preprocess_text():
    strings = [
        '3x4-5x2+4',
        '1/5x3 + 2.5x',
        '(x-1)2(x+2)',
        'sqrt(2)x2 - x',
        '{x+1}[x-1]',
        'X^2-1',
    ]
    targets = [
        '3*x^4-5*x^2+4',
        '1/5*x^3+2.5*x',
        '(x-1)^2*(x+2)',
        'sqrt(2)*x^2-x',
        '(x+1)*(x-1)',
        'x^2-1',
    ]
    for s, target in zip(strings, targets):
        assert preprocess_text(s, return_type='text') == target

    assert preprocess_text('3x4-5x2+4', return_type='expr') == 3*x**4 - 5*x**2 + 4
    assert preprocess_text('(x-1)2(x+2)') == Poly((x-1)**2*(x+2), x)
    assert pl('1/x+1') is None
    assert preprocess_text('t3-t', gen=t) == Poly(t**3 - t, t)
    assert preprocess_text('2e3x', return_type='text', scientific_notation=True) == '2e3*x'
    raises(ValueError, lambda: preprocess_text('x', return_type='frac'))

    # any sequence of function names is accepted
    assert preprocess_text('2sqrt(2)x', return_type='text', preserve_patterns=['sqrt']) == '2*sqrt(2)*x'
    assert preprocess_text('2sqrt(2)x', return_type='text', preserve_patterns=()) == '2*s*q*r*t*(2)*x'

def test_poly_coeffs():
    assert poly_coeffs('x4-5x2+4') == [4, 0, -5, 0, 1]
    assert poly_coeffs(x**3/2 - 1) == [-1, 0, 0, Rational(1, 2)]
    assert poly_coeffs(Poly(2*x - 6, x)) == [-6, 2]
    assert poly_coeffs('sqrt(2)x2-1') == [-1, 0, sqrt(2)]
    assert poly_coeffs(Symbol('y')**2 + 1, gen=Symbol('y')) == [1, 0, 1]
    assert poly_coeffs('0') == [0]

    raises(ValueError, lambda: poly_coeffs('1/x'))
    raises(ValueError, lambda: poly_coeffs(sqrt(x) + 1))
    raises(ValueError, lambda: poly_coeffs(Poly(x*t, x, t)))
