from .errors import PolySolveError, EmptyPolynomial, UnsupportedDegree, DomainError

from .domains import (
    Domain, RealField, ComplexField, MPComplexField, ExpressionDomain, construct_domain
)

from .binomials import binomial_rows, add_padded, shifted_coeffs

from .polyeval import polyval, residuals, nroots

from .text_process import preprocess_text, pl, poly_coeffs

__all__ = [
    'PolySolveError', 'EmptyPolynomial', 'UnsupportedDegree', 'DomainError',
    'Domain', 'RealField', 'ComplexField', 'MPComplexField', 'ExpressionDomain', 'construct_domain',
    'binomial_rows', 'add_padded', 'shifted_coeffs',
    'polyval', 'residuals', 'nroots',
    'preprocess_text', 'pl', 'poly_coeffs',
]
