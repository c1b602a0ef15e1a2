from .utils import (
    construct_domain, shifted_coeffs, binomial_rows, polyval, nroots, pl, poly_coeffs
)

from .core import (
    solve_poly, solve_normalized_poly, solve_depressed_poly, SolveConfigs,
    PolySolveError, EmptyPolynomial, UnsupportedDegree, DomainError
)

__version__ = "0.1.0"

__all__ = [
    '__version__',

    'construct_domain', 'shifted_coeffs', 'binomial_rows', 'polyval', 'nroots', 'pl', 'poly_coeffs',
    'solve_poly', 'solve_normalized_poly', 'solve_depressed_poly', 'SolveConfigs',
    'PolySolveError', 'EmptyPolynomial', 'UnsupportedDegree', 'DomainError'
]
