from .solve import solve_poly, solve_normalized_poly

from .depressed import (
    solve_depressed_poly, solve_depressed_linear, solve_depressed_quadratic,
    solve_depressed_cubic, solve_depressed_quartic
)

from .settings import SolveConfigs

from ..utils.errors import PolySolveError, EmptyPolynomial, UnsupportedDegree, DomainError

__all__ = [
    'solve_poly', 'solve_normalized_poly',
    'solve_depressed_poly', 'solve_depressed_linear', 'solve_depressed_quadratic',
    'solve_depressed_cubic', 'solve_depressed_quartic',
    'SolveConfigs',
    'PolySolveError', 'EmptyPolynomial', 'UnsupportedDegree', 'DomainError',
]
