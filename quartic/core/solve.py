"""
Solve polynomials of degree up to four by radicals.
Algorithms by Ferrari, Tartaglia, Cardano, et al.
"""
from typing import Any, List, Optional, Sequence, Union
from time import time

from sympy import Expr, Poly

from .depressed import solve_depressed_poly
from .settings import SolveConfigs
from ..utils.binomials import shifted_coeffs
from ..utils.domains import Domain, construct_domain
from ..utils.errors import EmptyPolynomial, UnsupportedDegree
from ..utils.polyeval import residuals
from ..utils.text_process import poly_coeffs


def solve_poly(
        coeffs: Union[Sequence[Any], str, Expr, Poly],
        domain: Optional[Union[str, Domain]] = None,
        verbose: bool = False,
        **kwargs
    ) -> List[Any]:
    """
    Solve a univariate polynomial of degree at most 4 by radicals.

    Parameters
    ----------
    coeffs : Sequence, str, Expr or Poly
        Coefficients in ascending order, i.e. `coeffs[i]` is the coefficient of x^i.
        Vanishing leading coefficients are dropped. A string, a sympy expression
        or a Poly in x is converted by `poly_coeffs`.
    domain : str or Domain, optional
        The numeric domain: 'RR', 'CC', 'MP' or 'EX'. If None, it is 'EX' for
        sympy coefficients, 'MP' for mpmath coefficients and 'CC' otherwise.
    verbose : bool
        Whether to print the intermediate steps.
    kwargs :
        Other options of `SolveConfigs`, e.g. `tol` and `dps`.

    Returns
    ----------
    roots : List
        The roots in the domain. A constant polynomial has no roots, linear and
        cubic polynomials get one root, quadratics get two roots and quartics get four.
        Only one root of a cubic is returned, see `solve_depressed_cubic`.

    Raises
    ----------
    EmptyPolynomial
        If all coefficients are zero.
    UnsupportedDegree
        If the degree is greater than 4.
    DomainError
        If a square root does not exist in the domain, e.g. a negative
        discriminant over 'RR'.

    Examples
    ----------
    >>> solve_poly([-6, 2])
    [(3+0j)]
    >>> solve_poly([-6, -1, 1], 'RR')
    [-2.0, 3.0]
    >>> from sympy import Rational
    >>> solve_poly([Rational(-2), 0, 1])
    [-sqrt(2), sqrt(2)]
    """
    configs = SolveConfigs(domain=domain, verbose=verbose, **kwargs)
    if isinstance(coeffs, (str, Expr, Poly)):
        coeffs = poly_coeffs(coeffs)
    coeffs = list(coeffs)
    domain = configs.get_domain(coeffs)
    coeffs = [domain.convert(c) for c in coeffs]
    verbose = configs.verbose

    n = len(coeffs)
    while n > 0 and domain.is_zero(coeffs[n-1]):
        n -= 1
    if n == 0:
        raise EmptyPolynomial()
    if n == 1:
        # nonzero constant
        return []

    time0 = time()
    a = coeffs[n-1]
    roots = solve_normalized_poly([c / a for c in coeffs[:n-1]], domain=domain, verbose=verbose)

    if verbose:
        print(f"Time for solving degree {n-1} polynomial : {time() - time0:.6f} seconds.")
        try:
            print(f"Max residual = {residuals(coeffs[:n], roots).max():.6e}")
        except TypeError: # symbolic values cannot be evaluated numerically
            pass
    return roots


def solve_normalized_poly(
        coeffs: Sequence[Any],
        domain: Optional[Union[str, Domain]] = None,
        verbose: bool = False
    ) -> List[Any]:
    """
    Solve a monic polynomial x^n + a_{n-1}*x^(n-1) + ... + a_0 given
    [a_0, ..., a_{n-1}]. The leading 1 is omitted so that the degree is len(coeffs).

    The substitution x = y + shift with shift = -a_{n-1}/n removes the x^(n-1) term,
    then the depressed polynomial in y is solved by `solve_depressed_poly`.
    """
    domain = construct_domain(coeffs, domain)
    coeffs = [domain.convert(c) for c in coeffs]
    degree = len(coeffs)
    if not (1 <= degree <= 4):
        raise UnsupportedDegree(degree)

    shift = -coeffs[-1] / degree
    depressed = shifted_coeffs(shift, coeffs + [1])[:degree - 1]
    if verbose:
        print(f"Degree = {degree}  Shift = {shift}  Depressed = {depressed}")

    roots = solve_depressed_poly(depressed, domain=domain, verbose=verbose)
    return [root + shift for root in roots]
