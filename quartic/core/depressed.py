"""
Closed-form solvers for depressed polynomials.

A depressed polynomial of degree n has the form

    x^n + a_{n-2}*x^(n-2) + ... + a_1*x + a_0,

i.e. it is monic and has no x^(n-1) term. Only the coefficients
[a_0, a_1, ..., a_{n-2}] are passed to the solvers, so a depressed
quartic is given by 3 coefficients.
"""
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from ..utils.domains import Domain, construct_domain
from ..utils.errors import DomainError, UnsupportedDegree


def solve_depressed_linear(coeffs: List[Any], domain: Domain, verbose: bool = False) -> List[Any]:
    """Solve x = 0. The coefficient list is always empty."""
    return [domain.zero]


def solve_depressed_quadratic(coeffs: List[Any], domain: Domain, verbose: bool = False) -> List[Any]:
    """Solve x^2 + c = 0. Always returns two roots."""
    c, = coeffs
    t = domain.sqrt(-c)
    return [-t, t]


def solve_depressed_cubic(coeffs: List[Any], domain: Domain, verbose: bool = False) -> List[Any]:
    """
    Solve x^3 + p*x + q = 0 by Cardano's method.

    Only one root is returned. The other two are obtained by multiplying u
    with the primitive cube roots of unity, which are not provided.
    For p = q = 0 the triple root 0 is returned. The cube root is taken of
    -q/2 - sqrt(q^2/4 + p^3/27), or of -q/2 + sqrt(...) when the latter is larger
    in magnitude (inexact domains) or when the former vanishes. If both vanish,
    which happens in floating point for q = 0 and a tiny p, then 0 is returned
    instead of dividing by u = 0. Over the real domain,
    the case of three distinct real roots raises DomainError as it
    requires the square root of a negative number.

    See also
    ----------
    http://en.wikipedia.org/wiki/Cubic_equation#Cardano's_method
    """
    q, p = coeffs
    if domain.is_zero(p) and domain.is_zero(q):
        return [domain.zero]

    disc = domain.sqrt(q*q/4 + p*p*p/27)
    u3 = -q/2 - disc
    if domain.is_Exact:
        if domain.is_zero(u3):
            # p = 0 with the other sign of q, use the conjugate radicand
            u3 = -q/2 + disc
    elif abs(-q/2 + disc) > abs(u3):
        # the radicand of larger magnitude avoids cancellation
        u3 = -q/2 + disc
    if domain.is_zero(u3):
        # both radicands vanish, e.g. q = 0 and p^3 underflows
        return [domain.zero]
    u = domain.cbrt(u3)
    return [u - p/3/u]


def solve_depressed_quartic(coeffs: List[Any], domain: Domain, verbose: bool = False) -> List[Any]:
    """
    Solve x^4 + c*x^2 + d*x + e = 0 by Ferrari's method.

    The quartic is factorized as (x^2 + p*x + s)(x^2 - p*x + r) where
    p^2 is a root of the resolvent cubic t^3 + 2c*t^2 + (c^2-4e)*t - d^2
    and s, r = (c + p^2 -+ d/p) / 2. When p = 0 (hence d = 0) the quartic
    is biquadratic and solved as a quadratic in x^2.

    Returns four roots.

    See also
    ----------
    http://en.wikipedia.org/wiki/Quartic_function#Quick_and_memorable_solution_from_first_principles
    """
    from .solve import solve_poly

    e, d, c = coeffs
    resolvent = solve_poly([-d*d, c*c - 4*e, 2*c, 1], domain=domain, verbose=verbose)
    p = domain.sqrt(resolvent[0])
    if verbose:
        print(f'Resolvent cubic root = {resolvent[0]}')

    if domain.is_zero(p):
        if not domain.is_zero(d):
            raise DomainError(f"Resolvent cubic root vanishes while d = {d} is nonzero.")
        roots = []
        for y in solve_poly([e, c, 1], domain=domain, verbose=verbose):
            t = domain.sqrt(y)
            roots.extend([-t, t])
        return roots

    c2 = c + p*p
    return solve_poly([c2 - d/p, 2*p, 2], domain=domain, verbose=verbose)\
        + solve_poly([c2 + d/p, -2*p, 2], domain=domain, verbose=verbose)


DEPRESSED_SOLVERS: Dict[int, Callable] = {
    1: solve_depressed_linear,
    2: solve_depressed_quadratic,
    3: solve_depressed_cubic,
    4: solve_depressed_quartic,
}


def solve_depressed_poly(
        coeffs: Sequence[Any],
        domain: Optional[Union[str, Domain]] = None,
        verbose: bool = False
    ) -> List[Any]:
    """
    Solve a depressed polynomial of degree 1 to 4.

    Parameters
    ----------
    coeffs : Sequence
        Coefficients [a_0, ..., a_{n-2}] of the depressed polynomial
        x^n + a_{n-2}*x^(n-2) + ... + a_0 in ascending order. The leading 1
        and the vanishing x^(n-1) coefficient are omitted, so that the degree
        is n = len(coeffs) + 1.
    domain : str or Domain, optional
        The numeric domain, see `construct_domain`.
    verbose : bool
        Whether to print the intermediate steps.

    Returns
    ----------
    roots : List
        One root for degree 1 and 3, two roots for degree 2 and four roots for degree 4.

    Examples
    ----------
    >>> solve_depressed_poly([-4], 'EX')
    [-2, 2]
    """
    domain = construct_domain(coeffs, domain)
    coeffs = [domain.convert(c) for c in coeffs]
    degree = len(coeffs) + 1
    solver = DEPRESSED_SOLVERS.get(degree)
    if solver is None:
        raise UnsupportedDegree(degree)
    return solver(coeffs, domain, verbose=verbose)
