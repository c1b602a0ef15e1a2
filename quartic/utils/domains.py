"""
Numeric domains for the closed-form solvers.

The solvers only use the four arithmetic operations on the coefficients,
together with a square root and a cube root supplied by the domain.
A domain converts the input coefficients to a common numeric type and
provides these two roots, named after the aliases of SymPy domains:

    RR : Python floats, square roots of negative numbers are not allowed.
    CC : Python complex numbers.
    MP : mpmath numbers with arbitrary precision.
    EX : SymPy expressions, the roots are exact radicals.
"""
from typing import Any, List, Optional, Union
import cmath
import math

import mpmath
import sympy as sp
from sympy import Basic, Rational

from .errors import DomainError


class Domain:
    """
    Abstract numeric domain. Subclasses should implement
    `convert`, `sqrt` and `cbrt`.
    """
    alias = None
    is_Exact = False
    is_Complex = False

    def __init__(self, tol: float = 0):
        if tol < 0:
            raise ValueError(f"tol must be nonnegative, got {tol}")
        self.tol = tol

    def convert(self, x: Any) -> Any:
        raise NotImplementedError

    def sqrt(self, x: Any) -> Any:
        raise NotImplementedError

    def cbrt(self, x: Any) -> Any:
        raise NotImplementedError

    def is_zero(self, x: Any) -> bool:
        """Whether x is zero up to the absolute tolerance of the domain."""
        return abs(x) <= self.tol

    @property
    def zero(self):
        return self.convert(0)

    @property
    def is_RR(self) -> bool:
        return self.alias == 'RR'
    @property
    def is_CC(self) -> bool:
        return self.alias == 'CC'
    @property
    def is_MP(self) -> bool:
        return self.alias == 'MP'
    @property
    def is_EX(self) -> bool:
        return self.alias == 'EX'

    def __eq__(self, other):
        return type(self) is type(other) and self.tol == other.tol

    def __hash__(self):
        return hash((type(self), self.tol))

    def __repr__(self):
        return self.alias


class RealField(Domain):
    """Python floats. The square root is partial: negative inputs raise DomainError."""
    alias = 'RR'

    def convert(self, x):
        if isinstance(x, complex):
            if x.imag != 0:
                raise DomainError(f"Cannot convert {x} to a real number.")
            x = x.real
        elif isinstance(x, Basic) and not x.is_extended_real:
            raise DomainError(f"Cannot convert {x} to a real number.")
        return float(x)

    def sqrt(self, x):
        if x < 0:
            raise DomainError(f"Square root of a negative number {x} is not real.")
        return math.sqrt(x)

    def cbrt(self, x):
        # the real cube root rather than the principal one
        return math.copysign(abs(x) ** (1./3), x)


class ComplexField(Domain):
    """Python complex numbers with principal square and cube roots."""
    alias = 'CC'
    is_Complex = True

    def convert(self, x):
        return complex(x)

    def sqrt(self, x):
        return cmath.sqrt(x)

    def cbrt(self, x):
        return complex(x) ** (1./3)


class MPComplexField(Domain):
    """
    mpmath numbers. Each domain owns a separate mpmath context so that
    the working precision does not depend on the global `mpmath.mp.dps`.
    """
    alias = 'MP'
    is_Complex = True

    def __init__(self, tol: float = 0, dps: int = 15):
        super().__init__(tol)
        self.dps = dps
        self.ctx = mpmath.MPContext()
        self.ctx.dps = dps

    def convert(self, x):
        if isinstance(x, Basic):
            re, im = sp.N(x, self.dps).as_real_imag()
            if im == 0:
                return self.ctx.mpf(str(re))
            return self.ctx.mpc(str(re), str(im))
        return self.ctx.mpmathify(x)

    def sqrt(self, x):
        return self.ctx.sqrt(x)

    def cbrt(self, x):
        return self.ctx.cbrt(x)

    def __eq__(self, other):
        return super().__eq__(other) and self.dps == other.dps

    def __hash__(self):
        return hash((type(self), self.tol, self.dps))

    def __repr__(self):
        return f"MP(dps={self.dps})"


class ExpressionDomain(Domain):
    """SymPy expressions. Results are exact radical expressions."""
    alias = 'EX'
    is_Exact = True
    is_Complex = True

    def convert(self, x):
        return sp.sympify(x)

    def sqrt(self, x):
        return sp.sqrt(x)

    def cbrt(self, x):
        return x ** Rational(1, 3)

    def is_zero(self, x):
        """
        Rationals and non-constant expressions are decided exactly. Other
        constants are compared numerically at 30 and then 100 digits, since
        the assumptions system may not terminate on nested radicals such as
        sqrt(10/3 + (595/27 - 4*sqrt(3)*I)**(1/3) + ...).
        """
        if self.tol:
            return abs(complex(sp.N(x))) <= self.tol
        if x.is_Rational or not x.is_number:
            return bool(x.is_zero)
        for prec in (30, 100):
            if abs(complex(sp.N(x, prec))) > 10.**(10 - prec):
                return False
        return True


_ALIASES = {
    'RR': RealField,
    'CC': ComplexField,
    'MP': MPComplexField,
    'EX': ExpressionDomain,
}

def _is_mpmath(x) -> bool:
    # every mpmath context has its own mpf / mpc classes
    return hasattr(x, '_mpf_') or hasattr(x, '_mpc_')


def construct_domain(
        coeffs: List[Any],
        domain: Optional[Union[str, Domain]] = None,
        tol: float = 0,
        dps: int = 15
    ) -> Domain:
    """
    Find a domain to solve the polynomial with given coefficients in.

    Parameters
    ----------
    coeffs : List
        The coefficients of the polynomial.
    domain : str or Domain, optional
        If a Domain instance, it is returned as is. If a string, it should be
        one of 'RR', 'CC', 'MP', 'EX' (case-insensitive). If None, the domain is
        inferred from the coefficients: 'EX' if any coefficient is a SymPy object,
        'MP' if any coefficient is an mpmath number, 'CC' otherwise.
    tol : float
        The absolute tolerance for deciding whether a value is zero.
    dps : int
        The decimal precision for the 'MP' domain.

    Returns
    ----------
    domain : Domain
        The constructed domain.

    Examples
    ----------
    >>> construct_domain([1, 2.5, 3j])
    CC
    >>> construct_domain([sp.sqrt(2), 1])
    EX
    >>> construct_domain([1, 2], 'mp', dps=30)
    MP(dps=30)
    """
    if isinstance(domain, Domain):
        return domain
    if domain is None:
        if any(isinstance(c, Basic) for c in coeffs):
            domain = 'EX'
        elif any(_is_mpmath(c) for c in coeffs):
            domain = 'MP'
        else:
            domain = 'CC'
    if not isinstance(domain, str) or domain.upper() not in _ALIASES:
        raise ValueError(f"Unknown domain {domain!r}, expected one of {list(_ALIASES)}.")

    cls = _ALIASES[domain.upper()]
    if cls is MPComplexField:
        return cls(tol=tol, dps=dps)
    return cls(tol=tol)
