from typing import Any, List

from ..utils.domains import Domain, construct_domain

class SolveConfigs:
    """
    Options of `solve_poly`. Class attributes are the defaults and
    can be overridden by keyword arguments.

    Attributes
    ----------
    domain : str or Domain or None
        The numeric domain, see `construct_domain`. If None, it is inferred
        from the coefficients.
    tol : float
        Absolute tolerance to decide whether a value is zero. Defaults to 0,
        which compares with the additive identity exactly.
    dps : int
        Decimal precision for the 'MP' domain.
    verbose : bool
        Whether to print the intermediate steps.
    """
    domain = None
    tol = 0
    dps = 15
    verbose = False
    _KEYS = ('domain', 'tol', 'dps', 'verbose')
    def __init__(self, **kwargs):
        for key in self._KEYS:
            setattr(self, key, kwargs.pop(key, getattr(self, key)))

        if kwargs:
            raise TypeError(f"Unexpected keyword arguments for SolveConfigs: {list(kwargs.keys())}")

    def get_domain(self, coeffs: List[Any]) -> Domain:
        return construct_domain(coeffs, self.domain, tol=self.tol, dps=self.dps)

    def keys(self):
        return list(self._KEYS)

    def values(self):
        return [getattr(self, key) for key in self._KEYS]

    def items(self):
        return [(key, getattr(self, key)) for key in self._KEYS]

    def __getitem__(self, key):
        return getattr(self, key)

    def __repr__(self):
        return f"SolveConfigs({', '.join(f'{key}={getattr(self, key)!r}' for key in self._KEYS)})"

    def __str__(self):
        return f"SolveConfigs({', '.join(f'{key}={getattr(self, key)}' for key in self._KEYS)})"
