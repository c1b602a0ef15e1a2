from typing import Any, List, Sequence

import numpy as np
from numpy import ndarray


def polyval(coeffs: Sequence[Any], x: Any) -> Any:
    """
    Evaluate a polynomial given by ascending coefficients at x
    using Horner's scheme. Works for any numeric type.

    Examples
    ----------
    >>> polyval([4, 0, -5, 0, 1], 2)
    0
    """
    result = 0
    for c in reversed(list(coeffs)):
        result = result * x + c
    return result


def residuals(coeffs: Sequence[Any], roots: Sequence[Any]) -> ndarray:
    """
    Compute |p(root)| for each root numerically in complex double precision.

    Parameters
    ----------
    coeffs : Sequence
        Coefficients of p in ascending order. They should be convertible to complex.
    roots : Sequence
        The points to evaluate p at. They should be convertible to complex.

    Returns
    ----------
    residuals : ndarray
        A 1D float array with the same length as roots.
    """
    coeffs = np.array([complex(c) for c in coeffs], dtype=np.complex128)
    roots = np.array([complex(r) for r in roots], dtype=np.complex128)
    if len(coeffs) == 0:
        return np.zeros(len(roots))
    # numpy.polyval expects the leading coefficient first
    return np.abs(np.polyval(coeffs[::-1], roots))


def nroots(coeffs: Sequence[Any]) -> List[complex]:
    """
    Numerical roots of a polynomial given by ascending coefficients
    via the eigenvalues of the companion matrix (numpy.roots).
    Leading zero coefficients are ignored.
    """
    coeffs = np.array([complex(c) for c in coeffs], dtype=np.complex128)
    return [complex(r) for r in np.roots(coeffs[::-1])]
