"""
Taylor shifts of univariate polynomials through binomial expansion.
Coefficients are always stored in ascending order, i.e. `coeffs[i]`
is the coefficient of `x**i`.
"""
from typing import Any, Generator, List, Sequence
from functools import reduce
from itertools import zip_longest


def binomial_rows() -> Generator[List[int], None, None]:
    """
    Generate the rows of Pascal's triangle lazily.

    Yields
    ----------
    row : List[int]
        The k-th row [C(k,0), C(k,1), ..., C(k,k)], starting from [1].

    Examples
    ----------
    >>> from itertools import islice
    >>> list(islice(binomial_rows(), 4))
    [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
    """
    row = [1]
    while True:
        yield row
        row = [u + v for u, v in zip([0] + row, row + [0])]


def add_padded(xs: Sequence[Any], ys: Sequence[Any]) -> List[Any]:
    """Add two coefficient lists of possibly different lengths,
    the shorter one is padded with zeros at the high-degree end."""
    return [u + v for u, v in zip_longest(xs, ys, fillvalue=0)]


def shifted_coeffs(shift: Any, coeffs: Sequence[Any]) -> List[Any]:
    """
    Compute the coefficients of p(x + shift) given the coefficients of p(x).

    Each term c_i * x^i is expanded as c_i * sum_k C(i,k) * shift^(i-k) * x^k
    and the expansions are summed up coefficient-wise.

    Parameters
    ----------
    shift : Any
        The value to shift the variable by.
    coeffs : Sequence
        Coefficients of p in ascending order.

    Returns
    ----------
    new_coeffs : List
        Coefficients of p(x + shift) in ascending order. It has the same length
        as `coeffs`.

    Examples
    ----------
    >>> shifted_coeffs(1, [0, 0, 1]) # (x+1)^2
    [1, 2, 1]
    >>> shifted_coeffs(-2, [3, 1]) # (x-2) + 3
    [1, 1]
    """
    coeffs = list(coeffs)
    if len(coeffs) == 0:
        return []

    powers = [1]
    for _ in range(len(coeffs) - 1):
        powers.append(powers[-1] * shift)

    terms = []
    for c, row in zip(coeffs, binomial_rows()):
        i = len(row) - 1
        terms.append([c * (b * powers[i - k]) for k, b in enumerate(row)])
    return reduce(add_padded, terms)
