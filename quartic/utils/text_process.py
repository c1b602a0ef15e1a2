from typing import Any, Dict, List, Optional, Sequence, Union

from sympy import Expr, Poly, Symbol, parse_expr, sympify
from sympy.abc import x as _x


def _preprocess_text_completion(
        poly: str,
        scientific_notation: bool = False,
        preserve_patterns: Sequence[str] = ('sqrt', 'cbrt')
    ) -> str:
    """
    Complete the polynomial with * and ^. E.g.
    3/4x4-2x2+1   ->   3/4*x^4-2*x^2+1

    Parameters
    ----------
    poly: str
        The polynomial to complete.
    scientific_notation: bool
        Whether to parse the scientific notation. If True, 1e2 will be parsed as 100.
        If False, 1e2 will be parsed as e^2 where e is a free variable.
    preserve_patterns: Sequence[str]
        Function names that should not be split into products of letters.
    """
    SCI = 'e' if scientific_notation else ''
    preserve_patterns = set(preserve_patterns)
    if scientific_notation:
        preserve_patterns.add('e')
    preserve_patterns.discard('') # will cause infinite loop
    preserve_patterns = sorted(preserve_patterns, key=lambda p: -len(p))

    def _pattern_match(poly, i):
        for pattern in preserve_patterns:
            if poly.startswith(pattern, i):
                return pattern
        return None

    poly = poly.replace(' ', '')
    i = 0
    while i < len(poly) - 1:
        if poly[i].isdigit() or poly[i] == '.':
            if poly[i+1] == '(' or (poly[i+1].isalpha() and poly[i+1] != SCI):
                # 1e2 should not be converted to 1*e2 when using scientific notation
                poly = poly[:i+1] + '*' + poly[i+1:]
                i += 1
        elif poly[i] == ')' or poly[i].isalpha():
            matched = _pattern_match(poly, i) if poly[i].isalpha() else None
            if matched is not None:
                i += len(matched) - 1
                if i + 1 < len(poly) and poly[i+1].isalpha():
                    poly = poly[:i+1] + '*' + poly[i+1:]
                    i += 1
            elif poly[i+1] == '(' or poly[i+1].isalpha():
                poly = poly[:i+1] + '*' + poly[i+1:]
                i += 1
            elif poly[i+1].isdigit():
                poly = poly[:i+1] + '^' + poly[i+1:]
                i += 1
        i += 1
    return poly


def preprocess_text(
        poly: str,
        gen: Symbol = _x,
        return_type: str = 'poly',
        scientific_notation: bool = False,
        lowercase: bool = True,
        preserve_patterns: Sequence[str] = ('sqrt', 'cbrt'),
        parse_expr_kwargs: Optional[Dict] = None,
    ) -> Union[str, Expr, Poly, None]:
    """
    Parse a text to a univariate sympy polynomial conveniently.
    Omitted multiplication signs and powers are completed.

    Parameters
    ----------
    poly: str
        The text of the polynomial.
    gen: Symbol
        The variable of the polynomial. Defaults to x.
    return_type: str
        One of ['text', 'expr', 'poly'].
        If 'text', return the completed text.
        If 'expr', return the sympy expression.
        If 'poly', return the sympy polynomial in `gen`, or None if the
        expression is not a polynomial in `gen`.
    scientific_notation: bool
        Whether to parse the scientific notation, see `_preprocess_text_completion`.
    lowercase: bool
        Whether to convert the text to lowercase. Defaults to True.
    preserve_patterns: Sequence[str]
        The patterns to be preserved when completing the text.
    parse_expr_kwargs: Dict
        The arguments for sympy parse_expr.

    Examples
    --------
    >>> preprocess_text('3x4-5x2+4', return_type='text')
    '3*x^4-5*x^2+4'
    >>> preprocess_text('2x2 - 3')
    Poly(2*x**2 - 3, x, domain='ZZ')
    >>> preprocess_text('1/x + 1') is None
    True
    """
    if lowercase:
        poly = poly.lower()
    poly = poly.translate({123: 40, 125: 41, 91: 40, 93: 41}) # {[ -> (, }] -> )
    poly = _preprocess_text_completion(poly,
        scientific_notation=scientific_notation,
        preserve_patterns=preserve_patterns
    )
    if return_type == 'text':
        return poly

    if parse_expr_kwargs is None:
        parse_expr_kwargs = {}
    local_dict = dict(parse_expr_kwargs.get('local_dict', {}))
    local_dict[gen.name] = gen
    parse_expr_kwargs = {**parse_expr_kwargs, 'local_dict': local_dict}

    expr = parse_expr(poly.replace('^', '**'), **parse_expr_kwargs)
    if return_type == 'expr':
        return expr
    if return_type != 'poly':
        raise ValueError(f"Unknown return_type {return_type!r}.")

    if not expr.is_polynomial(gen):
        return None
    return Poly(expr, gen, extension=True)

pl = preprocess_text


def poly_coeffs(poly: Union[str, Expr, Poly], gen: Symbol = _x) -> List[Any]:
    """
    Get the coefficients of a univariate polynomial in ascending order.

    Parameters
    ----------
    poly: str, Expr or Poly
        The polynomial. Strings are parsed by `preprocess_text`.
    gen: Symbol
        The variable of the polynomial.

    Returns
    ----------
    coeffs: List[Expr]
        The coefficients, `coeffs[i]` is the coefficient of `gen**i`.

    Examples
    ----------
    >>> poly_coeffs('x4-5x2+4')
    [4, 0, -5, 0, 1]
    """
    if isinstance(poly, str):
        text = poly
        poly = preprocess_text(text, gen=gen)
        if poly is None:
            raise ValueError(f"{text!r} is not a polynomial in {gen}.")
    elif isinstance(poly, Poly):
        if len(poly.gens) != 1:
            raise ValueError(f"Expected a univariate polynomial, but got gens {poly.gens}.")
    else:
        poly = sympify(poly)
        if not poly.is_polynomial(gen):
            raise ValueError(f"{poly} is not a polynomial in {gen}.")
        poly = Poly(poly, gen, extension=True)
    return poly.all_coeffs()[::-1]
