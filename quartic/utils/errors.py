class PolySolveError(Exception):
    """Base class for exceptions in this package."""

class EmptyPolynomial(PolySolveError, ValueError):
    """Raised when every coefficient of the polynomial is zero."""
    def __init__(self, message: str = "All coefficients are zero, the roots are undefined."):
        super().__init__(message)

class UnsupportedDegree(PolySolveError, ValueError):
    """Raised when the degree has no closed-form solver, i.e. degree 0 or >= 5."""
    degree = None
    def __init__(self, degree: int):
        self.degree = degree
        super().__init__(f"Unsupported polynomial degree {degree}, expected 1 <= degree <= 4.")

class DomainError(PolySolveError, ArithmeticError):
    """Raised when an operation is undefined in the numeric domain, e.g. sqrt(-1) over RR
    or a division by a vanishing intermediate value."""
