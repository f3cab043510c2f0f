"""Power-basis polynomials with ascending coefficients."""

from ._degree_error import DegreeError
from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_from_roots,
    polynomial_multiply,
)
from ._polynomial_error import PolynomialError

__all__ = [
    "DegreeError",
    "Polynomial",
    "PolynomialError",
    "polynomial",
    "polynomial_from_roots",
    "polynomial_multiply",
]
