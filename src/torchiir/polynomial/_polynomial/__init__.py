from ._polynomial import Polynomial, polynomial
from ._polynomial_from_roots import polynomial_from_roots
from ._polynomial_multiply import polynomial_multiply

__all__ = [
    "Polynomial",
    "polynomial",
    "polynomial_from_roots",
    "polynomial_multiply",
]
