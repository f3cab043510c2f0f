from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchiir.polynomial._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i. May be real or complex.

    Examples
    --------
    Polynomial 1 + 2x + 3x^2:
        Polynomial(coeffs=torch.tensor([1.0, 2.0, 3.0]))

    Operator overloading:
        p * q    # polynomial_multiply(p, q)
    """

    coeffs: Tensor

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply

        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomial_multiply(self, other)


def polynomial(coeffs: Tensor) -> Polynomial:
    """Create polynomial from coefficient tensor.

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,).
        Must have at least one coefficient.

    Returns
    -------
    Polynomial
        Polynomial instance.

    Raises
    ------
    PolynomialError
        If coeffs is empty.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.])
    """
    if coeffs.numel() == 0 or coeffs.shape[-1] == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return Polynomial(coeffs=coeffs)
