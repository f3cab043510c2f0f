import torch
from torch import Tensor

from ._polynomial import Polynomial, polynomial


def polynomial_from_roots(roots: Tensor) -> Polynomial:
    """Construct monic polynomial from its roots.

    Constructs (x - r_0)(x - r_1)...(x - r_{n-1}).

    Parameters
    ----------
    roots : Tensor
        Roots, shape (N,). Can be complex.

    Returns
    -------
    Polynomial
        Monic polynomial with given roots, N+1 ascending coefficients.

    Examples
    --------
    >>> roots = torch.tensor([1.0, 2.0])  # (x-1)(x-2) = x^2 - 3x + 2
    >>> p = polynomial_from_roots(roots)
    >>> p.coeffs
    tensor([ 2., -3.,  1.])
    """
    n_roots = roots.shape[-1]

    if n_roots == 0:
        return polynomial(
            torch.ones(1, dtype=roots.dtype, device=roots.device)
        )

    # Start with polynomial (x - r_0) = -r_0 + 1*x
    coeffs = torch.stack([-roots[0], torch.ones_like(roots[0])])
    zero = torch.zeros(1, dtype=roots.dtype, device=roots.device)

    for i in range(1, n_roots):
        # (c_0 + ... + c_i*x^i) * (x - r_i): shift by x, subtract r_i * c
        shifted = torch.cat([zero, coeffs])
        scaled = torch.cat([coeffs, zero]) * (-roots[i])

        coeffs = shifted + scaled

    return Polynomial(coeffs=coeffs)
