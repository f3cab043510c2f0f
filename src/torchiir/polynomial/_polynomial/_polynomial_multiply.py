import torch

from torchiir.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes the full linear convolution of the coefficients. Result degree
    is deg(p) + deg(q), so the result has len(p) + len(q) - 1 coefficients.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply. Coefficients must be 1-D and non-empty.

    Returns
    -------
    Polynomial
        Product p * q.

    Raises
    ------
    DegreeError
        If either operand is not 1-D or has no coefficients.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0]))  # 1 + 2x
    >>> q = polynomial(torch.tensor([3.0, 4.0]))  # 3 + 4x
    >>> polynomial_multiply(p, q).coeffs
    tensor([ 3., 10.,  8.])
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    if p_coeffs.dim() != 1 or q_coeffs.dim() != 1:
        raise DegreeError(
            f"Polynomial coefficients must be 1-D, got shapes "
            f"{tuple(p_coeffs.shape)} and {tuple(q_coeffs.shape)}"
        )

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    if n_p == 0 or n_q == 0:
        raise DegreeError(
            f"Cannot multiply polynomials with {n_p} and {n_q} coefficients"
        )

    # Promote to common dtype
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)
    p_coeffs = p_coeffs.to(common_dtype)
    q_coeffs = q_coeffs.to(device=p_coeffs.device, dtype=common_dtype)

    # Accumulate shifted copies of q, one per coefficient of p
    result = torch.zeros(
        n_p + n_q - 1, dtype=common_dtype, device=p_coeffs.device
    )
    for i in range(n_p):
        result[i : i + n_q] += p_coeffs[i] * q_coeffs

    return Polynomial(coeffs=result)
