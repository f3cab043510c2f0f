"""Rational composition of transfer functions."""

from typing import Optional, Tuple

import torch
from torch import Tensor

from torchiir.polynomial import polynomial, polynomial_multiply

from ._coefficients import (
    CoefficientsLike,
    allocate_zeros,
    as_coefficients,
    check_output_pair,
)
from ._exceptions import AllocationError, PointerError, SizeError


def rational_compose(
    numerator: CoefficientsLike,
    denominator: CoefficientsLike,
    substitution_numerator: CoefficientsLike,
    substitution_denominator: CoefficientsLike,
    *,
    out: Optional[Tuple[Tensor, Tensor]] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Substitute a rational function into a transfer function.

    Given H(x) = B(x) / A(x) of order n and the substitution
    x = C(y) / D(y) of order p, computes the polynomials of order n*p with

    .. math::
        H\\left(\\frac{C(y)}{D(y)}\\right) = \\frac{\\beta(y)}{\\alpha(y)}

    obtained by multiplying numerator and denominator by D(y)^n.

    Parameters
    ----------
    numerator : Tensor or array_like
        Coefficients of B in ascending powers, length n + 1.
    denominator : Tensor or array_like
        Coefficients of A in ascending powers, length n + 1.
    substitution_numerator : Tensor or array_like
        Coefficients of C in ascending powers, length p + 1.
    substitution_denominator : Tensor or array_like
        Coefficients of D in ascending powers, length p + 1.
    out : tuple of Tensor, optional
        Pre-allocated ``(beta, alpha)`` tensors of length n*p + 1. They are
        overwritten with the result and returned; on error they are left
        untouched. Their dtype must be one the result can be cast to, and
        they must not be leaf tensors that require grad.

    Returns
    -------
    beta : Tensor
        Numerator of the composed function, length n*p + 1.
    alpha : Tensor
        Denominator of the composed function, length n*p + 1.

    Raises
    ------
    PointerError
        If any coefficient argument is None, or if ``out`` is not a pair of
        tensors that can take the result dtype without autograd conflicts.
    SizeError
        If n < 1 or p < 1, if B and A (or C and D) differ in length, or if
        ``out`` has the wrong length.
    AllocationError
        If scratch storage cannot be allocated.

    Notes
    -----
    Every power x^i of the original variable becomes C^i / D^i. Clearing
    denominators turns the i-th term into the cross product

    .. math::
        C(y)^i \\, D(y)^{n-i}

    which has degree n*p for every i. The result is the weighted sum of the
    cross products with weights b_i for beta and a_i for alpha.

    Computation happens in float64 (complex128 for complex inputs); the
    result has the promoted dtype of the inputs.

    Examples
    --------
    >>> # Identity substitution x = y leaves the transfer function unchanged
    >>> beta, alpha = rational_compose([1.0, 2.0], [3.0, 4.0], [0.0, 1.0], [1.0, 0.0])
    >>> beta
    tensor([1., 2.], dtype=torch.float64)
    """
    names = (
        "numerator",
        "denominator",
        "substitution_numerator",
        "substitution_denominator",
    )
    values = (
        numerator,
        denominator,
        substitution_numerator,
        substitution_denominator,
    )
    for name, value in zip(names, values):
        if value is None:
            raise PointerError(f"{name} must not be None")

    b, a, c, d = (
        as_coefficients(value, name) for name, value in zip(names, values)
    )

    if b.numel() != a.numel():
        raise SizeError(
            f"Numerator and denominator must have equal length, "
            f"got {b.numel()} and {a.numel()}"
        )
    if c.numel() != d.numel():
        raise SizeError(
            f"Substitution numerator and denominator must have equal "
            f"length, got {c.numel()} and {d.numel()}"
        )

    n = b.numel() - 1
    p = c.numel() - 1
    if n < 1 or p < 1:
        raise SizeError(
            f"Transfer function and substitution orders must be at least "
            f"1, got n={n} and p={p}"
        )

    result_dtype = b.dtype
    for tensor in (a, c, d):
        result_dtype = torch.promote_types(result_dtype, tensor.dtype)

    size = n * p + 1
    check_output_pair(out, size, result_dtype)

    work_dtype = torch.promote_types(result_dtype, torch.float64)
    device = b.device

    b, a, c, d = (
        tensor.to(device=device, dtype=work_dtype) for tensor in (b, a, c, d)
    )

    numerator_powers = allocate_zeros(
        n + 1, size, dtype=work_dtype, device=device
    )
    denominator_powers = allocate_zeros(
        n + 1, size, dtype=work_dtype, device=device
    )
    cross = allocate_zeros(n + 1, size, dtype=work_dtype, device=device)

    # Row i holds C^i (resp. D^i), left-aligned and zero-padded
    substitution_c = polynomial(c)
    substitution_d = polynomial(d)
    power_c = polynomial(torch.ones(1, dtype=work_dtype, device=device))
    power_d = polynomial(torch.ones(1, dtype=work_dtype, device=device))
    numerator_powers[0, 0] = 1.0
    denominator_powers[0, 0] = 1.0
    for i in range(1, n + 1):
        power_c = polynomial_multiply(power_c, substitution_c)
        power_d = polynomial_multiply(power_d, substitution_d)
        numerator_powers[i, : i * p + 1] = power_c.coeffs
        denominator_powers[i, : i * p + 1] = power_d.coeffs

    # Row i holds C^i * D^(n-i), always of degree n*p
    for i in range(n + 1):
        product = polynomial_multiply(
            polynomial(numerator_powers[i, : i * p + 1]),
            polynomial(denominator_powers[n - i, : (n - i) * p + 1]),
        )
        cross[i] = product.coeffs

    # The weighted rows are scratch of the same size as the tables above
    try:
        numerator_cross = cross * b.unsqueeze(-1)
        denominator_cross = cross * a.unsqueeze(-1)

        beta = numerator_cross.sum(dim=0).to(result_dtype)
        alpha = denominator_cross.sum(dim=0).to(result_dtype)
    except (RuntimeError, MemoryError) as error:
        raise AllocationError(
            f"Cannot allocate weighted cross products of size "
            f"{(n + 1, size)}"
        ) from error

    if out is None:
        return beta, alpha

    out[0].copy_(beta)
    out[1].copy_(alpha)
    return out[0], out[1]
