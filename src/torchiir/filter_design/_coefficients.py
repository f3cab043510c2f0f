"""Coercion of coefficient arguments to tensors."""

from typing import Optional, Sequence, Tuple, Union

import numpy as np
import torch
from torch import Tensor

from ._exceptions import (
    AllocationError,
    FrequencyError,
    PointerError,
    SizeError,
)

CoefficientsLike = Union[Tensor, np.ndarray, Sequence[float]]


def as_coefficients(value: Optional[CoefficientsLike], name: str) -> Tensor:
    """Convert ``value`` to a 1-D floating or complex coefficient tensor.

    Tensors keep their dtype and device (integer tensors become float64).
    Sequences and arrays go through numpy so Python floats stay float64.
    """
    if value is None:
        raise PointerError(f"{name} must not be None")

    if isinstance(value, Tensor):
        tensor = value
    else:
        tensor = torch.as_tensor(np.asarray(value))

    if not (tensor.is_floating_point() or tensor.is_complex()):
        tensor = tensor.to(torch.float64)

    if tensor.dim() != 1:
        raise SizeError(
            f"{name} must be 1-D, got shape {tuple(tensor.shape)}"
        )

    return tensor


def as_frequency(
    value: Union[float, Tensor], name: str, like: Tensor
) -> Tensor:
    """Convert a positive angular frequency to a real 0-d tensor.

    The result is on ``like``'s device with its real dtype, so gradients
    flow through tensor-valued frequencies.
    """
    if value is None:
        raise PointerError(f"{name} must not be None")

    dtype = like.real.dtype if like.is_complex() else like.dtype
    frequency = torch.as_tensor(value, dtype=dtype, device=like.device)

    if frequency.numel() != 1:
        raise FrequencyError(
            f"{name} must be a scalar, got shape {tuple(frequency.shape)}"
        )
    frequency = frequency.reshape(())
    if not bool(torch.isfinite(frequency)) or frequency.item() <= 0:
        raise FrequencyError(
            f"{name} must be positive and finite, got {frequency.item()}"
        )

    return frequency


def check_output_pair(
    out: Optional[Tuple[Tensor, Tensor]], length: int, dtype: torch.dtype
) -> None:
    """Validate caller-supplied output tensors before anything is written.

    Both tensors must accept a result of ``length`` elements and ``dtype``
    so that either both are written or neither is.
    """
    if out is None:
        return
    if len(out) != 2 or out[0] is None or out[1] is None:
        raise PointerError("out must be a pair of tensors")
    for tensor in out:
        if not isinstance(tensor, Tensor):
            raise PointerError(
                f"out must be a pair of tensors, got {type(tensor).__name__}"
            )
        if tensor.dim() != 1 or tensor.numel() != length:
            raise SizeError(
                f"Output tensors must have shape ({length},), "
                f"got {tuple(tensor.shape)}"
            )
        if not torch.can_cast(dtype, tensor.dtype):
            raise PointerError(
                f"Cannot write {dtype} results into an output tensor of "
                f"dtype {tensor.dtype}"
            )
        if tensor.is_leaf and tensor.requires_grad:
            raise PointerError(
                "Output tensors must not be leaf tensors that require grad"
            )


def allocate_zeros(
    *size: int, dtype: torch.dtype, device: torch.device
) -> Tensor:
    """Allocate zero-filled scratch storage, raising AllocationError."""
    try:
        return torch.zeros(*size, dtype=dtype, device=device)
    except (RuntimeError, MemoryError) as error:
        raise AllocationError(
            f"Cannot allocate scratch tensor of size {tuple(size)}"
        ) from error
