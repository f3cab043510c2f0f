"""torchiir: IIR filter design in PyTorch by rational composition."""

from . import (
    filter_design,
    polynomial,
)

__all__ = [
    "filter_design",
    "polynomial",
]

__version__ = "0.1.0"
