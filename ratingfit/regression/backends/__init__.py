"""
Regression backends.

Available backends:
    NormalEquationsBackend: Matrix engine, β = (X'X)⁻¹ X'y (default)
    CPUQRBackend: QR reference implementation via LAPACK
"""

from ratingfit.regression.backends.normal import NormalEquationsBackend
from ratingfit.regression.backends.cpu import CPUQRBackend

__all__ = [
    "NormalEquationsBackend",
    "CPUQRBackend",
]
