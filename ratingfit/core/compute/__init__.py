"""
Shared compute infrastructure for ratingfit.

This module provides timing utilities, tolerance tiers and the matrix
kernels that the regression backends build on.

IMPORTANT: This is NOT where regression backends live. Those go in
regression/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Pivot tolerances and comparison tiers
    linalg: Matrix type and normal-equations solver
"""

from ratingfit.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
