"""
Tolerance tiers for numerical work.

Defines the thresholds used by row reduction, inversion checks and the
backends' conditioning diagnostics, plus the comparison tiers the test
suite uses when checking one compute path against another.

- Exact pivots: reproduces plain `!= 0` pivot search
- Normal equations vs QR: the two backends agree to this tier
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Pivot tolerance that reproduces exact-zero pivot search
PIVOT_TOL_EXACT = 0.0

# cond(X'X) = cond(X)^2; beyond this the normal equations lose
# roughly half of float64's significant digits
CONDITION_WARNING_THRESHOLD = 1e8


def gram_pivot_tolerance(n_obs: int, n_pred: int, scale: float) -> float:
    """
    Pivot tolerance for inverting X'X built from an (n_obs x n_pred) design.

    Rounding in each Gram entry accumulates over n_obs products, so a
    collinear design leaves residual pivots well above eps * scale.
    """
    return n_obs * n_pred * np.finfo(np.float64).eps * scale


# Matrix engine on well-conditioned input
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='cpu_fp64',
    description='Double precision Gauss-Jordan, well-conditioned',
)

# Normal equations vs QR reference, well-conditioned
NORMAL_VS_QR = ToleranceTier(
    rtol=1e-8,
    atol=1e-8,
    name='normal_vs_qr',
    description='Normal equations agree with QR reference',
)

# Normal equations vs QR reference, ill-conditioned (cond(X) > 1e4)
NORMAL_VS_QR_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-3,
    atol=1e-5,
    name='normal_vs_qr_ill_conditioned',
    description='Normal equations square the condition number',
)


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select the comparison tier for a backend against the QR reference."""
    if 'normal' in backend_name:
        if is_ill_conditioned:
            return NORMAL_VS_QR_ILL_CONDITIONED
        return NORMAL_VS_QR
    return CPU_FP64
