"""
Tests for tolerance tiers and pivot tolerance helpers.
"""

import numpy as np
import pytest

from ratingfit.core.compute.tolerances import (
    CONDITION_WARNING_THRESHOLD,
    CPU_FP64,
    NORMAL_VS_QR,
    NORMAL_VS_QR_ILL_CONDITIONED,
    PIVOT_TOL_EXACT,
    ToleranceTier,
    gram_pivot_tolerance,
    select_tolerance,
)


class TestGramPivotTolerance:

    def test_formula(self):
        eps = np.finfo(np.float64).eps
        assert gram_pivot_tolerance(100, 3, 10.0) == pytest.approx(100 * 3 * eps * 10.0)

    def test_grows_with_observations(self):
        assert gram_pivot_tolerance(1000, 3, 1.0) > gram_pivot_tolerance(10, 3, 1.0)

    def test_zero_scale(self):
        assert gram_pivot_tolerance(50, 2, 0.0) == 0.0


class TestSelectTolerance:

    def test_normal_backend(self):
        assert select_tolerance('cpu_normal') is NORMAL_VS_QR

    def test_normal_backend_ill_conditioned(self):
        tier = select_tolerance('cpu_normal', is_ill_conditioned=True)
        assert tier is NORMAL_VS_QR_ILL_CONDITIONED

    def test_other_backend(self):
        assert select_tolerance('cpu_qr') is CPU_FP64


class TestConstants:

    def test_exact_pivot_is_zero(self):
        assert PIVOT_TOL_EXACT == 0.0

    def test_condition_threshold(self):
        assert CONDITION_WARNING_THRESHOLD == 1e8

    def test_tiers_are_frozen(self):
        assert isinstance(CPU_FP64, ToleranceTier)
        with pytest.raises(AttributeError):
            CPU_FP64.rtol = 1.0
