"""
Tests for tolerance tiers.
"""

from dataclasses import FrozenInstanceError

import pytest

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.tolerances import (
    CPU_FP64,
    EXACT,
    LOOSE,
    ToleranceTier,
    select_tolerance,
)


class TestToleranceTiers:

    def test_exact_has_zero_tolerance(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0

    def test_tiers_ordered(self):
        assert EXACT.rtol < CPU_FP64.rtol < LOOSE.rtol
        assert EXACT.atol < CPU_FP64.atol < LOOSE.atol

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            CPU_FP64.rtol = 1.0

    def test_custom_tier(self):
        tier = ToleranceTier(rtol=0.1, atol=0.0, name='coarse', description='test')
        assert tier.rtol == 0.1


class TestSelectTolerance:

    @pytest.mark.parametrize("tier", [EXACT, CPU_FP64, LOOSE])
    def test_lookup_by_name(self, tier):
        assert select_tolerance(tier.name) is tier

    def test_unknown_name(self):
        with pytest.raises(ValidationError, match="unknown tier"):
            select_tolerance('gpu_fp32')
