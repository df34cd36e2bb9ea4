"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations used by Matrix.allclose() and the test suite:
- EXACT: bitwise-equal values only
- CPU_FP64: float64 round-off from reordered summation
- LOOSE: results that went through long chains of operations
"""

from dataclasses import dataclass

from pymatrix.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Identical values, no round-off allowed',
)

# Default: products of small matrices agree to a few ulps
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, summation-order round-off',
)

LOOSE = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='loose',
    description='Accumulated round-off over chained operations',
)

_TIERS = {tier.name: tier for tier in (EXACT, CPU_FP64, LOOSE)}


def select_tolerance(name: str) -> ToleranceTier:
    """Look up a tolerance tier by name."""
    try:
        return _TIERS[name]
    except KeyError:
        raise ValidationError(
            f"tolerance: unknown tier {name!r}, expected one of {sorted(_TIERS)}"
        ) from None
