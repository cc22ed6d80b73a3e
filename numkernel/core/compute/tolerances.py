"""
Numerical constants and tolerance tiers.

- DETERMINANT_ZERO_SNAP: determinants below this magnitude are elimination
  noise and are reported as exactly 0.0
- ToleranceTier presets: precision expectations used by the test suite
  when comparing against a LAPACK reference
"""

from dataclasses import dataclass


# |det| below this is reported as 0.0
DETERMINANT_ZERO_SNAP = 1e-15


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned problems: agreement with LAPACK to near machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches LAPACK reference',
)

# Ill-conditioned problems (cond > 1e4), and identity checks A @ inv(A)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-9,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)
