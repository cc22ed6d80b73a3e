"""
Shared compute infrastructure for numkernel.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical constants and tolerance tiers
"""

from numkernel.core.compute.timing import Timer
from numkernel.core.compute.tolerances import (
    DETERMINANT_ZERO_SNAP,
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
)

__all__ = [
    "Timer",
    "DETERMINANT_ZERO_SNAP",
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
]
