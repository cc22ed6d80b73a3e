"""
Welford single-pass accumulation.

Shared by mean(), variance(), std(), zscore() and describe(). Avoids the
cancellation of the sum-of-squares formula by updating a running mean and
a running sum of squared deviations (m2).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class WelfordState:
    """Count, running mean and sum of squared deviations after a pass."""
    n: int
    mean: float
    m2: float


def accumulate(values: NDArray[np.float64]) -> WelfordState:
    """One pass over ``values`` in order."""
    mean = 0.0
    m2 = 0.0
    n = 0
    for x in values.tolist():
        n += 1
        delta = x - mean
        mean += delta / n
        delta2 = x - mean
        m2 += delta * delta2
    return WelfordState(n=n, mean=mean, m2=m2)


def state_mean(state: WelfordState) -> float:
    """Running mean; NaN for an empty pass."""
    if state.n == 0:
        return math.nan
    return state.mean


def state_variance(state: WelfordState, flag: int) -> float:
    """
    m2 / (n - flag).

    n == 0 is NaN. n == 1 is 0.0 for the population divisor and NaN for
    the sample divisor.
    """
    if state.n == 0:
        return math.nan
    if state.n == 1:
        return math.nan if flag == 1 else 0.0
    return state.m2 / (state.n - flag)
