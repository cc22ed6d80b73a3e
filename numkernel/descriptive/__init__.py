"""
Descriptive statistics module.

Public API:
    mean(x)                              - Arithmetic mean
    variance(x, flag)                    - Variance (population or sample)
    std(x, flag)                         - Standard deviation
    zscore(x, flag)                      - Standardized values
    describe(x, flag)                    - All moments from one pass
    covariance(data, rows, cols, flag)   - Column covariance matrix
    correlation(data, rows, cols)        - Pearson correlation matrix
"""

from numkernel.descriptive.solution import MomentParams, DescriptiveSolution
from numkernel.descriptive.solvers import (
    mean,
    variance,
    std,
    zscore,
    describe,
    covariance,
    correlation,
)

__all__ = [
    "mean",
    "variance",
    "std",
    "zscore",
    "describe",
    "covariance",
    "correlation",
    "MomentParams",
    "DescriptiveSolution",
]
