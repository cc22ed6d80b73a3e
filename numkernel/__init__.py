"""
numkernel: numeric primitives on flat row-major buffers.

Stateless functions for dense matrix algebra and descriptive statistics.
Every matrix is passed as a flat row-major buffer plus explicit dimensions.

Submodules:
    linalg: multiply, LU factorization, determinant, inverse, solve
    descriptive: mean, variance, std, zscore, covariance, correlation
"""

__version__ = "0.1.0"

from numkernel.linalg import (
    multiply,
    lu,
    decode_lu,
    determinant,
    inverse,
    solve,
    factorize,
)
from numkernel.descriptive import (
    mean,
    variance,
    std,
    zscore,
    describe,
    covariance,
    correlation,
)

__all__ = [
    "__version__",
    # linalg
    "multiply",
    "lu",
    "decode_lu",
    "determinant",
    "inverse",
    "solve",
    "factorize",
    # descriptive
    "mean",
    "variance",
    "std",
    "zscore",
    "describe",
    "covariance",
    "correlation",
]
