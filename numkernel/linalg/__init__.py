"""
Dense linear algebra on flat row-major buffers.

Public API:
    multiply(a, b, rows_a, cols_a, cols_b)  - Matrix product
    lu(a, rows, cols)                       - Encoded LU factorization
    decode_lu(encoded, rows, cols)          - Unpack lu() output
    determinant(a, n)                       - Determinant (near-zero snapped)
    inverse(a, n)                           - Inverse (NaN on singular)
    solve(a, b, n, nrhs)                    - Linear solve A·X = B
    factorize(a, rows, cols)                - LUSolution with derived quantities
"""

from numkernel.linalg.design import MatrixDesign
from numkernel.linalg.solution import LUParams, LUSolution, decode_lu
from numkernel.linalg.solvers import (
    multiply,
    lu,
    determinant,
    inverse,
    solve,
    factorize,
)

__all__ = [
    "multiply",
    "lu",
    "decode_lu",
    "determinant",
    "inverse",
    "solve",
    "factorize",
    "MatrixDesign",
    "LUParams",
    "LUSolution",
]
