"""
Matrix operations on flat row-major buffers.

Provides the flat-buffer functions multiply(), lu(), inverse(),
determinant() and solve(), plus factorize() as the rich entry point
returning an LUSolution.

All elimination goes through linalg._lu.doolittle.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkernel.core.result import Result
from numkernel.core.compute.timing import Timer
from numkernel.core.compute.tolerances import DETERMINANT_ZERO_SNAP
from numkernel.linalg.design import MatrixDesign
from numkernel.linalg.solution import LUParams, LUSolution
from numkernel.linalg._lu import doolittle, is_singular, lu_solve, pivot_product


def multiply(
    a: ArrayLike,
    b: ArrayLike,
    rows_a: int,
    cols_a: int,
    cols_b: int,
) -> NDArray[np.float64]:
    """
    Dense matrix product C = A·B.

    Parameters
    ----------
    a : array-like
        Flat row-major A, shape (rows_a, cols_a).
    b : array-like
        Flat row-major B, shape (cols_a, cols_b).
    rows_a, cols_a, cols_b : int
        Dimensions. cols_a is both A's column count and B's row count.

    Returns
    -------
    Flat row-major C of length rows_a * cols_b.

    Raises
    ------
    DimensionError
        If either buffer length disagrees with its dimensions.
    """
    left = MatrixDesign.from_buffer(a, rows_a, cols_a, name='a')
    right = MatrixDesign.from_buffer(b, cols_a, cols_b, name='b')
    product = left.buffer.reshape(left.rows, left.cols) @ right.buffer.reshape(
        right.rows, right.cols
    )
    return product.reshape(-1)


def _factor(design: MatrixDesign) -> LUParams:
    work = design.as_matrix()
    pivots, sign = doolittle(work)
    return LUParams(lu=work, pivots=pivots, sign=sign)


def lu(a: ArrayLike, rows: int, cols: int) -> NDArray[np.float64]:
    """
    LU factorization with partial pivoting (Doolittle).

    Parameters
    ----------
    a : array-like
        Flat row-major matrix of shape (rows, cols).
    rows, cols : int
        Dimensions; rectangular matrices are allowed.

    Returns
    -------
    Flat array ``[sign, pivots[0..rows), LU row-major]`` of length
    1 + rows + rows*cols. The unit diagonal of L is implicit; entries
    below the diagonal are the multipliers.
    """
    design = MatrixDesign.from_buffer(a, rows, cols, name='a')
    return _factor(design).encode()


def determinant(a: ArrayLike, n: int) -> float:
    """
    Determinant from the pivot product of the LU factorization.

    Values with magnitude below 1e-15 are elimination noise and are
    returned as exactly 0.0.
    """
    design = MatrixDesign.square(a, n, name='a')
    params = _factor(design)
    det = pivot_product(params.lu, params.sign)
    if abs(det) < DETERMINANT_ZERO_SNAP:
        return 0.0
    return det


def inverse(a: ArrayLike, n: int) -> NDArray[np.float64]:
    """
    Inverse of a square matrix, solving A·X = I through its LU factors.

    Returns
    -------
    Flat row-major inverse of length n*n. A singular matrix (zero pivot,
    or pivot product underflowing to zero) gives an array filled with NaN
    and emits a RuntimeWarning.
    """
    design = MatrixDesign.square(a, n, name='a')
    params = _factor(design)

    if is_singular(params.lu, params.sign):
        warnings.warn(
            f"inverse: matrix is singular ({design.rows}x{design.cols}), "
            f"returning NaN",
            RuntimeWarning,
            stacklevel=2,
        )
        return np.full(design.rows * design.cols, np.nan)

    return lu_solve(params.lu, params.pivots, np.eye(design.rows)).reshape(-1)


def solve(a: ArrayLike, b: ArrayLike, n: int, nrhs: int = 1) -> NDArray[np.float64]:
    """
    Solve A·X = B.

    Parameters
    ----------
    a : array-like
        Flat row-major square matrix, shape (n, n).
    b : array-like
        Flat row-major right-hand sides, shape (n, nrhs).
    n : int
        Order of A.
    nrhs : int
        Number of right-hand-side columns.

    Returns
    -------
    Flat row-major X of length n*nrhs.

    Raises
    ------
    SingularMatrixError
        If A is singular.
    """
    return factorize(a, n, n).solve(b, nrhs)


def factorize(a: ArrayLike, rows: int, cols: int) -> LUSolution:
    """
    LU factorization returning an LUSolution.

    The solution exposes L, U, the permutation, and for square input the
    determinant, inverse and linear solves, all from the same factors.
    Zero pivots are recorded in the solution's warnings.
    """
    timer = Timer()
    timer.start()

    with timer.section('validation'):
        design = MatrixDesign.from_buffer(a, rows, cols, name='a')

    with timer.section('elimination'):
        params = _factor(design)

    k = min(design.rows, design.cols)
    zero_pivots = [int(j) for j in np.flatnonzero(np.diag(params.lu)[:k] == 0.0)]
    warnings_list = [f"zero pivot at column {j}" for j in zero_pivots]

    timer.stop()

    result = Result(
        params=params,
        info={
            'method': 'doolittle',
            'pivoting': 'partial',
            'rows': design.rows,
            'cols': design.cols,
            'zero_pivots': zero_pivots,
        },
        timing=timer.result(),
        backend_name='cpu_lu',
        warnings=tuple(warnings_list),
    )
    return LUSolution(_result=result, _design=design)
