"""
Descriptive statistics on flat buffers.

Vector statistics (mean, variance, std, zscore, describe) share one Welford
accumulation. Matrix statistics (covariance, correlation) work on a flat
row-major observation matrix, rows = observations, cols = variables.
"""

from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkernel.core.result import Result
from numkernel.core.compute.timing import Timer
from numkernel.core.validation import check_buffer, check_normalization_flag
from numkernel.descriptive._welford import accumulate, state_mean, state_variance
from numkernel.descriptive.solution import DescriptiveSolution, MomentParams
from numkernel.linalg.design import MatrixDesign
from numkernel.linalg.solvers import multiply


def mean(x: ArrayLike) -> float:
    """
    Arithmetic mean. NaN for an empty sequence.
    """
    return state_mean(accumulate(check_buffer(x, "x")))


def variance(x: ArrayLike, flag: int = 1) -> float:
    """
    Variance with divisor n - flag.

    Parameters
    ----------
    x : array-like
        Flat sequence of numbers.
    flag : int
        0 for population (divisor n), 1 for sample (divisor n-1).

    Returns
    -------
    float. NaN for an empty sequence, and for a single value with flag=1.
    """
    flag = check_normalization_flag(flag)
    return state_variance(accumulate(check_buffer(x, "x")), flag)


def std(x: ArrayLike, flag: int = 1) -> float:
    """Standard deviation, sqrt(variance(x, flag))."""
    return math.sqrt(variance(x, flag))


def zscore(x: ArrayLike, flag: int = 1) -> NDArray[np.float64]:
    """
    Standardized values (x - mean) / std.

    An empty input gives an empty array, a single value gives [0.0], and
    a constant sequence (std == 0) gives all zeros.
    """
    flag = check_normalization_flag(flag)
    data = check_buffer(x, "x")
    n = data.shape[0]

    if n == 0:
        return np.empty(0, dtype=np.float64)
    if n == 1:
        return np.zeros(1, dtype=np.float64)

    state = accumulate(data)
    sd = math.sqrt(state_variance(state, flag))
    if sd == 0.0:
        return np.zeros(n, dtype=np.float64)
    return (data - state.mean) / sd


def _divisor(rows: int, flag: int, caller: str) -> int:
    divisor = rows - flag
    if divisor <= 0:
        warnings.warn(
            f"{caller}: divisor rows - flag = {divisor}, result contains inf/NaN",
            RuntimeWarning,
            stacklevel=3,
        )
    return divisor


def covariance(
    data: ArrayLike,
    rows: int,
    cols: int,
    flag: int = 1,
) -> NDArray[np.float64]:
    """
    Covariance matrix of the columns of an observation matrix.

    Centers each column on its mean, then Cov = centeredᵗ·centered / (rows - flag).

    Parameters
    ----------
    data : array-like
        Flat row-major (rows, cols) matrix; rows are observations.
    rows, cols : int
        Dimensions.
    flag : int
        0 for population, 1 for sample normalization.

    Returns
    -------
    Flat row-major (cols, cols) matrix. rows == flag is not special-cased:
    the zero divisor propagates as inf/NaN.
    """
    design = MatrixDesign.from_buffer(data, rows, cols, name='data')
    flag = check_normalization_flag(flag)
    divisor = _divisor(design.rows, flag, 'covariance')

    x = design.as_matrix()
    with np.errstate(divide='ignore', invalid='ignore'):
        means = x.sum(axis=0) / design.rows
        centered = x - means
        gram = multiply(
            centered.T.reshape(-1), centered.reshape(-1),
            design.cols, design.rows, design.cols,
        )
        return gram / divisor


def correlation(data: ArrayLike, rows: int, cols: int) -> NDArray[np.float64]:
    """
    Pearson correlation matrix, cov[i, j] / (sd_i * sd_j).

    Columns with zero variance give NaN in their row and column.
    """
    cov = covariance(data, rows, cols, 1).reshape(cols, cols)
    with np.errstate(divide='ignore', invalid='ignore'):
        sd = np.sqrt(np.diag(cov))
        return (cov / np.outer(sd, sd)).reshape(-1)


def describe(x: ArrayLike, flag: int = 1) -> DescriptiveSolution:
    """
    Mean, variance and standard deviation from a single Welford pass.

    Parameters
    ----------
    x : array-like
        Flat sequence of numbers.
    flag : int
        0 for population, 1 for sample normalization.

    Returns
    -------
    DescriptiveSolution. Undefined statistics are NaN and are noted in
    its warnings.
    """
    timer = Timer()
    timer.start()

    flag = check_normalization_flag(flag)
    data = check_buffer(x, "x")
    warnings_list: list[str] = []

    with timer.section('accumulate'):
        state = accumulate(data)

    with timer.section('finalize'):
        var = state_variance(state, flag)
        params = MomentParams(
            n=state.n,
            mean=state_mean(state),
            variance=var,
            sd=math.sqrt(var),
            flag=flag,
        )

    if state.n == 0:
        warnings_list.append("empty input: mean, variance and sd are undefined")
    elif state.n == 1 and flag == 1:
        warnings_list.append("single observation: sample variance is undefined")

    timer.stop()

    result = Result(
        params=params,
        info={'method': 'welford', 'flag': flag},
        timing=timer.result(),
        backend_name='cpu_welford',
        warnings=tuple(warnings_list),
    )
    return DescriptiveSolution(_result=result)
