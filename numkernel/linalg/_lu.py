"""
Doolittle LU elimination with partial pivoting.

This is the single elimination routine behind lu(), determinant(),
inverse(), solve() and factorize(), so the four always agree on pivot
choice, permutation sign and zero-pivot handling.

Factored form: one (rows, cols) array holding U on and above the diagonal
and the multipliers of L below it. L's unit diagonal is implicit.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def _pivot_row(column: NDArray[np.float64]) -> int:
    """
    Offset of the first entry with strictly greatest magnitude.

    Equal magnitudes keep the earliest row. NaN never displaces the
    current candidate, and a NaN candidate is never displaced.
    """
    magnitudes = np.abs(column)
    if np.isnan(magnitudes[0]):
        return 0
    magnitudes = np.where(np.isnan(magnitudes), -np.inf, magnitudes)
    # argmax returns the first occurrence of the maximum
    return int(np.argmax(magnitudes))


def doolittle(work: NDArray[np.float64]) -> tuple[NDArray[np.intp], int]:
    """
    Factor ``work`` in place as P·A = L·U.

    For each pivot column j the row with the largest |work[i, j]|, i >= j,
    is swapped into position j. An exactly zero pivot means the rest of the
    column is zero too; elimination for that column is skipped and the
    zero stays on the diagonal.

    Args:
        work: (rows, cols) float64 array, overwritten with the factors

    Returns:
        (pivots, sign): pivots[i] is the original row now at row i;
        sign is +1 or -1 for an even or odd number of swaps
    """
    rows, cols = work.shape
    pivots = np.arange(rows)
    sign = 1

    for j in range(min(rows, cols)):
        p = j + _pivot_row(work[j:, j])

        if p != j:
            work[[j, p]] = work[[p, j]]
            pivots[[j, p]] = pivots[[p, j]]
            sign = -sign

        pivot = work[j, j]
        if pivot != 0.0:
            work[j + 1:, j] /= pivot
            work[j + 1:, j + 1:] -= np.outer(work[j + 1:, j], work[j, j + 1:])

    return pivots, sign


def first_zero_pivot(lu: NDArray[np.float64]) -> int | None:
    """Column of the first exactly-zero diagonal entry, or None."""
    zeros = np.flatnonzero(np.diag(lu) == 0.0)
    if zeros.size == 0:
        return None
    return int(zeros[0])


def pivot_product(lu: NDArray[np.float64], sign: int) -> float:
    """Signed product of the diagonal of a square factorization."""
    det = float(sign)
    for value in np.diag(lu):
        det *= float(value)
    return det


def is_singular(lu: NDArray[np.float64], sign: int) -> bool:
    """
    A square factorization is singular when a pivot is exactly zero or
    the pivot product underflows to zero.
    """
    return first_zero_pivot(lu) is not None or pivot_product(lu, sign) == 0.0


def lu_solve(
    lu: NDArray[np.float64],
    pivots: NDArray[np.intp],
    rhs: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Solve A·X = B given the factors of A.

    Forward substitution on the unit-lower L, then back substitution on U,
    for all columns of B at once.

    Args:
        lu: (n, n) factored form from doolittle()
        pivots: row permutation from doolittle()
        rhs: (n, m) right-hand sides

    Returns:
        (n, m) solution
    """
    n = lu.shape[0]
    x = rhs[pivots].copy()

    for i in range(1, n):
        x[i] -= lu[i, :i] @ x[:i]

    for i in range(n - 1, -1, -1):
        x[i] = (x[i] - lu[i, i + 1:] @ x[i + 1:]) / lu[i, i]

    return x


def split_factors(
    lu: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Expand the factored form into explicit L (rows x k) and U (k x cols),
    k = min(rows, cols).
    """
    rows, cols = lu.shape
    k = min(rows, cols)
    lower = np.tril(lu[:, :k], -1)
    lower[np.arange(k), np.arange(k)] = 1.0
    upper = np.triu(lu[:k, :])
    return lower, upper
