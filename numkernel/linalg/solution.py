"""
LU factorization solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkernel.core.result import Result
from numkernel.core.exceptions import SingularMatrixError
from numkernel.core.compute.tolerances import DETERMINANT_ZERO_SNAP
from numkernel.core.validation import check_buffer, check_dimension, check_length
from numkernel.linalg._lu import (
    first_zero_pivot, is_singular, lu_solve, pivot_product, split_factors,
)

if TYPE_CHECKING:
    from numkernel.linalg.design import MatrixDesign


@dataclass(frozen=True)
class LUParams:
    """
    Parameter payload for an LU factorization P·A = L·U.

    Attributes:
        lu: (rows, cols) factored form, U on and above the diagonal,
            multipliers of L below it
        pivots: pivots[i] is the row of A that ended up in row i
        sign: +1 or -1, parity of the row swaps
    """
    lu: NDArray[np.floating[Any]]
    pivots: NDArray[np.integer[Any]]
    sign: int

    @property
    def rows(self) -> int:
        return self.lu.shape[0]

    @property
    def cols(self) -> int:
        return self.lu.shape[1]

    @property
    def lower(self) -> NDArray[np.floating[Any]]:
        """Unit lower-triangular factor, shape (rows, min(rows, cols))."""
        return split_factors(self.lu)[0]

    @property
    def upper(self) -> NDArray[np.floating[Any]]:
        """Upper-triangular factor, shape (min(rows, cols), cols)."""
        return split_factors(self.lu)[1]

    @property
    def permutation_matrix(self) -> NDArray[np.floating[Any]]:
        """P such that P @ A == L @ U."""
        perm = np.zeros((self.rows, self.rows), dtype=np.float64)
        perm[np.arange(self.rows), self.pivots] = 1.0
        return perm

    def encode(self) -> NDArray[np.float64]:
        """Flat [sign, pivots..., LU row-major...] layout returned by lu()."""
        return np.concatenate((
            np.array([float(self.sign)]),
            self.pivots.astype(np.float64),
            self.lu.ravel(),
        ))


def decode_lu(encoded: ArrayLike, rows: int, cols: int) -> LUParams:
    """
    Unpack the flat output of lu() back into LUParams.

    Parameters
    ----------
    encoded : array-like
        Flat buffer of length 1 + rows + rows*cols.
    rows, cols : int
        Dimensions of the factored matrix.

    Raises
    ------
    DimensionError
        If the buffer length does not match the dimensions.
    """
    rows = check_dimension(rows, "rows")
    cols = check_dimension(cols, "cols")
    data = check_buffer(encoded, "encoded")
    check_length(data, 1 + rows + rows * cols, "encoded")

    return LUParams(
        lu=data[1 + rows:].reshape(rows, cols).copy(),
        pivots=data[1:1 + rows].astype(np.intp),
        sign=int(data[0]),
    )


@dataclass
class LUSolution:
    """
    User-facing LU factorization result.

    Wraps Result[LUParams] and derives determinant, inverse and solves
    from the stored factors without refactoring.
    """
    _result: Result[LUParams]
    _design: 'MatrixDesign'

    # --- Factors ---

    @property
    def params(self) -> LUParams:
        return self._result.params

    @property
    def lu(self) -> NDArray[np.floating[Any]]:
        """Factored form, shape (rows, cols)."""
        return self._result.params.lu

    @property
    def lower(self) -> NDArray[np.floating[Any]]:
        return self._result.params.lower

    @property
    def upper(self) -> NDArray[np.floating[Any]]:
        return self._result.params.upper

    @property
    def pivots(self) -> NDArray[np.integer[Any]]:
        return self._result.params.pivots

    @property
    def sign(self) -> int:
        return self._result.params.sign

    @property
    def permutation_matrix(self) -> NDArray[np.floating[Any]]:
        return self._result.params.permutation_matrix

    def encode(self) -> NDArray[np.float64]:
        """Same flat layout as lu()."""
        return self._result.params.encode()

    # --- Square-matrix derived quantities ---

    def _require_square(self) -> None:
        self._design.require_square('a')

    @property
    def is_singular(self) -> bool:
        """True when a pivot is zero or the pivot product underflows."""
        self._require_square()
        return is_singular(self.lu, self.sign)

    def determinant(self) -> float:
        """Signed pivot product, with |det| < 1e-15 reported as 0.0."""
        self._require_square()
        det = pivot_product(self.lu, self.sign)
        if abs(det) < DETERMINANT_ZERO_SNAP:
            return 0.0
        return det

    def _raise_if_singular(self) -> None:
        if not is_singular(self.lu, self.sign):
            return
        zero = first_zero_pivot(self.lu)
        if zero is not None:
            reason = f"zero pivot at column {zero}"
        else:
            reason = "pivot product underflows to zero"
        raise SingularMatrixError(
            f"a: matrix is singular ({self._design.rows}x{self._design.cols}), {reason}",
            matrix_name='a',
            pivot_index=zero,
        )

    def inverse(self) -> NDArray[np.float64]:
        """
        Inverse as a flat row-major buffer.

        Raises
        ------
        SingularMatrixError
            If the factorization is singular.
        """
        self._require_square()
        self._raise_if_singular()
        n = self._design.rows
        return lu_solve(self.lu, self.pivots, np.eye(n)).ravel()

    def solve(self, b: ArrayLike, nrhs: int = 1) -> NDArray[np.float64]:
        """
        Solve A·X = B for a flat row-major B of shape (n, nrhs).

        Raises
        ------
        DimensionError
            If B does not hold n*nrhs values.
        SingularMatrixError
            If the factorization is singular.
        """
        self._require_square()
        n = self._design.rows
        nrhs = check_dimension(nrhs, "nrhs")
        rhs = check_buffer(b, "b")
        check_length(rhs, n * nrhs, "b")
        self._raise_if_singular()
        return lu_solve(self.lu, self.pivots, rhs.reshape(n, nrhs)).ravel()

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        return (
            f"LUSolution(rows={self._design.rows}, cols={self._design.cols}, "
            f"sign={self.sign})"
        )
