"""
MatrixDesign: validated "buffer + shape" value.

Wraps a flat row-major buffer together with its dimensions. Every matrix
operation builds one of these before touching the data, so dimension
mistakes surface as DimensionError instead of out-of-bounds reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from numkernel.core.exceptions import DimensionError
from numkernel.core.validation import check_buffer, check_dimension, check_length


@dataclass(frozen=True)
class MatrixDesign:
    """
    Flat row-major buffer of length rows*cols with its shape.

    Immutable after construction. Element (i, j) lives at offset i*cols + j.

    Construction:
        MatrixDesign.from_buffer(a, rows, cols, name='a')
        MatrixDesign.square(a, n, name='a')
    """
    _buffer: NDArray[np.float64]
    _rows: int
    _cols: int

    @classmethod
    def from_buffer(
        cls,
        buffer: ArrayLike,
        rows: int,
        cols: int,
        *,
        name: str = 'a',
    ) -> MatrixDesign:
        """
        Build a MatrixDesign from a flat buffer and explicit dimensions.

        Parameters
        ----------
        buffer : array-like
            Flat sequence of rows*cols numbers, row-major.
        rows, cols : int
            Matrix dimensions. Never inferred from the buffer.
        name : str
            Parameter name used in error messages.
        """
        rows = check_dimension(rows, f"{name} rows")
        cols = check_dimension(cols, f"{name} cols")
        data = check_buffer(buffer, name)
        check_length(data, rows * cols, name)
        return cls(_buffer=data, _rows=rows, _cols=cols)

    @classmethod
    def square(cls, buffer: ArrayLike, n: int, *, name: str = 'a') -> MatrixDesign:
        """Build an n x n MatrixDesign."""
        return cls.from_buffer(buffer, n, n, name=name)

    @property
    def buffer(self) -> NDArray[np.float64]:
        """Flat row-major values."""
        return self._buffer

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    def as_matrix(self) -> NDArray[np.float64]:
        """Fresh 2D (rows, cols) copy, safe to modify in place."""
        return self._buffer.reshape(self._rows, self._cols).copy()

    def require_square(self, name: str = 'a') -> None:
        """Raise DimensionError unless rows == cols."""
        if not self.is_square:
            raise DimensionError(
                f"{name}: expected a square matrix, got {self._rows}x{self._cols}"
            )

    def __repr__(self) -> str:
        return f"MatrixDesign(rows={self._rows}, cols={self._cols})"
