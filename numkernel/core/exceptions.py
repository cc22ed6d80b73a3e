"""
Exception hierarchy for numkernel.

All exceptions inherit from NumKernelError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class NumKernelError(Exception):
    """Base exception for all numkernel errors."""
    pass


class ValidationError(NumKernelError):
    """
    Input validation failed.

    Raised when caller-provided buffers, dimensions or flags fail
    validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Buffer length or shape is inconsistent with the stated dimensions.

    Raised when a flat buffer does not hold exactly rows*cols values, or
    when an operation needs a square matrix and gets a rectangular one.
    """
    pass


class NumericalError(NumKernelError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an operation requires invertibility (solve, strict inverse)
    but elimination produced a zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Column of the first zero pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
