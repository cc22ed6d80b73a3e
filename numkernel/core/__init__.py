"""
Core infrastructure for numkernel.

This module provides shared abstractions used by the linalg and descriptive
submodules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Buffer, dimension and flag validators
    compute: Timing and numerical constants
"""

from numkernel.core.result import Result
from numkernel.core.exceptions import (
    NumKernelError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "NumKernelError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
