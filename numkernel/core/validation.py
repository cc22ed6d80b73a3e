"""
Input validation utilities for numkernel.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from numkernel.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    # All kernels run in double precision
    return result.astype(np.float64, copy=False)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_buffer(buffer: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate a flat row-major buffer and return it as a 1D float64 array.

    Args:
        buffer: Flat sequence of numbers
        name: Parameter name for error messages

    Raises:
        ValidationError: If the buffer is not numeric
        DimensionError: If the buffer is not 1D
    """
    result = check_array(buffer, name)
    check_1d(result, name)
    return result


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a dimension is a non-negative integer.

    Booleans are rejected even though they are integers in Python, since
    passing True/False as a shape is always a caller mistake.

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_length(
    array: NDArray[np.floating[Any]],
    expected: int,
    name: str,
) -> None:
    """
    Verify a flat buffer holds exactly the expected number of values.

    Raises:
        DimensionError: If the length differs
    """
    if array.shape[0] != expected:
        raise DimensionError(
            f"{name}: expected {expected} values, got {array.shape[0]}"
        )


def check_normalization_flag(flag: Any, name: str = 'flag') -> int:
    """
    Verify a normalization flag is 0 (population) or 1 (sample).

    Returns:
        The flag as a plain int

    Raises:
        ValidationError: If flag is anything other than 0 or 1
    """
    if isinstance(flag, (bool, np.bool_)) or not isinstance(flag, numbers.Integral):
        raise ValidationError(
            f"{name}: expected normalization flag 0 or 1, got {flag!r}"
        )
    if flag not in (0, 1):
        raise ValidationError(
            f"{name}: expected normalization flag 0 or 1, got {flag}"
        )
    return int(flag)
