"""
Generic result container for numkernel computations.

The Result class is the envelope used by the rich entry points
(factorize, describe). It carries timing, warnings and provenance next to
the domain-specific payload.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, shape, pivots)
    - timing is optional
    - Immutable (frozen=True)
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software stack that produced a result."""
    from numkernel import __version__

    return {
        'numkernel_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (LU factors, moments, ...)
        info: Structured metadata (method, shape, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the stack that produced the result

    Examples:
        >>> Result(
        ...     params=LUParams(lu=lu, pivots=piv, sign=-1),
        ...     info={'method': 'doolittle', 'rows': 3, 'cols': 3},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_lu'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
