"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper for
describe().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from numkernel.core.result import Result


@dataclass(frozen=True)
class MomentParams:
    """
    Parameter payload for describe().

    All moments come from the same Welford pass.
    """
    n: int
    mean: float
    variance: float
    sd: float
    flag: int


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics result.

    Wraps Result[MomentParams] and provides convenient accessors.
    """
    _result: Result[MomentParams]

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float:
        """Variance with divisor n - flag."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        return self._result.params.sd

    @property
    def flag(self) -> int:
        """0 for population, 1 for sample normalization."""
        return self._result.params.flag

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

    def summary(self) -> str:
        """Short plain-text table of the moments."""
        divisor = 'n' if self.flag == 0 else 'n-1'
        rows = [
            ("n", f"{self.n:d}"),
            ("mean", f"{self.mean:.6g}"),
            (f"variance ({divisor})", f"{self.variance:.6g}"),
            ("sd", f"{self.sd:.6g}"),
        ]
        width = max(len(label) for label, _ in rows)
        lines = [f"{label:<{width}}  {value}" for label, value in rows]
        for w in self.warnings:
            lines.append(f"warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(n={self.n}, mean={self.mean:.6g}, "
            f"sd={self.sd:.6g}, flag={self.flag})"
        )
