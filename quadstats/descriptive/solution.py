"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper returned
by describe().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from quadstats.core.result import Result
from quadstats.descriptive._common import Selection


@dataclass(frozen=True)
class DescriptiveParams:
    """Parameter payload for describe()."""
    n: int
    mean: float
    variance: float
    sd: float
    min: float
    max: float
    range: float
    selection: Selection


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float:
        """Variance with the denominator chosen by selection."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        return self._result.params.sd

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def selection(self) -> Selection:
        return self._result.params.selection

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    def summary(self) -> str:
        """Two-column summary table."""
        p = self._result.params
        rows = [
            ("n", f"{p.n:d}"),
            ("Mean", f"{p.mean:.6f}"),
            ("Variance", f"{p.variance:.6f}"),
            ("Std. Dev.", f"{p.sd:.6f}"),
            ("Min.", f"{p.min:.6f}"),
            ("Max.", f"{p.max:.6f}"),
            ("Range", f"{p.range:.6f}"),
        ]
        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)
        lines = [f"({p.selection.name.lower()} denominator)"]
        for label, value in rows:
            lines.append(f"{label:<{label_width}}  {value:>{value_width}}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(n={p.n}, mean={p.mean:.4g}, "
            f"sd={p.sd:.4g})"
        )
