"""
HypothesisDesign: validated inputs for hypothesis tests.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import numpy as np
from numpy.typing import NDArray, ArrayLike

from quadstats.core.exceptions import DimensionError, DivisionByZeroError, ValidationError
from quadstats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
)
from quadstats.hypothesis._common import CategoryLabels


def _validate_alpha(alpha: float) -> float:
    """Validate significance level is in (0, 1]."""
    alpha = float(alpha)
    if not (0.0 < alpha <= 1.0):
        raise ValidationError(f"alpha must be in (0, 1], got {alpha}")
    return alpha


def _to_frequencies(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert to a finite 1D float64 array."""
    arr = check_array(x, name)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr.copy()


def _to_labels(
    labels: CategoryLabels | Sequence[str] | None,
    size: int,
) -> CategoryLabels | None:
    if labels is None:
        return None
    if not isinstance(labels, CategoryLabels):
        if isinstance(labels, str):
            raise ValidationError("labels must be a CategoryLabels or a sequence of strings")
        labels = CategoryLabels(header="", rows=tuple(labels))
    if len(labels.rows) != size:
        raise DimensionError(
            f"labels: expected {size} rows (one per category), got {len(labels.rows)}"
        )
    return labels


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Frequency table
    _observed: NDArray[np.floating[Any]] | None = None
    _expected: NDArray[np.floating[Any]] | None = None
    _labels: CategoryLabels | None = None

    # Test configuration
    _alpha: float = 0.05

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def observed(self) -> NDArray[np.floating[Any]] | None:
        return self._observed

    @property
    def expected(self) -> NDArray[np.floating[Any]] | None:
        return self._expected

    @property
    def labels(self) -> CategoryLabels | None:
        return self._labels

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def data_name(self) -> str:
        return self._data_name

    @property
    def size(self) -> int:
        """Number of categories."""
        return 0 if self._observed is None else int(self._observed.shape[0])

    # --- Factory classmethods ---

    @classmethod
    def for_chisq_gof(
        cls,
        observed: ArrayLike,
        expected: ArrayLike,
        *,
        labels: CategoryLabels | Sequence[str] | None = None,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """
        Build design for chisq_gof_test().

        observed and expected are parallel frequency sequences of the same
        length (at least 2). Observed counts must be non-negative; expected
        counts must be strictly positive since they are denominators.
        """
        alpha = _validate_alpha(alpha)
        obs = _to_frequencies(observed, "observed")
        exp = _to_frequencies(expected, "expected")
        check_consistent_length(obs, exp, names=("observed", "expected"))

        size = obs.shape[0]
        if size < 2:
            raise ValidationError(
                f"Need at least 2 categories for goodness-of-fit test "
                f"(df = size - 1 >= 1), got {size}"
            )
        if np.any(obs < 0):
            raise ValidationError("All observed counts must be non-negative")

        bad = np.flatnonzero(exp <= 0)
        if bad.size:
            i = int(bad[0])
            raise DivisionByZeroError(
                f"expected: all entries must be strictly positive, "
                f"got {exp[i]:g} at index {i}",
                name="expected",
                index=i,
                value=float(exp[i]),
            )

        return cls(
            test_type="chisq_gof",
            _observed=obs,
            _expected=exp,
            _labels=_to_labels(labels, size),
            _alpha=alpha,
            _data_name="observed and expected",
        )

    def __repr__(self) -> str:
        return f"HypothesisDesign(test_type={self.test_type!r}, size={self.size}, alpha={self._alpha:g})"
