"""
Solver dispatch for hypothesis tests.

Provides chisq_gof_test().
"""

from __future__ import annotations

from typing import Sequence
from numpy.typing import ArrayLike

from quadstats.core.exceptions import ValidationError
from quadstats.hypothesis._common import CategoryLabels
from quadstats.hypothesis.design import HypothesisDesign
from quadstats.hypothesis.solution import HTestSolution
from quadstats.hypothesis.backends.cpu import CPUHypothesisBackend


def _get_backend(backend: str = 'cpu'):
    """Select backend for hypothesis tests. Only 'cpu' exists."""
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def chisq_gof_test(
    observed: ArrayLike | HypothesisDesign,
    expected: ArrayLike | None = None,
    *,
    labels: CategoryLabels | Sequence[str] | None = None,
    alpha: float = 0.05,
    backend: str = 'cpu',
) -> HTestSolution:
    """
    Pearson's chi-square goodness-of-fit test.

    H0: the observed frequencies do not differ from the expected ones.

    Parameters
    ----------
    observed : array-like or HypothesisDesign
        Observed counts per category (non-negative). Can also be a
        pre-built HypothesisDesign, in which case the other data
        arguments are ignored.
    expected : array-like
        Expected counts per category, same length as observed, all
        strictly positive.
    labels : CategoryLabels or sequence of str, optional
        Category labels for the report. A plain sequence is used as the
        rows with an empty header.
    alpha : float
        Significance level for the reject verdict. Default 0.05.
    backend : str
        'cpu' (default).

    Returns
    -------
    HTestSolution
        statistic (X-squared), parameter {'df': size - 1}, p_value,
        reject, and per-category observed, expected, residuals and
        components. summary() renders the report.

    Raises
    ------
    ValidationError
        Fewer than 2 categories, negative observed counts, alpha outside
        (0, 1].
    DimensionError
        observed, expected or labels lengths differ.
    DivisionByZeroError
        An expected count is zero or negative.
    """
    if isinstance(observed, HypothesisDesign):
        design = observed
    else:
        if expected is None:
            raise ValidationError("expected frequencies are required for chisq_gof_test")
        design = HypothesisDesign.for_chisq_gof(
            observed, expected,
            labels=labels,
            alpha=alpha,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return HTestSolution(_result=result, _design=design)
