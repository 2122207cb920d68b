"""
Descriptive statistics over a single Sample.

Every function accepts any 1D array-like of real numbers with at least
one element; an empty sample raises ValidationError. Inputs are copied
into float64 arrays and never retained.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import ArrayLike

from quadstats.core.exceptions import DimensionError, ValidationError
from quadstats.core.result import Result
from quadstats.core.validation import check_integer, check_positive, check_sample
from quadstats.descriptive._common import Selection, check_denominator, resolve_selection
from quadstats.descriptive.solution import DescriptiveParams, DescriptiveSolution


def minimum(x: ArrayLike) -> float:
    """Smallest value in the sample."""
    return float(np.min(check_sample(x, "x")))


def maximum(x: ArrayLike) -> float:
    """Largest value in the sample."""
    return float(np.max(check_sample(x, "x")))


def value_range(x: ArrayLike) -> float:
    """max(x) - min(x)."""
    arr = check_sample(x, "x")
    return float(np.max(arr) - np.min(arr))


def mean(x: ArrayLike) -> float:
    """Arithmetic mean."""
    arr = check_sample(x, "x")
    return float(np.sum(arr) / arr.shape[0])


def var(x: ArrayLike, selection: Selection | str = Selection.SAMPLE) -> float:
    """
    Variance, two-pass.

    Sum of squared deviations from the mean divided by n - selection.

    Parameters
    ----------
    x : array-like
        Sample.
    selection : Selection or str
        SAMPLE (default, n - 1) or POPULATION (n).

    Raises
    ------
    ValidationError
        If n - selection <= 0 (e.g. a single value with SAMPLE).
    """
    arr = check_sample(x, "x")
    sel = resolve_selection(selection)
    denom = check_denominator(arr.shape[0], sel, "var")
    # Shift by the first value so a constant sample gives exactly 0.
    shifted = arr - arr[0]
    dev = shifted - np.sum(shifted) / arr.shape[0]
    return float(np.sum(dev * dev) / denom)


def var_raw(x: ArrayLike, selection: Selection | str = Selection.SAMPLE) -> float:
    """
    Variance, single pass from sum(x) and sum(x^2).

    Faster for long samples but loses precision when the mean is large
    relative to the spread. Cancellation below zero is clamped to 0.
    """
    arr = check_sample(x, "x")
    sel = resolve_selection(selection)
    denom = check_denominator(arr.shape[0], sel, "var_raw")
    return _raw_sum_of_squares(arr) / denom


def sd(x: ArrayLike, selection: Selection | str = Selection.SAMPLE) -> float:
    """Standard deviation, sqrt(var(x, selection))."""
    return math.sqrt(var(x, selection))


def mean_sd(
    x: ArrayLike,
    selection: Selection | str = Selection.SAMPLE,
) -> tuple[float, float]:
    """
    Mean and standard deviation in one traversal.

    Uses the same sum / sum-of-squares formula as var_raw, trading
    numerical stability for speed. Prefer mean() and sd() for data with
    a large offset.

    Returns
    -------
    (mean, sd)
    """
    arr = check_sample(x, "x")
    sel = resolve_selection(selection)
    n = arr.shape[0]
    denom = check_denominator(n, sel, "mean_sd")
    return float(np.sum(arr) / n), math.sqrt(_raw_sum_of_squares(arr) / denom)


def _raw_sum_of_squares(arr: np.ndarray) -> float:
    total = float(np.sum(arr))
    total_sq = float(np.dot(arr, arr))
    return max(total_sq - total * total / arr.shape[0], 0.0)


def cov(
    x: ArrayLike,
    y: ArrayLike,
    n: int | None = None,
    selection: Selection | str = Selection.SAMPLE,
) -> float:
    """
    Covariance of the first n elements of x and y.

    Parameters
    ----------
    x, y : array-like
        Samples. Each must hold at least n elements.
    n : int or None
        Number of leading pairs to use. Defaults to len(x).
    selection : Selection or str
        SAMPLE (default, n - 1) or POPULATION (n).

    Raises
    ------
    DimensionError
        If x or y is shorter than n.

    Notes
    -----
    The correlation coefficient is cov(x, y) / (sd(x) * sd(y)).
    """
    x_arr = check_sample(x, "x")
    y_arr = check_sample(y, "y")
    sel = resolve_selection(selection)

    if n is None:
        n = x_arr.shape[0]
    n = check_integer(n, "n", minimum=1)
    if x_arr.shape[0] < n or y_arr.shape[0] < n:
        raise DimensionError(
            f"cov: x and y need at least n={n} elements, "
            f"got x={x_arr.shape[0]}, y={y_arr.shape[0]}"
        )
    denom = check_denominator(n, sel, "cov")

    xs = x_arr[:n]
    ys = y_arr[:n]
    dx = xs - np.sum(xs) / n
    dy = ys - np.sum(ys) / n
    return float(np.dot(dx, dy) / denom)


def acov(
    x: ArrayLike,
    lag: int,
    selection: Selection | str = Selection.POPULATION,
    center: float | None = None,
) -> float:
    """
    Lag-k autocovariance.

    Covariance of x[0:n-lag] against x[lag:n], both views centred on the
    same value, divided by n - lag - selection.

    Parameters
    ----------
    x : array-like
        Sample of n values (n counts elements, not pairs).
    lag : int
        0 <= lag < n.
    selection : Selection or str
        POPULATION (default) or SAMPLE.
    center : float or None
        Centring constant. None computes the mean of the full sample
        first. Pass the known population mean when x is a draw from a
        distribution with known parameters (e.g. 0.5 for U(0, 1)).

    Returns
    -------
    float
    """
    arr = check_sample(x, "x")
    n = arr.shape[0]
    lag = check_integer(lag, "lag", minimum=0)
    if lag >= n:
        raise ValidationError(f"lag: must be less than the sample size {n}, got {lag}")
    sel = resolve_selection(selection)
    denom = check_denominator(n - lag, sel, "acov")

    m = float(np.sum(arr) / n) if center is None else float(center)
    head = arr[:n - lag] - m
    tail = arr[lag:] - m
    return float(np.dot(head, tail) / denom)


def acf(
    x: ArrayLike,
    lag: int,
    center: float | None = None,
    variance: float | None = None,
) -> float:
    """
    Lag-k autocorrelation coefficient, acov(x, lag, POPULATION, center) / variance.

    variance defaults to the population variance of x. Pass the known
    population variance together with center to test a generator with
    known parameters (1/12 for U(0, 1)).
    """
    if variance is None:
        variance = var(x, Selection.POPULATION)
        if variance == 0.0:
            raise ValidationError("acf: sample has zero variance")
    else:
        variance = check_positive(variance, "variance")
    return acov(x, lag, Selection.POPULATION, center) / variance


def describe(
    x: ArrayLike,
    selection: Selection | str = Selection.SAMPLE,
) -> DescriptiveSolution:
    """
    All single-sample statistics at once.

    Parameters
    ----------
    x : array-like
        Sample with at least 1 element (2 for SAMPLE selection).
    selection : Selection or str
        Denominator for var and sd.

    Returns
    -------
    DescriptiveSolution
    """
    arr = check_sample(x, "x")
    sel = resolve_selection(selection)
    lo = float(np.min(arr))
    hi = float(np.max(arr))
    variance = var(arr, sel)

    params = DescriptiveParams(
        n=int(arr.shape[0]),
        mean=mean(arr),
        variance=variance,
        sd=math.sqrt(variance),
        min=lo,
        max=hi,
        range=hi - lo,
        selection=sel,
    )
    result = Result(
        params=params,
        info={'selection': sel.name.lower()},
        timing=None,
        backend_name='cpu_descriptive',
    )
    return DescriptiveSolution(_result=result)
