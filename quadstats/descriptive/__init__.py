"""
Descriptive statistics module.

Public API:
    minimum(x), maximum(x), value_range(x)
    mean(x)
    var(x, selection)       - Two-pass variance
    var_raw(x, selection)   - Single-pass variance
    sd(x, selection)        - Standard deviation
    mean_sd(x, selection)   - Single-pass (mean, sd)
    cov(x, y, n, selection) - Covariance of the first n pairs
    acov(x, lag, ...)       - Lag-k autocovariance
    acf(x, lag, ...)        - Lag-k autocorrelation coefficient
    describe(x)             - All of the above for one sample
"""

from quadstats.descriptive._common import Selection
from quadstats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from quadstats.descriptive.solvers import (
    minimum,
    maximum,
    value_range,
    mean,
    var,
    var_raw,
    sd,
    mean_sd,
    cov,
    acov,
    acf,
    describe,
)

__all__ = [
    "Selection",
    "minimum",
    "maximum",
    "value_range",
    "mean",
    "var",
    "var_raw",
    "sd",
    "mean_sd",
    "cov",
    "acov",
    "acf",
    "describe",
    "DescriptiveParams",
    "DescriptiveSolution",
]
