"""
Cumulative normal distribution by quadrature.

Both functions integrate the normal density with Simpson's rule at
NORMAL_RESOLUTION sub-intervals. Accuracy is engineering grade: fine for
the z-scores used in standard tests, not certified deep in the tails.
"""

from __future__ import annotations

from quadstats.core.compute.resolution import NORMAL_RESOLUTION
from quadstats.core.validation import check_positive
from quadstats.distributions._integrands import NormalDensity
from quadstats.integrate.simpson import simpson


def pnorm_one_tailed(
    z: float,
    mean: float = 0.0,
    sd: float = 1.0,
    *,
    resolution: int = NORMAL_RESOLUTION,
) -> float:
    """
    P(X <= z) for X ~ Normal(mean, sd).

    Integrates the density from the mean to z and adds the result to 0.5
    (or subtracts it when z lies below the mean). Exactly 0.5 at z == mean.

    Parameters
    ----------
    z : float
        Upper limit.
    mean : float
        Distribution mean.
    sd : float
        Standard deviation, must be positive.
    resolution : int
        Simpson sub-intervals.

    Returns
    -------
    float
    """
    sd = check_positive(sd, "sd")
    z = float(z)
    mean = float(mean)

    area = simpson(NormalDensity(mean, sd), mean, z, resolution)
    return 0.5 + area if z > mean else 0.5 - area


def pnorm_two_tailed(
    a: float,
    b: float,
    mean: float = 0.0,
    sd: float = 1.0,
    *,
    resolution: int = NORMAL_RESOLUTION,
) -> float:
    """
    Probability mass of Normal(mean, sd) between a and b.

    The order of a and b does not matter; the mass is always returned as
    a non-negative number. Typical use is the symmetric interval
    ``(mean - d, mean + d)``, with ``1 - pnorm_two_tailed(...)`` as the
    two-sided p-value.
    """
    sd = check_positive(sd, "sd")
    return simpson(NormalDensity(float(mean), sd), a, b, resolution)
