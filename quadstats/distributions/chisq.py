"""
Cumulative chi-square distribution.

    pchisq(X, df) = gamma_lower(df/2, X/2) / Gamma(df/2)

with two special cases that avoid the general path:

- df == 1: the ratio reduces to the error function, erf(sqrt(X/2)),
  computed by integrating e^(-t^2). The incomplete gamma integrand
  t^(-1/2) e^(-t) is infinite at t = 0, so the general path cannot be
  used here.
- df == 2: closed form 1 - e^(-X/2).

The general path integrates t^(k-1) e^(-t) at GAMMA_RESOLUTION nodes.
Its numerical limit: t^(k-1) outgrows float64 when both df and X are
large, and the result becomes NaN. Keep df below ~100 and X below
~100000 (smaller X for larger df).
"""

from __future__ import annotations

import math
import warnings

from scipy import special as sp_special

from quadstats.core.compute.resolution import (
    NORMAL_RESOLUTION,
    GAMMA_RESOLUTION,
    MAX_RELIABLE_DF,
    MAX_RELIABLE_X,
)
from quadstats.core.exceptions import ValidationError
from quadstats.core.validation import check_integer
from quadstats.distributions._integrands import GammaIntegrand, erf_integrand
from quadstats.integrate.simpson import simpson


_TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)


def lower_incomplete_gamma(
    k: float,
    x: float,
    *,
    resolution: int = GAMMA_RESOLUTION,
) -> float:
    """
    Lower incomplete gamma function, integral of t^(k-1) e^(-t) over [0, x].

    Parameters
    ----------
    k : float
        Shape, must be positive. For k < 1 the integrand is infinite at
        t = 0 and the quadrature returns inf.
    x : float
        Upper limit, must be non-negative.
    resolution : int
        Simpson sub-intervals.

    Returns
    -------
    float
        May be NaN or inf outside the reliable range; a RuntimeWarning is
        issued in that case.
    """
    k = float(k)
    x = float(x)
    if not k > 0.0:
        raise ValidationError(f"k: must be positive, got {k}")
    if not x >= 0.0:
        raise ValidationError(f"x: must be non-negative, got {x}")

    value = _lower_gamma(k, x, resolution)
    if not math.isfinite(value):
        warnings.warn(
            f"lower incomplete gamma is not finite for k={k:g}, x={x:g}; "
            f"the integrand t^(k-1) e^(-t) is outside float64 range",
            RuntimeWarning,
            stacklevel=2,
        )
    return value


def _lower_gamma(k: float, x: float, n: int) -> float:
    return simpson(GammaIntegrand(k), 0.0, x, n)


def pchisq(
    X: float,
    df: int,
    *,
    resolution: int | None = None,
) -> float:
    """
    P(Q <= X) for Q ~ chi-square with df degrees of freedom.

    Parameters
    ----------
    X : float
        Upper limit. X <= 0 gives 0.0.
    df : int
        Degrees of freedom, a non-negative integer. df == 0 is treated
        as df == 1.
    resolution : int or None
        Simpson sub-intervals. None uses NORMAL_RESOLUTION for df == 1
        and GAMMA_RESOLUTION for df >= 3. Ignored for df == 2.

    Returns
    -------
    float
        NaN when the incomplete gamma integrand overflows (large df and
        X); a RuntimeWarning names the reliable range.
    """
    df = check_integer(df, "df", minimum=0)
    X = float(X)
    if math.isnan(X):
        return X
    if X <= 0.0:
        return 0.0
    if df == 0:
        df = 1

    if df == 1:
        n = NORMAL_RESOLUTION if resolution is None else resolution
        return _TWO_OVER_SQRT_PI * simpson(erf_integrand, 0.0, math.sqrt(X / 2.0), n)

    if df == 2:
        return 1.0 - math.exp(-X / 2.0)

    n = GAMMA_RESOLUTION if resolution is None else resolution
    k = df / 2.0
    value = _lower_gamma(k, X / 2.0, n) / float(sp_special.gamma(k))

    if not math.isfinite(value):
        warnings.warn(
            f"pchisq is not finite for X={X:g}, df={df}; keep df below "
            f"{MAX_RELIABLE_DF} and X below {MAX_RELIABLE_X:g}",
            RuntimeWarning,
            stacklevel=2,
        )
    return value
