"""
Distribution functions module.

Cumulative distribution functions computed by Simpson quadrature.

Public API:
    pnorm_one_tailed(z, mean, sd)     - P(X <= z), X ~ Normal(mean, sd)
    pnorm_two_tailed(a, b, mean, sd)  - Normal mass between a and b
    lower_incomplete_gamma(k, x)      - integral of t^(k-1) e^(-t) over [0, x]
    pchisq(X, df)                     - Chi-square CDF
"""

from quadstats.distributions.normal import pnorm_one_tailed, pnorm_two_tailed
from quadstats.distributions.chisq import lower_incomplete_gamma, pchisq
from quadstats.distributions._integrands import NormalDensity, GammaIntegrand

__all__ = [
    "pnorm_one_tailed",
    "pnorm_two_tailed",
    "lower_incomplete_gamma",
    "pchisq",
    "NormalDensity",
    "GammaIntegrand",
]
