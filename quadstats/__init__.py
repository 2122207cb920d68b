"""
quadstats: a small numerical-statistics engine.

Descriptive statistics, Simpson's-rule quadrature, quadrature-derived
normal and chi-square CDFs, and Pearson's chi-square goodness-of-fit test.
Built for checking the output of random number generators and
simulations against theoretical frequencies.

Submodules:
    descriptive: Mean, variance, covariance, autocovariance
    integrate: Composite Simpson's rule
    distributions: Normal and chi-square CDFs, incomplete gamma
    hypothesis: Chi-square goodness-of-fit test
"""

__version__ = "0.1.0"

from quadstats import descriptive
from quadstats import integrate
from quadstats import distributions
from quadstats import hypothesis

__all__ = [
    "__version__",
    "descriptive",
    "integrate",
    "distributions",
    "hypothesis",
]
