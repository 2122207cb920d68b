"""
Integrand callables for the distribution functions.

Each integrand is a frozen dataclass holding its own parameters, so the
distribution context travels with the function value instead of living
in shared module state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np


@dataclass(frozen=True)
class NormalDensity:
    """Density of Normal(mean, sd), callable on scalars or arrays."""
    mean: float
    sd: float
    _scale: float = field(init=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "_scale", 1.0 / (self.sd * math.sqrt(2.0 * math.pi)))

    def __call__(self, x):
        z = (np.asarray(x, dtype=np.float64) - self.mean) / self.sd
        return self._scale * np.exp(-0.5 * z * z)


@dataclass(frozen=True)
class GammaIntegrand:
    """t^(k-1) e^(-t), the integrand of the incomplete gamma function."""
    k: float

    def __call__(self, t):
        t = np.asarray(t, dtype=np.float64)
        # 0^(k-1) is inf for k < 1 and t^(k-1) overflows for large k;
        # both are reported by the caller, not here.
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return np.power(t, self.k - 1.0) * np.exp(-t)


def erf_integrand(t):
    """e^(-t^2), the integrand of the Gauss error function."""
    t = np.asarray(t, dtype=np.float64)
    return np.exp(-t * t)
