"""
Quadrature resolution constants.

Each distribution function integrates with a fixed number of Simpson
sub-intervals. The defaults below are the package configuration; every
public function accepts a ``resolution=`` keyword to override them.

- NORMAL_RESOLUTION: normal density and the erf integrand (chi-square,
  df == 1). Smooth integrands over short intervals.
- GAMMA_RESOLUTION: lower incomplete gamma integrand t^(k-1) e^(-t).
  The power factor peaks sharply for larger k and coarse sampling
  under-resolves the peak.
"""

NORMAL_RESOLUTION = 1024

GAMMA_RESOLUTION = 65536

# Simpson's rule needs at least one pair of sub-intervals.
MIN_RESOLUTION = 2

# Above these, the incomplete gamma integrand can overflow float64
# (t^(k-1) with k = df/2) and pchisq returns NaN.
MAX_RELIABLE_DF = 100
MAX_RELIABLE_X = 100_000.0
