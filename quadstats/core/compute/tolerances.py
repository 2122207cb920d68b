"""
Tolerance tiers for numerical validation.

Defines precision expectations for the quadrature-based paths when
compared against closed-form references (scipy.stats / scipy.special):

- Exact: closed forms and plain sums, machine precision
- Smooth quadrature: normal density, erf integrand
- Gamma quadrature: incomplete gamma, whose integrand has a sqrt-type
  derivative singularity at 0 for odd df

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance tier for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='exact',
    description='Closed forms and sums, machine precision',
)

SMOOTH_QUADRATURE = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='smooth_quadrature',
    description='Simpson at NORMAL_RESOLUTION on a smooth integrand',
)

GAMMA_QUADRATURE = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='gamma_quadrature',
    description='Simpson at GAMMA_RESOLUTION on t^(k-1) e^(-t)',
)


def select_tolerance(path: str) -> ToleranceTier:
    """Select the tolerance tier for a computation path."""
    if path in ('normal', 'erf', 'chisq_df1'):
        return SMOOTH_QUADRATURE
    if path in ('gamma', 'chisq'):
        return GAMMA_QUADRATURE
    return EXACT
