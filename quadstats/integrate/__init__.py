"""
Numerical integration module.

Public API:
    simpson(func, a, b, n)  - Composite Simpson's rule over [a, b]
    even_resolution(n)      - Sub-interval count coercion used by simpson
"""

from quadstats.integrate.simpson import simpson, even_resolution, simpson_weights

__all__ = [
    "simpson",
    "even_resolution",
    "simpson_weights",
]
