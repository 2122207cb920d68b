"""
Shared compute infrastructure for quadstats.

Submodules:
    timing: Execution timing utilities
    resolution: Quadrature resolution constants
    tolerances: Numerical comparison tiers
"""

from quadstats.core.compute.timing import Timer
from quadstats.core.compute.resolution import (
    NORMAL_RESOLUTION,
    GAMMA_RESOLUTION,
)

__all__ = [
    # Timing
    "Timer",
    # Resolution
    "NORMAL_RESOLUTION",
    "GAMMA_RESOLUTION",
]
