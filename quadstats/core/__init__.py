"""
Core infrastructure for quadstats.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, integrate, distributions,
hypothesis).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, resolution constants, tolerance tiers
"""

from quadstats.core.result import Result
from quadstats.core.exceptions import (
    QuadStatsError,
    ValidationError,
    DimensionError,
    DivisionByZeroError,
    NumericalError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "QuadStatsError",
    "ValidationError",
    "DimensionError",
    "DivisionByZeroError",
    "NumericalError",
]
