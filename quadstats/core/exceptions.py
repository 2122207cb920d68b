"""
Exception hierarchy for quadstats.

All exceptions inherit from QuadStatsError so callers can catch any
library-specific failure with one clause. Argument problems (the
"invalid argument" class of failure) are ValidationError or one of its
subclasses; everything numeric sits under NumericalError.

Design principles:
    - Error messages name the parameter and show the offending value
    - Failures are local to the call that raised them
    - Never catch and re-raise with less information
"""


class QuadStatsError(Exception):
    """Base exception for all quadstats errors."""
    pass


class ValidationError(QuadStatsError):
    """
    Input validation failed.

    Raised for degenerate sample sizes, non-positive degrees of freedom,
    out-of-range lags and similar invalid arguments.
    """
    pass


class DimensionError(ValidationError):
    """
    Sequence lengths are incorrect or inconsistent.

    Raised when paired inputs (observed/expected, x/y, labels) do not have
    the lengths the operation requires.
    """
    pass


class DivisionByZeroError(ValidationError, ZeroDivisionError):
    """
    A value used as a denominator is zero or negative.

    Raised by the goodness-of-fit test when an expected frequency is not
    strictly positive. Also catchable as the builtin ZeroDivisionError.

    Attributes:
        name: Parameter holding the bad value
        index: Position of the first offending entry, if known
        value: The offending value, if known
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        index: int | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.index = index
        self.value = value


class NumericalError(QuadStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    The quadrature paths report overflow through RuntimeWarning and NaN
    results instead of raising this.
    """
    pass
