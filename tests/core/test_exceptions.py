"""
Tests for quadstats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via QuadStatsError)
    - DivisionByZeroError is also a builtin ZeroDivisionError
    - Diagnostic attributes on DivisionByZeroError
"""

import pytest

from quadstats.core.exceptions import (
    DimensionError,
    DivisionByZeroError,
    NumericalError,
    QuadStatsError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via QuadStatsError."""

    def test_validation_error_is_quadstats_error(self):
        with pytest.raises(QuadStatsError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong length")

    def test_numerical_error_is_quadstats_error(self):
        with pytest.raises(QuadStatsError):
            raise NumericalError("computation failed")

    def test_numerical_error_is_not_validation_error(self):
        assert not isinstance(NumericalError("x"), ValidationError)

    def test_division_by_zero_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DivisionByZeroError("expected has a zero")

    def test_division_by_zero_is_builtin_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            raise DivisionByZeroError("expected has a zero")


# ═══════════════════════════════════════════════════════════════════════
# DivisionByZeroError
# ═══════════════════════════════════════════════════════════════════════


class TestDivisionByZeroError:

    def test_all_attributes(self):
        err = DivisionByZeroError(
            "expected: zero at index 2",
            name="expected",
            index=2,
            value=0.0,
        )
        assert str(err) == "expected: zero at index 2"
        assert err.name == "expected"
        assert err.index == 2
        assert err.value == 0.0

    def test_defaults_are_none(self):
        err = DivisionByZeroError("zero")
        assert err.name is None
        assert err.index is None
        assert err.value is None
