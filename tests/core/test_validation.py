"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_1d: dimensionality
    - check_consistent_length: multi-array length matching
    - check_min_samples / check_sample: sample size
    - check_integer / check_positive: scalar arguments
"""

import numpy as np
import pytest

from quadstats.core.exceptions import DimensionError, ValidationError
from quadstats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_integer,
    check_min_samples,
    check_positive,
    check_sample,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted(self):
        result = check_array(np.array([1, 2], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "x")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "x")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "x")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="observed"):
            check_array(["a"], "observed")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 2.0]), "x")


class TestCheck1D:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")


class TestCheckConsistentLength:

    def test_same_length(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("a", "b"))

    def test_mismatch(self):
        with pytest.raises(DimensionError, match="a=3, b=2"):
            check_consistent_length(np.zeros(3), np.ones(2), names=("a", "b"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.ones(3), names=("a",))


class TestSampleSize:

    def test_min_samples(self):
        with pytest.raises(ValidationError, match="at least 2"):
            check_min_samples(np.zeros(1), 2, "x")

    def test_check_sample_empty(self):
        with pytest.raises(ValidationError, match="at least 1"):
            check_sample([], "x")

    def test_check_sample_ok(self):
        np.testing.assert_array_equal(check_sample((3, 4), "x"), [3.0, 4.0])


class TestScalars:

    @pytest.mark.parametrize("value, expected", [(3, 3), (3.0, 3), (np.int64(7), 7)])
    def test_integer_accepted(self, value, expected):
        assert check_integer(value, "df") == expected

    @pytest.mark.parametrize("value", [2.5, "3", None, True])
    def test_integer_rejected(self, value):
        with pytest.raises(ValidationError):
            check_integer(value, "df")

    def test_integer_minimum(self):
        with pytest.raises(ValidationError, match=">= 0"):
            check_integer(-1, "df", minimum=0)

    def test_positive(self):
        assert check_positive(2, "sd") == 2.0

    @pytest.mark.parametrize("value", [0.0, -1.0, np.nan, np.inf])
    def test_positive_rejected(self, value):
        with pytest.raises(ValidationError):
            check_positive(value, "sd")
