"""
Tests for covariance, autocovariance and autocorrelation.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from quadstats.core.exceptions import DimensionError, ValidationError
from quadstats.descriptive import Selection, acf, acov, cov, mean, var


class TestCov:

    def test_sample(self):
        x = [1, 2, 3, 4]
        y = [2, 4, 6, 8]
        assert_allclose(cov(x, y), np.cov(x, y)[0, 1], rtol=1e-14)

    def test_population(self):
        assert cov([1, 2, 3, 4], [2, 4, 6, 8], selection=Selection.POPULATION) == pytest.approx(2.5)

    def test_leading_n(self):
        """Only the first n pairs are used."""
        result = cov([1, 2, 100], [2, 4, -50, 7], n=2, selection=Selection.POPULATION)
        assert result == pytest.approx(0.5)

    def test_self_covariance_is_variance(self, rng):
        x = rng.normal(size=50)
        assert_allclose(cov(x, x), var(x), rtol=1e-13)

    def test_shorter_than_n(self):
        with pytest.raises(DimensionError, match="at least n=5"):
            cov([1, 2, 3, 4, 5], [1, 2, 3], n=5)

    def test_default_n_from_x(self):
        with pytest.raises(DimensionError):
            cov([1, 2, 3, 4], [1, 2, 3])

    def test_invalid_n(self):
        with pytest.raises(ValidationError):
            cov([1, 2], [1, 2], n=0)

    def test_sample_denominator_needs_two(self):
        with pytest.raises(ValidationError, match="denominator"):
            cov([1.0], [2.0])


class TestAcov:

    X = [1.0, 2.0, 3.0, 4.0, 5.0]

    def test_sample_mean_centre(self):
        # m = 3: (-2)(-1) + (-1)(0) + 0(1) + 1(2) = 4
        assert acov(self.X, 1) == pytest.approx(1.0)
        assert acov(self.X, 1, Selection.SAMPLE) == pytest.approx(4.0 / 3.0)

    def test_known_centre(self):
        # centre 0: 1*2 + 2*3 + 3*4 + 4*5 = 40
        assert acov(self.X, 1, center=0.0) == pytest.approx(10.0)

    def test_none_centre_equals_explicit_sample_mean(self, rng):
        x = rng.normal(size=64)
        assert acov(x, 3, center=None) == acov(x, 3, center=mean(x))

    def test_lag_zero_is_population_variance(self, rng):
        x = rng.normal(size=40)
        assert_allclose(acov(x, 0), var(x, Selection.POPULATION), rtol=1e-12)

    def test_matches_direct_formula(self, rng):
        x = rng.normal(size=100)
        lag = 7
        m = x.mean()
        expected = np.sum((x[:-lag] - m) * (x[lag:] - m)) / (100 - lag)
        assert_allclose(acov(x, lag), expected, rtol=1e-12)

    def test_lag_too_large(self):
        with pytest.raises(ValidationError, match="lag"):
            acov(self.X, 5)

    def test_negative_lag(self):
        with pytest.raises(ValidationError, match="lag"):
            acov(self.X, -1)

    def test_last_lag_sample_selection(self):
        """n - lag - 1 = 0 leaves no denominator."""
        with pytest.raises(ValidationError, match="denominator"):
            acov(self.X, 4, Selection.SAMPLE)
        assert acov(self.X, 4) == pytest.approx((1 - 3) * (5 - 3))


class TestAcf:

    def test_lag_zero_is_one(self, rng):
        assert_allclose(acf(rng.normal(size=30), 0), 1.0, rtol=1e-12)

    def test_uniform_generator_uncorrelated(self, uniform_sample):
        """Known U(0, 1) parameters, as an autocorrelation driver uses them."""
        for lag in range(1, 21):
            r = acf(uniform_sample, lag, center=0.5, variance=1.0 / 12.0)
            # standard error 1/sqrt(400) = 0.05
            assert abs(r) < 0.25

    def test_alternating_sequence(self):
        # 19 products of -1 over n - lag = 19, population variance 1
        x = [1.0, -1.0] * 10
        assert acf(x, 1) == pytest.approx(-1.0)

    def test_constant_sample(self):
        with pytest.raises(ValidationError, match="zero variance"):
            acf([2.0, 2.0, 2.0], 1)

    def test_invalid_variance(self):
        with pytest.raises(ValidationError, match="variance"):
            acf([1.0, 2.0, 3.0], 1, variance=0.0)
