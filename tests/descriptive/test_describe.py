"""
Tests for describe() and DescriptiveSolution.
"""

import pytest

from quadstats.core.exceptions import ValidationError
from quadstats.descriptive import DescriptiveSolution, Selection, describe


class TestDescribe:

    def test_fields(self):
        result = describe([2, 4, 4, 4, 5, 5, 7, 9], Selection.POPULATION)
        assert isinstance(result, DescriptiveSolution)
        assert result.n == 8
        assert result.mean == 5.0
        assert result.variance == pytest.approx(4.0)
        assert result.sd == pytest.approx(2.0)
        assert result.min == 2.0
        assert result.max == 9.0
        assert result.range == 7.0
        assert result.selection is Selection.POPULATION

    def test_default_selection_is_sample(self):
        result = describe([1.0, 2.0, 3.0])
        assert result.selection is Selection.SAMPLE
        assert result.variance == pytest.approx(1.0)
        assert result.info["selection"] == "sample"
        assert result.backend_name == "cpu_descriptive"

    def test_single_value_sample_rejected(self):
        with pytest.raises(ValidationError):
            describe([1.0])

    def test_summary(self):
        text = describe([1.0, 2.0, 3.0]).summary()
        assert "(sample denominator)" in text
        assert "Mean" in text
        assert "2.000000" in text
        assert "Range" in text

    def test_repr(self):
        assert "n=3" in repr(describe([1.0, 2.0, 3.0]))
