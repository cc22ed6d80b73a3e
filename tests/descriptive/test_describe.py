"""
Tests for describe() — all moments from one Welford pass.
"""

import math

import numpy as np
import pytest

from numkernel import describe, mean, variance, std
from numkernel.descriptive import DescriptiveSolution


class TestDescribe:

    def test_moments(self):
        result = describe([1, 2, 3, 4, 5])
        assert isinstance(result, DescriptiveSolution)
        assert result.n == 5
        assert result.mean == 3.0
        assert result.variance == 2.5
        assert result.sd == pytest.approx(math.sqrt(2.5))
        assert result.flag == 1

    @pytest.mark.parametrize("flag", [0, 1])
    def test_agrees_with_individual_functions(self, rng, flag):
        x = rng.standard_normal(100)
        result = describe(x, flag)
        assert result.mean == mean(x)
        assert result.variance == variance(x, flag)
        assert result.sd == std(x, flag)

    def test_metadata(self):
        result = describe([1.0, 2.0])
        assert result.backend_name == 'cpu_welford'
        assert result.info['method'] == 'welford'
        assert 'accumulate' in result.timing
        assert result.warnings == ()

    def test_summary_text(self):
        text = describe([1, 2, 3], 0).summary()
        assert "variance (n)" in text
        assert "mean" in text


class TestDescribeEdgeCases:

    def test_empty(self):
        result = describe([])
        assert result.n == 0
        assert math.isnan(result.mean)
        assert math.isnan(result.variance)
        assert math.isnan(result.sd)
        assert any("empty input" in w for w in result.warnings)

    def test_single_value_sample(self):
        result = describe([4.0], 1)
        assert result.mean == 4.0
        assert math.isnan(result.variance)
        assert any("single observation" in w for w in result.warnings)

    def test_single_value_population(self):
        result = describe([4.0], 0)
        assert result.variance == 0.0
        assert result.sd == 0.0
        assert result.warnings == ()
