"""
Hypothesis testing module.

Public API:
    chisq_gof_test(observed, expected)  - Pearson's chi-square goodness-of-fit
"""

from quadstats.hypothesis.solvers import chisq_gof_test
from quadstats.hypothesis.design import HypothesisDesign
from quadstats.hypothesis._common import CategoryLabels, HTestParams
from quadstats.hypothesis.solution import HTestSolution

__all__ = [
    "chisq_gof_test",
    "CategoryLabels",
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
]
