"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def uniform_sample(rng):
    """400 draws from U(0, 1): population mean 0.5, variance 1/12."""
    return rng.random(400)


@pytest.fixture
def poker_table():
    """
    Five-card poker hand frequencies for N = 2,598,960 deals.

    Observed counts are the expected counts rounded, so the fit is
    essentially perfect.
    """
    probabilities = np.array([
        0.501177394, 0.422569027, 0.047539015, 0.021128451, 0.003924646,
        0.001965401, 0.001440576, 0.000240096, 0.000013851, 0.000001539,
    ])
    expected = probabilities * 2_598_960
    observed = np.round(expected)
    labels = (
        "High Card", "One Pair", "Two Pair", "Three of a kind", "Straight",
        "Flush", "Full house", "Four of a kind", "Straight flush", "Royal flush",
    )
    return observed, expected, labels
