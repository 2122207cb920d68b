"""
Common types for hypothesis testing.

Defines HTestParams, the payload every hypothesis test returns, and
CategoryLabels, the optional row labels of a frequency table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Every hypothesis test returns this same structure; test-specific
    outputs go in the `extras` dict.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    statistic_name : str
        Name of the test statistic ("X-squared").
    parameter : dict or None
        Distribution parameters, e.g. {"df": 9}.
    p_value : float
        p-value of the test.
    method : str
        Human-readable method name.
    data_name : str
        Description of the data.
    extras : dict or None
        Test-specific additional outputs (observed, expected, residuals,
        components, labels, alpha and reject for the chi-square test).
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float] | None
    p_value: float
    method: str
    data_name: str
    extras: dict[str, Any] | None = None


@dataclass(frozen=True)
class CategoryLabels:
    """
    Labels for the rows of a frequency table.

    Attributes
    ----------
    header : str
        Title of the label column in the report, may be "".
    rows : tuple of str
        One label per category, in table order.
    """
    header: str
    rows: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "rows", tuple(str(r) for r in self.rows))
        object.__setattr__(self, "header", str(self.header))

    def __len__(self) -> int:
        return len(self.rows)
