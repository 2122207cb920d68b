"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and renders the goodness-of-fit
report via summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from quadstats.core.result import Result
from quadstats.hypothesis._common import CategoryLabels, HTestParams

if TYPE_CHECKING:
    from quadstats.hypothesis.design import HypothesisDesign


_H0 = "H0: Observed frequencies do not differ significantly from expected frequencies."
_HA = "HA: Observed frequencies differ significantly from expected frequencies."
_RULE = "-" * 54


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. The report fields consumed by test drivers
    (statistic, df, p_value, reject and the per-category observed,
    expected, residuals and components) are all available as properties;
    summary() renders them as text.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    # --- Standard fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float] | None:
        """Distribution parameters (e.g. {'df': 9.0})."""
        return self._result.params.parameter

    @property
    def df(self) -> int | None:
        """Degrees of freedom as an integer."""
        param = self._result.params.parameter
        return int(param["df"]) if param and "df" in param else None

    @property
    def p_value(self) -> float:
        """p-value of the test."""
        return self._result.params.p_value

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    # --- Test-specific extras ---

    @property
    def extras(self) -> dict[str, Any] | None:
        return self._result.params.extras

    def _extra(self, key: str):
        e = self._result.params.extras
        return e.get(key) if e else None

    @property
    def observed(self) -> NDArray | None:
        """Observed counts."""
        return self._extra('observed')

    @property
    def expected(self) -> NDArray | None:
        """Expected counts under H0."""
        return self._extra('expected')

    @property
    def residuals(self) -> NDArray | None:
        """observed - expected, per category."""
        return self._extra('residuals')

    @property
    def components(self) -> NDArray | None:
        """(observed - expected)^2 / expected, per category."""
        return self._extra('components')

    @property
    def labels(self) -> CategoryLabels | None:
        return self._extra('labels')

    @property
    def alpha(self) -> float | None:
        """Significance level the verdict was taken at."""
        return self._extra('alpha')

    @property
    def reject(self) -> bool | None:
        """True when p_value < alpha (H0 rejected)."""
        return self._extra('reject')

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        """
        Itemized goodness-of-fit report.

        Produces output like:

            Pearson's chi-square goodness-of-fit test

            H0: Observed frequencies do not differ significantly from ...
            HA: Observed frequencies differ significantly from ...

               X-squared =  64.0000
                      df =   1
                       P =   0.0000

                   observed     expected     residual     component
              ------------------------------------------------------
                         10        50.00       -40.00         32.00
                         90        50.00        40.00         32.00
              ------------------------------------------------------
                Reject H0 (P < 0.05)?     YES
        """
        p = self._result.params
        labels = self.labels
        lines = ["", f"    {p.method}", "", f"    {_H0}", f"    {_HA}", ""]

        lines.append(f"       {p.statistic_name} = {p.statistic:8.4f}")
        lines.append(f"{'df':>16s} = {self.df:3d}")
        lines.append(f"{'P':>16s} = {_format_pvalue(p.p_value)}")
        lines.append("")

        if labels is not None:
            head = f"    {labels.header:<15.15s}  "
            rule = "  " + "-" * 15 + _RULE
        else:
            head = "       "
            rule = "  " + "-" * 5 + _RULE
        lines.append(head + "observed     expected     residual     component")
        lines.append(rule)

        for i, (o, e, r, c) in enumerate(zip(
            self.observed, self.expected, self.residuals, self.components
        )):
            lead = f"    {labels.rows[i]:<16.16s} " if labels is not None else "       "
            lines.append(f"{lead}{o:8.0f} {e:12.2f} {r:12.2f} {c:13.2f}")

        lines.append(rule)
        verdict = "YES" if self.reject else "NO"
        lines.append(f"    Reject H0 (P < {self.alpha:4.2f})?     {verdict:>3s}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g}, reject={self.reject})"
        )


def _format_pvalue(p: float) -> str:
    """Fixed four decimals, scientific below 1e-4 so tiny p-values stay visible."""
    if np.isnan(p):
        return "     NaN"
    if 0.0 < p < 1e-4:
        return f"{p:8.2e}"
    return f"{p:8.4f}"
