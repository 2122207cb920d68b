"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from quadstats.core.result import Result
from quadstats.core.compute.timing import Timer
from quadstats.hypothesis._common import HTestParams
from quadstats.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "chisq_gof":
                from quadstats.hypothesis.backends._chisq_test import chisq_gof
                params, warnings_list = chisq_gof(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type, 'alpha': design.alpha},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
