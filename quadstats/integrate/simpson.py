"""
Composite Simpson's rule.

Integrands are plain callables. Any parameters they need (a mean, a
standard deviation, a gamma shape) are captured by the callable itself,
so the integrator signature stays generic and concurrent calls never
share state.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from quadstats.core.compute.resolution import NORMAL_RESOLUTION, MIN_RESOLUTION
from quadstats.core.validation import check_integer


Integrand = Callable[[Any], Any]


def even_resolution(n: int) -> int:
    """
    Coerce a requested sub-interval count to what Simpson's rule accepts.

    Counts below 2 become 2 and odd counts are rounded up to the next
    even number.
    """
    n = check_integer(n, "n")
    if n < MIN_RESOLUTION:
        n = MIN_RESOLUTION
    if n % 2 != 0:
        n += 1
    return n


def simpson_weights(n: int) -> NDArray[np.floating[Any]]:
    """Weights 1, 4, 2, 4, ..., 2, 4, 1 for n (even) sub-intervals."""
    weights = np.full(n + 1, 2.0)
    weights[1::2] = 4.0
    weights[0] = 1.0
    weights[-1] = 1.0
    return weights


def simpson(
    func: Integrand,
    a: float,
    b: float,
    n: int = NORMAL_RESOLUTION,
    *,
    vectorized: bool = True,
) -> float:
    """
    Definite integral of func over [a, b] by composite Simpson's rule.

    Parameters
    ----------
    func : callable
        Integrand. With ``vectorized=True`` it is called once with the
        array of nodes and must return an array of the same shape or a
        scalar (broadcast, so constants work). With ``vectorized=False``
        it is called once per node with a Python float.
    a, b : float
        Interval endpoints. If ``b < a`` the endpoints are swapped and the
        integral is taken left to right; the result is NOT negated.
    n : int
        Requested number of sub-intervals. Clamped to at least 2 and
        rounded up to even.
    vectorized : bool
        Whether func accepts numpy arrays.

    Returns
    -------
    float
        The estimate. NaN or inf from the integrand propagates unchanged.
    """
    a = float(a)
    b = float(b)
    if a == b:
        return 0.0

    n = even_resolution(n)
    if b < a:
        a, b = b, a

    h = (b - a) / n
    nodes = a + h * np.arange(n + 1, dtype=np.float64)
    nodes[-1] = b

    if vectorized:
        values = np.broadcast_to(
            np.asarray(func(nodes), dtype=np.float64), nodes.shape
        )
    else:
        values = np.fromiter(
            (func(float(t)) for t in nodes), dtype=np.float64, count=n + 1
        )

    total = float(np.dot(simpson_weights(n), values))
    return total * (h / 3.0)
