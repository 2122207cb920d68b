"""
Common types for descriptive statistics.

Defines the Selection tag that picks the variance denominator.
"""

from __future__ import annotations

from enum import IntEnum

from quadstats.core.exceptions import ValidationError


class Selection(IntEnum):
    """
    Variance denominator selector.

    The value is subtracted from the number of terms: POPULATION divides
    by n, SAMPLE divides by n - 1 (Bessel's correction). Autocovariance
    generalizes this to n - lag - selection.
    """
    POPULATION = 0
    SAMPLE = 1


_ALIASES = {
    "population": Selection.POPULATION,
    "sample": Selection.SAMPLE,
}


def resolve_selection(selection: Selection | str | int) -> Selection:
    """Accept a Selection, its integer value, or 'population' / 'sample'."""
    if isinstance(selection, Selection):
        return selection
    if isinstance(selection, str):
        try:
            return _ALIASES[selection.lower()]
        except KeyError:
            raise ValidationError(
                f"selection must be 'population' or 'sample', got {selection!r}"
            ) from None
    if isinstance(selection, int) and not isinstance(selection, bool):
        try:
            return Selection(selection)
        except ValueError:
            pass
    raise ValidationError(
        f"selection must be Selection.POPULATION or Selection.SAMPLE, got {selection!r}"
    )


def check_denominator(n_terms: int, selection: Selection, what: str) -> int:
    """Return n_terms - selection, or raise if it is not positive."""
    denom = n_terms - int(selection)
    if denom <= 0:
        raise ValidationError(
            f"{what}: denominator n - selection must be positive, "
            f"got {n_terms} - {int(selection)} = {denom}"
        )
    return denom
