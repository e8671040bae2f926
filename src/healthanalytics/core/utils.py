"""Utility functions for the reporting engine."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from healthanalytics.core.errors import NoDataError


def rounded_mean(values: list[int], what: str = "values") -> int:
    """Arithmetic mean rounded half away from zero.

    This matches SQLite's ``ROUND(AVG(x), 0)``, so 52.5 becomes 53 and
    -52.5 becomes -53.

    Raises:
        NoDataError: If ``values`` is empty.
    """
    if not values:
        msg = f"Cannot average {what}: no rows"
        raise NoDataError(msg)
    mean = Decimal(sum(values)) / Decimal(len(values))
    return int(mean.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def percentage(part: int, total: int, what: str = "total") -> float:
    """Share of ``part`` in ``total`` as a percentage, unrounded."""
    if total == 0:
        msg = f"Cannot compute percentage: {what} is zero"
        raise NoDataError(msg)
    return part * 100.0 / total
