"""Axis range estimation with rounded bounds."""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import ROUND_CEILING, Decimal


def ceil_to_precision(value: float, precision: int) -> float:
    """Round ``value`` up to ``precision`` decimal places.

    Negative precision rounds up to tens, hundreds and so on. The shift is
    done in decimal arithmetic so that e.g. 0.3 stays 0.3.
    """
    shifted = Decimal(repr(value)).scaleb(precision)
    return float(shifted.to_integral_value(rounding=ROUND_CEILING).scaleb(-precision))


class RangeEstimationService:
    """Guess a clean y-axis range so axes do not jitter between renders."""

    @staticmethod
    def precision_for(range_size: float) -> int:
        """Number of decimals to round bounds to for a given span."""
        if range_size <= 0 or not math.isfinite(range_size):
            return 0
        digits = math.floor(math.log10(range_size))
        if range_size >= 10:
            return -digits
        return -digits + 1

    @staticmethod
    def estimate_range(values: Iterable[float | None]) -> tuple[float, float]:
        """Return ``(minimum, maximum)`` with bounds rounded outwards.

        The lower bound stays at zero unless the data goes negative.
        """
        finite = [v for v in values if v is not None and math.isfinite(v)]
        if not finite:
            return 0.0, 0.0

        min_value = min(finite)
        max_value = max(finite)
        precision = RangeEstimationService.precision_for(max_value - min_value)

        minimum = (
            -ceil_to_precision(abs(min_value), precision) if min_value < 0 else 0.0
        )
        maximum = ceil_to_precision(max_value, precision)
        return minimum, maximum
