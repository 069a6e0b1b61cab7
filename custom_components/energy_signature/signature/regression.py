"""Ordinary least squares fit of energy against total degree days.

The model is the classic two-parameter energy signature:

    Energy = BLC × (HDD + CDD) + Baseload

where the slope (BLC, building load coefficient) is the energy used per
total degree day and the intercept is the weather-independent baseload.
The fit is computed in closed form from running sums, in a single pass.
"""

import logging
import math
from typing import Iterable, Sequence

from .models import MonthlyRecord, RegressionModel

_LOGGER = logging.getLogger(__name__)

# Type alias for (total degree days, energy) pairs
RegressionPair = tuple[float, float]

DEGENERATE_MODEL = RegressionModel(
    slope=0.0, intercept=0.0, r_squared=0.0, degenerate=True
)


def pairs_from_records(records: Iterable[MonthlyRecord]) -> list[RegressionPair]:
    """Return the (tdd, energy) pairs of validated records."""
    return [(record.tdd, record.energy) for record in records]


def fit_linear_regression(pairs: Sequence[RegressionPair]) -> RegressionModel:
    """Fit ``y = slope * x + intercept`` by ordinary least squares.

    Args:
        pairs: Sequence of (x, y) tuples, x being total degree days and y
               the energy of the same period.

    Returns:
        The fitted model. When every x is identical (or there are no pairs)
        the slope is undefined and the all-zero model flagged as degenerate
        is returned instead of dividing by zero.

    Example:
        >>> fit_linear_regression([(1, 1), (2, 2), (3, 3)])
        RegressionModel(slope=1.0, intercept=0.0, r_squared=1.0, degenerate=False)

    """
    n = len(pairs)
    if n == 0:
        _LOGGER.debug("No pairs provided for regression")
        return DEGENERATE_MODEL

    sum_x = sum_y = sum_xy = sum_xx = sum_yy = 0.0
    first_x = pairs[0][0]
    varying_x = False

    for x, y in pairs:
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x
        sum_yy += y * y
        if x != first_x:
            varying_x = True

    _LOGGER.debug(
        "Regression sums over %d pairs: Σx=%.3f Σy=%.3f Σxy=%.3f Σx²=%.3f Σy²=%.3f",
        n,
        sum_x,
        sum_y,
        sum_xy,
        sum_xx,
        sum_yy,
    )

    denominator = n * sum_xx - sum_x * sum_x
    if not varying_x or denominator <= 0:
        _LOGGER.debug("All total degree day values are identical, model is degenerate")
        return DEGENERATE_MODEL

    numerator = n * sum_xy - sum_x * sum_y
    slope = numerator / denominator
    intercept = (sum_y - slope * sum_x) / n

    # Radicand is zero when every y is identical; rounding can push it below
    radicand = denominator * (n * sum_yy - sum_y * sum_y)
    if radicand <= 0:
        r_squared = 0.0
    else:
        r_squared = (numerator / math.sqrt(radicand)) ** 2

    return RegressionModel(slope=slope, intercept=intercept, r_squared=r_squared)
