"""Calendar aggregation of normalized records into annual intensities.

Each year's sums are extrapolated to twelve months with an annualization
factor of ``12 / months present``. The factor is not clamped:
a year key that collects more than twelve rows (for instance two meters
entered under the same year) is scaled down accordingly.
"""

from collections import defaultdict
from dataclasses import dataclass
import logging
from typing import Sequence

from .exceptions import InvalidAreaError
from .models import AnnualSummary, NormalizedRecord

_LOGGER = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass
class _YearTotals:
    actual_sum: float = 0.0
    normalized_sum: float = 0.0
    count: int = 0


def annualization_factor(month_count: int) -> float:
    """Return the factor extrapolating ``month_count`` months to a full year."""
    return MONTHS_PER_YEAR / month_count


def group_by_year(records: Sequence[NormalizedRecord]) -> dict[str, _YearTotals]:
    """Sum actual and normalized energy per year key, in first-seen order."""
    totals: dict[str, _YearTotals] = defaultdict(_YearTotals)
    for record in records:
        year = totals[record.year]
        year.actual_sum += record.actual_energy
        year.normalized_sum += record.normalized_energy
        year.count += 1
    return dict(totals)


def aggregate_by_year(
    records: Sequence[NormalizedRecord], area: float
) -> list[AnnualSummary]:
    """Compute the actual EUI and normalized EnPI of every year.

    Args:
        records: Normalized records carrying their year key.
        area: Conditioned area, strictly positive.

    Returns:
        One summary per distinct year key, sorted by the year label.

    Raises:
        InvalidAreaError: If the area is not strictly positive.

    """
    if not area > 0:
        raise InvalidAreaError(area)

    report = []
    for year, totals in sorted(group_by_year(records).items()):
        factor = annualization_factor(totals.count)
        _LOGGER.debug(
            "Year %s: %d months, factor %.3f, actual %.1f, normalized %.1f",
            year,
            totals.count,
            factor,
            totals.actual_sum,
            totals.normalized_sum,
        )
        report.append(
            AnnualSummary(
                year=year,
                month_count=totals.count,
                annualization_factor=factor,
                actual_eui=totals.actual_sum * factor / area,
                normalized_enpi=totals.normalized_sum * factor / area,
            )
        )
    return report
