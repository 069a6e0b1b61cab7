"""Single entry point running the whole energy signature pipeline.

raw rows -> validation -> regression -> normalization -> annual report
-> baseline. Fatal errors are raised before the regression runs; advisories
travel with the result.
"""

import logging
from typing import Sequence

from .aggregation import aggregate_by_year
from .baseline import calculate_baseline_eui
from .models import Advisory, RawObservation, SignatureResult
from .normalization import normalize_records
from .options import SignatureOptions
from .regression import fit_linear_regression, pairs_from_records
from .validation import parse_area, validate_observations

_LOGGER = logging.getLogger(__name__)


def compute_signature(
    observations: Sequence[RawObservation],
    area: object,
    options: SignatureOptions | None = None,
) -> SignatureResult:
    """Compute the regression model, normalized series, annual report and baseline.

    Args:
        observations: Monthly rows in table order.
        area: Conditioned area as entered (text or number).
        options: Unit labels and tunables, defaults when omitted.

    Returns:
        The complete result of the computation.

    Raises:
        InvalidAreaError: If the area is not a positive number.
        InsufficientDataError: If too few rows are valid.

    """
    options = options or SignatureOptions()

    numeric_area = parse_area(area)
    records = validate_observations(observations, min_rows=options.min_rows)

    model = fit_linear_regression(pairs_from_records(records))

    advisories = set()
    if model.degenerate:
        _LOGGER.warning(
            "All %d rows share the same total degree days, regression is degenerate",
            len(records),
        )
        advisories.add(Advisory.DEGENERATE_MODEL)
    if model.r_squared < options.low_fit_threshold:
        _LOGGER.warning(
            "Model has a very low R-squared value (%.3f), results may not be reliable",
            model.r_squared,
        )
        advisories.add(Advisory.LOW_FIT)

    normalized = normalize_records(records, model)
    annual_report = aggregate_by_year(normalized, numeric_area)
    baseline_eui = calculate_baseline_eui(
        normalized,
        len(annual_report),
        numeric_area,
        annual_report=annual_report,
        annualized=options.annualized_baseline,
    )

    _LOGGER.info(
        "Energy signature computed from %d rows over %d years: "
        "slope=%.3f intercept=%.1f r²=%.3f baseline=%.2f %s/%s/yr",
        len(records),
        len(annual_report),
        model.slope,
        model.intercept,
        model.r_squared,
        baseline_eui,
        options.energy_unit,
        options.area_unit,
    )

    return SignatureResult(
        model=model,
        records=tuple(normalized),
        annual_report=tuple(annual_report),
        baseline_eui=baseline_eui,
        area=numeric_area,
        area_unit=options.area_unit,
        energy_unit=options.energy_unit,
        advisories=frozenset(advisories),
    )
