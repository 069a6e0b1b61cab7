"""Energy baseline (EnB) of the whole normalized series."""

from typing import Sequence

from .models import AnnualSummary, NormalizedRecord


def calculate_baseline_eui(
    records: Sequence[NormalizedRecord],
    year_count: int,
    area: float,
    annual_report: Sequence[AnnualSummary] | None = None,
    annualized: bool = False,
) -> float:
    """Return the baseline EUI against which yearly EnPI values are compared.

    By default the baseline is the sum of every monthly normalized energy,
    divided by the number of distinct years and by the area. Unlike the
    per-year EnPI, partial years are not annualized here.

    With ``annualized`` the baseline is instead the mean of the per-year
    normalized EnPI values of ``annual_report``, so it is directly comparable
    to them.

    Args:
        records: The full normalized series.
        year_count: Number of distinct year keys in the series.
        area: Conditioned area, strictly positive.
        annual_report: Per-year summaries, required when ``annualized``.
        annualized: Select the fully annualized baseline.

    Returns:
        Baseline EUI, 0.0 when there are no years or, for the annualized
        baseline, an empty report.

    """
    if year_count == 0:
        return 0.0

    if annualized:
        if annual_report is None:
            raise ValueError("annual_report is required for an annualized baseline")
        if not annual_report:
            return 0.0
        return sum(year.normalized_enpi for year in annual_report) / len(annual_report)

    total_normalized = sum(record.normalized_energy for record in records)
    return total_normalized / year_count / area
