"""Weather normalization of monthly readings."""

from typing import Sequence

from .models import MonthlyRecord, NormalizedRecord, RegressionModel


def period_label(month: str, year: str) -> str:
    """Return the display label of a monthly period, e.g. ``Jan 2023``."""
    return f"{month} {year}"


def normalize_records(
    records: Sequence[MonthlyRecord], model: RegressionModel
) -> list[NormalizedRecord]:
    """Apply the energy signature to every validated record.

    The normalized energy is what the model expects for the period's total
    degree days; savings are that expectation minus the actual reading.
    Order is preserved.
    """
    normalized = []
    for record in records:
        tdd = record.tdd
        expected = model.predict(tdd)
        normalized.append(
            NormalizedRecord(
                period=period_label(record.month, record.year),
                year=record.year,
                tdd=tdd,
                actual_energy=record.energy,
                normalized_energy=expected,
                savings=expected - record.energy,
            )
        )
    return normalized
