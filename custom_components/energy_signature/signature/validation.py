"""Parsing and filtering of user-entered monthly rows.

Invalid rows are dropped, never repaired. Only the area is checked strictly
because every intensity is divided by it.
"""

import logging
import math
from typing import Sequence

from .exceptions import InsufficientDataError, InvalidAreaError
from .models import MonthlyRecord, RawObservation
from .options import MIN_VALID_ROWS

_LOGGER = logging.getLogger(__name__)


def parse_number(value: object) -> float | None:
    """Parse a user-entered value into a finite float.

    Returns:
        The parsed value, or None when the value is empty, non-numeric,
        NaN or infinite.

    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_area(value: object) -> float:
    """Parse the conditioned area.

    Args:
        value: Area as text or number.

    Returns:
        The area as a positive float.

    Raises:
        InvalidAreaError: If the area is missing, non-numeric, zero or negative.

    """
    area = parse_number(value)
    if area is None or area <= 0:
        _LOGGER.debug("Rejected conditioned area %r", value)
        raise InvalidAreaError(value)
    return area


def _rejection_reason(energy, hdd, cdd) -> str | None:
    if energy is None or hdd is None or cdd is None:
        return "non-numeric value"
    if energy <= 0:
        return "energy is not positive"
    if hdd < 0 or cdd < 0:
        return "negative degree days"
    return None


def validate_observations(
    observations: Sequence[RawObservation],
    min_rows: int = MIN_VALID_ROWS,
) -> list[MonthlyRecord]:
    """Turn raw rows into validated monthly records.

    A row is kept when energy, HDD and CDD all parse to finite numbers,
    energy is strictly positive and both degree day values are non-negative.
    Year and month are carried through as labels. Input order is preserved.

    Args:
        observations: Rows in table order.
        min_rows: Minimum number of rows that must survive.

    Returns:
        Validated records in input order.

    Raises:
        InsufficientDataError: If fewer than ``min_rows`` rows are valid.

    """
    records: list[MonthlyRecord] = []

    for index, row in enumerate(observations):
        energy = parse_number(row.energy)
        hdd = parse_number(row.hdd)
        cdd = parse_number(row.cdd)

        reason = _rejection_reason(energy, hdd, cdd)
        if reason is not None:
            _LOGGER.debug(
                "Dropping row %d (%s %s): %s", index, row.month, row.year, reason
            )
            continue

        records.append(
            MonthlyRecord(
                year=row.year,
                month=row.month,
                energy=energy,
                hdd=hdd,
                cdd=cdd,
            )
        )

    _LOGGER.debug(
        "Validated %d of %d rows (minimum %d)",
        len(records),
        len(observations),
        min_rows,
    )

    if len(records) < min_rows:
        raise InsufficientDataError(len(records), min_rows)

    return records
