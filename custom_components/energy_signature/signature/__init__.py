"""Pure domain logic for weather-normalized building energy signatures.

This package contains only pure functions with no Home Assistant dependency.
It can be tested independently and reused outside of Home Assistant.
"""

from .aggregation import aggregate_by_year
from .baseline import calculate_baseline_eui
from .engine import compute_signature
from .exceptions import InsufficientDataError, InvalidAreaError, SignatureError
from .models import (
    Advisory,
    AnnualSummary,
    MonthlyRecord,
    NormalizedRecord,
    RawObservation,
    RegressionModel,
    SignatureResult,
)
from .normalization import normalize_records
from .options import AREA_UNITS, ENERGY_UNITS, SignatureOptions
from .regression import fit_linear_regression, pairs_from_records
from .session import ObservationTable, ResultSnapshot, ResultStore
from .validation import parse_area, validate_observations

__all__ = [
    "AREA_UNITS",
    "ENERGY_UNITS",
    "Advisory",
    "AnnualSummary",
    "InsufficientDataError",
    "InvalidAreaError",
    "MonthlyRecord",
    "NormalizedRecord",
    "ObservationTable",
    "RawObservation",
    "RegressionModel",
    "ResultSnapshot",
    "ResultStore",
    "SignatureError",
    "SignatureOptions",
    "SignatureResult",
    "aggregate_by_year",
    "calculate_baseline_eui",
    "compute_signature",
    "fit_linear_regression",
    "normalize_records",
    "pairs_from_records",
    "parse_area",
    "validate_observations",
]
