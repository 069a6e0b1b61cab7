"""Configuration for the energy signature engine.

Unit labels are cosmetic: they are carried through to the results so the
presentation layer can print "kWh/m²/yr", but no value is ever converted.
"""

from dataclasses import dataclass

AREA_UNITS = ("m²", "ft²")
ENERGY_UNITS = ("kWh", "GJ", "MWh", "MBtu")

# A year of monthly readings is the smallest set that covers every season
MIN_VALID_ROWS = 12

# Below this R² the weather explains almost none of the energy variance
LOW_FIT_THRESHOLD = 0.1


@dataclass(frozen=True)
class SignatureOptions:
    """Tunables and unit labels for one computation.

    Attributes:
        area_unit: Label of the conditioned area unit.
        energy_unit: Label of the energy unit of the monthly readings.
        min_rows: Minimum number of valid monthly rows.
        low_fit_threshold: R² under which the low fit advisory is raised.
        annualized_baseline: Average the per-year annualized EnPI values
            instead of dividing the raw monthly sum by the year count.

    """

    area_unit: str = AREA_UNITS[0]
    energy_unit: str = ENERGY_UNITS[0]
    min_rows: int = MIN_VALID_ROWS
    low_fit_threshold: float = LOW_FIT_THRESHOLD
    annualized_baseline: bool = False

    def __post_init__(self) -> None:
        if self.area_unit not in AREA_UNITS:
            raise ValueError(
                f"Unknown area unit {self.area_unit!r}, expected one of {AREA_UNITS}"
            )
        if self.energy_unit not in ENERGY_UNITS:
            raise ValueError(
                f"Unknown energy unit {self.energy_unit!r}, "
                f"expected one of {ENERGY_UNITS}"
            )
        if self.min_rows < 1:
            raise ValueError(f"min_rows must be at least 1, got {self.min_rows}")
        if not 0.0 <= self.low_fit_threshold <= 1.0:
            raise ValueError(
                f"low_fit_threshold must be within [0, 1], got {self.low_fit_threshold}"
            )

    @property
    def intensity_unit(self) -> str:
        """Return the label of an annual intensity, e.g. ``kWh/m²/yr``."""
        return f"{self.energy_unit}/{self.area_unit}/yr"
