"""Records flowing through the energy signature pipeline.

Every record is immutable. Each stage derives a new collection from the
previous one, so a computation can be replayed from the raw observations
alone.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Advisory(str, Enum):
    """Non-fatal findings attached to a computed result."""

    DEGENERATE_MODEL = "degenerate_model"
    LOW_FIT = "low_fit"


@dataclass(frozen=True)
class RawObservation:
    """One monthly row exactly as entered by the user."""

    year: str = ""
    month: str = ""
    energy: str = ""
    hdd: str = ""
    cdd: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawObservation":
        """Build an observation from a mapping, stringifying present values.

        Missing keys and ``None`` become empty strings so that the row is
        later dropped by validation rather than rejected here.
        """
        def text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            year=text("year"),
            month=text("month"),
            energy=text("energy"),
            hdd=text("hdd"),
            cdd=text("cdd"),
        )


@dataclass(frozen=True)
class MonthlyRecord:
    """A validated monthly reading.

    Invariants: ``energy > 0``, ``hdd >= 0``, ``cdd >= 0``, all finite.
    """

    year: str
    month: str
    energy: float
    hdd: float
    cdd: float

    @property
    def tdd(self) -> float:
        """Total degree days, the single regression predictor."""
        return self.hdd + self.cdd


@dataclass(frozen=True)
class RegressionModel:
    """Energy signature ``energy = slope * tdd + intercept``.

    The slope is the building load coefficient (energy per total degree day)
    and the intercept the weather-independent baseload per month.
    """

    slope: float
    intercept: float
    r_squared: float
    degenerate: bool = False

    def predict(self, tdd: float) -> float:
        """Return the weather-expected energy for a given total degree days."""
        return self.slope * tdd + self.intercept

    @property
    def variance_explained_pct(self) -> float:
        """Share of the energy variance explained by weather, in percent."""
        return self.r_squared * 100

    def formula(self, energy_unit: str | None = None) -> str:
        """Return the fitted model as a human-readable equation.

        The energy unit label, when given, is shown next to the left-hand side.
        """
        energy = f"Energy ({energy_unit})" if energy_unit else "Energy"
        return (
            f"{energy} = {self.slope:,.2f} × (HDD + CDD) + {self.intercept:,.0f}"
        )


@dataclass(frozen=True)
class NormalizedRecord:
    """A monthly reading next to its weather-normalized expectation.

    Positive ``savings`` means actual use was below what the weather alone
    would predict.
    """

    period: str
    year: str
    tdd: float
    actual_energy: float
    normalized_energy: float
    savings: float


@dataclass(frozen=True)
class AnnualSummary:
    """Per-year intensities, extrapolated to twelve months."""

    year: str
    month_count: int
    annualization_factor: float
    actual_eui: float
    normalized_enpi: float


@dataclass(frozen=True)
class SignatureResult:
    """Everything produced by one computation, replaced as a unit."""

    model: RegressionModel
    records: tuple[NormalizedRecord, ...]
    annual_report: tuple[AnnualSummary, ...]
    baseline_eui: float
    area: float
    area_unit: str
    energy_unit: str
    advisories: frozenset[Advisory] = field(default_factory=frozenset)

    @property
    def intensity_unit(self) -> str:
        """Return the label of the annual intensities, e.g. ``kWh/m²/yr``."""
        return f"{self.energy_unit}/{self.area_unit}/yr"

    @property
    def latest_year(self) -> AnnualSummary | None:
        """Return the summary of the most recent year, if any."""
        return self.annual_report[-1] if self.annual_report else None

    @property
    def baseline_trend_pct(self) -> float | None:
        """Return how far the latest EnPI sits from the baseline, in percent.

        Positive values mean the latest year performed worse than the
        baseline. ``None`` when there is no year or the baseline is zero.
        """
        latest = self.latest_year
        if latest is None or self.baseline_eui == 0:
            return None
        return (latest.normalized_enpi - self.baseline_eui) / self.baseline_eui * 100

    @property
    def total_actual_energy(self) -> float:
        return sum(record.actual_energy for record in self.records)

    @property
    def total_normalized_energy(self) -> float:
        return sum(record.normalized_energy for record in self.records)

    @property
    def total_savings(self) -> float:
        return sum(record.savings for record in self.records)
