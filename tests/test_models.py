"""Tests for records, options and result helpers."""

import pytest

from signature import (
    AnnualSummary,
    RawObservation,
    RegressionModel,
    SignatureOptions,
    SignatureResult,
)


def make_result(baseline_eui: float, enpis: list[float]) -> SignatureResult:
    """Build a result with the given baseline and yearly EnPI values."""
    report = tuple(
        AnnualSummary(
            year=str(2020 + i),
            month_count=12,
            annualization_factor=1.0,
            actual_eui=enpi,
            normalized_enpi=enpi,
        )
        for i, enpi in enumerate(enpis)
    )
    return SignatureResult(
        model=RegressionModel(slope=1.0, intercept=0.0, r_squared=0.5),
        records=(),
        annual_report=report,
        baseline_eui=baseline_eui,
        area=1.0,
        area_unit="m²",
        energy_unit="kWh",
    )


class TestRawObservation:
    """Test construction of raw rows."""

    def test_from_mapping(self):
        """Values are stringified and missing keys become empty."""
        row = RawObservation.from_mapping(
            {"year": 2024, "month": "Jan", "energy": 118000.5, "hdd": None}
        )
        assert row == RawObservation("2024", "Jan", "118000.5", "", "")


class TestSignatureOptions:
    """Test option validation."""

    def test_defaults(self):
        """Defaults are kWh per m² with a 12 row minimum."""
        options = SignatureOptions()
        assert options.intensity_unit == "kWh/m²/yr"
        assert options.min_rows == 12
        assert options.low_fit_threshold == 0.1
        assert not options.annualized_baseline

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"area_unit": "acre"},
            {"energy_unit": "therm"},
            {"min_rows": 0},
            {"low_fit_threshold": 1.5},
            {"low_fit_threshold": -0.1},
        ],
    )
    def test_invalid_options(self, kwargs):
        """Unknown units and out of range tunables are rejected."""
        with pytest.raises(ValueError):
            SignatureOptions(**kwargs)


class TestSignatureResult:
    """Test derived figures of a result."""

    def test_trend_worse_than_baseline(self):
        """A latest EnPI above the baseline is a positive trend."""
        result = make_result(100.0, [90.0, 110.0])
        assert result.latest_year.year == "2021"
        assert result.baseline_trend_pct == pytest.approx(10.0)

    def test_trend_better_than_baseline(self):
        """A latest EnPI below the baseline is a negative trend."""
        assert make_result(100.0, [95.0]).baseline_trend_pct == pytest.approx(-5.0)

    def test_trend_without_baseline(self):
        """No trend is reported against a zero baseline."""
        assert make_result(0.0, [95.0]).baseline_trend_pct is None

    def test_no_years(self):
        """An empty report has no latest year and no trend."""
        result = make_result(100.0, [])
        assert result.latest_year is None
        assert result.baseline_trend_pct is None

    def test_intensity_unit(self):
        """The intensity unit combines energy and area labels."""
        assert make_result(1.0, []).intensity_unit == "kWh/m²/yr"
