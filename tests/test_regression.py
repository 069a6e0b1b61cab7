"""Tests for the least squares energy signature fit."""

import pytest

from signature import (
    MonthlyRecord,
    RegressionModel,
    fit_linear_regression,
    pairs_from_records,
)


# =============================================================================
# Tests: fit_linear_regression - Basic Cases
# =============================================================================


class TestRegressionBasicCases:
    """Basic test cases for the regression."""

    def test_exact_fit(self):
        """Points on the identity line give slope 1, intercept 0, R² 1."""
        model = fit_linear_regression([(1, 1), (2, 2), (3, 3)])
        assert model.slope == 1
        assert model.intercept == 0
        assert model.r_squared == 1
        assert not model.degenerate

    def test_known_line(self):
        """Points on y = 2x + 3 are recovered exactly."""
        pairs = [(x, 2 * x + 3) for x in range(5)]
        model = fit_linear_regression(pairs)
        assert model.slope == pytest.approx(2.0)
        assert model.intercept == pytest.approx(3.0)
        assert model.r_squared == pytest.approx(1.0)

    def test_noisy_points(self):
        """Scattered points give the textbook least squares solution."""
        # n=4, Σx=10, Σy=14, Σxy=39, Σx²=30, Σy²=54
        model = fit_linear_regression([(1, 2), (2, 3), (3, 5), (4, 4)])
        assert model.slope == pytest.approx(0.8)
        assert model.intercept == pytest.approx(1.5)
        assert model.r_squared == pytest.approx(0.64)

    def test_negative_slope(self):
        """A decreasing relation gives a negative slope and a positive R²."""
        model = fit_linear_regression([(0, 10), (1, 8), (2, 6), (3, 4)])
        assert model.slope == pytest.approx(-2.0)
        assert model.intercept == pytest.approx(10.0)
        assert model.r_squared == pytest.approx(1.0)


# =============================================================================
# Tests: fit_linear_regression - Degenerate Cases
# =============================================================================


class TestRegressionDegenerateCases:
    """Inputs for which the slope or correlation is undefined."""

    def test_identical_predictor(self):
        """All x identical returns the all-zero model without dividing by zero."""
        model = fit_linear_regression([(5, 10), (5, 20), (5, 30)])
        assert model.slope == 0
        assert model.intercept == 0
        assert model.r_squared == 0
        assert model.degenerate

    def test_identical_non_integer_predictor(self):
        """Identical fractional x values are degenerate despite rounding."""
        model = fit_linear_regression([(0.1, 10), (0.1, 20), (0.1, 30), (0.1, 5)])
        assert model.degenerate
        assert model.slope == 0

    def test_empty_pairs(self):
        """No pairs returns the all-zero model."""
        model = fit_linear_regression([])
        assert (model.slope, model.intercept, model.r_squared) == (0, 0, 0)
        assert model.degenerate

    def test_constant_energy(self):
        """Constant y gives a flat line with R² forced to 0."""
        model = fit_linear_regression([(1, 5), (2, 5), (3, 5)])
        assert model.slope == 0
        assert model.intercept == pytest.approx(5.0)
        assert model.r_squared == 0
        assert not model.degenerate

    def test_uncorrelated_points(self):
        """A symmetric parabola has zero linear correlation."""
        pairs = [(x, 100 + 4 * (x - 6.5) ** 2) for x in range(1, 13)]
        model = fit_linear_regression(pairs)
        assert model.slope == pytest.approx(0.0, abs=1e-12)
        assert model.r_squared == pytest.approx(0.0, abs=1e-12)
        assert not model.degenerate


# =============================================================================
# Tests: pairs_from_records
# =============================================================================


class TestPairsFromRecords:
    """Test conversion of validated records into regression pairs."""

    def test_predictor_is_total_degree_days(self):
        """x is HDD + CDD and y is the energy, in record order."""
        records = [
            MonthlyRecord(year="2023", month="Jan", energy=120000.0, hdd=450.0, cdd=10.0),
            MonthlyRecord(year="2023", month="Jul", energy=115000.0, hdd=0.0, cdd=350.0),
        ]
        assert pairs_from_records(records) == [(460.0, 120000.0), (350.0, 115000.0)]


# =============================================================================
# Tests: RegressionModel helpers
# =============================================================================


class TestRegressionModelHelpers:
    """Test prediction and display helpers of the model."""

    def test_predict(self):
        """Prediction applies slope and intercept."""
        model = fit_linear_regression([(x, 2 * x + 3) for x in range(5)])
        assert model.predict(10) == pytest.approx(23.0)

    def test_variance_explained(self):
        """R² is reported as a percentage."""
        model = fit_linear_regression([(1, 2), (2, 3), (3, 5), (4, 4)])
        assert model.variance_explained_pct == pytest.approx(64.0)

    def test_formula(self):
        """The formula prints the slope with 2 decimals and the intercept rounded."""
        model = fit_linear_regression([(0, 5000), (1, 6234.5678)])
        assert model.formula() == "Energy = 1,234.57 × (HDD + CDD) + 5,000"

    def test_formula_with_energy_unit(self):
        """The energy unit label is shown on the left-hand side."""
        model = RegressionModel(slope=12.5, intercept=300.4, r_squared=0.9)
        assert model.formula("MWh") == "Energy (MWh) = 12.50 × (HDD + CDD) + 300"
