"""Tests for parsing and filtering of monthly rows."""

import pytest

from signature import (
    InsufficientDataError,
    InvalidAreaError,
    RawObservation,
    parse_area,
    validate_observations,
)
from signature.validation import parse_number


# =============================================================================
# Fixtures
# =============================================================================


def make_rows(count: int, year: str = "2023") -> list[RawObservation]:
    """Generate valid monthly rows with increasing degree days."""
    return [
        RawObservation(
            year=year,
            month=f"M{i + 1}",
            energy=str(1000 + 10 * i),
            hdd=str(100 + i),
            cdd=str(i),
        )
        for i in range(count)
    ]


@pytest.fixture
def twelve_rows() -> list[RawObservation]:
    """Return one year of valid rows."""
    return make_rows(12)


# =============================================================================
# Tests: parse_number
# =============================================================================


class TestParseNumber:
    """Test parsing of user-entered numbers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("12.5", 12.5), (" 460 ", 460.0), ("-3", -3.0), ("1e3", 1000.0), (7, 7.0)],
    )
    def test_valid_numbers(self, value, expected):
        """Numeric text and numbers are parsed."""
        assert parse_number(value) == expected

    @pytest.mark.parametrize("value", ["", "   ", "abc", "12abc", "nan", "inf", None, True])
    def test_invalid_numbers(self, value):
        """Empty, non-numeric and non-finite values are rejected."""
        assert parse_number(value) is None


# =============================================================================
# Tests: parse_area
# =============================================================================


class TestParseArea:
    """Test validation of the conditioned area."""

    def test_valid_area(self):
        """A positive number is accepted as text or number."""
        assert parse_area("10000") == 10000.0
        assert parse_area(250.5) == 250.5

    @pytest.mark.parametrize("value", ["-5", "0", "", "abc", None, "inf"])
    def test_invalid_area(self, value):
        """Missing, non-numeric, zero and negative areas are rejected."""
        with pytest.raises(InvalidAreaError) as excinfo:
            parse_area(value)
        assert excinfo.value.value == value

    def test_invalid_area_is_value_error(self):
        """Callers catching ValueError also catch invalid areas."""
        with pytest.raises(ValueError):
            parse_area("-5")


# =============================================================================
# Tests: validate_observations - Filtering
# =============================================================================


class TestFiltering:
    """Test that invalid rows are dropped and valid ones kept."""

    def test_all_valid_rows_kept(self, twelve_rows):
        """Twelve valid rows give twelve records."""
        records = validate_observations(twelve_rows)
        assert len(records) == 12
        assert records[0].energy == 1000.0
        assert records[0].hdd == 100.0
        assert records[0].cdd == 0.0

    def test_zero_energy_dropped(self, twelve_rows):
        """A row with zero energy is excluded."""
        rows = twelve_rows + [RawObservation("2023", "X", "0", "10", "0")]
        records = validate_observations(rows)
        assert len(records) == 12
        assert all(record.month != "X" for record in records)

    def test_negative_energy_dropped(self, twelve_rows):
        """A row with negative energy is excluded."""
        rows = twelve_rows + [RawObservation("2023", "X", "-100", "10", "0")]
        assert len(validate_observations(rows)) == 12

    def test_non_numeric_hdd_dropped(self, twelve_rows):
        """A row with a non-numeric HDD is excluded."""
        rows = [RawObservation("2023", "X", "500", "n/a", "0")] + twelve_rows
        records = validate_observations(rows)
        assert len(records) == 12
        assert records[0].month == "M1"

    def test_empty_cdd_dropped(self, twelve_rows):
        """A row with a blank CDD is excluded."""
        rows = twelve_rows + [RawObservation("2023", "X", "500", "10", "")]
        assert len(validate_observations(rows)) == 12

    def test_negative_degree_days_dropped(self, twelve_rows):
        """Rows with negative HDD or CDD are excluded."""
        rows = twelve_rows + [
            RawObservation("2023", "X", "500", "-1", "0"),
            RawObservation("2023", "Y", "500", "0", "-1"),
        ]
        assert len(validate_observations(rows)) == 12

    def test_blank_row_dropped(self, twelve_rows):
        """A freshly added blank row is ignored."""
        rows = twelve_rows + [RawObservation()]
        assert len(validate_observations(rows)) == 12

    def test_order_preserved(self, twelve_rows):
        """Records come out in input order, invalid rows simply omitted."""
        rows = list(twelve_rows)
        rows.insert(5, RawObservation("2023", "bad", "abc", "1", "1"))
        records = validate_observations(rows)
        assert [record.month for record in records] == [f"M{i}" for i in range(1, 13)]

    def test_labels_carried_through_unchanged(self):
        """Year and month labels are kept exactly as entered."""
        rows = make_rows(11) + [RawObservation(" FY24 ", " Dec ", "100", "1", "1")]
        records = validate_observations(rows)
        assert records[-1].year == " FY24 "
        assert records[-1].month == " Dec "

    def test_total_degree_days(self, twelve_rows):
        """Records expose HDD + CDD."""
        records = validate_observations(twelve_rows)
        assert records[3].tdd == 106.0


# =============================================================================
# Tests: validate_observations - Minimum Rows
# =============================================================================


class TestMinimumRows:
    """Test the minimum number of valid rows."""

    def test_eleven_rows_insufficient(self):
        """Eleven valid rows are not enough."""
        with pytest.raises(InsufficientDataError) as excinfo:
            validate_observations(make_rows(11))
        assert excinfo.value.valid_rows == 11
        assert excinfo.value.min_rows == 12

    def test_twelve_rows_sufficient(self):
        """Twelve valid rows are enough."""
        assert len(validate_observations(make_rows(12))) == 12

    def test_invalid_rows_do_not_count(self):
        """Invalid rows do not help reaching the minimum."""
        rows = make_rows(11) + [RawObservation("2023", "X", "0", "1", "1")]
        with pytest.raises(InsufficientDataError):
            validate_observations(rows)

    def test_custom_minimum(self):
        """The minimum can be lowered."""
        assert len(validate_observations(make_rows(3), min_rows=3)) == 3

    def test_error_message(self):
        """The error carries a human-readable message."""
        with pytest.raises(InsufficientDataError, match="At least 12 valid data rows"):
            validate_observations([])
