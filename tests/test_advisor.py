"""Tests for input validation and the compute entry point."""

import pytest

from comfort_advisor import (
    ComfortResult,
    ErrorKind,
    Season,
    ValidationError,
    compute,
    get_days_in_month,
)
from comfort_advisor.profiles import ADVICE_EXTREME_COLD, ADVICE_HEATWAVE


def error_kind(result: ComfortResult) -> ErrorKind:
    """Return the error kind of a failed result."""
    assert not result.ok
    assert result.recommendation is None
    return result.error.kind


# =============================================================================
# Tests: Validation order and messages
# =============================================================================


class TestMissingFields:
    """Missing input is reported before anything else."""

    @pytest.mark.parametrize(
        "fields",
        [
            ("", "15", "20", "50"),
            ("7", "", "20", "50"),
            ("7", "15", "", "50"),
            ("7", "15", "20", ""),
            (None, "15", "20", "50"),
            ("7", "15", "20", "   "),
        ],
    )
    def test_missing_field(self, fields):
        """Any empty field gives the missing field error."""
        result = compute(*fields)
        assert error_kind(result) is ErrorKind.MISSING_FIELD
        assert result.error.message == "모든 필드를 입력해주세요."

    def test_missing_wins_over_invalid(self):
        """An empty field is reported even when others are invalid."""
        result = compute("13", "40", "abc", "")
        assert error_kind(result) is ErrorKind.MISSING_FIELD

    def test_zero_is_not_missing(self):
        """A numeric zero temperature is a valid reading."""
        assert compute(5, 1, 0, 50).ok


class TestInvalidMonth:
    """Month must be an integer from 1 to 12."""

    @pytest.mark.parametrize("month", ["0", "13", "-1", "abc", ".5", "13.2", True])
    def test_invalid_month(self, month):
        """Out of range months and months without a leading integer fail."""
        result = compute(month, "1", "20", "50")
        assert error_kind(result) is ErrorKind.INVALID_MONTH
        assert result.error.message == "월은 1부터 12 사이의 숫자여야 합니다."

    @pytest.mark.parametrize("month", ["1", " 12 ", 6, 6.0])
    def test_valid_month_forms(self, month):
        """Integer strings, ints and integral floats are accepted."""
        assert compute(month, "1", "20", "50").ok

    @pytest.mark.parametrize(
        ("month", "expected"), [("7.5", 7), ("7월", 7), (" 12abc", 12), (7.9, 7)]
    )
    def test_leading_integer_is_read(self, month, expected):
        """Only the leading integer counts, trailing text is ignored."""
        assert compute(month, "1", "20", "50").recommendation.month == expected

    def test_month_checked_before_day(self):
        """An invalid month hides an invalid day."""
        result = compute("13", "99", "20", "50")
        assert error_kind(result) is ErrorKind.INVALID_MONTH


class TestInvalidDay:
    """Day must fit the month."""

    @pytest.mark.parametrize("month", range(1, 13))
    def test_every_valid_day_passes(self, month):
        """All days up to the month length validate."""
        for day in range(1, get_days_in_month(month) + 1):
            assert compute(month, day, 20, 50).ok

    @pytest.mark.parametrize("month", range(1, 13))
    def test_day_after_month_end_fails(self, month):
        """The day after the last day is rejected with that month's length."""
        max_days = get_days_in_month(month)
        result = compute(month, max_days + 1, 20, 50)
        assert error_kind(result) is ErrorKind.INVALID_DAY
        assert result.error.max_days == max_days
        assert result.error.message == f"일은 1부터 {max_days} 사이의 숫자여야 합니다."

    def test_april_40(self):
        """April has 30 days."""
        result = compute("4", "40", "20", "50")
        assert error_kind(result) is ErrorKind.INVALID_DAY
        assert result.error.max_days == 30
        assert "30" in result.error.message

    def test_february_29_accepted(self):
        """February 29 is always accepted."""
        assert compute("2", "29", "0", "40").ok

    def test_february_30_rejected(self):
        """February 30 is rejected with 29 as the maximum."""
        result = compute("2", "30", "0", "40")
        assert result.error.max_days == 29

    def test_zero_padded_month_uses_month_table(self):
        """A zero-padded "02" still allows 29 days, not the 31-day fallback."""
        # The table is keyed by the parsed month, so "02" and "2" agree
        result = compute("02", "30", "0", "40")
        assert error_kind(result) is ErrorKind.INVALID_DAY
        assert result.error.max_days == 29

    @pytest.mark.parametrize("day", ["0", "-3", "x", "32.5"])
    def test_invalid_day_values(self, day):
        """Zero, negative, too large and prefix-less days are rejected."""
        result = compute("5", day, "20", "50")
        assert error_kind(result) is ErrorKind.INVALID_DAY
        assert result.error.max_days == 31

    def test_fractional_day_reads_leading_integer(self):
        """A day of "1.5" is read as the 1st."""
        assert compute("5", "1.5", "20", "50").recommendation.day == 1


class TestInvalidTemperature:
    """Temperature must be numeric but is otherwise unbounded."""

    @pytest.mark.parametrize("temp", ["abc", "nan", "inf", "-", "1e400"])
    def test_non_numeric_temperature(self, temp):
        """Temperatures without a leading number or not finite are rejected."""
        result = compute("5", "5", temp, "50")
        assert error_kind(result) is ErrorKind.INVALID_TEMPERATURE
        assert result.error.message == "온도는 숫자여야 합니다."

    @pytest.mark.parametrize("temp", ["-60", "60", "25.5", " -3.2 "])
    def test_any_numeric_temperature(self, temp):
        """There is no range restriction on temperature."""
        assert compute("5", "5", temp, "50").ok

    @pytest.mark.parametrize(
        ("temp", "expected"),
        [("12,5", 12.0), ("25abc", 25.0), (".5", 0.5), ("-3.5°C", -3.5), ("1e1", 10.0)],
    )
    def test_leading_number_is_read(self, temp, expected):
        """Only the leading number counts, trailing text is ignored."""
        rec = compute("5", "5", temp, "50").recommendation
        assert rec.outdoor_temperature == expected

    def test_temperature_checked_before_humidity(self):
        """An invalid temperature hides an invalid humidity."""
        result = compute("5", "5", "hot", "150")
        assert error_kind(result) is ErrorKind.INVALID_TEMPERATURE


class TestInvalidHumidity:
    """Humidity must be a number from 0 to 100."""

    @pytest.mark.parametrize("humidity", ["150", "-1", "100.1", "wet", "nan"])
    def test_invalid_humidity(self, humidity):
        """Out of range or non-numeric humidity is rejected."""
        result = compute("5", "5", "20", humidity)
        assert error_kind(result) is ErrorKind.INVALID_HUMIDITY
        assert result.error.message == "습도는 0부터 100 사이의 숫자여야 합니다."

    @pytest.mark.parametrize("humidity", ["0", "100", "55.5"])
    def test_humidity_bounds_inclusive(self, humidity):
        """0 and 100 are valid."""
        assert compute("5", "5", "20", humidity).ok

    def test_leading_number_is_read(self):
        """A humidity of "55%" is read as 55."""
        rec = compute("5", "5", "20", "55%").recommendation
        assert rec.outdoor_humidity == 55.0

    def test_humidity_150_with_valid_fields(self):
        """Humidity 150 fails regardless of the other fields."""
        result = compute("7", "15", "33", "150")
        assert error_kind(result) is ErrorKind.INVALID_HUMIDITY


# =============================================================================
# Tests: Scenarios
# =============================================================================


class TestScenarios:
    """End-to-end calculations from raw form input."""

    def test_summer_heatwave(self):
        """July 15th at 33°C and 55%."""
        result = compute("7", "15", "33", "55")
        assert result.ok
        assert result.error is None

        rec = result.recommendation
        assert rec.season is Season.SUMMER
        assert rec.indoor_temperature_display == "27.0"
        assert rec.indoor_humidity_display == "50"
        assert rec.advice == ADVICE_HEATWAVE

    def test_winter_cold_snap(self):
        """January 10th at -10°C and 25%."""
        rec = compute("1", "10", "-10", "25").recommendation
        assert rec.season is Season.WINTER
        assert rec.indoor_temperature_display == "21.0"
        assert rec.indoor_humidity_display == "45"
        assert rec.advice == ADVICE_EXTREME_COLD

    def test_mild_autumn_day(self):
        """A mild autumn day keeps the baseline and has no advice."""
        rec = compute("10", "3", "18", "50").recommendation
        assert rec.season is Season.AUTUMN
        assert rec.indoor_temperature_display == "22.0"
        assert rec.indoor_humidity_display == "50"
        assert rec.advice == ""

    def test_humidity_just_above_70(self):
        """70.0001% lowers the humidity target, 70% does not."""
        assert compute("4", "1", "20", "70").recommendation.indoor_humidity == 50
        assert compute("4", "1", "20", "70.0001").recommendation.indoor_humidity == 45

    def test_humidity_30_not_adjusted(self):
        """30% takes the unadjusted branch."""
        assert compute("4", "1", "20", "30").recommendation.indoor_humidity == 50


# =============================================================================
# Tests: Output record
# =============================================================================


class TestRecommendationRecord:
    """Test the display record built from a recommendation."""

    def test_as_dict(self):
        """The record matches the display shape."""
        rec = compute("7", "15", "33", "55").recommendation
        assert rec.as_dict() == {
            "date": "7월 15일",
            "season": "여름",
            "outdoorConditions": {"temperature": 33.0, "humidity": 55.0},
            "recommendedIndoor": {"temperature": "27.0", "humidity": "50"},
            "advice": ADVICE_HEATWAVE,
        }

    def test_date_label_not_zero_padded(self):
        """Single digit months and days are not padded."""
        rec = compute("03", "05", "15", "50").recommendation
        assert rec.date_label == "3월 5일"

    def test_half_degree_formatting(self):
        """Half degree targets keep their fraction."""
        rec = compute("8", "1", "27", "50").recommendation
        assert rec.indoor_temperature_display == "26.5"


class TestDeterminism:
    """The computation is a pure function."""

    def test_identical_inputs_identical_results(self):
        """Two calls with the same input produce equal results."""
        first = compute("1", "10", "-10", "25")
        second = compute("1", "10", "-10", "25")
        assert first == second
        assert first.recommendation.as_dict() == second.recommendation.as_dict()

    def test_identical_errors(self):
        """Errors are deterministic too."""
        assert compute("4", "40", "20", "50") == compute("4", "40", "20", "50")


class TestComfortResult:
    """A result holds exactly one outcome."""

    def test_neither_outcome_rejected(self):
        """A result without recommendation or error is invalid."""
        with pytest.raises(ValueError):
            ComfortResult()

    def test_both_outcomes_rejected(self):
        """A result cannot carry a recommendation and an error."""
        rec = compute("7", "15", "33", "55").recommendation
        error = ValidationError(ErrorKind.INVALID_DAY, "bad day", max_days=30)
        with pytest.raises(ValueError):
            ComfortResult(recommendation=rec, error=error)

    def test_error_result_is_not_ok(self):
        """Failed results report ok as False."""
        assert not compute("", "", "", "").ok
