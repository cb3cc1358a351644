"""
Tests for the lunar-python backed calendar oracle.
"""

from __future__ import annotations

from datetime import date

import pytest

from lunarpick.calendar.models import LunarDate, SolarDate
from lunarpick.calendar.oracle import CalendarOracle, build_year_table
from lunarpick.core.exceptions import InvalidDateError, OutOfRangeError


@pytest.fixture(scope="module")
def oracle():
    """Oracle over the full supported range."""
    return CalendarOracle()


class TestYearTable:
    """Test the static year lookup table."""

    def test_covers_full_range(self, oracle: CalendarOracle):
        assert len(oracle) == 201
        assert oracle.year_at(0).year == 1900
        assert oracle.year_at(200).year == 2100

    def test_table_is_shared(self):
        """The table is built once per range and shared between oracles."""
        assert CalendarOracle().years is CalendarOracle().years
        assert build_year_table(1900, 2100) is CalendarOracle().years

    def test_year_at_negative_index(self, oracle: CalendarOracle):
        with pytest.raises(OutOfRangeError) as exc_info:
            oracle.year_at(-1)
        assert exc_info.value.index == -1

    def test_year_at_past_end(self, oracle: CalendarOracle):
        with pytest.raises(OutOfRangeError) as exc_info:
            oracle.year_at(201)
        assert exc_info.value.size == 201
        assert "valid 0..200" in str(exc_info.value)

    def test_index_of_year_round_trip(self, oracle: CalendarOracle):
        assert oracle.index_of_year(2024) == 124
        assert oracle.year_at(oracle.index_of_year(2024)).year == 2024

    def test_index_of_unsupported_year(self, oracle: CalendarOracle):
        with pytest.raises(OutOfRangeError):
            oracle.index_of_year(2101)

    def test_narrowed_range(self):
        narrow = CalendarOracle(2000, 2010)
        assert len(narrow) == 11
        assert narrow.year_at(0).year == 2000
        with pytest.raises(OutOfRangeError):
            narrow.index_of_year(1999)

    def test_inverted_range(self):
        with pytest.raises(ValueError):
            CalendarOracle(2010, 2000)


class TestMonths:
    """Test month lists and day counts for every supported year."""

    def test_every_year_has_ordered_months(self, oracle: CalendarOracle):
        for year in oracle.years:
            months = oracle.months_of(year)
            assert len(months) in (12, 13), year.year

            magnitudes = [m.magnitude for m in months]
            assert magnitudes == sorted(magnitudes), year.year
            assert set(magnitudes) == set(range(1, 13)), year.year

            leaps = [m for m in months if m.is_leap]
            assert len(leaps) == (len(months) - 12), year.year
            assert len(leaps) <= 1

    def test_leap_month_follows_regular_month(self, oracle: CalendarOracle):
        for year in oracle.years:
            months = oracle.months_of(year)
            for index, month in enumerate(months):
                if month.is_leap:
                    assert index > 0
                    assert months[index - 1].month == month.magnitude

    def test_day_counts(self, oracle: CalendarOracle):
        for year in oracle.years:
            for month in oracle.months_of(year):
                assert oracle.day_count(month) in (29, 30)

    def test_year_2023_has_leap_second_month(self, oracle: CalendarOracle):
        months = oracle.months_of(2023)
        assert len(months) == 13
        assert [m.month for m in months][:4] == [1, 2, -2, 3]
        assert oracle.year_at(oracle.index_of_year(2023)).leap_month.month == -2

    def test_common_year(self, oracle: CalendarOracle):
        months = oracle.months_of(2024)
        assert [m.month for m in months] == list(range(1, 13))
        assert oracle.year_at(oracle.index_of_year(2024)).leap_month is None

    def test_months_by_number_or_entity(self, oracle: CalendarOracle):
        year = oracle.year_at(oracle.index_of_year(2020))
        assert oracle.months_of(year) == oracle.months_of(2020)

    def test_day_count_matches_conversion(self, oracle: CalendarOracle):
        """A month's length equals the gap to the next month's first day."""
        months = oracle.months_of(2023)
        for current, following in zip(months, months[1:]):
            start = oracle.to_solar(2023, current.month, 1).to_date()
            end = oracle.to_solar(2023, following.month, 1).to_date()
            assert (end - start).days == current.day_count


class TestConversion:
    """Test lunar <-> solar conversion."""

    def test_lunar_new_year_2024(self, oracle: CalendarOracle):
        assert oracle.to_solar(2024, 1, 1) == SolarDate(2024, 2, 10)
        assert oracle.to_lunar(SolarDate(2024, 2, 10)) == LunarDate(2024, 1, 1)

    def test_to_lunar_accepts_date(self, oracle: CalendarOracle):
        assert oracle.to_lunar(date(2024, 2, 10)) == LunarDate(2024, 1, 1)

    def test_leap_and_regular_month_differ(self, oracle: CalendarOracle):
        regular = oracle.to_solar(2023, 2, 1)
        leap = oracle.to_solar(2023, -2, 1)
        assert regular != leap
        assert leap.to_date() > regular.to_date()

    @pytest.mark.parametrize(
        "lunar",
        [
            LunarDate(1900, 1, 1),
            LunarDate(1984, 10, 15),
            LunarDate(2020, 4, 10),
            LunarDate(2020, -4, 10),
            LunarDate(2023, -2, 29),
            LunarDate(2024, 12, 1),
            LunarDate(2025, -6, 1),
            LunarDate(2099, 8, 15),
        ],
    )
    def test_round_trip(self, oracle: CalendarOracle, lunar: LunarDate):
        solar = oracle.to_solar(lunar.year, lunar.month, lunar.day)
        assert oracle.to_lunar(solar) == lunar

    def test_round_trip_every_month_of_leap_year(self, oracle: CalendarOracle):
        for month in oracle.months_of(2023):
            for day in (1, month.day_count):
                solar = oracle.to_solar(2023, month.month, day)
                assert oracle.to_lunar(solar) == LunarDate(2023, month.month, day)

    def test_to_solar_unsupported_year(self, oracle: CalendarOracle):
        with pytest.raises(InvalidDateError) as exc_info:
            oracle.to_solar(1899, 1, 1)
        assert exc_info.value.year == 1899

    def test_to_solar_missing_leap_month(self, oracle: CalendarOracle):
        with pytest.raises(InvalidDateError):
            oracle.to_solar(2024, -2, 1)

    def test_to_solar_day_past_month_end(self, oracle: CalendarOracle):
        short = next(m for m in oracle.months_of(2024) if m.day_count == 29)
        with pytest.raises(InvalidDateError):
            oracle.to_solar(2024, short.month, 30)

    def test_to_lunar_before_supported_range(self, oracle: CalendarOracle):
        # 1900-01-01 still belongs to lunar year 1899
        with pytest.raises(InvalidDateError):
            oracle.to_lunar(SolarDate(1900, 1, 1))

    def test_to_lunar_invalid_solar_date(self, oracle: CalendarOracle):
        with pytest.raises(InvalidDateError) as exc_info:
            oracle.to_lunar(SolarDate(2023, 2, 30))
        assert exc_info.value.day == 30


class TestSolarDate:
    """Test solar date output helpers."""

    def test_epoch_values(self):
        assert SolarDate(1970, 1, 1).to_epoch_day() == 0
        assert SolarDate(1970, 1, 2).to_epoch_millis() == 86_400_000
        assert SolarDate(2024, 2, 10).to_epoch_day() == 19763

    def test_before_epoch(self):
        assert SolarDate(1969, 12, 31).to_epoch_millis() == -86_400_000

    def test_str(self):
        assert str(SolarDate(2024, 2, 10)) == "2024-02-10"
