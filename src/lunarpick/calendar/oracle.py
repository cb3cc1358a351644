"""
Calendar oracle adapter backed by lunar-python.

Translates the raw indices chosen by a picker into calendar entities and
performs the lunar <-> solar conversions.

Usage:
    from lunarpick.calendar.oracle import CalendarOracle

    oracle = CalendarOracle()
    year = oracle.year_at(123)                 # LunarYearInfo(year=2023, ...)
    months = oracle.months_of(year)            # 13 entries, leap second month included
    oracle.to_solar(2023, -2, 1)               # SolarDate(2023, 3, 22)
"""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache

from lunar_python import Lunar, LunarYear, Solar

from lunarpick.calendar.models import LunarDate, LunarMonthInfo, LunarYearInfo, SolarDate
from lunarpick.core.config import SUPPORTED_MAX_YEAR, SUPPORTED_MIN_YEAR
from lunarpick.core.exceptions import InvalidDateError, OutOfRangeError

logger = logging.getLogger(__name__)


def _load_year(year: int) -> LunarYearInfo:
    lunar_year = LunarYear.fromYear(year)
    months = tuple(
        LunarMonthInfo(year=year, month=m.getMonth(), day_count=m.getDayCount())
        for m in lunar_year.getMonths()
        if m.getYear() == year
    )
    return LunarYearInfo(year=year, gan_zhi=lunar_year.getGanZhi(), months=months)


@lru_cache(maxsize=None)
def build_year_table(first: int, last: int) -> tuple[LunarYearInfo, ...]:
    """Build the read-only year table for [first, last], once per range."""
    logger.debug("Building lunar year table %d..%d", first, last)
    return tuple(_load_year(year) for year in range(first, last + 1))


class CalendarOracle:
    """
    Read-only query surface over the lunar calendar data.

    Args:
        first_year: First supported lunar year (inclusive)
        last_year: Last supported lunar year (inclusive)
    """

    def __init__(self, first_year: int = SUPPORTED_MIN_YEAR, last_year: int = SUPPORTED_MAX_YEAR):
        if first_year > last_year:
            raise ValueError(f"first_year {first_year} is after last_year {last_year}")
        self.first_year = first_year
        self.last_year = last_year
        self._years = build_year_table(first_year, last_year)

    @property
    def years(self) -> tuple[LunarYearInfo, ...]:
        """Every supported year, ordered by year number."""
        return self._years

    def __len__(self) -> int:
        return len(self._years)

    def supports(self, year: int) -> bool:
        return self.first_year <= year <= self.last_year

    def year_at(self, index: int) -> LunarYearInfo:
        """Return the year at ``index`` offset from the first supported year."""
        if index < 0 or index >= len(self._years):
            raise OutOfRangeError("Year index out of range", index=index, size=len(self._years))
        return self._years[index]

    def index_of_year(self, year: int) -> int:
        """Inverse of :meth:`year_at`."""
        index = year - self.first_year
        if not self.supports(year):
            raise OutOfRangeError(
                f"Lunar year {year} is not supported", index=index, size=len(self._years)
            )
        return index

    def months_of(self, year: LunarYearInfo | int) -> tuple[LunarMonthInfo, ...]:
        """Months of a lunar year in calendar order, leap month after its regular one."""
        if isinstance(year, LunarYearInfo):
            return year.months
        return self.year_at(self.index_of_year(year)).months

    def day_count(self, month: LunarMonthInfo) -> int:
        """Number of days (29 or 30) in ``month``."""
        return month.day_count

    def to_solar(self, year: int, month: int, day: int) -> SolarDate:
        """
        Convert a lunar date to its solar date.

        Args:
            year: Lunar year
            month: Signed lunar month (negative for the leap month)
            day: Day of month (1-30)

        Raises:
            InvalidDateError: The triple is outside the supported range or does not exist
        """
        if not self.supports(year):
            raise InvalidDateError(
                f"Lunar year outside {self.first_year}..{self.last_year}",
                year=year, month=month, day=day,
            )
        try:
            solar = Lunar.fromYmd(year, month, day).getSolar()
        except Exception as e:
            raise InvalidDateError(str(e), year=year, month=month, day=day) from e

        result = SolarDate(solar.getYear(), solar.getMonth(), solar.getDay())
        logger.debug("Lunar %d/%d/%d -> solar %s", year, month, day, result)
        return result

    def to_lunar(self, solar: SolarDate | date) -> LunarDate:
        """
        Convert a solar date to its lunar date.

        Raises:
            InvalidDateError: The solar date is not valid or falls outside the supported range
        """
        try:
            value = solar if isinstance(solar, date) else solar.to_date()
        except ValueError as e:
            raise InvalidDateError(
                str(e), year=solar.year, month=solar.month, day=solar.day
            ) from e

        lunar = Solar.fromYmd(value.year, value.month, value.day).getLunar()
        result = LunarDate(lunar.getYear(), lunar.getMonth(), lunar.getDay())

        if not self.supports(result.year):
            raise InvalidDateError(
                f"Solar {value.isoformat()} is lunar year {result.year}, "
                f"outside {self.first_year}..{self.last_year}",
                year=value.year, month=value.month, day=value.day,
            )
        return result

    def __repr__(self) -> str:
        return f"CalendarOracle({self.first_year}..{self.last_year})"
