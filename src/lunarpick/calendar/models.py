"""
Calendar value types.

Months are identified by a signed number: the magnitude is the month of
the year (1-12) and a negative sign marks the leap (intercalary) month.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

MILLIS_PER_DAY = 24 * 3600 * 1000


@dataclass(frozen=True)
class LunarMonthInfo:
    """
    One month of a lunar year as reported by the calendar data.

    Attributes:
        year: Lunar year the month belongs to
        month: Signed month number (-5 = leap fifth month)
        day_count: Days in this month (29 or 30)
    """
    year: int
    month: int
    day_count: int

    @property
    def magnitude(self) -> int:
        """Month number without the leap sign."""
        return abs(self.month)

    @property
    def is_leap(self) -> bool:
        return self.month < 0


@dataclass(frozen=True)
class LunarYearInfo:
    """A supported lunar year with its months in calendar order."""
    year: int
    gan_zhi: str
    months: tuple[LunarMonthInfo, ...]

    @property
    def leap_month(self) -> LunarMonthInfo | None:
        """The leap entry of this year, if any."""
        for month in self.months:
            if month.is_leap:
                return month
        return None


@dataclass(frozen=True)
class LunarDate:
    """A lunar (year, signed month, day) triple."""
    year: int
    month: int
    day: int

    @property
    def is_leap_month(self) -> bool:
        return self.month < 0


@dataclass(frozen=True)
class SolarDate:
    """A Gregorian calendar date."""
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> "SolarDate":
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_epoch_day(self) -> int:
        """Days since 1970-01-01."""
        return self.to_date().toordinal() - date(1970, 1, 1).toordinal()

    def to_epoch_millis(self) -> int:
        """Milliseconds since the epoch at this date's midnight."""
        return self.to_epoch_day() * MILLIS_PER_DAY

    def isoformat(self) -> str:
        return self.to_date().isoformat()

    def __str__(self) -> str:
        return self.isoformat()
