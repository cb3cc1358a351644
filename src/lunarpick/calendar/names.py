"""Display names for lunar years, months and days."""

from __future__ import annotations

from lunar_python.util import LunarUtil

from lunarpick.calendar.models import LunarMonthInfo, LunarYearInfo

LEAP_PREFIX = "闰"

# 初一 .. 三十
DAY_NAMES: tuple[str, ...] = tuple(LunarUtil.DAY[1:31])


def chinese_digits(number: int) -> str:
    """Spell each decimal digit with a Chinese numeral: 2024 -> 二〇二四."""
    return "".join(LunarUtil.NUMBER[int(ch)] for ch in str(number))


def year_name(year: LunarYearInfo, ganzhi: bool = True) -> str:
    name = chinese_digits(year.year)
    if ganzhi:
        return f"{name} {year.gan_zhi}"
    return name


def month_name(month: LunarMonthInfo) -> str:
    prefix = LEAP_PREFIX if month.is_leap else ""
    return f"{prefix}{LunarUtil.MONTH[month.magnitude]}月"


def day_names(day_count: int) -> list[str]:
    return list(DAY_NAMES[:day_count])
