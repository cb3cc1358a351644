"""Calendar data: value types, display names and the lunar-python oracle."""

from lunarpick.calendar.models import LunarDate, LunarMonthInfo, LunarYearInfo, SolarDate
from lunarpick.calendar.oracle import CalendarOracle

__all__ = ["CalendarOracle", "LunarDate", "LunarMonthInfo", "LunarYearInfo", "SolarDate"]
