"""
lunarpick - lunar calendar date selection.

Keeps cascading year/month/day pickers over the traditional lunar calendar
consistent and converts the chosen lunar date to a Gregorian date.
"""

__version__ = "1.0.0"

from lunarpick.calendar.models import LunarDate, LunarMonthInfo, LunarYearInfo, SolarDate
from lunarpick.calendar.oracle import CalendarOracle
from lunarpick.core.config import Config
from lunarpick.core.events import EventBus, EventTypes
from lunarpick.core.exceptions import (
    ConfigurationError,
    InvalidDateError,
    LunarPickError,
    OutOfRangeError,
)
from lunarpick.selector.dialog import LunarDateSelector
from lunarpick.selector.state import Selection, SelectionState

__all__ = [
    "__version__",
    "CalendarOracle",
    "Config",
    "EventBus",
    "EventTypes",
    "LunarDate",
    "LunarDateSelector",
    "LunarMonthInfo",
    "LunarYearInfo",
    "Selection",
    "SelectionState",
    "SolarDate",
    "LunarPickError",
    "ConfigurationError",
    "OutOfRangeError",
    "InvalidDateError",
]
