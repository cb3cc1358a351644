"""
Cascading year/month/day selection.

Three pickers depend on each other strictly downstream:

    year change  -> month list rebuilt -> month re-resolved -> day clamped
    month change -> day count rebuilt  -> day clamped
    day change   -> leaf value only

Indices are saturated into range instead of being reset or rejected, so the
user's month and day survive edits upstream wherever they still fit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lunarpick.calendar.models import LunarDate, LunarMonthInfo, LunarYearInfo, SolarDate
from lunarpick.calendar.names import day_names, month_name
from lunarpick.calendar.oracle import CalendarOracle
from lunarpick.core.events import EventBus, EventTypes

logger = logging.getLogger(__name__)


def _clamp(index: int, last_index: int) -> int:
    return max(0, min(index, last_index))


@dataclass(frozen=True)
class Selection:
    """Immutable snapshot of the three picker indices."""
    year_index: int
    month_index: int
    day_index: int


class SelectionState:
    """
    Owns the selected year, month and day indices.

    Invariants after every transition:
        0 <= month_index < len(month_list)
        0 <= day_index < day_count

    Args:
        oracle: Calendar data source
        year_index: Offset into the oracle's supported years
        month_index: Index into that year's month list
        day_index: Zero-based day of month
        bus: Optional event bus notified after each transition
    """

    def __init__(
        self,
        oracle: CalendarOracle,
        year_index: int = 0,
        month_index: int = 0,
        day_index: int = 0,
        bus: EventBus | None = None,
    ):
        self.oracle = oracle
        self.bus = bus

        self._year_index = year_index
        self._year = oracle.year_at(year_index)
        self._month_list = oracle.months_of(self._year)
        self._month_index = _clamp(month_index, len(self._month_list) - 1)
        self._day_count = oracle.day_count(self.month)
        self._day_index = _clamp(day_index, self._day_count - 1)

    @classmethod
    def from_lunar(
        cls,
        oracle: CalendarOracle,
        lunar: LunarDate,
        bus: EventBus | None = None,
    ) -> "SelectionState":
        """Seed a selection pointing at ``lunar`` (leap month matched exactly)."""
        year_index = oracle.index_of_year(lunar.year)
        months = oracle.months_of(oracle.year_at(year_index))
        month_index = next(
            (i for i, m in enumerate(months) if m.month == lunar.month),
            0,
        )
        return cls(oracle, year_index, month_index, lunar.day - 1, bus=bus)

    @classmethod
    def from_solar(
        cls,
        oracle: CalendarOracle,
        solar: SolarDate,
        bus: EventBus | None = None,
    ) -> "SelectionState":
        return cls.from_lunar(oracle, oracle.to_lunar(solar), bus=bus)

    # -- read side -------------------------------------------------------

    @property
    def year_index(self) -> int:
        return self._year_index

    @property
    def month_index(self) -> int:
        return self._month_index

    @property
    def day_index(self) -> int:
        return self._day_index

    @property
    def year(self) -> LunarYearInfo:
        return self._year

    @property
    def month(self) -> LunarMonthInfo:
        return self._month_list[self._month_index]

    @property
    def day(self) -> int:
        """One-based day of month."""
        return self._day_index + 1

    @property
    def month_list(self) -> tuple[LunarMonthInfo, ...]:
        return self._month_list

    @property
    def day_count(self) -> int:
        return self._day_count

    @property
    def month_names(self) -> list[str]:
        return [month_name(m) for m in self._month_list]

    @property
    def day_names(self) -> list[str]:
        return day_names(self._day_count)

    def snapshot(self) -> Selection:
        return Selection(self._year_index, self._month_index, self._day_index)

    def lunar_date(self) -> LunarDate:
        return LunarDate(self._year.year, self.month.month, self.day)

    # -- transitions -----------------------------------------------------

    def on_year_changed(self, year_index: int) -> Selection:
        """
        Select another year and re-resolve the month and day.

        The previously selected month magnitude is looked up in the new
        year's list regardless of leap status; when it is missing the old
        raw index is kept, capped to the new list.
        """
        previous_magnitude = self.month.magnitude
        previous_index = self._month_index

        self._year = self.oracle.year_at(year_index)
        self._year_index = year_index
        self._month_list = self.oracle.months_of(self._year)

        self._month_index = next(
            (i for i, m in enumerate(self._month_list) if m.magnitude == previous_magnitude),
            _clamp(previous_index, len(self._month_list) - 1),
        )
        logger.debug(
            "Year -> %d, month %d resolved to index %d of %d",
            self._year.year,
            previous_magnitude,
            self._month_index,
            len(self._month_list),
        )
        self._publish(EventTypes.MONTH_LIST_CHANGED, self.month_names)

        self._refresh_days()
        return self._changed()

    def on_month_changed(self, month_index: int) -> Selection:
        """Select another month of the current year and clamp the day."""
        self._month_index = _clamp(month_index, len(self._month_list) - 1)
        logger.debug("Month -> index %d (%d)", self._month_index, self.month.month)

        self._refresh_days()
        return self._changed()

    def on_day_changed(self, day_index: int) -> Selection:
        """Select another day; nothing downstream depends on it."""
        self._day_index = _clamp(day_index, self._day_count - 1)
        return self._changed()

    def confirm(self) -> SolarDate:
        """Convert the current selection to its solar date."""
        return self.oracle.to_solar(self._year.year, self.month.month, self.day)

    # -- helpers ---------------------------------------------------------

    def _refresh_days(self) -> None:
        self._day_count = self.oracle.day_count(self.month)
        self._day_index = _clamp(self._day_index, self._day_count - 1)
        self._publish(EventTypes.DAY_COUNT_CHANGED, self._day_count)

    def _changed(self) -> Selection:
        selection = self.snapshot()
        self._publish(EventTypes.SELECTION_CHANGED, selection)
        return selection

    def _publish(self, event_type: str, data) -> None:
        if self.bus is not None:
            self.bus.publish(event_type, data)

    def __repr__(self) -> str:
        lunar = self.lunar_date()
        return f"SelectionState({lunar.year}/{lunar.month}/{lunar.day})"
