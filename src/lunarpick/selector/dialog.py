"""
Lunar date selector - the surface a picker UI talks to.

The UI fills its three pickers from ``year_names``, ``month_names`` and
``day_names``, reports index changes through the ``on_*_changed`` methods,
and calls ``confirm()`` when the user accepts.

Usage:
    selector = LunarDateSelector(date(2024, 2, 10), on_select=print)
    selector.on_year_changed(selector.year_index + 1)
    selector.confirm()   # prints epoch milliseconds of the chosen solar date
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from lunarpick.calendar.models import LunarDate, SolarDate
from lunarpick.calendar.names import year_name
from lunarpick.calendar.oracle import CalendarOracle
from lunarpick.core.config import Config
from lunarpick.core.events import EventBus, EventTypes
from lunarpick.selector.state import Selection, SelectionState

logger = logging.getLogger(__name__)

OnSelect = Callable[[int], None]


class LunarDateSelector:
    """
    One selector per dialog invocation.

    Args:
        initial: Solar date to seed the pickers with (default: today)
        on_select: Completion callback receiving epoch milliseconds
        oracle: Calendar data source (default: built from ``config``)
        config: Configuration (default: ``Config()``)
        bus: Event bus for picker refresh notifications

    Raises:
        InvalidDateError: ``initial`` falls outside the supported lunar years
    """

    def __init__(
        self,
        initial: date | SolarDate | None = None,
        on_select: OnSelect | None = None,
        oracle: CalendarOracle | None = None,
        config: Config | None = None,
        bus: EventBus | None = None,
    ):
        if oracle is None:
            config = config or Config()
            oracle = CalendarOracle(*config.year_range)

        self.oracle = oracle
        self.bus = bus or EventBus()
        self.on_select = on_select
        self._show_ganzhi = config.show_ganzhi if config is not None else True

        if initial is None:
            initial = date.today()
        if isinstance(initial, date):
            initial = SolarDate.from_date(initial)

        self.state = SelectionState.from_solar(oracle, initial, bus=self.bus)
        self._confirmed: SolarDate | None = None

        logger.debug("Selector seeded from %s -> %r", initial, self.state)

    # -- display lists ---------------------------------------------------

    @property
    def year_names(self) -> list[str]:
        return [year_name(y, ganzhi=self._show_ganzhi) for y in self.oracle.years]

    @property
    def month_names(self) -> list[str]:
        return self.state.month_names

    @property
    def day_names(self) -> list[str]:
        return self.state.day_names

    @property
    def year_index(self) -> int:
        return self.state.year_index

    @property
    def month_index(self) -> int:
        return self.state.month_index

    @property
    def day_index(self) -> int:
        return self.state.day_index

    @property
    def lunar_date(self) -> LunarDate:
        return self.state.lunar_date()

    # -- picker callbacks ------------------------------------------------

    def on_year_changed(self, year_index: int) -> Selection:
        return self.state.on_year_changed(year_index)

    def on_month_changed(self, month_index: int) -> Selection:
        return self.state.on_month_changed(month_index)

    def on_day_changed(self, day_index: int) -> Selection:
        return self.state.on_day_changed(day_index)

    # -- output ----------------------------------------------------------

    def get_selection(self) -> SolarDate:
        """Solar date of the current selection, without confirming."""
        return self.state.confirm()

    @property
    def confirmed(self) -> bool:
        return self._confirmed is not None

    def confirm(self) -> SolarDate:
        """
        Accept the selection and hand it to ``on_select``.

        The callback fires once per selector; later calls return the
        date confirmed first.
        """
        if self._confirmed is not None:
            logger.warning("Selector already confirmed as %s; ignoring", self._confirmed)
            return self._confirmed

        solar = self.state.confirm()
        self._confirmed = solar
        logger.info("Lunar %s confirmed as solar %s", self.state.lunar_date(), solar)

        self.bus.publish(EventTypes.SELECTION_CONFIRMED, solar)
        if self.on_select is not None:
            self.on_select(solar.to_epoch_millis())
        return solar

    def __repr__(self) -> str:
        return f"LunarDateSelector({self.state!r})"
