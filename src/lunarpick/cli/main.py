"""
lunarpick CLI - Click-based command line interface.

Usage:
    lunarpick to-solar 2023 2 1 --leap     # leap second month, day 1
    lunarpick to-lunar 2024-02-10          # solar -> lunar
    lunarpick months 2023                  # month list with day counts
    lunarpick pick --date 2024-02-10 --year-index 125 --day-index 29
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import date, datetime
from functools import wraps
from typing import TypeVar

import click

from lunarpick.calendar.names import DAY_NAMES, month_name, year_name
from lunarpick.calendar.oracle import CalendarOracle
from lunarpick.core.config import Config
from lunarpick.core.exceptions import LunarPickError
from lunarpick.core.logging_setup import setup_logging
from lunarpick.selector.dialog import LunarDateSelector

# Windows UTF-8 encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

logger = logging.getLogger(__name__)

T = TypeVar("T")


def report_errors(f: Callable[..., T]) -> Callable[..., T]:
    """Decorator turning package errors into Click errors (exit code 1)."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except LunarPickError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def parse_date(ctx: click.Context, param: click.Parameter, value: str | None) -> date | None:
    """Click callback parsing YYYY-MM-DD."""
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Path to a YAML config file",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """Lunar calendar date picker

    Convert between lunar and solar dates and drive the cascading
    year/month/day selection from the command line.
    """
    try:
        config = Config(config_path)
        first, last = config.year_range
    except LunarPickError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(logging.DEBUG if verbose else config.log_level)

    ctx.obj = {
        "config": config,
        "oracle": CalendarOracle(first, last),
    }


@cli.command("to-solar")
@click.argument("year", type=int)
@click.argument("month", type=click.IntRange(1, 12))
@click.argument("day", type=click.IntRange(1, 30))
@click.option("--leap", is_flag=True, help="Month is the leap (intercalary) month")
@click.pass_obj
@report_errors
def to_solar(obj: dict, year: int, month: int, day: int, leap: bool) -> None:
    """Convert a lunar date to a solar date."""
    oracle: CalendarOracle = obj["oracle"]
    solar = oracle.to_solar(year, -month if leap else month, day)
    click.echo(solar.isoformat())


@cli.command("to-lunar")
@click.argument("solar", callback=parse_date)
@click.pass_obj
@report_errors
def to_lunar(obj: dict, solar: date) -> None:
    """Convert a solar date (YYYY-MM-DD) to a lunar date."""
    oracle: CalendarOracle = obj["oracle"]
    config: Config = obj["config"]

    lunar = oracle.to_lunar(solar)
    year = oracle.year_at(oracle.index_of_year(lunar.year))
    month = next(m for m in year.months if m.month == lunar.month)

    leap = " (leap)" if lunar.is_leap_month else ""
    click.echo(f"{lunar.year}-{abs(lunar.month)}-{lunar.day}{leap}")
    click.echo(
        f"{year_name(year, ganzhi=config.show_ganzhi)}年 {month_name(month)}{DAY_NAMES[lunar.day - 1]}"
    )


@cli.command()
@click.argument("year", type=int)
@click.pass_obj
@report_errors
def months(obj: dict, year: int) -> None:
    """List the months of a lunar year with their day counts."""
    oracle: CalendarOracle = obj["oracle"]

    for index, month in enumerate(oracle.months_of(year)):
        first_day = oracle.to_solar(year, month.month, 1)
        click.echo(
            f"{index:2d}  {month_name(month)}\t{oracle.day_count(month)} days\tfrom {first_day}"
        )


@cli.command()
@click.option("--date", "initial", callback=parse_date, help="Seed solar date (default: today)")
@click.option("--year-index", type=int, help="Select this year index")
@click.option("--month-index", type=int, help="Then select this month index")
@click.option("--day-index", type=int, help="Then select this day index")
@click.pass_obj
@report_errors
def pick(
    obj: dict,
    initial: date | None,
    year_index: int | None,
    month_index: int | None,
    day_index: int | None,
) -> None:
    """Run the cascading selection and print the confirmed date.

    Transitions apply in year, month, day order, the way a user would
    scroll the three pickers.
    """
    selector = LunarDateSelector(initial, oracle=obj["oracle"], config=obj["config"])

    if year_index is not None:
        selector.on_year_changed(year_index)
    if month_index is not None:
        selector.on_month_changed(month_index)
    if day_index is not None:
        selector.on_day_changed(day_index)

    click.echo(
        f"year:  [{selector.year_index}] {selector.year_names[selector.year_index]}"
    )
    click.echo(
        f"month: [{selector.month_index}] {selector.month_names[selector.month_index]}"
        f" of {len(selector.month_names)}"
    )
    click.echo(
        f"day:   [{selector.day_index}] {selector.day_names[selector.day_index]}"
        f" of {len(selector.day_names)}"
    )

    millis: list[int] = []
    selector.on_select = millis.append
    solar = selector.confirm()
    click.echo(f"solar: {solar.isoformat()} ({millis[0]} ms)")


if __name__ == "__main__":
    cli()
