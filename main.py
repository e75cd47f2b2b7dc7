"""Entry point: console driver for the picker engine."""

import logging
from datetime import date, datetime
from typing import Optional

import typer

from calendar_logic import InvalidArgument, WeekStart, next_month, weeks_overlapping
from formatting import format_granularity, format_month, format_selection, format_week
from picker import TimePicker
from settings import granularities_from_settings, load_settings, week_start_from_settings

logger = logging.getLogger(__name__)

app = typer.Typer(help="Time picker: list the weeks of a month and resolve picker selections.")


def enable_debug_logging() -> None:
    logging.basicConfig(level=logging.DEBUG)
    logger.debug("Debug logging enabled.")


def handle_exception(e: Exception) -> None:
    logger.error("Exception occurred: %s", e, exc_info=e)
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


def _parse_week_start(value: Optional[str], settings: dict) -> WeekStart:
    if value is None:
        return week_start_from_settings(settings)
    try:
        return WeekStart[value.strip().upper()]
    except KeyError:
        raise InvalidArgument(f"Invalid week start: {value}. Expected monday or sunday.") from None


def _parse_date(value: Optional[str]) -> date:
    if value:
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError as e:
            raise InvalidArgument(f"Invalid date format: {value}. Expected YYYY-MM-DD.") from e
    return date.today()


@app.command("weeks")
def list_weeks(
    year: int = typer.Argument(..., help="Year, e.g. 2024"),
    month: int = typer.Argument(..., help="Month, 1-12"),
    months: int = typer.Option(1, min=1, help="Number of consecutive months to list"),
    week_start: Optional[str] = typer.Option(None, help="monday or sunday (default from settings)"),
    locale: Optional[str] = typer.Option(None, help="Locale tag, e.g. en or zh-Hans-CN"),
    debug: bool = typer.Option(False, help="Enable debug logging"),
):
    """Print the week rows a picker shows for a month."""
    if debug:
        enable_debug_logging()

    settings = load_settings()
    locale = locale or settings["locale"]
    try:
        start = _parse_week_start(week_start, settings)
        for i in range(months):
            if months > 1:
                if i:
                    typer.echo("")
                typer.echo(format_month(year, month, locale))
            weeks = weeks_overlapping(year, month, start, settings["min_days_in_first_week"])
            logger.debug("%d-%02d has %d week rows", year, month, len(weeks))
            for index, week in enumerate(weeks):
                typer.echo(f"{index}  {format_week(week, locale)}")
            year, month = next_month(year, month)
    except Exception as e:
        handle_exception(e)


@app.command("select")
def select(
    granularity: str = typer.Argument(..., help="year, month, week or day"),
    year: Optional[int] = typer.Option(None, help="Move the year wheel"),
    month: Optional[int] = typer.Option(None, help="Move the month wheel"),
    day: Optional[int] = typer.Option(None, help="Move the day wheel (clamped to the month)"),
    week_index: Optional[int] = typer.Option(None, help="Pick a week row (0-based)"),
    start_date: Optional[str] = typer.Option(
        None, "--date", help="Date the picker opens on (YYYY-MM-DD, default today)"
    ),
    week_start: Optional[str] = typer.Option(None, help="monday or sunday (default from settings)"),
    locale: Optional[str] = typer.Option(None, help="Locale tag, e.g. en or zh-Hans-CN"),
    debug: bool = typer.Option(False, help="Enable debug logging"),
):
    """Open a picker, apply the given wheel moves and print the selection."""
    if debug:
        enable_debug_logging()

    settings = load_settings()
    locale = locale or settings["locale"]
    try:
        picker = TimePicker.from_settings(
            settings,
            granularity=granularity,
            week_start=_parse_week_start(week_start, settings),
            today=_parse_date(start_date),
        )
        if year is not None:
            picker.set_year(year)
        if month is not None:
            picker.set_month(month)
        if day is not None:
            picker.set_day(day)
        if week_index is not None:
            picker.set_week_index(week_index)
        typer.echo(format_selection(picker.selection, locale))
    except Exception as e:
        handle_exception(e)


@app.command("granularities")
def list_granularities(
    locale: Optional[str] = typer.Option(None, help="Locale tag, e.g. en or zh-Hans-CN"),
):
    """Print the granularities the configured picker offers."""
    settings = load_settings()
    locale = locale or settings["locale"]
    initial = settings["initial_granularity"] or settings["granularities"][0]
    for granularity in granularities_from_settings(settings):
        marker = "*" if granularity.value == initial else " "
        typer.echo(f"{marker} {granularity.value:<6} {format_granularity(granularity, locale)}")


if __name__ == "__main__":
    app()
