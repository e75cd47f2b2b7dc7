"""Pure calendar calculations, no UI dependencies.

Gregorian only. Dates are plain ``datetime.date`` values; week arithmetic is
done on proleptic ordinals so weeks touching the ends of the supported range
can still be numbered.
"""

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from enum import IntEnum


class InvalidArgument(ValueError):
    """A year, month or option outside the supported range."""


class WeekStart(IntEnum):
    """First day of the week, valued as the ``calendar`` weekday constants."""

    MONDAY = calendar.MONDAY
    SUNDAY = calendar.SUNDAY

    @property
    def min_days_in_first_week(self) -> int:
        # ISO 8601 for Monday (week holding the first Thursday),
        # week holding January 1 for Sunday.
        return 4 if self is WeekStart.MONDAY else 1


@dataclass(frozen=True)
class WeekInfo:
    """One calendar week; ``end_date`` is the last day belonging to it."""

    start_date: date
    end_date: date
    week_number: int
    year_for_week: int


def _check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidArgument(f"Year {year} outside supported range {MINYEAR}-{MAXYEAR}")


def _check_month(year: int, month: int) -> None:
    _check_year(year)
    if not 1 <= month <= 12:
        raise InvalidArgument(f"Month {month} outside 1-12")


def _from_ordinal(ordinal: int) -> date:
    try:
        return date.fromordinal(ordinal)
    except (ValueError, OverflowError) as e:
        raise InvalidArgument(f"Day ordinal {ordinal} outside supported date range") from e


def _jan1_ordinal(year: int) -> int:
    """Proleptic ordinal of January 1st, valid for any integer year."""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400 + 1


def _weekday_offset(ordinal: int, week_start: WeekStart) -> int:
    """Days between the week start and the given day (0-6)."""
    weekday = (ordinal + 6) % 7  # Monday == 0, as date.weekday()
    return (weekday - week_start) % 7


def resolve_min_days(week_start: WeekStart, min_days: int | None) -> int:
    if min_days is None:
        return WeekStart(week_start).min_days_in_first_week
    if not 1 <= min_days <= 7:
        raise InvalidArgument(f"Minimum days in first week must be 1-7, got {min_days}")
    return min_days


def _first_week_ordinal(year: int, week_start: WeekStart, min_days: int) -> int:
    """Ordinal of the first day of week 1 of *year*."""
    jan1 = _jan1_ordinal(year)
    offset = _weekday_offset(jan1, week_start)
    start = jan1 - offset
    if 7 - offset < min_days:
        start += 7
    return start


# ------------------------------------------------------------------
# Month arithmetic
# ------------------------------------------------------------------
def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month, leap years included."""
    _check_month(year, month)
    return calendar.monthrange(year, month)[1]


def clamp_day(day: int, year: int, month: int) -> int:
    """Clamp *day* into 1..days_in_month(year, month)."""
    return max(1, min(day, days_in_month(year, month)))


def date_from_components(year: int, month: int, day: int) -> date:
    """Build a date, clamping the day to the length of the month."""
    return date(year, month, clamp_day(day, year, month))


def add_days(d: date, n: int) -> date:
    """Return the date *n* calendar days after *d* (negative moves back)."""
    return _from_ordinal(d.toordinal() + n)


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


# ------------------------------------------------------------------
# Weeks
# ------------------------------------------------------------------
def week_bounds(d: date, week_start: WeekStart = WeekStart.MONDAY) -> tuple[date, date]:
    """Return the first and last day of the week containing *d*."""
    start = d.toordinal() - _weekday_offset(d.toordinal(), week_start)
    return _from_ordinal(start), _from_ordinal(start + 6)


def week_of_year(
    d: date,
    week_start: WeekStart = WeekStart.MONDAY,
    min_days: int | None = None,
) -> tuple[int, int]:
    """Return ``(year_for_week, week_number)`` for the week containing *d*.

    Week 1 of a year is the first week with at least *min_days* days in that
    year. Monday weeks with the default of 4 reproduce ``date.isocalendar()``.
    Late-December days may belong to week 1 of the next year and early-January
    days to the last week of the previous one.
    """
    min_days = resolve_min_days(week_start, min_days)
    start = d.toordinal() - _weekday_offset(d.toordinal(), week_start)
    year = d.year + 1
    while True:
        first = _first_week_ordinal(year, week_start, min_days)
        if start >= first:
            return year, (start - first) // 7 + 1
        year -= 1


def weeks_overlapping(
    year: int,
    month: int,
    week_start: WeekStart = WeekStart.MONDAY,
    min_days: int | None = None,
) -> list[WeekInfo]:
    """Return every week intersecting the month, ordered by start date.

    Weeks running into the previous or next month are included once. The
    ``year_for_week`` of boundary weeks is kept as computed, so December can
    end with week 1 of the following year.

    Raises ``InvalidArgument`` for a bad year or month, and for the two months
    whose boundary weeks leave the date range: January of year 1 with Sunday
    weeks and December 9999.
    """
    min_days = resolve_min_days(week_start, min_days)
    length = days_in_month(year, month)
    first_day = date(year, month, 1)
    last = first_day.toordinal() + length - 1

    weeks: list[WeekInfo] = []
    seen: set[tuple[int, int]] = set()
    for ordinal in range(first_day.toordinal(), last + 1):
        day = date.fromordinal(ordinal)
        key = week_of_year(day, week_start, min_days)
        if key in seen:
            continue
        start = ordinal - _weekday_offset(ordinal, week_start)
        end_exclusive = start + 7
        if end_exclusive > first_day.toordinal() and start <= last:
            weeks.append(WeekInfo(
                start_date=_from_ordinal(start),
                end_date=_from_ordinal(end_exclusive - 1),
                week_number=key[1],
                year_for_week=key[0],
            ))
            seen.add(key)
    weeks.sort(key=lambda w: w.start_date)
    return weeks
