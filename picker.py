"""Selection model for a year / month / week / day picker.

The indices a picker UI moves (year, month, day, week row) live in a plain
``PickerState``. ``recompute`` turns a state into its normalized copy plus the
``Selection`` it stands for; ``TimePicker`` wraps that for callers that want a
stateful object with change notifications. Nothing here knows about rendering.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Iterable

from calendar_logic import (
    InvalidArgument,
    WeekInfo,
    WeekStart,
    date_from_components,
    days_in_month,
    next_month,
    prev_month,
    resolve_min_days,
    weeks_overlapping,
)
from selection import (
    DaySelection,
    MonthSelection,
    Selection,
    TimeGranularity,
    WeekSelection,
    YearSelection,
)
from settings import granularities_from_settings, week_start_from_settings

logger = logging.getLogger(__name__)

DEFAULT_YEARS = range(2000, 2100)


@dataclass
class PickerState:
    """Raw cursor state of a picker."""

    granularity: TimeGranularity
    selected_date: date
    year: int
    month: int
    day: int
    week_index: int = 0

    @classmethod
    def from_date(cls, granularity: TimeGranularity, d: date) -> "PickerState":
        return cls(granularity, d, d.year, d.month, d.day)


def sync_indices(state: PickerState) -> None:
    """Re-derive year/month/day from the held date and reset the week row."""
    d = state.selected_date
    state.year, state.month, state.day = d.year, d.month, d.day
    state.week_index = 0


def sync_date(state: PickerState) -> None:
    """Clamp the day to the month and rebuild the held date from the indices."""
    state.selected_date = date_from_components(state.year, state.month, state.day)
    state.day = state.selected_date.day


def current_selection(
    state: PickerState,
    week_start: WeekStart = WeekStart.MONDAY,
    min_days: int | None = None,
) -> Selection:
    """Map the state to a selection.

    A week row that does not exist in the current month (a stale index) yields
    the month itself instead of an error.
    """
    granularity = state.granularity
    if granularity is TimeGranularity.YEAR:
        return YearSelection(state.year)
    if granularity is TimeGranularity.MONTH:
        return MonthSelection(state.year, state.month)
    if granularity is TimeGranularity.WEEK:
        weeks = weeks_overlapping(state.year, state.month, week_start, min_days)
        if 0 <= state.week_index < len(weeks):
            week = weeks[state.week_index]
            return WeekSelection(week.start_date, week.end_date, week.week_number)
        logger.debug(
            "Week row %d not in %d-%02d (%d weeks); selecting the month",
            state.week_index, state.year, state.month, len(weeks),
        )
        return MonthSelection(state.year, state.month)
    return DaySelection(state.selected_date)


def recompute(
    state: PickerState,
    week_start: WeekStart = WeekStart.MONDAY,
    min_days: int | None = None,
) -> tuple[PickerState, Selection]:
    """Return a normalized copy of *state* and its selection; *state* is untouched."""
    new_state = replace(state)
    sync_date(new_state)
    return new_state, current_selection(new_state, week_start, min_days)


def _check_index(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name.capitalize()} must be an integer, got {value!r}")
    return value


class TimePicker:
    """Stateful picker: apply index events, get a consistent selection back.

    Every event recomputes synchronously and then calls
    ``on_selection_changed`` with the new selection. Not thread-safe; one
    caller owns an instance.
    """

    def __init__(
        self,
        granularity: TimeGranularity | str | None = None,
        allowed: Iterable[TimeGranularity | str] | None = None,
        week_start: WeekStart = WeekStart.MONDAY,
        min_days: int | None = None,
        today: date | None = None,
        years: range = DEFAULT_YEARS,
        on_selection_changed: Callable[[Selection], None] | None = None,
    ) -> None:
        if allowed is None:
            allowed = list(TimeGranularity)
        self.allowed: tuple[TimeGranularity, ...] = tuple(
            dict.fromkeys(TimeGranularity.parse(g) for g in allowed)
        )
        if not self.allowed:
            raise InvalidArgument("At least one granularity must be allowed")

        initial = self.allowed[0] if granularity is None else TimeGranularity.parse(granularity)
        if initial not in self.allowed:
            raise InvalidArgument(f"Initial granularity {initial.value!r} is not allowed")

        self.week_start = WeekStart(week_start)
        self.min_days = min_days
        resolve_min_days(self.week_start, min_days)
        if len(years) == 0:
            raise InvalidArgument("Year range is empty")
        self.years = years
        self.on_selection_changed = on_selection_changed

        self._state = PickerState.from_date(initial, today or date.today())
        sync_indices(self._state)
        self._commit()

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def year_only(cls, **kwargs) -> "TimePicker":
        return cls(TimeGranularity.YEAR, allowed=[TimeGranularity.YEAR], **kwargs)

    @classmethod
    def month_only(cls, **kwargs) -> "TimePicker":
        return cls(TimeGranularity.MONTH, allowed=[TimeGranularity.MONTH], **kwargs)

    @classmethod
    def week_only(cls, **kwargs) -> "TimePicker":
        return cls(TimeGranularity.WEEK, allowed=[TimeGranularity.WEEK], **kwargs)

    @classmethod
    def day_only(cls, **kwargs) -> "TimePicker":
        return cls(TimeGranularity.DAY, allowed=[TimeGranularity.DAY], **kwargs)

    @classmethod
    def custom(
        cls,
        granularities: Iterable[TimeGranularity | str],
        default: TimeGranularity | str | None = None,
        **kwargs,
    ) -> "TimePicker":
        """Picker restricted to *granularities*, starting on *default* or the first."""
        granularities = list(granularities)
        if default is None and granularities:
            default = granularities[0]
        return cls(default, allowed=granularities, **kwargs)

    @classmethod
    def from_settings(cls, settings: dict, **kwargs) -> "TimePicker":
        """Build a picker from a dict returned by ``settings.load_settings``."""
        kwargs.setdefault("week_start", week_start_from_settings(settings))
        kwargs.setdefault("min_days", settings.get("min_days_in_first_week"))
        kwargs.setdefault("years", range(settings["first_year"], settings["last_year"] + 1))
        default = kwargs.pop("granularity", None) or settings.get("initial_granularity")
        return cls.custom(granularities_from_settings(settings), default=default, **kwargs)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def state(self) -> PickerState:
        return replace(self._state)

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def granularity(self) -> TimeGranularity:
        return self._state.granularity

    @property
    def weeks(self) -> list[WeekInfo]:
        """Week rows for the current year and month."""
        return weeks_overlapping(self._state.year, self._state.month, self.week_start, self.min_days)

    @property
    def days(self) -> range:
        """Day rows for the current year and month."""
        return range(1, days_in_month(self._state.year, self._state.month) + 1)

    @property
    def shows_granularity_switch(self) -> bool:
        return len(self.allowed) > 1

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def set_granularity(self, granularity: TimeGranularity | str) -> Selection:
        granularity = TimeGranularity.parse(granularity)
        if granularity not in self.allowed:
            raise InvalidArgument(f"Granularity {granularity.value!r} is not allowed here")
        self._state.granularity = granularity
        sync_indices(self._state)
        return self._commit()

    def set_year(self, year: int) -> Selection:
        return self._move_to(year, self._state.month)

    def set_month(self, month: int) -> Selection:
        return self._move_to(self._state.year, month)

    def set_day(self, day: int) -> Selection:
        self._state.day = _check_index("day", day)
        return self._commit()

    def set_week_index(self, index: int) -> Selection:
        self._state.week_index = _check_index("week index", index)
        return self._commit()

    def next_month(self) -> Selection:
        """Step the month wheel forward, rolling into the next year."""
        return self._move_to(*next_month(self._state.year, self._state.month))

    def prev_month(self) -> Selection:
        """Step the month wheel back, rolling into the previous year."""
        return self._move_to(*prev_month(self._state.year, self._state.month))

    def _move_to(self, year: int, month: int) -> Selection:
        _check_index("year", year)
        _check_index("month", month)
        # A picker opened outside its wheel range can still move its month.
        if year != self._state.year and year not in self.years:
            raise InvalidArgument(
                f"Year {year} outside picker range {self.years.start}-{self.years.stop - 1}"
            )
        days_in_month(year, month)
        # Another month means another week list.
        if (year, month) != (self._state.year, self._state.month):
            self._state.week_index = 0
        self._state.year, self._state.month = year, month
        return self._commit()

    def _commit(self) -> Selection:
        self._state, self._selection = recompute(self._state, self.week_start, self.min_days)
        logger.debug("Selection is now %r", self._selection)
        if self.on_selection_changed is not None:
            self.on_selection_changed(self._selection)
        return self._selection
