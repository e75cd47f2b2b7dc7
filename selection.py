"""Picker granularities and the selection values a picker emits."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from calendar_logic import InvalidArgument


class TimeGranularity(Enum):
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"

    @property
    def display_name(self) -> str:
        """Canonical short name shown on the granularity switch."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: "str | TimeGranularity") -> "TimeGranularity":
        """Accept an enum member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(g.value for g in cls)
            raise InvalidArgument(f"Unknown granularity {value!r}. Expected one of: {names}.") from None


_DISPLAY_NAMES = {
    TimeGranularity.YEAR: "年",
    TimeGranularity.MONTH: "月",
    TimeGranularity.WEEK: "周",
    TimeGranularity.DAY: "日",
}


@dataclass(frozen=True)
class YearSelection:
    year: int

    @property
    def granularity(self) -> TimeGranularity:
        return TimeGranularity.YEAR


@dataclass(frozen=True)
class MonthSelection:
    year: int
    month: int

    @property
    def granularity(self) -> TimeGranularity:
        return TimeGranularity.MONTH


@dataclass(frozen=True)
class WeekSelection:
    start_date: date
    end_date: date
    week_number: int

    @property
    def granularity(self) -> TimeGranularity:
        return TimeGranularity.WEEK


@dataclass(frozen=True)
class DaySelection:
    date: date

    @property
    def granularity(self) -> TimeGranularity:
        return TimeGranularity.DAY


Selection = YearSelection | MonthSelection | WeekSelection | DaySelection
