"""Locale-conditioned labels for years, months, weeks and days.

Styles are looked up by the language subtag of a locale tag ("zh-Hans-CN",
"zh_CN" and "zh" all select the "zh" style). Languages without a registered
style use the Latin style.
"""

from abc import ABC, abstractmethod
from datetime import date

from calendar_logic import WeekInfo
from selection import (
    DaySelection,
    MonthSelection,
    Selection,
    TimeGranularity,
    WeekSelection,
    YearSelection,
)

DEFAULT_LOCALE = "en"

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
MONTH_ABBR = [name[:3] for name in MONTH_NAMES]


class LabelStyle(ABC):
    """Base style; subclasses render every label kind."""

    @abstractmethod
    def year(self, year: int) -> str:
        ...

    @abstractmethod
    def month(self, year: int, month: int) -> str:
        ...

    @abstractmethod
    def day(self, d: date) -> str:
        ...

    @abstractmethod
    def week(self, start: date, end: date, week_number: int) -> str:
        ...

    @abstractmethod
    def week_number(self, week_number: int) -> str:
        ...

    @abstractmethod
    def month_name(self, month: int) -> str:
        ...

    @abstractmethod
    def day_number(self, day: int) -> str:
        ...

    @abstractmethod
    def granularity(self, granularity: TimeGranularity) -> str:
        ...


class LatinStyle(LabelStyle):
    """Latin labels such as "May 2024" and "Week 20"."""

    def year(self, year: int) -> str:
        return str(year)

    def month(self, year: int, month: int) -> str:
        return f"{MONTH_NAMES[month - 1]} {year}"

    def day(self, d: date) -> str:
        return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"

    def week(self, start: date, end: date, week_number: int) -> str:
        first = f"{MONTH_ABBR[start.month - 1]} {start.day}"
        last = f"{MONTH_ABBR[end.month - 1]} {end.day}"
        if start.year != end.year:
            first = f"{first}, {start.year}"
            last = f"{last}, {end.year}"
        return f"{first} to {last} ({self.week_number(week_number)})"

    def week_number(self, week_number: int) -> str:
        return f"Week {week_number}"

    def month_name(self, month: int) -> str:
        return MONTH_NAMES[month - 1]

    def day_number(self, day: int) -> str:
        return str(day)

    def granularity(self, granularity: TimeGranularity) -> str:
        return granularity.value.capitalize()


class CjkStyle(LabelStyle):
    """Dense CJK labels such as "2024年5月" and "第20周"."""

    def year(self, year: int) -> str:
        return f"{year}年"

    def month(self, year: int, month: int) -> str:
        return f"{year}年{month}月"

    def day(self, d: date) -> str:
        return f"{d.year}年{d.month}月{d.day}日"

    def week(self, start: date, end: date, week_number: int) -> str:
        first = f"{start.month}月{start.day}日"
        last = f"{end.month}月{end.day}日"
        if start.year != end.year:
            first = f"{start.year}年{first}"
            last = f"{end.year}年{last}"
        return f"{first} 至 {last} ({self.week_number(week_number)})"

    def week_number(self, week_number: int) -> str:
        return f"第{week_number}周"

    def month_name(self, month: int) -> str:
        return f"{month}月"

    def day_number(self, day: int) -> str:
        return f"{day}日"

    def granularity(self, granularity: TimeGranularity) -> str:
        return granularity.display_name


_FALLBACK = LatinStyle()
_STYLES: dict[str, LabelStyle] = {"zh": CjkStyle()}


def language_of(locale: str | None) -> str:
    """Return the lower-cased language subtag of a locale tag."""
    tag = (locale or DEFAULT_LOCALE).strip().replace("_", "-")
    return tag.split("-", 1)[0].lower()


def register_style(language: str, style: LabelStyle) -> None:
    """Add or replace the style used for *language*."""
    _STYLES[language_of(language)] = style


def style_for(locale: str | None) -> LabelStyle:
    return _STYLES.get(language_of(locale), _FALLBACK)


def format_year(year: int, locale: str | None = None) -> str:
    return style_for(locale).year(year)


def format_month(year: int, month: int, locale: str | None = None) -> str:
    return style_for(locale).month(year, month)


def format_day(d: date, locale: str | None = None) -> str:
    return style_for(locale).day(d)


def format_week(week: WeekInfo | WeekSelection, locale: str | None = None) -> str:
    """Label a week; both years are shown when it straddles New Year."""
    return style_for(locale).week(week.start_date, week.end_date, week.week_number)


def format_week_number(week_number: int, locale: str | None = None) -> str:
    return style_for(locale).week_number(week_number)


def format_month_name(month: int, locale: str | None = None) -> str:
    """Month wheel row label."""
    return style_for(locale).month_name(month)


def format_day_number(day: int, locale: str | None = None) -> str:
    """Day wheel row label."""
    return style_for(locale).day_number(day)


def format_granularity(granularity: TimeGranularity, locale: str | None = None) -> str:
    return style_for(locale).granularity(granularity)


def format_selection(selection: Selection, locale: str | None = None) -> str:
    if isinstance(selection, YearSelection):
        return format_year(selection.year, locale)
    if isinstance(selection, MonthSelection):
        return format_month(selection.year, selection.month, locale)
    if isinstance(selection, WeekSelection):
        return format_week(selection, locale)
    if isinstance(selection, DaySelection):
        return format_day(selection.date, locale)
    raise TypeError(f"Not a selection: {selection!r}")
