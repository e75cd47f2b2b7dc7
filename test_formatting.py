from datetime import date

import pytest

import formatting
from calendar_logic import WeekInfo, weeks_overlapping
from formatting import (
    LatinStyle,
    format_day,
    format_day_number,
    format_granularity,
    format_month,
    format_month_name,
    format_selection,
    format_week,
    format_week_number,
    format_year,
    language_of,
    register_style,
)
from selection import DaySelection, MonthSelection, TimeGranularity, WeekSelection, YearSelection

NEW_YEAR_WEEK = WeekInfo(date(2024, 12, 30), date(2025, 1, 5), 1, 2025)
MAY_WEEK = WeekInfo(date(2024, 5, 13), date(2024, 5, 19), 20, 2024)


@pytest.mark.parametrize(
    "locale, expected",
    [("zh", "zh"), ("zh-Hans-CN", "zh"), ("zh_TW", "zh"), ("EN-us", "en"), (None, "en"), ("", "en")],
)
def test_language_of(locale, expected):
    assert language_of(locale) == expected


def test_format_month():
    assert format_month(2024, 5, "zh") == "2024年5月"
    assert format_month(2024, 5, "en") == "May 2024"
    assert format_month(2024, 5, "zh-Hans-CN") == "2024年5月"
    assert format_month(2024, 5, "de-CH") == "May 2024"


def test_format_year_and_day():
    assert format_year(2024, "zh") == "2024年"
    assert format_year(2024, "en") == "2024"
    assert format_day(date(2024, 5, 20), "zh") == "2024年5月20日"
    assert format_day(date(2024, 5, 20), "en") == "May 20, 2024"


def test_format_week_across_years_shows_both_years():
    assert format_week(NEW_YEAR_WEEK, "en") == "Dec 30, 2024 to Jan 5, 2025 (Week 1)"
    assert format_week(NEW_YEAR_WEEK, "zh") == "2024年12月30日 至 2025年1月5日 (第1周)"


def test_format_week_within_year_omits_years():
    assert format_week(MAY_WEEK, "en") == "May 13 to May 19 (Week 20)"
    assert format_week(MAY_WEEK, "zh") == "5月13日 至 5月19日 (第20周)"


def test_format_week_spanning_months():
    week = weeks_overlapping(2024, 12)[0]
    assert format_week(week) == "Nov 25 to Dec 1 (Week 48)"


def test_wheel_row_labels():
    assert format_week_number(20, "zh") == "第20周"
    assert format_week_number(20, "en") == "Week 20"
    assert format_month_name(5, "zh") == "5月"
    assert format_month_name(5, "en") == "May"
    assert format_day_number(5, "zh") == "5日"
    assert format_day_number(5, "en") == "5"


def test_format_granularity():
    assert format_granularity(TimeGranularity.WEEK, "zh") == "周"
    assert format_granularity(TimeGranularity.WEEK, "en") == "Week"
    assert [format_granularity(g, "zh") for g in TimeGranularity] == ["年", "月", "周", "日"]


def test_format_selection_dispatches_on_variant():
    assert format_selection(YearSelection(2024), "zh") == "2024年"
    assert format_selection(MonthSelection(2024, 5), "zh") == "2024年5月"
    assert format_selection(DaySelection(date(2024, 5, 20)), "en") == "May 20, 2024"
    week = WeekSelection(date(2024, 12, 30), date(2025, 1, 5), 1)
    assert format_selection(week, "en") == "Dec 30, 2024 to Jan 5, 2025 (Week 1)"
    with pytest.raises(TypeError):
        format_selection("2024", "en")


def test_register_style(monkeypatch):
    monkeypatch.setattr(formatting, "_STYLES", dict(formatting._STYLES))

    class GermanWeeks(LatinStyle):
        def week_number(self, week_number: int) -> str:
            return f"KW {week_number}"

    register_style("de-DE", GermanWeeks())
    assert format_week_number(20, "de") == "KW 20"
    assert format_week(MAY_WEEK, "de-CH") == "May 13 to May 19 (KW 20)"
    assert format_week_number(20, "en") == "Week 20"
    assert format_month(2024, 5, "zh") == "2024年5月"


def test_incomplete_style_cannot_be_instantiated():
    class YearsOnly(formatting.LabelStyle):
        def year(self, year: int) -> str:
            return str(year)

    with pytest.raises(TypeError):
        YearsOnly()
