from __future__ import annotations

import calendar
from datetime import date

import pytest

from fakes import visit
from zoppertrack.attendance.aggregator import (
    AttendanceAggregator,
    build_presence_index,
    enumerate_date_keys,
    resolve_range,
)
from zoppertrack.attendance.model import DateRangeSelector
from zoppertrack.core.enums import CellStatus, DateFilter
from zoppertrack.core.exceptions import ValidationError
from zoppertrack.visits.model import Executive

E1 = Executive(id="E1", name="Asha")
E2 = Executive(id="E2", name="Bilal")


def test_today_and_yesterday_are_single_days(fixed_today):
    assert enumerate_date_keys(DateRangeSelector.today(), fixed_today) == ["2024-03-20"]
    assert enumerate_date_keys(DateRangeSelector.yesterday(), fixed_today) == ["2024-03-19"]


def test_yesterday_crosses_month_boundary():
    assert resolve_range(DateRangeSelector.yesterday(), date(2024, 3, 1)) == (date(2024, 2, 29), date(2024, 2, 29))


@pytest.mark.parametrize("year,month", [(2024, 2), (2023, 2), (2024, 3), (2024, 4), (2024, 12)])
def test_custom_covers_whole_month_in_ascending_order(fixed_today, year, month):
    keys = enumerate_date_keys(DateRangeSelector.custom(month=month, year=year), fixed_today)

    assert len(keys) == calendar.monthrange(year, month)[1]
    assert keys == sorted(keys)
    assert keys[0] == f"{year}-{month:02d}-01"


@pytest.mark.parametrize(
    "mode,count,oldest",
    [
        (DateFilter.LAST_7_DAYS, 7, "2024-03-14"),
        (DateFilter.LAST_30_DAYS, 30, "2024-02-20"),
        (DateFilter.LAST_90_DAYS, 90, "2023-12-22"),
        (DateFilter.LAST_YEAR, 367, "2023-03-20"),
    ],
)
def test_rolling_ranges_end_today_newest_first(fixed_today, mode, count, oldest):
    keys = enumerate_date_keys(DateRangeSelector(mode), fixed_today)

    assert len(keys) == count
    assert keys == sorted(keys, reverse=True)
    assert keys[0] == "2024-03-20"
    assert keys[-1] == oldest


def test_last_year_from_leap_day_starts_on_feb_28():
    start, end = resolve_range(DateRangeSelector(DateFilter.LAST_YEAR), date(2024, 2, 29))

    assert start == date(2023, 2, 28)
    assert end == date(2024, 2, 29)


def test_custom_requires_valid_month():
    with pytest.raises(ValidationError):
        DateRangeSelector.custom(month=13, year=2024)


def test_duplicate_visits_collapse_into_one_cell(fixed_today):
    visits = [visit("E1", "15/03/2024", "A"), visit("E1", "15/03/2024", "A", visit_id="2")]
    selector = DateRangeSelector.custom(month=3, year=2024)

    matrix = AttendanceAggregator().aggregate(visits, selector, frozenset(), [E1], today=fixed_today)

    cell = matrix.cell("2024-03-15", "E1")
    assert cell.visited is True
    assert cell.stores == ("A",)
    assert matrix.summary_for("E1").present_days == 1


def test_store_order_is_first_seen_and_blank_names_still_count():
    index = build_presence_index(
        [
            visit("E1", "15/03/2024", "B"),
            visit("E1", "15/03/2024", " A "),
            visit("E1", "15/03/2024", "B"),
            visit("E2", "16/03/2024", "  "),
        ]
    )

    assert index[("2024-03-15", "E1")] == ["B", "A"]
    assert index[("2024-03-16", "E2")] == []


@pytest.mark.parametrize("bad", ["", "2024-03-15", "15/03", "xx/03/2024", "31/02/2024", "15/13/2024"])
def test_unparseable_dates_are_skipped(bad):
    assert build_presence_index([visit("E1", bad, "A")]) == {}


def test_sunday_is_weekend_independent_of_holidays(fixed_today):
    selector = DateRangeSelector.custom(month=3, year=2024)
    matrix = AttendanceAggregator().aggregate([], selector, frozenset({"2024-03-12"}), [E1], today=fixed_today)

    for c in matrix.rows[0].cells:
        assert c.is_weekend == (date.fromisoformat(c.date_key).isoweekday() == 7)

    assert matrix.cell("2024-03-12", "E1").is_holiday is True
    assert matrix.cell("2024-03-12", "E1").is_weekend is False


def test_holiday_on_sunday_is_excluded_once(fixed_today):
    selector = DateRangeSelector.custom(month=3, year=2024)
    holidays = frozenset({"2024-03-17", "2024-03-08"})

    matrix = AttendanceAggregator().aggregate([], selector, holidays, [E1], today=fixed_today)

    sunday = matrix.cell("2024-03-17", "E1")
    assert sunday.is_weekend and sunday.is_holiday
    assert sunday.status == CellStatus.HOLIDAY
    # 31 days - 5 Sundays - 1 weekday holiday
    assert matrix.summary_for("E1").working_days == 25


def test_no_visits_means_zero_percent(fixed_today):
    selector = DateRangeSelector.custom(month=3, year=2024)
    matrix = AttendanceAggregator().aggregate([], selector, frozenset(), [E1, E2], today=fixed_today)

    for row in matrix.rows:
        assert row.summary.working_days == 26
        assert row.summary.present_days == 0
        assert row.summary.percentage == 0


def test_percentage_is_zero_without_working_days():
    sunday = date(2024, 3, 17)
    matrix = AttendanceAggregator().aggregate(
        [visit("E1", "17/03/2024", "A")], DateRangeSelector.today(), frozenset(), [E1], today=sunday
    )

    summary = matrix.summary_for("E1")
    assert summary.working_days == 0
    assert summary.percentage == 0
    # Sunday visits are shown but never counted
    assert matrix.cell("2024-03-17", "E1").visited is True


def test_visits_outside_range_do_not_count(fixed_today):
    visits = [visit("E1", "19/03/2024", "A"), visit("E1", "20/03/2024", "B")]

    matrix = AttendanceAggregator().aggregate(visits, DateRangeSelector.today(), frozenset(), [E1], today=fixed_today)

    assert matrix.date_keys == ("2024-03-20",)
    assert matrix.summary_for("E1").present_days == 1
    assert matrix.cell("2024-03-19", "E1") is None


def test_aggregation_is_repeatable(fixed_today):
    visits = [visit("E1", "15/03/2024", "A"), visit("E2", "16/03/2024", "B"), visit("E2", "bad", "C")]
    selector = DateRangeSelector.custom(month=3, year=2024)
    holidays = frozenset({"2024-03-08"})
    agg = AttendanceAggregator()

    first = agg.aggregate(visits, selector, holidays, [E1, E2], today=fixed_today)
    second = agg.aggregate(visits, selector, holidays, [E1, E2], today=fixed_today)

    assert first == second


def test_executive_filter(fixed_today):
    matrix = AttendanceAggregator().aggregate(
        [], DateRangeSelector.today(), frozenset(), [E1, E2], today=fixed_today, executive_id="E2"
    )
    assert [r.executive.id for r in matrix.rows] == ["E2"]


def test_unknown_executive_shows_everyone(fixed_today):
    matrix = AttendanceAggregator().aggregate(
        [visit("E1", "20/03/2024", "A")], DateRangeSelector.today(), frozenset(), [E1, E2],
        today=fixed_today, executive_id="gone",
    )

    assert [r.executive.id for r in matrix.rows] == ["E1", "E2"]
    assert matrix.summary_for("E1").present_days == 1
