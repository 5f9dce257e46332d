from __future__ import annotations

import pytest

from time_tracker.core.enums import DayType
from time_tracker.core.exceptions import InvalidFilter, InvalidPeriod
from time_tracker.reports.builder import build_report
from time_tracker.reports.model import ReportFilters, ReportPeriod
from time_tracker.workdays.model import TimeEntry, WorkDay, WorkStats

SHIFT = TimeEntry("09:00", "18:00", "13:00", "14:00")


def day(employee_id, date, day_type=DayType.WORK_DAY, *, tasks=(), connections=(), stats=None):
    return WorkDay(
        employee_id=employee_id,
        date=date,
        day_type=day_type,
        time_entry=SHIFT if day_type == DayType.WORK_DAY else None,
        work_stats=stats,
        tasks=tuple(tasks),
        connections=tuple(connections),
    )


RECORDS = [
    day("e1", "2025-03-31"),
    day("e1", "2025-04-01", tasks=[{"id": "t1", "name": "Install router"}]),
    day("e1", "2025-04-15", connections=[{"id": "c1", "name": "Client A"}]),
    day("e2", "2025-04-15", DayType.VACATION),
    day("e2", "2025-04-30"),
    day("e3", "2025-05-01"),
]

APRIL = ReportPeriod(start="2025-04-01", end="2025-04-30")


def test_period_bounds_are_inclusive_and_lexical():
    report = build_report(RECORDS, APRIL)

    assert set(report.summaries) == {"e1", "e2"}
    assert [wd.date for wd in report.days["e1"]] == ["2025-04-01", "2025-04-15"]
    assert [wd.date for wd in report.days["e2"]] == ["2025-04-15", "2025-04-30"]
    assert report.summaries["e1"].total_work_hours == 16.0


def test_end_before_start_is_invalid_period():
    with pytest.raises(InvalidPeriod):
        build_report(RECORDS, ReportPeriod(start="2025-04-30", end="2025-04-01"))


@pytest.mark.parametrize("start, end", [("2025-4-1", "2025-04-30"), ("2025-04-01", ""), ("2025-02-30", "2025-03-01")])
def test_malformed_period_is_invalid(start, end):
    with pytest.raises(InvalidPeriod):
        build_report(RECORDS, ReportPeriod(start=start, end=end))


def test_single_day_period():
    report = build_report(RECORDS, ReportPeriod(start="2025-04-15", end="2025-04-15"))

    assert set(report.summaries) == {"e1", "e2"}


def test_employee_filter():
    report = build_report(RECORDS, APRIL, ReportFilters(employee_id="e2"))

    assert list(report.summaries) == ["e2"]
    assert report.summaries["e2"].count(DayType.VACATION) == 1


def test_day_type_filter():
    report = build_report(RECORDS, APRIL, ReportFilters(day_type=DayType.VACATION))

    assert list(report.summaries) == ["e2"]
    assert report.summaries["e2"].total_days == 1


def test_has_tasks_true_excludes_records_with_empty_task_list():
    records = [day("e9", "2025-04-10", tasks=[])]

    report = build_report(records, APRIL, ReportFilters(has_tasks=True))

    assert report.summaries == {}
    assert report.days == {}


def test_has_tasks_false_keeps_only_records_without_tasks():
    report = build_report(RECORDS, APRIL, ReportFilters(employee_id="e1", has_tasks=False))

    assert [wd.date for wd in report.days["e1"]] == ["2025-04-15"]


def test_has_connections_filter():
    report = build_report(RECORDS, APRIL, ReportFilters(has_connections=True))

    assert list(report.summaries) == ["e1"]
    assert [wd.date for wd in report.days["e1"]] == ["2025-04-15"]


def test_single_record_round_trip():
    record = day("e5", "2025-04-20", DayType.SICK_LEAVE, stats=WorkStats(tasks_completed=3, connections_established=2))

    summary = build_report([record], APRIL).summaries["e5"]

    assert summary.total_tasks == 3
    assert summary.total_connections == 2
    assert summary.count(DayType.SICK_LEAVE) == 1
    assert all(summary.count(dt) == 0 for dt in DayType if dt != DayType.SICK_LEAVE)


def test_filters_from_query():
    filters = ReportFilters.from_query({"employeeId": "e1", "dayType": "WORK_DAY", "hasTasks": "true", "hasConnections": "0"})

    assert filters == ReportFilters(employee_id="e1", day_type=DayType.WORK_DAY, has_tasks=True, has_connections=False)


def test_filters_from_query_wildcards_mean_unset():
    assert ReportFilters.from_query({"employeeId": "all", "dayType": "ALL", "hasTasks": ""}) == ReportFilters()


@pytest.mark.parametrize(
    "args",
    [{"dayType": "HOLIDAY"}, {"hasTasks": "maybe"}, {"hasConnections": "2"}],
)
def test_filters_from_query_rejects_bad_values(args):
    with pytest.raises(InvalidFilter):
        ReportFilters.from_query(args)


@pytest.mark.parametrize(
    "filters",
    [ReportFilters(employee_id="  "), ReportFilters(day_type="WORK_DAY"), ReportFilters(has_tasks="yes")],
)
def test_builder_rejects_malformed_filters(filters):
    with pytest.raises(InvalidFilter):
        build_report(RECORDS, APRIL, filters)


@pytest.mark.parametrize("wildcard", ["ALL", "all", "All"])
def test_filters_wildcards_are_case_insensitive(wildcard):
    assert ReportFilters.from_query({"employeeId": wildcard, "dayType": wildcard}) == ReportFilters()
