from __future__ import annotations

import pytest

from time_tracker.core.enums import DayType
from time_tracker.core.exceptions import InvalidPeriod, ValidationError
from time_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository
from time_tracker.employees.model import Employee
from time_tracker.reports.model import ReportFilters
from time_tracker.reports.service import REPORT_CSV_FIELDS, ReportService
from time_tracker.workdays.model import TimeEntry, WorkDay, WorkStats


class FakeWorkDayRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def get_by_date(self, date: str):
        return [wd for wd in self._rows if wd.date == date]

    def get_by_date_range(self, start: str, end: str):
        self.last_args = {"start": start, "end": end}
        return [wd for wd in self._rows if start <= wd.date <= end]


ROWS = [
    WorkDay(
        employee_id="e1",
        date="2025-04-15",
        day_type=DayType.WORK_DAY,
        time_entry=TimeEntry("09:00", "18:00", "13:00", "14:00"),
        work_stats=WorkStats(tasks_completed=5, connections_established=2),
        tasks=({"id": "t1", "name": "Install router"},),
        comment="on site",
    ),
    WorkDay(employee_id="e2", date="2025-04-15", day_type=DayType.VACATION),
    WorkDay(
        employee_id="e3",
        date="2025-04-15",
        day_type=DayType.WORK_DAY,
        time_entry=TimeEntry("oops", "18:00"),
    ),
    WorkDay(employee_id="e1", date="2025-04-16", day_type=DayType.DAY_OFF),
]

EMPLOYEES = InMemoryEmployeeRepository(
    [Employee("e1", "Anna", "Engineer"), Employee("e2", "Boris", "Manager"), Employee("e3", "Chen", "Engineer")]
)


def test_report_forwards_period_to_store():
    repo = FakeWorkDayRepo(ROWS)
    svc = ReportService(repo, EMPLOYEES)

    report = svc.build_report(start="2025-04-15", end="2025-04-15")

    assert repo.last_args == {"start": "2025-04-15", "end": "2025-04-15"}
    assert set(report.summaries) == {"e1", "e2", "e3"}


def test_invalid_period_does_not_hit_store():
    repo = FakeWorkDayRepo(ROWS)
    svc = ReportService(repo)

    with pytest.raises(InvalidPeriod):
        svc.build_report(start="2025-04-16", end="2025-04-15")

    assert repo.last_args is None


def test_report_to_dict_shape():
    svc = ReportService(FakeWorkDayRepo(ROWS), EMPLOYEES)
    report = svc.build_report(start="2025-04-01", end="2025-04-30", filters=ReportFilters(employee_id="e1"))

    out = svc.report_to_dict(report)

    assert out["period"] == {"startDate": "2025-04-01", "endDate": "2025-04-30"}
    assert len(out["report"]) == 1
    item = out["report"][0]
    assert item["employee"] == {"id": "e1", "name": "Anna", "position": "Engineer"}
    assert [d["date"] for d in item["days"]] == ["2025-04-15", "2025-04-16"]
    assert item["summary"]["totalDays"] == 2
    assert item["summary"]["workDays"] == 1
    assert item["summary"]["daysOff"] == 1
    assert item["summary"]["totalWorkHours"] == 8.0
    assert item["summary"]["totalTasks"] == 5
    assert item["summary"]["totalConnections"] == 2


def test_report_to_dict_without_directory_uses_id_as_name():
    svc = ReportService(FakeWorkDayRepo(ROWS))
    report = svc.build_report(start="2025-04-15", end="2025-04-15", filters=ReportFilters(employee_id="e2"))

    item = svc.report_to_dict(report)["report"][0]

    assert item["employee"] == {"id": "e2", "name": "e2", "position": ""}
    assert item["summary"]["vacation"] == 1


def test_failed_record_is_reported_in_summary():
    svc = ReportService(FakeWorkDayRepo(ROWS), EMPLOYEES)
    report = svc.build_report(start="2025-04-15", end="2025-04-15", filters=ReportFilters(employee_id="e3"))

    summary = svc.report_to_dict(report)["report"][0]["summary"]

    assert summary["workDays"] == 1
    assert summary["failedRecords"] == 1
    assert summary["totalWorkHours"] == 0


def test_csv_rows():
    svc = ReportService(FakeWorkDayRepo(ROWS), EMPLOYEES)
    report = svc.build_report(start="2025-04-15", end="2025-04-16")

    rows = svc.report_csv_rows(report)

    assert len(rows) == 4
    assert all(set(row) == set(REPORT_CSV_FIELDS) for row in rows)
    anna = rows[0]
    assert anna["employee_name"] == "Anna"
    assert anna["day_type"] == "Work day"
    assert anna["start_time"] == "09:00"
    assert anna["work_time"] == "08:00"
    assert anna["tasks_completed"] == 5
    vacation = next(r for r in rows if r["employee_id"] == "e2")
    assert vacation["work_time"] == ""
    broken = next(r for r in rows if r["employee_id"] == "e3")
    assert broken["start_time"] == ""
    assert broken["work_time"] == "--:--"


def test_dashboard():
    svc = ReportService(FakeWorkDayRepo(ROWS), EMPLOYEES)

    out = svc.dashboard("2025-04-15")

    assert out["employees"] == {"total": 3, "present": 2, "absent": 1}
    assert out["workTime"]["totalMinutes"] == 480
    assert out["workTime"]["averageMinutes"] == 480
    assert out["workTime"]["total"] == "08:00"
    assert [r["employeeId"] for r in out["recent"]] == ["e1", "e2", "e3"]
    assert out["recent"][0]["workTime"] == "08:00"
    assert out["recent"][0]["employee"]["name"] == "Anna"
    assert out["recent"][1]["workTime"] == "--:--"
    assert out["recent"][2]["workTime"] == "--:--"


def test_dashboard_empty_day():
    out = ReportService(FakeWorkDayRepo([])).dashboard("2025-01-01")

    assert out["employees"] == {"total": 0, "present": 0, "absent": 0}
    assert out["workTime"]["averageMinutes"] is None
    assert out["workTime"]["average"] == "--:--"
    assert out["recent"] == []


def test_dashboard_rejects_bad_date():
    with pytest.raises(ValidationError):
        ReportService(FakeWorkDayRepo(ROWS)).dashboard("15.04.2025")
