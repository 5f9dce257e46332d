from __future__ import annotations

import pytest

from time_tracker.backup.service import BackupService
from time_tracker.core.enums import DayType
from time_tracker.core.exceptions import ValidationError
from time_tracker.employees.memory_employee_repository import InMemoryEmployeeRepository
from time_tracker.employees.model import Employee
from time_tracker.workdays.memory_workday_repository import InMemoryWorkDayRepository
from time_tracker.workdays.model import TimeEntry, WorkDay


@pytest.fixture
def repos():
    employees = InMemoryEmployeeRepository([Employee("e1", "Anna", "Engineer")])
    workdays = InMemoryWorkDayRepository(
        [
            WorkDay("e1", "2025-04-15", DayType.WORK_DAY, time_entry=TimeEntry("09:00", "18:00")),
            WorkDay("e1", "2025-04-16", DayType.DAY_OFF),
        ]
    )
    return employees, workdays


def test_export_then_restore_into_empty_store(repos):
    snapshot = BackupService(repos[1], repos[0]).export()

    employees, workdays = InMemoryEmployeeRepository(), InMemoryWorkDayRepository()
    restored = BackupService(workdays, employees).restore(snapshot)

    assert restored == {"employees": 1, "workDays": 2}
    assert employees.get_by_id("e1") == Employee("e1", "Anna", "Engineer")
    assert workdays.list_all() == repos[1].list_all()


def test_restore_skips_invalid_entries(repos, caplog):
    employees, workdays = repos
    svc = BackupService(workdays, employees)

    restored = svc.restore(
        {
            "workDays": [
                {"employeeId": "e2", "date": "2025-05-01", "dayType": "VACATION"},
                {"employeeId": 5, "date": "2025-05-02", "dayType": "VACATION"},
                {"employeeId": "e2", "date": "2025-05-03", "dayType": "HOLIDAY"},
                "junk",
            ]
        }
    )

    assert restored == {"workDays": 1}
    assert [wd.date for wd in workdays.list_all()] == ["2025-05-01"]
    assert employees.get_by_id("e1") is not None
    assert "Skipped 3 invalid workDays entries" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"workDays": "nope"},
        {"workDays": [{"date": "2025-05-01"}]},
        {"employees": [{"name": "no id"}]},
    ],
)
def test_restore_rejects_unusable_payload(repos, payload):
    employees, workdays = repos
    before = workdays.list_all()

    with pytest.raises(ValidationError):
        BackupService(workdays, employees).restore(payload)

    assert workdays.list_all() == before


def test_restore_applies_record_rules(repos, caplog):
    employees, workdays = repos

    restored = BackupService(workdays, employees).restore(
        {
            "workDays": [
                {"employeeId": "e1", "date": "15.04.2025", "dayType": "WORK_DAY", "timeEntry": {"startTime": "09:00"}},
                {
                    "employeeId": "e1",
                    "date": "2025-04-16",
                    "dayType": "VACATION",
                    "timeEntry": {"startTime": "09:00", "endTime": "18:00"},
                },
                {
                    "employeeId": "e1",
                    "date": "2025-04-17",
                    "dayType": "WORK_DAY",
                    "timeEntry": {"startTime": "9:00", "endTime": "2025-04-17T18:00:00.000Z"},
                },
                {"employeeId": "e1", "date": "2025-04-18", "dayType": "WORK_DAY", "timeEntry": {"startTime": "nine"}},
            ]
        }
    )

    assert restored == {"workDays": 2}
    stored = {wd.date: wd for wd in workdays.list_all()}
    assert sorted(stored) == ["2025-04-16", "2025-04-17"]
    assert stored["2025-04-16"].time_entry is None
    assert stored["2025-04-17"].time_entry == TimeEntry("09:00", "18:00", None, None)
    assert "Skipped 2 invalid workDays entries" in caplog.text
