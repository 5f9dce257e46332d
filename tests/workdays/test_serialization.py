from __future__ import annotations

import json

import pytest

from time_tracker.core.enums import DayType
from time_tracker.core.exceptions import ValidationError
from time_tracker.employees.model import Employee
from time_tracker.workdays.model import TimeEntry, WorkDay, WorkStats
from time_tracker.workdays.serialization import decode_json_field, workday_from_dict, workday_to_dict


def test_decode_json_field_handles_double_encoding():
    value = json.dumps(json.dumps([{"id": "t1"}]))

    assert decode_json_field(value, field_name="tasks") == [{"id": "t1"}]


def test_decode_json_field_malformed_gives_default(caplog):
    assert decode_json_field("{not json", field_name="tasks", default=[]) == []
    assert "tasks" in caplog.text


def test_from_dict_reads_stored_row():
    wd = workday_from_dict(
        {
            "id": 7,
            "employeeId": "e1",
            "date": "2025-04-15",
            "dayType": "WORK_DAY",
            "timeEntry": json.dumps(json.dumps({"startTime": "09:00", "endTime": "18:00"})),
            "tasks": '[{"id": "t1", "name": "A"}, "junk"]',
            "connections": None,
            "comment": "",
        }
    )

    assert wd.id == "7"
    assert wd.time_entry == TimeEntry("09:00", "18:00", None, None)
    assert wd.tasks == ({"id": "t1", "name": "A"},)
    assert wd.connections == ()
    assert wd.work_stats is None
    assert wd.comment is None


def test_from_dict_requires_key_fields():
    with pytest.raises(ValidationError):
        workday_from_dict({"employeeId": "e1", "date": "2025-04-15"})


def test_to_dict_wire_shape():
    wd = WorkDay(
        employee_id="e1",
        date="2025-04-15",
        day_type=DayType.WORK_DAY,
        time_entry=TimeEntry("09:00", "18:00", "13:00", "14:00"),
        work_stats=WorkStats(4, 1),
        connections=({"id": "c1", "name": "Client"},),
        id="abc",
    )

    out = workday_to_dict(wd, employee=Employee("e1", "Anna", "Engineer"))

    assert out == {
        "id": "abc",
        "employeeId": "e1",
        "date": "2025-04-15",
        "dayType": "WORK_DAY",
        "timeEntry": {"startTime": "09:00", "endTime": "18:00", "lunchStartTime": "13:00", "lunchEndTime": "14:00"},
        "workStats": {"tasksCompleted": 4, "connectionsEstablished": 1},
        "tasks": [],
        "connections": [{"id": "c1", "name": "Client"}],
        "comment": None,
        "employee": {"id": "e1", "name": "Anna", "position": "Engineer"},
    }
    assert workday_from_dict(out) == wd
