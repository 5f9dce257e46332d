"""Conversion between WorkDay and its JSON shape.

Wire shape (kept compatible with persisted data)::

    {"id", "employeeId", "date", "dayType", "comment",
     "timeEntry": {"startTime", "endTime", "lunchStartTime", "lunchEndTime"},
     "workStats": {"tasksCompleted", "connectionsEstablished"},
     "tasks": [...], "connections": [...]}

The timesheet form posts a flat variant (shift keys and counters at the top
level); older rows may hold ``timeEntry``/``tasks``/``connections`` as JSON
strings, occasionally encoded twice.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_iso_date
from ..core.constants import TIME_ENTRY_KEYS
from ..core.enums import DayType
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.serialization import employee_to_dict
from .model import TimeEntry, WorkDay, WorkStats

logger = logging.getLogger(__name__)


def decode_json_field(value: Any, *, field_name: str, default: Any = None) -> Any:
    """Decode a possibly (double-)encoded JSON value; malformed input yields ``default``."""
    for _ in range(2):
        if not isinstance(value, str):
            break
        try:
            value = json.loads(value)
        except ValueError:
            logger.warning("Cannot decode %s %r, dropping it", field_name, value)
            return default
    if isinstance(value, str):
        return default
    return value


def _time_entry_from(data: Mapping[str, Any]) -> Optional[TimeEntry]:
    raw = data.get("timeEntry")
    if raw is None and any(data.get(k) not in (None, "") for k in TIME_ENTRY_KEYS):
        raw = {k: data.get(k) for k in TIME_ENTRY_KEYS}

    raw = decode_json_field(raw, field_name="timeEntry")
    if not isinstance(raw, Mapping):
        return None
    return TimeEntry(
        start_time=raw.get("startTime") or None,
        end_time=raw.get("endTime") or None,
        lunch_start_time=raw.get("lunchStartTime") or None,
        lunch_end_time=raw.get("lunchEndTime") or None,
    )


def _counter(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


def _work_stats_from(data: Mapping[str, Any]) -> Optional[WorkStats]:
    raw = decode_json_field(data.get("workStats"), field_name="workStats")
    if not isinstance(raw, Mapping):
        if "tasksCompleted" not in data and "connectionsEstablished" not in data:
            return None
        raw = data
    return WorkStats(
        tasks_completed=_counter(raw.get("tasksCompleted")),
        connections_established=_counter(raw.get("connectionsEstablished")),
    )


def _items_from(data: Mapping[str, Any], field_name: str) -> tuple[Mapping[str, Any], ...]:
    raw = decode_json_field(data.get(field_name), field_name=field_name, default=[])
    if not isinstance(raw, list):
        return ()
    return tuple(item for item in raw if isinstance(item, Mapping))


def parse_day_type(value: Any) -> DayType:
    try:
        return DayType(value)
    except ValueError:
        raise ValidationError(f"Unknown dayType {value!r}") from None


def workday_from_dict(data: Mapping[str, Any]) -> WorkDay:
    if not data.get("employeeId") or not data.get("date") or not data.get("dayType"):
        raise ValidationError("Missing required fields: employeeId, date, dayType")

    return WorkDay(
        id=str(data["id"]) if data.get("id") else None,
        employee_id=str(data["employeeId"]),
        date=to_iso_date(data["date"]),
        day_type=parse_day_type(data["dayType"]),
        time_entry=_time_entry_from(data),
        work_stats=_work_stats_from(data),
        tasks=_items_from(data, "tasks"),
        connections=_items_from(data, "connections"),
        comment=data.get("comment") or None,
    )


def time_entry_to_dict(entry: Optional[TimeEntry]) -> Optional[dict]:
    if entry is None:
        return None
    return {
        "startTime": entry.start_time,
        "endTime": entry.end_time,
        "lunchStartTime": entry.lunch_start_time,
        "lunchEndTime": entry.lunch_end_time,
    }


def work_stats_to_dict(stats: Optional[WorkStats]) -> Optional[dict]:
    if stats is None:
        return None
    return {
        "tasksCompleted": stats.tasks_completed,
        "connectionsEstablished": stats.connections_established,
    }


def workday_to_dict(workday: WorkDay, *, employee: Optional[Employee] = None) -> dict:
    out = {
        "id": workday.id,
        "employeeId": workday.employee_id,
        "date": workday.date,
        "dayType": workday.day_type.value,
        "timeEntry": time_entry_to_dict(workday.time_entry),
        "workStats": work_stats_to_dict(workday.work_stats),
        "tasks": [dict(t) for t in workday.tasks],
        "connections": [dict(c) for c in workday.connections],
        "comment": workday.comment,
    }
    if employee is not None:
        out["employee"] = employee_to_dict(employee)
    return out


