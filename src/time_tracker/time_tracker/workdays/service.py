from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import require_iso_date, require_non_empty, require_non_negative_int
from ..core.enums import DayType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..worktime.calculator.base import WorkTimeCalculator
from ..worktime.calculator.net_calculator import NetWorkTimeCalculator
from ..worktime.duration import format_duration
from ..worktime.time_parser import normalize_time
from .model import TimeEntry, WorkDay
from .repository import WorkDayRepository
from .serialization import workday_from_dict

logger = logging.getLogger(__name__)

_TIME_FIELDS = (
    ("start_time", "startTime"),
    ("end_time", "endTime"),
    ("lunch_start_time", "lunchStartTime"),
    ("lunch_end_time", "lunchEndTime"),
)


def normalize_entry(entry: Optional[TimeEntry]) -> Optional[TimeEntry]:
    """Shift with every bound as ``HH:MM``; None when no bound is set."""
    if entry is None:
        return None

    values = {}
    for attr, wire_name in _TIME_FIELDS:
        raw = getattr(entry, attr)
        value = normalize_time(raw)
        if value is None and raw not in (None, ""):
            raise ValidationError(f"{wire_name} must be a HH:MM time")
        values[attr] = value

    if not any(values.values()):
        return None
    return TimeEntry(**values)


def enforce_record_rules(wd: WorkDay) -> WorkDay:
    """Rules every stored record follows, whether saved or restored.

    The date must be a real ``YYYY-MM-DD`` key, shift times are normalized,
    and only a WORK_DAY keeps its shift.
    """
    require_iso_date(wd.date, "date")
    if wd.day_type == DayType.WORK_DAY:
        return replace(wd, time_entry=normalize_entry(wd.time_entry))
    if wd.time_entry is not None:
        logger.debug("Dropping shift of %s record %s@%s", wd.day_type.value, wd.employee_id, wd.date)
        return replace(wd, time_entry=None)
    return wd


class WorkDayService:
    """Use case: save and read daily attendance records."""

    def __init__(
        self,
        workdays: WorkDayRepository,
        employees: Optional[EmployeeRepository] = None,
        *,
        calculator: Optional[WorkTimeCalculator] = None,
    ):
        self._workdays = workdays
        self._employees = employees
        self._calculator = calculator or NetWorkTimeCalculator()

    def save(self, payload: Mapping[str, Any]) -> WorkDay:
        """Create or fully replace the record for (employeeId, date)."""
        for name in ("tasksCompleted", "connectionsEstablished"):
            require_non_negative_int(payload.get(name), name)
        stats = payload.get("workStats")
        if isinstance(stats, Mapping):
            for name in ("tasksCompleted", "connectionsEstablished"):
                require_non_negative_int(stats.get(name), name)

        wd = enforce_record_rules(workday_from_dict(payload))

        if self._employees is not None and not self._employees.get_by_id(wd.employee_id):
            raise NotFoundError(f"Employee {wd.employee_id} does not exist")

        stored = self._workdays.upsert(wd)
        logger.info("Saved work day %s@%s (%s)", stored.employee_id, stored.date, stored.day_type.value)
        return stored

    def delete(self, workday_id: str) -> None:
        workday_id = require_non_empty(workday_id, "id")
        if not self._workdays.delete(workday_id):
            raise NotFoundError(f"Work day {workday_id} does not exist")
        logger.info("Deleted work day %s", workday_id)

    def get_day(self, date: str, *, employee_id: Optional[str] = None) -> Sequence[WorkDay]:
        require_iso_date(date, "date")
        items = self._workdays.get_by_date(date)
        if employee_id:
            items = [wd for wd in items if wd.employee_id == employee_id]
        return items

    def get_range(self, start: str, end: str, *, employee_id: Optional[str] = None) -> Sequence[WorkDay]:
        require_iso_date(start, "startDate")
        require_iso_date(end, "endDate")
        if end < start:
            raise ValidationError("endDate is before startDate")
        items = self._workdays.get_by_date_range(start, end)
        if employee_id:
            items = [wd for wd in items if wd.employee_id == employee_id]
        return items

    def get_timesheet_ui(self, date: str) -> list[dict]:
        """Rows for the daily timesheet; unknown durations render as ``--:--``."""
        names = {}
        if self._employees is not None:
            names = {e.employee_id: e for e in self._employees.list_employees()}
        return [self._to_ui(wd, names.get(wd.employee_id)) for wd in self.get_day(date)]

    def _to_ui(self, wd: WorkDay, employee) -> dict:
        entry = wd.time_entry if wd.has_shift else None
        times = {wire: normalize_time(getattr(entry, attr)) if entry else None for attr, wire in _TIME_FIELDS}

        net = gross = None
        if entry is not None:
            net = self._calculator.net_minutes(entry.start_time, entry.end_time, entry.lunch_start_time, entry.lunch_end_time)
            gross = self._calculator.net_minutes(entry.start_time, entry.end_time)

        return {
            "employeeId": wd.employee_id,
            "employeeName": employee.name if employee else wd.employee_id,
            "position": employee.position if employee else "",
            "date": wd.date,
            "dayType": wd.day_type.value,
            "dayTypeLabel": wd.day_type.label,
            **{k: v or "" for k, v in times.items()},
            "workTime": format_duration(net),
            "totalTime": format_duration(gross),
            "tasksCompleted": wd.tasks_completed,
            "connectionsEstablished": wd.connections_established,
            "comment": wd.comment or "",
        }
