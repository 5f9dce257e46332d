from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_iso_date
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..core.exceptions import RecordComputeFailure
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.serialization import employee_to_dict
from ..worktime.calculator.base import WorkTimeCalculator
from ..worktime.calculator.net_calculator import NetWorkTimeCalculator
from ..worktime.duration import format_duration
from ..worktime.time_parser import normalize_time
from ..workdays.repository import WorkDayRepository
from ..workdays.serialization import workday_to_dict
from .aggregator import aggregate_day, shift_minutes
from .builder import build_report
from .model import Report, ReportFilters, ReportPeriod

logger = logging.getLogger(__name__)

REPORT_CSV_FIELDS = [
    "date",
    "employee_id",
    "employee_name",
    "position",
    "day_type",
    "start_time",
    "end_time",
    "lunch_start_time",
    "lunch_end_time",
    "work_time",
    "tasks_completed",
    "connections_established",
    "comment",
]


class ReportService:
    """Report/dashboard data source: fetches a snapshot from the store and runs the engine on it."""

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

    def _directory(self) -> dict[str, Employee]:
        if self._employees is None:
            return {}
        return {e.employee_id: e for e in self._employees.list_employees()}

    def build_report(self, *, start: str, end: str, filters: Optional[ReportFilters] = None) -> Report:
        period = ReportPeriod(start=start, end=end).validate()
        records = self._workdays.get_by_date_range(period.start, period.end)
        return build_report(records, period, filters, calculator=self._calculator)

    def report_to_dict(self, report: Report) -> dict:
        directory = self._directory()
        items = []
        for employee_id, summary in report.summaries.items():
            employee = directory.get(employee_id)
            if employee is None and directory:
                logger.warning("Report references unknown employee %s", employee_id)
            items.append(
                {
                    "employee": employee_to_dict(employee) if employee else {"id": employee_id, "name": employee_id, "position": ""},
                    "days": [workday_to_dict(wd) for wd in report.days[employee_id]],
                    "summary": summary.to_dict(),
                }
            )
        return {
            "period": {"startDate": report.period.start, "endDate": report.period.end},
            "report": items,
        }

    def report_csv_rows(self, report: Report) -> list[dict]:
        directory = self._directory()
        rows = []
        for employee_id, days in report.days.items():
            employee = directory.get(employee_id)
            for wd in days:
                entry = wd.time_entry if wd.has_shift else None
                minutes = None
                if entry is not None:
                    minutes = self._calculator.net_minutes(
                        entry.start_time, entry.end_time, entry.lunch_start_time, entry.lunch_end_time
                    )
                rows.append(
                    {
                        "date": wd.date,
                        "employee_id": employee_id,
                        "employee_name": employee.name if employee else employee_id,
                        "position": employee.position if employee else "",
                        "day_type": wd.day_type.label,
                        "start_time": self._fmt(entry, "start_time"),
                        "end_time": self._fmt(entry, "end_time"),
                        "lunch_start_time": self._fmt(entry, "lunch_start_time"),
                        "lunch_end_time": self._fmt(entry, "lunch_end_time"),
                        "work_time": format_duration(minutes) if entry is not None else "",
                        "tasks_completed": wd.tasks_completed,
                        "connections_established": wd.connections_established,
                        "comment": wd.comment or "",
                    }
                )
        return rows

    @staticmethod
    def _fmt(entry, attr: str) -> str:
        if entry is None:
            return ""
        return normalize_time(getattr(entry, attr)) or ""

    def dashboard(self, date: str, *, recent_limit: int = DEFAULT_RECENT_LIMIT) -> dict:
        require_iso_date(date, "date")
        records = self._workdays.get_by_date(date)
        stats = aggregate_day(records, calculator=self._calculator)
        directory = self._directory()

        recent = []
        for wd in records[:recent_limit]:
            minutes = None
            if wd.has_shift:
                try:
                    minutes = shift_minutes(wd, self._calculator)
                except RecordComputeFailure as exc:
                    logger.warning("No duration for %s", exc)
            employee = directory.get(wd.employee_id)
            recent.append(
                {
                    **workday_to_dict(wd, employee=employee),
                    "workTime": format_duration(minutes),
                }
            )

        return {
            "date": date,
            "employees": {
                "total": stats.total_employees,
                "present": stats.present_employees,
                "absent": stats.absent_employees,
            },
            "workTime": {
                "totalMinutes": stats.total_work_minutes,
                "averageMinutes": stats.average_work_minutes,
                "total": format_duration(stats.total_work_minutes),
                "average": format_duration(stats.average_work_minutes),
            },
            "recent": recent,
        }
