from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.datetime_utils import is_iso_date
from ..core.constants import DAY_TYPE_WILDCARD
from ..core.enums import DayType
from ..core.exceptions import InvalidFilter, InvalidPeriod
from ..workdays.model import WorkDay

_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no"}


@dataclass(frozen=True)
class ReportPeriod:
    """Inclusive ``[start, end]`` range of ``YYYY-MM-DD`` keys."""

    start: str
    end: str

    def validate(self) -> "ReportPeriod":
        if not is_iso_date(self.start) or not is_iso_date(self.end):
            raise InvalidPeriod("startDate and endDate must be YYYY-MM-DD dates")
        if self.end < self.start:
            raise InvalidPeriod(f"endDate {self.end} is before startDate {self.start}")
        return self

    def contains(self, date: str) -> bool:
        # Fixed-width zero-padded keys: lexical order is calendar order.
        return self.start <= date <= self.end


def _is_wildcard(value: Any) -> bool:
    return str(value).strip().upper() == DAY_TYPE_WILDCARD


def _parse_tristate(value: Any, name: str) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text == "":
        return None
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise InvalidFilter(f"{name} must be true or false")


@dataclass(frozen=True)
class ReportFilters:
    employee_id: Optional[str] = None
    day_type: Optional[DayType] = None
    has_tasks: Optional[bool] = None
    has_connections: Optional[bool] = None

    @classmethod
    def from_query(cls, args: Mapping[str, Any]) -> "ReportFilters":
        """Build filters from raw query parameters (``employeeId``, ``dayType``, ``hasTasks``, ``hasConnections``)."""
        employee_id = args.get("employeeId")
        if employee_id is not None:
            employee_id = str(employee_id).strip()
            if not employee_id or _is_wildcard(employee_id):
                employee_id = None

        day_type = args.get("dayType")
        if day_type is None or str(day_type).strip() == "" or _is_wildcard(day_type):
            day_type = None
        else:
            try:
                day_type = DayType(day_type)
            except ValueError:
                raise InvalidFilter(f"Unknown dayType {day_type!r}") from None

        return cls(
            employee_id=employee_id,
            day_type=day_type,
            has_tasks=_parse_tristate(args.get("hasTasks"), "hasTasks"),
            has_connections=_parse_tristate(args.get("hasConnections"), "hasConnections"),
        ).validate()

    def validate(self) -> "ReportFilters":
        if self.employee_id is not None and (not isinstance(self.employee_id, str) or not self.employee_id.strip()):
            raise InvalidFilter("employeeId must be a non-empty string")
        if self.day_type is not None and not isinstance(self.day_type, DayType):
            raise InvalidFilter(f"Unknown dayType {self.day_type!r}")
        for name, value in (("hasTasks", self.has_tasks), ("hasConnections", self.has_connections)):
            if value is not None and not isinstance(value, bool):
                raise InvalidFilter(f"{name} must be true or false")
        return self

    def matches(self, wd: WorkDay) -> bool:
        if self.employee_id is not None and wd.employee_id != self.employee_id:
            return False
        if self.day_type is not None and wd.day_type != self.day_type:
            return False
        if self.has_tasks is not None and bool(wd.tasks) != self.has_tasks:
            return False
        if self.has_connections is not None and bool(wd.connections) != self.has_connections:
            return False
        return True


@dataclass
class PeriodSummary:
    """Per-employee aggregate over a period. Rebuilt on every request."""

    employee_id: str
    day_type_counts: dict[DayType, int] = field(default_factory=lambda: {dt: 0 for dt in DayType})
    total_work_minutes: float = 0.0
    total_tasks: int = 0
    total_connections: int = 0
    failed_records: int = 0

    @property
    def total_days(self) -> int:
        return sum(self.day_type_counts.values())

    @property
    def total_work_hours(self) -> float:
        return self.total_work_minutes / 60

    def count(self, day_type: DayType) -> int:
        return self.day_type_counts.get(day_type, 0)

    def to_dict(self) -> dict:
        return {
            "totalDays": self.total_days,
            "workDays": self.count(DayType.WORK_DAY),
            "daysOff": self.count(DayType.DAY_OFF),
            "vacation": self.count(DayType.VACATION),
            "sickLeave": self.count(DayType.SICK_LEAVE),
            "absence": self.count(DayType.ABSENCE),
            "unpaidLeave": self.count(DayType.UNPAID_LEAVE),
            "totalWorkHours": round(self.total_work_hours, 2),
            "totalTasks": self.total_tasks,
            "totalConnections": self.total_connections,
            "failedRecords": self.failed_records,
        }


@dataclass(frozen=True)
class DayStats:
    """Single-day dashboard aggregate. ``average_work_minutes`` is None when unknown."""

    total_employees: int
    present_employees: int
    absent_employees: int
    total_work_minutes: float
    average_work_minutes: Optional[float]
    records_with_time: int


@dataclass(frozen=True)
class Report:
    period: ReportPeriod
    filters: ReportFilters
    summaries: dict[str, PeriodSummary]
    days: dict[str, list[WorkDay]]
