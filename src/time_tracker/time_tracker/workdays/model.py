from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import DayType


@dataclass(frozen=True)
class TimeEntry:
    """Shift of a work day.

    Values are kept as stored; ``worktime.normalize_time`` is the only place
    that interprets them.
    """

    start_time: Optional[Any] = None
    end_time: Optional[Any] = None
    lunch_start_time: Optional[Any] = None
    lunch_end_time: Optional[Any] = None


@dataclass(frozen=True)
class WorkStats:
    """Activity counters of a work day."""

    tasks_completed: int = 0
    connections_established: int = 0


@dataclass(frozen=True)
class WorkDay:
    """Thực thể miền (domain): one employee's attendance record for one calendar day.

    ``date`` is an opaque ``YYYY-MM-DD`` key, never a timestamp.
    """

    employee_id: str
    date: str
    day_type: DayType
    time_entry: Optional[TimeEntry] = None
    work_stats: Optional[WorkStats] = None
    tasks: tuple[Mapping[str, Any], ...] = ()
    connections: tuple[Mapping[str, Any], ...] = ()
    comment: Optional[str] = None
    id: Optional[str] = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.employee_id, self.date)

    @property
    def has_shift(self) -> bool:
        return self.day_type == DayType.WORK_DAY and self.time_entry is not None

    @property
    def tasks_completed(self) -> int:
        return self.work_stats.tasks_completed if self.work_stats else 0

    @property
    def connections_established(self) -> int:
        return self.work_stats.connections_established if self.work_stats else 0
