"""Fold attendance records into per-employee and per-day statistics.

Both folds are order-independent: minutes are whole numbers, so summing them
as floats is exact in any order, and hours are derived at the end.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.enums import DayType
from ..core.exceptions import RecordComputeFailure
from ..worktime.calculator.base import WorkTimeCalculator
from ..worktime.calculator.net_calculator import NetWorkTimeCalculator
from ..workdays.model import WorkDay
from .model import DayStats, PeriodSummary

logger = logging.getLogger(__name__)


def shift_minutes(wd: WorkDay, calculator: WorkTimeCalculator) -> float:
    """Net minutes of a record's shift; raises RecordComputeFailure if not computable."""
    entry = wd.time_entry
    if entry is None:
        raise RecordComputeFailure(wd.key, "no shift")
    try:
        minutes = calculator.net_minutes(
            entry.start_time,
            entry.end_time,
            entry.lunch_start_time,
            entry.lunch_end_time,
        )
    except (TypeError, ValueError) as exc:
        raise RecordComputeFailure(wd.key, str(exc)) from exc
    if minutes is None:
        raise RecordComputeFailure(wd.key, "shift start or end time is missing or malformed")
    return minutes


def aggregate(
    records: Iterable[WorkDay],
    *,
    calculator: Optional[WorkTimeCalculator] = None,
) -> dict[str, PeriodSummary]:
    calculator = calculator or NetWorkTimeCalculator()
    summaries: dict[str, PeriodSummary] = {}

    for wd in records:
        s = summaries.get(wd.employee_id)
        if s is None:
            s = PeriodSummary(employee_id=wd.employee_id)
            summaries[wd.employee_id] = s

        s.day_type_counts[wd.day_type] = s.day_type_counts.get(wd.day_type, 0) + 1

        if wd.has_shift:
            try:
                s.total_work_minutes += shift_minutes(wd, calculator)
            except RecordComputeFailure as exc:
                s.failed_records += 1
                logger.warning("Skipping worked hours for %s", exc)

        s.total_tasks += wd.tasks_completed
        s.total_connections += wd.connections_established

    return {employee_id: summaries[employee_id] for employee_id in sorted(summaries)}


def aggregate_day(
    records: Iterable[WorkDay],
    *,
    calculator: Optional[WorkTimeCalculator] = None,
) -> DayStats:
    calculator = calculator or NetWorkTimeCalculator()
    total = 0
    present = 0
    total_minutes = 0.0
    with_time = 0

    for wd in records:
        total += 1
        if not wd.has_shift:
            continue
        present += 1
        try:
            minutes = shift_minutes(wd, calculator)
        except RecordComputeFailure as exc:
            logger.warning("No duration for %s", exc)
            continue
        total_minutes += minutes
        if minutes > 0:
            with_time += 1

    return DayStats(
        total_employees=total,
        present_employees=present,
        absent_employees=total - present,
        total_work_minutes=total_minutes,
        average_work_minutes=(total_minutes / with_time) if with_time else None,
        records_with_time=with_time,
    )


def count_by_day_type(records: Iterable[WorkDay]) -> dict[DayType, int]:
    """Day-type histogram, as shown on the timesheet header."""
    counts = {dt: 0 for dt in DayType}
    for wd in records:
        counts[wd.day_type] += 1
    return counts
