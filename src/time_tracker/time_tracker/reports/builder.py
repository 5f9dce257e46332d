from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..worktime.calculator.base import WorkTimeCalculator
from ..workdays.model import WorkDay
from .aggregator import aggregate
from .model import Report, ReportFilters, ReportPeriod

logger = logging.getLogger(__name__)


def filter_records(records: Sequence[WorkDay], period: ReportPeriod, filters: ReportFilters) -> list[WorkDay]:
    in_period = [wd for wd in records if period.contains(wd.date)]
    return [wd for wd in in_period if filters.matches(wd)]


def build_report(
    records: Sequence[WorkDay],
    period: ReportPeriod,
    filters: Optional[ReportFilters] = None,
    *,
    calculator: Optional[WorkTimeCalculator] = None,
) -> Report:
    """Period report: filter, then aggregate per employee.

    Employees without matching records are left out rather than zero-filled.
    Raises InvalidPeriod / InvalidFilter before looking at any record.
    """
    period = period.validate()
    filters = (filters or ReportFilters()).validate()

    selected = filter_records(records, period, filters)
    selected.sort(key=lambda wd: (wd.date, wd.employee_id))
    logger.debug("Report %s..%s: %d of %d records selected", period.start, period.end, len(selected), len(records))

    summaries = aggregate(selected, calculator=calculator)
    days: dict[str, list[WorkDay]] = {employee_id: [] for employee_id in summaries}
    for wd in selected:
        days[wd.employee_id].append(wd)

    return Report(period=period, filters=filters, summaries=summaries, days=days)
