from .aggregator import aggregate, aggregate_day, count_by_day_type
from .builder import build_report
from .model import DayStats, PeriodSummary, Report, ReportFilters, ReportPeriod

__all__ = [
    "DayStats",
    "PeriodSummary",
    "Report",
    "ReportFilters",
    "ReportPeriod",
    "aggregate",
    "aggregate_day",
    "build_report",
    "count_by_day_type",
]
